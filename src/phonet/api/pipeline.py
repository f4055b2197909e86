"""디스크립터 처리 파이프라인 (API / CLI 공용)."""
# src/phonet/api/pipeline.py
from typing import Any, Dict, List, Optional

from ..normalization.minifier import minify_draft
from ..normalization.outcome_mapper import (
    build_draft_summary,
    build_outcome_report,
    build_validity_report,
)
from ..parsing.draft_parser import override_tests, parse_draft
from ..validation.rule_validator import validate_word
from ..validation.test_runner import run_draft


def run_descriptor(descriptor: str, tests: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    디스크립터 1개에 대한 전체 파이프라인:
      1) 파싱 + 규칙 컴파일
      2) (선택) 인라인 테스트로 선언 테스트 대체
      3) 테스트 실행
      4) 리포트 반환
    """
    draft = parse_draft(descriptor)
    if tests:
        draft = override_tests(draft, tests)

    outcome = run_draft(draft)
    return build_outcome_report(outcome, draft.test_count)


def summarize_descriptor(descriptor: str) -> Dict[str, Any]:
    """파싱만 수행하고 Draft 요약을 반환한다."""
    return build_draft_summary(parse_draft(descriptor))


def validate_words(descriptor: str, words: List[str]) -> List[Dict[str, Any]]:
    """선언 테스트와 무관하게 임의 단어들을 규칙으로 판정한다."""
    draft = parse_draft(descriptor)
    return [build_validity_report(word, validate_word(word, draft.rules)) for word in words]


def minify_descriptor(descriptor: str, with_tests: bool = False) -> str:
    return minify_draft(parse_draft(descriptor), with_tests=with_tests)
