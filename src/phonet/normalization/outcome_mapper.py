"""Draft / Outcome → API 응답용 JSON 매핑."""
# src/phonet/normalization/outcome_mapper.py
from typing import Any, Dict, List, Optional

from ..models.draft_types import Draft, Info, Note
from ..models.outcome_types import Outcome, TestOutcome
from ..validation.rule_validator import Validity


def _note_text(note: Optional[Note]) -> Optional[str]:
    return note.text if note is not None else None


def _test_outcome_to_dict(outcome: TestOutcome) -> Dict[str, Any]:
    item: Dict[str, Any] = {
        "kind": "test",
        "word": outcome.word,
        # 선언된 기대값: True → 무효여야 통과
        "expectInvalid": outcome.intent,
        "passed": outcome.status.is_pass,
    }

    # 실패한 경우에만 실패 유형/사유 출력
    fail = outcome.status.fail
    if fail is not None:
        item["failKind"] = fail.reason.value
        if fail.note is not None:
            item["reason"] = fail.note.text

    return item


def build_draft_summary(draft: Draft) -> Dict[str, Any]:
    """Draft → 요약 JSON (모드, 클래스, 규칙, 테스트 수)."""
    return {
        "mode": draft.mode.value,
        "ruleCount": len(draft.rules),
        "testCount": draft.test_count,
        "classes": dict(draft.raw_classes),
        "rules": [
            {
                "line": raw.line,
                "intent": raw.intent,
                "pattern": raw.pattern,
                "expandedPattern": rule.pattern.pattern,
                "note": _note_text(raw.note),
            }
            for raw, rule in zip(draft.raw_rules, draft.rules)
        ],
    }


def build_outcome_report(outcome: Outcome, test_count: int) -> Dict[str, Any]:
    """
    Outcome → 리포트 JSON.

    messages 는 원본 순서를 유지하며 note 와 테스트 결과가 섞여서 출력된다.
    """
    messages: List[Dict[str, Any]] = []
    for msg in outcome.messages:
        if isinstance(msg, Info):
            messages.append({"kind": "info", "note": msg.note.text})
        else:
            messages.append(_test_outcome_to_dict(msg.value))

    return {
        "testCount": test_count,
        "failCount": outcome.fail_count,
        "messages": messages,
    }


def build_validity_report(word: str, validity: Validity) -> Dict[str, Any]:
    """단어 하나의 판정 결과 JSON."""
    return {
        "word": word,
        "valid": validity.is_valid,
        "note": _note_text(validity.note),
    }
