"""
Draft → 압축된 정규(canonical) 문자열.

형식: ~{mode};{+|!}{펼친 패턴};...[;?+{단어들}][;?!{단어들}]

  - 규칙 패턴은 클래스 참조를 모두 펼친 형태로 출력한다
  - 클래스 정의와 note 는 버린다 (손실 변환, 원본 복원 불가)
  - with_tests 일 때만 테스트 그룹을 붙이고, 비어 있는 그룹은 생략한다
"""
# src/phonet/normalization/minifier.py
from typing import Iterable, List, Tuple

from ..models.draft_types import ClassTable, Draft, Message, Mode, RawRule, Test, TestDraft
from ..parsing.class_expander import replace_classes


def _split_tests(messages: Iterable[Message[TestDraft]]) -> Tuple[List[str], List[str]]:
    """테스트 단어를 (무효여야 통과, 유효여야 통과) 두 그룹으로 나눈다."""
    should_fail: List[str] = []
    should_pass: List[str] = []

    for msg in messages:
        if not isinstance(msg, Test):
            continue
        if msg.value.intent:
            should_fail.append(msg.value.word)
        else:
            should_pass.append(msg.value.word)

    return should_fail, should_pass


def _minify_rules(rules: Iterable[RawRule], classes: ClassTable, mode: Mode) -> List[str]:
    return [
        ("+" if rule.intent else "!") + replace_classes(rule.pattern, classes, mode, rule.line)
        for rule in rules
    ]


def minify_draft(draft: Draft, with_tests: bool = False) -> str:
    """Draft 를 압축 문자열로 직렬화한다."""
    parts = [f"~{draft.mode.value}"]
    parts.extend(_minify_rules(draft.raw_rules, draft.raw_classes, draft.mode))

    if with_tests:
        should_fail, should_pass = _split_tests(draft.messages)
        if should_fail:
            parts.append("?+" + " ".join(should_fail))
        if should_pass:
            parts.append("?!" + " ".join(should_pass))

    return ";".join(parts)
