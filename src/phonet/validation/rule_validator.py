"""단어 하나를 순서 있는 규칙 목록으로 검증한다."""
# src/phonet/validation/rule_validator.py
from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.draft_types import Note, Rule


@dataclass(frozen=True)
class Validity:
    """
    단어의 판정 결과 (Valid / Invalid(note)).

    NOTE: 테스트 '통과' 여부(PassStatus)와는 다른 개념이다.
    """

    is_valid: bool
    note: Optional[Note] = None

    @classmethod
    def valid(cls) -> "Validity":
        return cls(True)

    @classmethod
    def invalid(cls, note: Optional[Note] = None) -> "Validity":
        return cls(False, note)


def validate_word(word: str, rules: Iterable[Rule]) -> Validity:
    """
    선언 순서대로 규칙을 검사하다가 처음 위반된 규칙에서 즉시 Invalid 를 반환한다.

    위반 조건: intent XOR (패턴 매칭 여부)
      - intent=True  (따라야 할 형태): 매칭되지 않으면 위반
      - intent=False (금지된 형태):    매칭되면 위반
    """
    for rule in rules:
        if rule.intent ^ (rule.pattern.search(word) is not None):
            return Validity.invalid(rule.note)

    return Validity.valid()
