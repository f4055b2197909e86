"""테스트 실행 결과(Outcome) 타입 정의."""
# src/phonet/models/outcome_types.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .draft_types import Message, Note


class FailReason(str, Enum):
    """테스트 실패 유형."""

    SHOULD_BE_INVALID = "ShouldBeInvalid"  # 유효로 판정됐지만 무효여야 했음
    NO_REASON_GIVEN = "NoReasonGiven"  # 무효로 판정됐고, 걸린 규칙에 note 없음
    CUSTOM_REASON = "CustomReason"  # 무효로 판정됐고, 걸린 규칙의 note 를 노출


@dataclass(frozen=True)
class FailKind:
    """실패 유형 + (CUSTOM_REASON 인 경우) 사유 note."""

    reason: FailReason
    note: Optional[Note] = None

    @classmethod
    def should_be_invalid(cls) -> "FailKind":
        return cls(FailReason.SHOULD_BE_INVALID)

    @classmethod
    def no_reason_given(cls) -> "FailKind":
        return cls(FailReason.NO_REASON_GIVEN)

    @classmethod
    def custom_reason(cls, note: Note) -> "FailKind":
        return cls(FailReason.CUSTOM_REASON, note)


@dataclass(frozen=True)
class PassStatus:
    """테스트 통과 여부. fail 이 None 이면 Pass."""

    fail: Optional[FailKind] = None

    @classmethod
    def passed(cls) -> "PassStatus":
        return cls()

    @classmethod
    def failed(cls, kind: FailKind) -> "PassStatus":
        return cls(kind)

    @property
    def is_pass(self) -> bool:
        return self.fail is None

    @property
    def is_fail(self) -> bool:
        return self.fail is not None


@dataclass(frozen=True)
class TestOutcome:
    """실행된 TestDraft 의 결과."""

    __test__ = False  # pytest 수집 대상 아님

    word: str
    intent: bool  # TestDraft.intent 와 같은 극성 (True → 무효여야 통과)
    status: PassStatus


@dataclass(frozen=True)
class Outcome:
    """
    Draft 실행 결과.

    messages 는 Draft.messages 와 1:1 위치 대응하며 Info 는 그대로 통과한다.
    Draft 자체는 참조하지 않는다.
    """

    messages: Tuple[Message[TestOutcome], ...]
    fail_count: int

    @property
    def test_outcomes(self) -> Tuple[TestOutcome, ...]:
        return tuple(msg.value for msg in self.messages if msg.is_test)
