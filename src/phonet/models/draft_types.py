"""
Draft 타입 체계 정의 — 파싱 결과를 담는 불변 데이터 모델.

파이프라인 단계별 타입:
  RawRule   → 클래스 참조가 펼쳐지지 않은 원본 규칙 (minify 용으로 보관)
  Rule      → 클래스 확장 + re.compile 까지 끝난 실행 가능한 규칙
  TestDraft → 아직 실행되지 않은 테스트 단어
  Draft     → 위 모든 것을 묶은 파싱 결과

Message[T] 는 Info(Note) | Test[T] 두 가지 variant 를 가진 tagged union 이다.
실행 전에는 Test[TestDraft], 실행 후에는 Test[TestOutcome] 을 담아
같은 위치 순서를 그대로 유지한다.
"""
# src/phonet/models/draft_types.py
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Mapping, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class Mode(str, Enum):
    """
    전사(transcription) 모드. 패턴 안에서 클래스 참조를 감싸는 구분자 쌍을 고른다.
    str 상속으로 JSON 직렬화 시 값(문자열)이 그대로 출력된다.
    """

    ROMANIZED = "<>"  # 기본값. 예) <C>
    BROAD = "//"  # 예) /C/
    NARROW = "[]"  # 예) [C]

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]

    @classmethod
    def default(cls) -> "Mode":
        return cls.ROMANIZED

    @classmethod
    def from_options(cls, first: Optional[str], last: Optional[str]) -> Optional["Mode"]:
        """
        모드 지정자의 첫 글자/마지막 글자 조합으로 모드를 찾는다.
        알 수 없는 조합이면 None.
        """
        if first is None or last is None:
            return None
        for mode in cls:
            if mode.value == first + last:
                return mode
        return None


@dataclass(frozen=True)
class Note:
    """규칙 설명 겸 테스트 실패 사유로 노출되는 주석 텍스트."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RawRule:
    """클래스 참조가 아직 펼쳐지지 않은 규칙."""

    intent: bool  # True: 패턴이 '반드시 따라야 할' 형태 / False: '금지된' 형태
    pattern: str  # 공백 제거된 원본 패턴
    note: Optional[Note]
    line: int  # 1-based 소스 라인


@dataclass(frozen=True)
class Rule:
    """컴파일된 규칙."""

    intent: bool
    pattern: re.Pattern
    note: Optional[Note] = None


@dataclass(frozen=True)
class TestDraft:
    """
    선언된 테스트 단어.

    intent 극성은 Rule.intent 와 다르다:
      True  → 단어가 INVALID 로 판정되어야 통과 (?+)
      False → 단어가 VALID 로 판정되어야 통과 (?!)
    """

    __test__ = False  # pytest 수집 대상 아님

    word: str
    intent: bool


@dataclass(frozen=True)
class Info:
    """표시용 주석 메시지."""

    note: Note

    @property
    def is_test(self) -> bool:
        return False


@dataclass(frozen=True)
class Test(Generic[T]):
    """테스트 메시지. 실행 전에는 TestDraft, 실행 후에는 TestOutcome 을 담는다."""

    __test__ = False  # pytest 수집 대상 아님

    value: T

    @property
    def is_test(self) -> bool:
        return True


Message = Union[Info, Test[T]]

ClassTable = Mapping[str, str]


@dataclass(frozen=True)
class Draft:
    """
    파싱된 디스크립터.

    test_count 는 생성 시점에 한 번 계산되어 다시 계산되지 않는다.
    raw_rules / raw_classes 는 minify 에서 클래스를 다시 펼치기 위해 보관한다.
    """

    rules: Tuple[Rule, ...]
    messages: Tuple[Message[TestDraft], ...]
    mode: Mode
    test_count: int
    raw_rules: Tuple[RawRule, ...] = ()
    raw_classes: ClassTable = field(default_factory=dict)

    @property
    def tests(self) -> Tuple[TestDraft, ...]:
        """messages 중 테스트만 순서대로."""
        return tuple(msg.value for msg in self.messages if isinstance(msg, Test))
