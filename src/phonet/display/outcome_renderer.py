"""
Outcome 콘솔 렌더러.

표시 단계(DisplayLevel):
  SHOW_ALL       note + 통과 + 실패
  IGNORE_PASSES  note + 실패
  ONLY_FAILS     실패만
  HIDE_ALL       아무것도 출력하지 않음
"""
# src/phonet/display/outcome_renderer.py
from enum import Enum
from typing import List

from ..models.draft_types import Info, Mode
from ..models.outcome_types import FailKind, FailReason, Outcome, TestOutcome


class DisplayLevel(str, Enum):
    """출력 표시 단계. CLI 인자 값과 같은 문자열을 쓴다."""

    SHOW_ALL = "show-all"
    IGNORE_PASSES = "ignore-passes"
    ONLY_FAILS = "only-fails"
    HIDE_ALL = "hide-all"

    @classmethod
    def from_arg(cls, value: str) -> "DisplayLevel":
        """전체 이름 또는 한 글자 약어(s/i/o/h)로 DisplayLevel 을 찾는다."""
        for level in cls:
            if value in (level.value, level.value[0]):
                return level
        raise ValueError(f"Unknown display level: {value}")

    @property
    def shows_notes(self) -> bool:
        return self in (DisplayLevel.SHOW_ALL, DisplayLevel.IGNORE_PASSES)

    @property
    def shows_passes(self) -> bool:
        return self is DisplayLevel.SHOW_ALL

    @property
    def shows_fails(self) -> bool:
        return self is not DisplayLevel.HIDE_ALL


class Colors:
    """ANSI 색상 코드"""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"


# 모드별 단어 표시 구분자 (ROMANIZED 는 꺾쇠 대신 ⟨⟩ 사용)
_WORD_DELIMITERS = {
    Mode.ROMANIZED: ("⟨", "⟩"),
    Mode.BROAD: ("/", "/"),
    Mode.NARROW: ("[", "]"),
}


def _is_shown(test: TestOutcome, level: DisplayLevel) -> bool:
    if test.status.is_pass:
        return level.shows_passes
    return level.shows_fails


def max_word_len(outcome: Outcome, level: DisplayLevel) -> int:
    """주어진 단계에서 표시되는 테스트 단어 중 가장 긴 길이. 없으면 0."""
    return max(
        (len(test.word) for test in outcome.test_outcomes if _is_shown(test, level)),
        default=0,
    )


def describe_fail(kind: FailKind) -> str:
    """실패 유형 → 사람이 읽는 사유."""
    if kind.reason is FailReason.SHOULD_BE_INVALID:
        return "Valid, but should be invalid"
    if kind.reason is FailReason.CUSTOM_REASON and kind.note is not None:
        return kind.note.text
    return "No reason given"


def render_outcome(
    outcome: Outcome,
    mode: Mode = Mode.ROMANIZED,
    level: DisplayLevel = DisplayLevel.SHOW_ALL,
    color: bool = True,
) -> List[str]:
    """Outcome → 출력 라인 목록."""
    if level is DisplayLevel.HIDE_ALL:
        return []

    def paint(text: str, *codes: str) -> str:
        if not color:
            return text
        return "".join(codes) + text + Colors.RESET

    open_, close = _WORD_DELIMITERS[mode]
    width = max_word_len(outcome, level) + len(open_) + len(close)
    lines: List[str] = []

    for msg in outcome.messages:
        if isinstance(msg, Info):
            if level.shows_notes:
                lines.append(paint(msg.note.text, Colors.BLUE))
            continue

        test = msg.value
        if not _is_shown(test, level):
            continue

        intent = "+" if test.intent else "!"
        word = f"{open_}{test.word}{close}"

        if test.status.is_pass:
            lines.append(f"  {paint('pass', Colors.GREEN)} {intent} {word}")
        else:
            # 실패 사유가 같은 열에서 시작하도록 단어 폭을 맞춘다
            word = word.ljust(width)
            reason = describe_fail(test.status.fail)
            lines.append(
                f"  {paint('FAIL', Colors.BOLD, Colors.RED)} {intent} {word} "
                f"{paint(reason, Colors.YELLOW)}"
            )

    test_count = len(outcome.test_outcomes)
    if outcome.fail_count == 0:
        lines.append(paint(f"All {test_count} tests passed", Colors.BOLD, Colors.GREEN))
    else:
        lines.append(
            paint(
                f"{outcome.fail_count} of {test_count} tests failed",
                Colors.BOLD,
                Colors.RED,
            )
        )

    return lines
