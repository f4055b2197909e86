"""
디스크립터 파서 (Descriptor Parser)

statement 를 한 번의 순방향 패스로 읽으며 첫 글자(연산자)로 분기한다.

  #   주석
  ~   모드 선언 (최대 1회)
  $   클래스 정의    $name = pattern
  + ! 규칙           + 는 '따라야 할 형태', ! 는 '금지된 형태'
  *   note           Info 메시지 + 이후 규칙에 붙는 '현재 note'
  ?   테스트         ?+ 는 무효여야 통과, ?! 는 유효여야 통과

파싱은 all-or-nothing: 첫 에러에서 DescriptorParseError 를 raise 하고 부분 결과는 없다.
"""
# src/phonet/parsing/draft_parser.py
import logging
import re
from types import MappingProxyType
from typing import Dict, List, Optional

from ..errors import DescriptorParseError, ParseErrorKind
from ..models.draft_types import (
    Draft,
    Info,
    Message,
    Mode,
    Note,
    RawRule,
    Test,
    TestDraft,
)
from .rule_compiler import compile_rules
from .statements import split_statements

logger = logging.getLogger(__name__)

_CLASS_NAME_RE = re.compile(r"\w+")
_WHITESPACE_RE = re.compile(r"\s+")


def _strip_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def _parse_mode(body: str, line: int) -> Mode:
    """'~' 이후 텍스트 → Mode. 공백 제외 첫 글자/마지막 글자로 판정."""
    chars = body.replace(" ", "")
    first = chars[0] if chars else None
    last = chars[-1] if len(chars) > 1 else None

    mode = Mode.from_options(first, last)
    if mode is None:
        raise DescriptorParseError(ParseErrorKind.INVALID_MODE_SPECIFIER, line)
    return mode


def _parse_class(body: str, classes: Dict[str, str], line: int) -> None:
    """'$' 이후 텍스트를 클래스 테이블에 추가한다. 패턴은 펼치지 않고 원본 그대로 저장."""
    name, has_pattern, pattern = body.partition("=")
    name = name.strip()

    if not name:
        raise DescriptorParseError(ParseErrorKind.NO_CLASS_NAME, line)

    if not _CLASS_NAME_RE.fullmatch(name):
        raise DescriptorParseError(ParseErrorKind.INVALID_CLASS_NAME, line, name)

    if name in classes:
        raise DescriptorParseError(ParseErrorKind.CLASS_ALREADY_EXISTS, line, name)

    pattern = _strip_whitespace(pattern)
    if not has_pattern or not pattern:
        raise DescriptorParseError(ParseErrorKind.NO_CLASS_PATTERN, line, name)

    classes[name] = pattern


def _parse_tests(body: str, line: int) -> List[TestDraft]:
    """'?' 이후 텍스트 → 공백으로 나뉜 단어마다 독립된 TestDraft."""
    body = body.lstrip()

    if body.startswith("+"):
        intent = True  # 무효여야 통과
    elif body.startswith("!"):
        intent = False  # 유효여야 통과
    else:
        raise DescriptorParseError(ParseErrorKind.INVALID_TEST_INTENT, line)

    return [TestDraft(word=word, intent=intent) for word in body[1:].split()]


def parse_draft(text: str) -> Draft:
    """디스크립터 텍스트 → Draft."""
    statements = split_statements(text)

    # 필드 빌더
    messages: List[Message[TestDraft]] = []
    mode: Optional[Mode] = None
    raw_rules: List[RawRule] = []
    raw_classes: Dict[str, str] = {}

    # 가장 최근 note (이 파싱 패스 안에서만 유효)
    last_note: Optional[Note] = None

    for statement, line in statements:
        operator, body = statement[0], statement[1:]

        if operator == "#":
            continue

        if operator == "~":
            if mode is not None:
                raise DescriptorParseError(ParseErrorKind.MODE_ALREADY_DEFINED, line)
            mode = _parse_mode(body, line)

        elif operator == "$":
            _parse_class(body, raw_classes, line)

        elif operator in ("+", "!"):
            raw_rules.append(
                RawRule(
                    intent=operator == "+",
                    pattern=_strip_whitespace(body),
                    note=last_note,
                    line=line,
                )
            )

        elif operator == "*":
            note_text = body.strip()
            if not note_text:
                raise DescriptorParseError(ParseErrorKind.EMPTY_NOTE, line)

            last_note = Note(note_text)
            messages.append(Info(last_note))

        elif operator == "?":
            messages.extend(Test(test) for test in _parse_tests(body, line))

        else:
            raise DescriptorParseError(
                ParseErrorKind.UNKNOWN_STATEMENT_OPERATOR, line, operator
            )

    # 모드 미지정 시 기본값
    mode = mode or Mode.default()

    # 규칙 컴파일은 모드가 확정된 뒤에 수행
    rules = compile_rules(raw_rules, raw_classes, mode)

    test_count = sum(1 for msg in messages if msg.is_test)

    logger.debug(
        "Parsed %d statements: %d classes, %d rules, %d tests (mode %s)",
        len(statements),
        len(raw_classes),
        len(rules),
        test_count,
        mode.value,
    )

    return Draft(
        rules=tuple(rules),
        messages=tuple(messages),
        mode=mode,
        test_count=test_count,
        raw_rules=tuple(raw_rules),
        raw_classes=MappingProxyType(raw_classes),
    )


def override_tests(draft: Draft, words: List[str]) -> Draft:
    """
    파일에 선언된 메시지를 모두 버리고 주어진 단어들로 테스트를 대체한 새 Draft.

    대체 테스트는 모두 '유효여야 통과'(intent=False) 로 선언된다.
    """
    messages = tuple(Test(TestDraft(word=word, intent=False)) for word in words)
    return Draft(
        rules=draft.rules,
        messages=messages,
        mode=draft.mode,
        test_count=len(messages),
        raw_rules=draft.raw_rules,
        raw_classes=draft.raw_classes,
    )
