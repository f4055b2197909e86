# tests/test_class_expander.py
"""
클래스 확장기 단위 테스트.

검증 대상:
- 중첩 클래스 재귀 치환 + 비캡처 그룹 래핑
- 모드별 구분자
- 알 수 없는 클래스 / 순환 참조 (직접, 다단계 체인)
"""
import re

import pytest

from phonet.errors import DescriptorParseError, ParseErrorKind
from phonet.models.draft_types import Mode
from phonet.parsing.class_expander import replace_classes


# ── 정상 치환 ────────────────────────────────────────────────────────────────

def test_simple_reference():
    classes = {"C": "[ptk]"}
    assert replace_classes("^<C>+$", classes, Mode.ROMANIZED, 1) == "^(?:[ptk])+$"


def test_nested_reference():
    classes = {"V": "[aeiou]", "C": "[ptk]", "S": "<C><V>"}
    result = replace_classes("^<S>+$", classes, Mode.ROMANIZED, 1)
    assert result == "^(?:(?:[ptk])(?:[aeiou]))+$"


def test_pattern_without_references_unchanged():
    assert replace_classes("^(a)\\1$", {}, Mode.ROMANIZED, 1) == "^(a)\\1$"


def test_wrapping_keeps_backreference_index():
    """클래스가 캡처 그룹을 늘리지 않으므로 \\1 은 여전히 첫 번째 그룹을 가리킨다."""
    classes = {"C": "[ptk]"}
    expanded = replace_classes("^<C>(a)\\1$", classes, Mode.ROMANIZED, 1)
    pattern = re.compile(expanded)
    assert pattern.search("paa")
    assert not pattern.search("pab")


def test_broad_mode_delimiters():
    classes = {"C": "[ptk]"}
    assert replace_classes("^/C/$", classes, Mode.BROAD, 1) == "^(?:[ptk])$"


def test_narrow_mode_delimiters():
    classes = {"C": "[ptk]"}
    assert replace_classes("^[C]$", classes, Mode.NARROW, 1) == "^(?:[ptk])$"


def test_other_mode_delimiters_are_literal():
    """ROMANIZED 모드에서 /C/ 는 참조가 아니다."""
    assert replace_classes("/C/", {"C": "x"}, Mode.ROMANIZED, 1) == "/C/"


def test_named_group_syntax_not_a_reference():
    expanded = replace_classes("(?P<first>a)(?P=first)", {}, Mode.ROMANIZED, 1)
    assert expanded == "(?P<first>a)(?P=first)"


def test_shared_class_used_twice():
    """A, B 는 V 의 별칭이므로 V 의 그룹을 그대로 재사용한다."""
    classes = {"V": "[ae]", "A": "<V>", "B": "<V>", "S": "<A><B>"}
    assert replace_classes("<S>", classes, Mode.ROMANIZED, 1) == (
        "(?:(?:[ae])(?:[ae]))"
    )


# ── 에러 ─────────────────────────────────────────────────────────────────────

def test_unknown_class():
    with pytest.raises(DescriptorParseError) as exc_info:
        replace_classes("<X>", {"C": "a"}, Mode.ROMANIZED, 7)
    assert exc_info.value.kind == ParseErrorKind.UNKNOWN_CLASS_REFERENCE
    assert exc_info.value.value == "X"
    assert exc_info.value.line == 7


def test_unknown_class_nested():
    with pytest.raises(DescriptorParseError) as exc_info:
        replace_classes("<A>", {"A": "<B>"}, Mode.ROMANIZED, 2)
    assert exc_info.value.kind == ParseErrorKind.UNKNOWN_CLASS_REFERENCE
    assert exc_info.value.value == "B"


def test_self_reference():
    with pytest.raises(DescriptorParseError) as exc_info:
        replace_classes("<A>", {"A": "a<A>"}, Mode.ROMANIZED, 3)
    assert exc_info.value.kind == ParseErrorKind.RECURSIVE_CLASS_REFERENCE
    assert exc_info.value.value == "A"
    assert exc_info.value.line == 3


def test_multi_hop_cycle():
    """a → b → c → a 처럼 깊은 체인도 순환으로 검출된다."""
    classes = {"a": "<b>", "b": "x<c>", "c": "<a>y"}
    with pytest.raises(DescriptorParseError) as exc_info:
        replace_classes("^<a>$", classes, Mode.ROMANIZED, 1)
    assert exc_info.value.kind == ParseErrorKind.RECURSIVE_CLASS_REFERENCE
    assert exc_info.value.value == "a"


def test_cycle_not_reached_is_not_an_error():
    """순환이 있어도 참조되지 않으면 에러가 아니다."""
    classes = {"a": "<b>", "b": "<a>", "c": "z"}
    assert replace_classes("<c>", classes, Mode.ROMANIZED, 1) == "(?:z)"


# ── 별칭 / 깊은 체인 ─────────────────────────────────────────────────────────

def test_alias_reuses_target_group():
    classes = {"C": "[ptk]", "K": "<C>"}
    assert replace_classes("^<K>$", classes, Mode.ROMANIZED, 1) == "^(?:[ptk])$"


def test_alias_with_surrounding_text_is_wrapped():
    classes = {"C": "[ptk]", "K": "<C>+"}
    assert replace_classes("<K>", classes, Mode.ROMANIZED, 1) == "(?:(?:[ptk])+)"


def test_deep_alias_chain():
    """c0 → c1 → … → c999 → 'a' 체인도 재귀 한도 없이 펼쳐진다."""
    depth = 1000
    classes = {f"c{i}": f"<c{i + 1}>" for i in range(depth)}
    classes[f"c{depth}"] = "a"
    assert replace_classes("^<c0>$", classes, Mode.ROMANIZED, 1) == "^(?:a)$"


def test_deep_nested_chain():
    depth = 1000
    classes = {f"c{i}": f"x<c{i + 1}>" for i in range(depth)}
    classes[f"c{depth}"] = "a"
    expanded = replace_classes("<c0>", classes, Mode.ROMANIZED, 1)
    assert expanded == "(?:x" * depth + "(?:a)" + ")" * depth


def test_deep_chain_ending_in_cycle():
    depth = 1000
    classes = {f"c{i}": f"<c{i + 1}>" for i in range(depth)}
    classes[f"c{depth}"] = "<c500>"
    with pytest.raises(DescriptorParseError) as exc_info:
        replace_classes("<c0>", classes, Mode.ROMANIZED, 4)
    assert exc_info.value.kind == ParseErrorKind.RECURSIVE_CLASS_REFERENCE
    assert exc_info.value.value == "c500"
    assert exc_info.value.line == 4
