"""RawRule → Rule 컴파일 (클래스 확장 + re.compile)."""
# src/phonet/parsing/rule_compiler.py
import logging
import re
from typing import Iterable, List

from ..errors import DescriptorParseError, ParseErrorKind
from ..models.draft_types import ClassTable, Mode, RawRule, Rule
from .class_expander import replace_classes

logger = logging.getLogger(__name__)


def compile_rule(raw: RawRule, classes: ClassTable, mode: Mode) -> Rule:
    """
    규칙 하나를 컴파일한다.

    re.error 는 해당 규칙의 원본 소스 라인을 가진 PatternCompileError 로 바뀐다.
    re 파서가 감당하지 못할 만큼 그룹이 깊게 중첩된 경우(RecursionError)도 같다.
    """
    expanded = replace_classes(raw.pattern, classes, mode, raw.line)
    logger.debug("Rule at line %d expanded: %s -> %s", raw.line, raw.pattern, expanded)

    try:
        pattern = re.compile(expanded)
    except re.error as exc:
        raise DescriptorParseError(
            ParseErrorKind.PATTERN_COMPILE_ERROR, raw.line, str(exc)
        ) from exc
    except RecursionError as exc:
        raise DescriptorParseError(
            ParseErrorKind.PATTERN_COMPILE_ERROR, raw.line, "pattern nested too deeply"
        ) from exc

    return Rule(intent=raw.intent, pattern=pattern, note=raw.note)


def compile_rules(
    raw_rules: Iterable[RawRule], classes: ClassTable, mode: Mode
) -> List[Rule]:
    """선언 순서를 유지한 채 모든 규칙을 컴파일한다."""
    return [compile_rule(raw, classes, mode) for raw in raw_rules]
