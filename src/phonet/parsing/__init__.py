from .class_expander import replace_classes
from .draft_parser import override_tests, parse_draft
from .rule_compiler import compile_rules
from .statements import split_statements

__all__ = [
    "compile_rules",
    "override_tests",
    "parse_draft",
    "replace_classes",
    "split_statements",
]
