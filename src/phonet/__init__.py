"""
phonet — 음소배열(phonotactic) 패턴 검증 엔진.

디스크립터 → Draft (parse_draft) → Outcome (run_draft)
                                 → 압축 문자열 (minify_draft)
"""

from .errors import DescriptorNotFoundError, DescriptorParseError, ParseErrorKind
from .models import Draft, Mode, Note, Outcome
from .normalization.minifier import minify_draft
from .parsing.draft_parser import override_tests, parse_draft
from .validation.rule_validator import Validity, validate_word
from .validation.test_runner import run_draft

__version__ = "0.1.0"

__all__ = [
    "DescriptorNotFoundError",
    "DescriptorParseError",
    "Draft",
    "Mode",
    "Note",
    "Outcome",
    "ParseErrorKind",
    "Validity",
    "minify_draft",
    "override_tests",
    "parse_draft",
    "run_draft",
    "validate_word",
]
