from .rule_validator import Validity, validate_word
from .test_runner import get_status, run_draft, run_test

__all__ = ["Validity", "get_status", "run_draft", "run_test", "validate_word"]
