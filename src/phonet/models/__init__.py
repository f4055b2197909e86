from .draft_types import (
    ClassTable,
    Draft,
    Info,
    Message,
    Mode,
    Note,
    RawRule,
    Rule,
    Test,
    TestDraft,
)
from .outcome_types import FailKind, FailReason, Outcome, PassStatus, TestOutcome

__all__ = [
    "ClassTable",
    "Draft",
    "FailKind",
    "FailReason",
    "Info",
    "Message",
    "Mode",
    "Note",
    "Outcome",
    "PassStatus",
    "RawRule",
    "Rule",
    "Test",
    "TestDraft",
    "TestOutcome",
]
