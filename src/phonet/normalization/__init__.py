from .minifier import minify_draft
from .outcome_mapper import (
    build_draft_summary,
    build_outcome_report,
    build_validity_report,
)

__all__ = [
    "build_draft_summary",
    "build_outcome_report",
    "build_validity_report",
    "minify_draft",
]
