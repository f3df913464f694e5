"""Data models for Map Labeler."""

from maplabeler.models.renderings import (
    EMPTY_TALLY,
    LabelLocation,
    MatchSpan,
    MatchTally,
    TermRenderingEntry,
)
from maplabeler.models.status import (
    STATUS_DISPLAY,
    STATUS_SORT_ORDER,
    LabelStatus,
    sorted_statuses,
)
from maplabeler.models.template import (
    FieldType,
    ParsedTemplate,
    ResolvedTemplate,
    TemplateField,
)

__all__ = [
    "EMPTY_TALLY",
    "FieldType",
    "LabelLocation",
    "LabelStatus",
    "MatchSpan",
    "MatchTally",
    "ParsedTemplate",
    "ResolvedTemplate",
    "STATUS_DISPLAY",
    "STATUS_SORT_ORDER",
    "TemplateField",
    "TermRenderingEntry",
    "sorted_statuses",
]
