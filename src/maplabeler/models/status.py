"""Label status codes.

Numeric codes are stable identifiers shared with the UI. Sort rank and display
colors live in separate lookup tables.
"""

from enum import IntEnum


class LabelStatus(IntEnum):
    """Classification of a vernacular map label."""

    MATCHED = 0  # Label is the approved map form
    GUESSED = 1  # Label is the map form of a guessed (unapproved) rendering
    NO_RENDERINGS = 2  # Term has no renderings to compare with
    UNMATCHED = 3  # Label matches none of the renderings
    BLANK = 4  # No label text
    MULTIPLE = 5  # Label still holds several map forms joined by the separator
    RENDERING_SHORT = 6  # Label is a valid rendering but not the map form
    BAD_EXPLICIT_FORM = 7  # Explicit map form matches none of the renderings

    @property
    def sort_rank(self) -> int:
        """Position of this status in tally listings."""
        return STATUS_SORT_ORDER[self]

    @property
    def label(self) -> str:
        return STATUS_DISPLAY[self]["label"]


# Tally sort order
STATUS_SORT_ORDER: dict[LabelStatus, int] = {
    LabelStatus.MATCHED: 0,
    LabelStatus.GUESSED: 1,
    LabelStatus.NO_RENDERINGS: 2,
    LabelStatus.UNMATCHED: 3,
    LabelStatus.BLANK: 4,
    LabelStatus.MULTIPLE: 5,
    LabelStatus.RENDERING_SHORT: 6,
    LabelStatus.BAD_EXPLICIT_FORM: 7,
}

# UI color coding
STATUS_DISPLAY: dict[LabelStatus, dict[str, str]] = {
    LabelStatus.BLANK: {"label": "Blank", "bk_color": "crimson", "text_color": "white"},
    LabelStatus.MULTIPLE: {
        "label": "Must select one",
        "bk_color": "darkorange",
        "text_color": "black",
    },
    LabelStatus.NO_RENDERINGS: {
        "label": "No renderings",
        "bk_color": "indianred",
        "text_color": "white",
    },
    LabelStatus.UNMATCHED: {"label": "Unmatched", "bk_color": "yellow", "text_color": "black"},
    LabelStatus.MATCHED: {"label": "Approved", "bk_color": "white", "text_color": "black"},
    LabelStatus.GUESSED: {"label": "Guessed", "bk_color": "#FF8000", "text_color": "black"},
    LabelStatus.RENDERING_SHORT: {
        "label": "Not the map form",
        "bk_color": "purple",
        "text_color": "white",
    },
    LabelStatus.BAD_EXPLICIT_FORM: {
        "label": "Bad explicit form",
        "bk_color": "blue",
        "text_color": "white",
    },
}


def sorted_statuses() -> list[LabelStatus]:
    """All statuses in tally sort order."""
    return sorted(LabelStatus, key=lambda s: STATUS_SORT_ORDER[s])
