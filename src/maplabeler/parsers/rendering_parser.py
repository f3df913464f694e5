"""
Parse the free-form renderings text of a Paratext biblical term.

A renderings string holds one rendering per line (or per ``||``). Each item
may contain ``*`` wildcards and parenthesized comments, and one item may be
an explicit map form written ``(@text)`` or ``(map: text)``.
"""
import re

ITEM_SEPARATOR = re.compile(r"\r?\n")

# Explicit map form, e.g. "(@Yerusalem)" or "(map: Yerusalem)"
EXPLICIT_FORM_PATTERN = re.compile(r"\((?:@|map:\s*)([^)]+)\)")

# Comments, including ones still being typed: "Babel (old" or "old) Babel"
OPEN_COMMENT_TAIL = re.compile(r"\([^\r\n]*")
CLOSE_COMMENT_HEAD = re.compile(r"[^\r\n]*\)")

CLOSED_COMMENT = re.compile(r"\([^)]*\)")
COMMENT_WITH_SPACING = re.compile(r"\s*\([^)]*\)?\s*")


def split_items(renderings: str | None) -> list[str]:
    """Split a renderings string into raw items.

    Items are separated by ``||`` or line breaks. Items are returned untrimmed
    and may be empty.
    """
    if not renderings:
        return []
    return ITEM_SEPARATOR.split(renderings.replace("||", "\n"))


def strip_partial_comment(item: str) -> str:
    """Remove a comment from an item even when only one parenthesis is typed."""
    item = OPEN_COMMENT_TAIL.sub("", item)
    return CLOSE_COMMENT_HEAD.sub("", item)


def matchable_items(renderings: str | None) -> list[str]:
    """Items that can be compiled into match patterns, in source order."""
    items = (strip_partial_comment(item).strip() for item in split_items(renderings))
    return [item for item in items if item]


def display_items(renderings: str | None) -> list[str]:
    """Items with closed comments removed, as shown on a map."""
    items = (CLOSED_COMMENT.sub("", item).strip() for item in split_items(renderings))
    return [item for item in items if item]


def extract_rendering_patterns(renderings: str | None) -> list[str]:
    """Rendering patterns with comments removed but wildcards kept.

    Args:
        renderings: Raw renderings string

    Returns:
        Patterns in source order, e.g. ``["Yerusalem*", "Salem"]`` for
        ``"Yerusalem* (city)\\nSalem"``
    """
    items = (COMMENT_WITH_SPACING.sub("", item).strip() for item in split_items(renderings))
    return [item for item in items if item]


def explicit_form(renderings: str | None) -> str | None:
    """Return the explicit map form of a renderings string, if one is given.

    Asterisks are removed first since wildcards never belong on a map.
    """
    if not renderings:
        return None
    match = EXPLICIT_FORM_PATTERN.search(renderings.replace("*", ""))
    return match.group(1) if match else None


def has_explicit_form(renderings: str | None) -> bool:
    return explicit_form(renderings) is not None
