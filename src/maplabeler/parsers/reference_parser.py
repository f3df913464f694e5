"""
Scripture reference helpers.

Verse references are stored as 9-digit strings: 3 digits of book number
(1-based index into the standard book codes), then 3 of chapter and 3 of
verse, e.g. ``"040002001"`` for MAT 2:1.

Template references use book codes with chapter.verse notation, e.g.
``"1SA 2.3-5;2SA 1"``, and are tokenized here for vernacular formatting.
"""
import re
from dataclasses import dataclass

from maplabeler.config.constants import BOOK_CODES

BOOK_TOKEN = re.compile(r"[1-4]?[A-Z]{2,3}")
NUMBER_TOKEN = re.compile(r"\d+")
SEPARATOR_TOKEN = re.compile(r"[:.,;–—-]")

# Value given to ";" when it separates passages in different books
PASSAGE_SEPARATOR = "#"


@dataclass(frozen=True)
class RefToken:
    """A token of a scripture reference: ``book``, ``num`` or ``sep``."""

    type: str
    value: str


def pretty_ref(ref: str) -> str:
    """Format a 9-digit verse reference for display.

    Args:
        ref: Reference like ``"001001001"``

    Returns:
        Human-readable reference like ``"GEN 1:1"``, or the input unchanged
        when it is not a 9-digit reference
    """
    if len(ref) != 9 or not ref.isdigit():
        return ref
    book_index = int(ref[0:3]) - 1
    chapter = int(ref[3:6])
    verse = int(ref[6:9])
    book = BOOK_CODES[book_index] if 0 <= book_index < len(BOOK_CODES) else ref[0:3]
    return f"{book} {chapter}:{verse}"


def make_ref(book: str, chapter: int, verse: int) -> str:
    """Build a 9-digit verse reference from a book code, chapter and verse."""
    book_number = BOOK_CODES.index(book.upper()) + 1
    return f"{book_number:03d}{chapter:03d}{verse:03d}"


def tokenize_bible_refs(text: str) -> list[RefToken]:
    """Split a reference string into book, number and separator tokens.

    Whitespace is ignored. A ``;`` directly followed by a book code becomes
    the passage separator ``#``. Unrecognized characters are skipped.
    """
    clean = re.sub(r"\s", "", text)
    tokens: list[RefToken] = []
    i = 0

    while i < len(clean):
        match = BOOK_TOKEN.match(clean, i)
        if match:
            tokens.append(RefToken("book", match.group(0)))
            i = match.end()
            continue

        match = NUMBER_TOKEN.match(clean, i)
        if match:
            tokens.append(RefToken("num", match.group(0)))
            i = match.end()
            continue

        match = SEPARATOR_TOKEN.match(clean, i)
        if match:
            value = match.group(0)
            if value == ";" and BOOK_TOKEN.match(clean, i + 1):
                value = PASSAGE_SEPARATOR
            tokens.append(RefToken("sep", value))
            i = match.end()
            continue

        i += 1

    return tokens
