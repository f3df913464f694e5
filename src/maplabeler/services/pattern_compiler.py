"""Compile renderings text into match patterns.

Each rendering item becomes a case-insensitive Unicode pattern:

- ``*`` matches zero or more word characters, where a word character is a
  letter, combining mark, format character or hyphen (``WORD_CLASS``);
- an isolated ``**`` matches any number of whole words, including none;
- whitespace matches whitespace;
- everything else is literal.

An item that does not start (end) with ``*`` must match at a word boundary
on that side. Boundaries are defined by the same word class rather than
``\\b``, so text in scripts with combining marks and joiners matches as
whole words. The ``regex`` package is used because the standard ``re``
module has no ``\\p{...}`` property classes.

Compilation never raises: an item that cannot be compiled is dropped.
"""

from dataclasses import dataclass

import regex
from loguru import logger

from maplabeler.config.constants import MATCH_POST_B, MATCH_PRE_B, WORD_CLASS
from maplabeler.models.renderings import MatchSpan
from maplabeler.parsers.rendering_parser import matchable_items

PATTERN_FLAGS = regex.IGNORECASE | regex.UNICODE | regex.V0

TOKEN_SPLIT = regex.compile(r"(\s+|\*+)")

ANY_WORDS = rf"(?:{WORD_CLASS}+(?:\s+{WORD_CLASS}+)*)?"
OPTIONAL_WORD = rf"(?:{WORD_CLASS}+)?"


@dataclass(frozen=True)
class CompiledPattern:
    """A rendering item compiled for matching.

    Attributes:
        source: The rendering item the pattern was built from
        index: 1-based position of the item among the compiled items
        bounded: Pattern with word-boundary requirements, for searching text
        anchored: Pattern that must match a whole string
    """

    source: str
    index: int
    bounded: regex.Pattern
    anchored: regex.Pattern

    def search(self, text: str) -> regex.Match | None:
        """Find the rendering anywhere in ``text`` (at word boundaries)."""
        return self.bounded.search(text)

    def fullmatch(self, text: str) -> bool:
        """Whether ``text`` as a whole is this rendering."""
        return self.anchored.search(text) is not None

    def matches(self, text: str, anchored: bool = False) -> bool:
        if anchored:
            return self.fullmatch(text)
        return self.search(text) is not None


def wildcards_to_regex(item: str) -> str:
    """Translate one rendering item's wildcards into a regex body (no boundaries)."""
    parts: list[str] = []
    for token in TOKEN_SPLIT.split(item):
        if not token:
            continue
        if token.isspace():
            parts.append(r"\s" * len(token))
        elif token == "**":
            parts.append(ANY_WORDS)
        elif token == "*":
            parts.append(OPTIONAL_WORD)
        elif "*" in token:
            parts.append(f"{WORD_CLASS}*" * len(token))
        else:
            parts.append(regex.escape(token))
    return "".join(parts)


def compile_item(item: str, index: int) -> CompiledPattern | None:
    """Compile one rendering item, or return None if it cannot be compiled."""
    body = wildcards_to_regex(item)
    prefix = "" if item.startswith("*") else MATCH_PRE_B
    suffix = "" if item.endswith("*") else MATCH_POST_B
    try:
        bounded = regex.compile(prefix + body + suffix, PATTERN_FLAGS)
        anchored = regex.compile("^" + body + "$", PATTERN_FLAGS)
    except (regex.error, ValueError, OverflowError) as e:
        logger.debug(f"Dropping rendering {item!r}: {e}")
        return None
    return CompiledPattern(source=item, index=index, bounded=bounded, anchored=anchored)


class RenderingPatternCompiler:
    """Compiles renderings strings, remembering recent results.

    The cache is an optimization only; results do not depend on it.

    Example:
        compiler = RenderingPatternCompiler()
        patterns = compiler.compile("Yerusalem*\\nSalem (short form)")
    """

    def __init__(self, cache_size: int = 512):
        self.cache_size = cache_size
        self._cache: dict[str, tuple[CompiledPattern, ...]] = {}

    def compile(self, renderings: str | None) -> list[CompiledPattern]:
        """Compile a renderings string into patterns, in item order.

        Args:
            renderings: Raw renderings text (may be None or empty)

        Returns:
            Compiled patterns; items that are empty after comment removal or
            that fail to compile are left out
        """
        if not renderings or not isinstance(renderings, str):
            return []

        cached = self._cache.get(renderings)
        if cached is None:
            cached = tuple(self._compile_uncached(renderings))
            if self.cache_size > 0:
                if len(self._cache) >= self.cache_size:
                    self._cache.pop(next(iter(self._cache)))
                self._cache[renderings] = cached
        return list(cached)

    @staticmethod
    def _compile_uncached(renderings: str) -> list[CompiledPattern]:
        patterns = []
        for item in matchable_items(renderings):
            pattern = compile_item(item, len(patterns) + 1)
            if pattern is not None:
                patterns.append(pattern)
        return patterns

    def clear(self) -> None:
        self._cache.clear()


def matches_any(text: str, patterns: list[CompiledPattern], anchored: bool = False) -> bool:
    """Whether any pattern matches ``text``. Independent of pattern order."""
    if not text:
        return False
    return any(pattern.matches(text, anchored) for pattern in patterns)


def find_first_match(text: str, patterns: list[CompiledPattern]) -> MatchSpan | None:
    """Locate the first pattern (in item order) found in ``text``.

    Used to choose what to highlight in a verse; tallies use ``matches_any``.
    """
    if not text:
        return None
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return MatchSpan(
                index=pattern.index,
                start=match.start(),
                end=match.end(),
                text=match.group(0),
            )
    return None


def match_index(
    word: str,
    patterns: list[CompiledPattern],
    anchored: bool = True,
) -> int:
    """Return the 1-based index of the first pattern matching ``word``, 0 if none."""
    if not word:
        return 0
    for pattern in patterns:
        if pattern.matches(word, anchored):
            return pattern.index
    return 0
