"""Tally how many expected verses contain a rendering of a term."""

from collections.abc import Iterable, Mapping

from maplabeler.models.renderings import EMPTY_TALLY, MatchSpan, MatchTally, TermRenderingEntry
from maplabeler.services.pattern_compiler import (
    CompiledPattern,
    RenderingPatternCompiler,
    find_first_match,
    matches_any,
)


class VerseMatchTally:
    """Counts verse matches for a term, honoring denials.

    A verse whose text is missing or empty has not been loaded yet and is
    left out of both counts. A verse with no rendering that the user denied
    still counts as matched, and the tally reports that denials were used.
    """

    def __init__(self, compiler: RenderingPatternCompiler | None = None):
        self.compiler = compiler or RenderingPatternCompiler()

    def tally(
        self,
        entry: TermRenderingEntry | None,
        refs: Iterable[str],
        verses: Mapping[str, str | None],
        patterns: list[CompiledPattern] | None = None,
    ) -> MatchTally:
        """Compute ``(match_count, considered_count, any_denials)``.

        Args:
            entry: Term renderings entry (None gives an empty tally)
            refs: Expected verse references
            verses: Verse text by reference; may be incomplete
            patterns: Precompiled patterns of ``entry`` (compiled on demand)

        Returns:
            MatchTally for the references that have text
        """
        if entry is None:
            return EMPTY_TALLY

        if patterns is None:
            patterns = self.compiler.compile(entry.renderings)

        match_count = 0
        considered_count = 0
        any_denials = False

        for ref in refs:
            text = verses.get(ref)
            if not text:
                continue
            considered_count += 1
            if matches_any(text, patterns):
                match_count += 1
            elif ref in entry.denials:
                match_count += 1
                any_denials = True

        return MatchTally(match_count, considered_count, any_denials)

    def unmatched_refs(
        self,
        entry: TermRenderingEntry | None,
        refs: Iterable[str],
        verses: Mapping[str, str | None],
    ) -> list[str]:
        """References with text that contain no rendering and are not denied."""
        if entry is None:
            return []
        patterns = self.compiler.compile(entry.renderings)
        return [
            ref
            for ref in refs
            if verses.get(ref)
            and not matches_any(verses[ref], patterns)
            and ref not in entry.denials
        ]

    def highlight(
        self,
        entry: TermRenderingEntry | None,
        text: str | None,
    ) -> MatchSpan | None:
        """Span of the first rendering (in item order) found in a verse."""
        if entry is None or not text:
            return None
        return find_first_match(text, self.compiler.compile(entry.renderings))
