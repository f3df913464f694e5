"""Classify a vernacular map label against its term renderings.

The first rule that applies decides the status:

1. empty label                                   -> BLANK
2. label still contains the multiple separator   -> MULTIPLE
3. no renderings entry, or empty map form        -> NO_RENDERINGS
4. label equals the map form:
   - renderings are guessed                      -> GUESSED
   - explicit map form matching no rendering     -> BAD_EXPLICIT_FORM
   - otherwise                                   -> MATCHED
5. label differs from the map form:
   - label is (as a whole) one of the renderings -> RENDERING_SHORT
   - otherwise                                   -> UNMATCHED

Classification is a pure function of its inputs.
"""

from collections.abc import Iterable, Mapping

from maplabeler.config.constants import MULTIPLE_SEPARATOR
from maplabeler.models.renderings import TermRenderingEntry
from maplabeler.models.status import LabelStatus
from maplabeler.parsers.rendering_parser import has_explicit_form
from maplabeler.services.map_form import MapFormResolver
from maplabeler.services.pattern_compiler import (
    CompiledPattern,
    RenderingPatternCompiler,
    matches_any,
)


class LabelStatusClassifier:
    """Assigns a LabelStatus to a label.

    Collaborators are passed in so that callers can share one pattern
    compiler (and its cache) across classifier, tally and resolver.
    """

    def __init__(
        self,
        compiler: RenderingPatternCompiler | None = None,
        resolver: MapFormResolver | None = None,
    ):
        self.compiler = compiler or RenderingPatternCompiler()
        self.resolver = resolver or MapFormResolver()

    def classify(
        self,
        entry: TermRenderingEntry | None,
        vern_label: str | None,
        refs: Iterable[str] | None = None,
        verses: Mapping[str, str | None] | None = None,
        patterns: list[CompiledPattern] | None = None,
    ) -> LabelStatus:
        """Classify ``vern_label`` for a term.

        Args:
            entry: Renderings of the label's term (None if the term has none)
            vern_label: Current vernacular label text
            refs: Expected verse references of the label
            verses: Verse text by reference
            patterns: Precompiled patterns of ``entry.renderings``

        Returns:
            The label's status

        ``refs`` and ``verses`` do not change the status; they are accepted
        so that status and tally can be computed from the same arguments.
        """
        label = vern_label.strip() if isinstance(vern_label, str) else ""
        if not label:
            return LabelStatus.BLANK

        if MULTIPLE_SEPARATOR in label:
            return LabelStatus.MULTIPLE

        if entry is None:
            return LabelStatus.NO_RENDERINGS

        map_form = self.resolver.resolve(entry)
        if not map_form:
            return LabelStatus.NO_RENDERINGS

        if patterns is None:
            patterns = self.compiler.compile(entry.renderings)

        if label == map_form:
            if entry.is_guessed:
                return LabelStatus.GUESSED
            if has_explicit_form(entry.renderings) and not matches_any(map_form, patterns):
                return LabelStatus.BAD_EXPLICIT_FORM
            return LabelStatus.MATCHED

        if matches_any(label, patterns, anchored=True):
            return LabelStatus.RENDERING_SHORT
        return LabelStatus.UNMATCHED

    def classify_term(
        self,
        entries: Mapping[str, TermRenderingEntry],
        term_id: str,
        vern_label: str | None,
        refs: Iterable[str] | None = None,
        verses: Mapping[str, str | None] | None = None,
    ) -> LabelStatus:
        """Classify a label whose term is looked up in ``entries``."""
        return self.classify(entries.get(term_id), vern_label, refs, verses)
