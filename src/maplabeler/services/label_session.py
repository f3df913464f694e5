"""In-memory labeling session.

The session owns the term renderings, the placed labels and the verse text
of one map. Every edit goes through a method here, and the status of every
affected label is recomputed from scratch afterwards.
"""

from collections import Counter
from collections.abc import Iterable, Mapping

from loguru import logger

from maplabeler.models.catalog import PlaceNameCatalog
from maplabeler.models.renderings import (
    EMPTY_TALLY,
    LabelLocation,
    MatchTally,
    TermRenderingEntry,
)
from maplabeler.models.status import LabelStatus, sorted_statuses
from maplabeler.parsers.template_parser import LabelTemplateParser
from maplabeler.services.map_form import MapFormResolver
from maplabeler.services.pattern_compiler import RenderingPatternCompiler
from maplabeler.services.status_classifier import LabelStatusClassifier
from maplabeler.services.verse_tally import VerseMatchTally


class LabelSession:
    """Editing session over the labels of one map.

    Args:
        entries: Term renderings keyed by term id (modified in place)
        locations: Labels placed on the map
        verses: Verse text by reference (may be filled in later)
        catalog: Place names and expected verses; a location's merge key is
            either a place name itself or has a template naming place names
        compiler: Shared pattern compiler
    """

    def __init__(
        self,
        entries: dict[str, TermRenderingEntry],
        locations: list[LabelLocation],
        verses: Mapping[str, str | None] | None = None,
        catalog: PlaceNameCatalog | None = None,
        compiler: RenderingPatternCompiler | None = None,
    ):
        self.entries = entries
        self.locations = locations
        self.verses: Mapping[str, str | None] = verses or {}
        self.catalog = catalog or PlaceNameCatalog()
        self.compiler = compiler or RenderingPatternCompiler()
        self.resolver = MapFormResolver()
        self.classifier = LabelStatusClassifier(self.compiler, self.resolver)
        self.tallier = VerseMatchTally(self.compiler)
        self.template_parser = LabelTemplateParser()

    # ------------------------------------------------------------------
    # Status computation
    # ------------------------------------------------------------------

    def _place_name_ids(self, location: LabelLocation) -> list[str]:
        if location.merge_key in self.catalog.place_names:
            return [location.merge_key]
        template = self.catalog.get_template(location.merge_key)
        return self.template_parser.get_place_name_ids(template)

    def refs_for(self, location: LabelLocation) -> list[str]:
        """Expected verses of the location's term.

        When the term is not listed under the location's place names, the
        verses of all of their terms are used.
        """
        place_name_ids = self._place_name_ids(location)
        for place_name_id in place_name_ids:
            for term in self.catalog.get_terms(place_name_id):
                if term.term_id == location.term_id:
                    return list(term.refs)

        refs: list[str] = []
        for place_name_id in place_name_ids:
            for ref in self.catalog.get_refs(place_name_id):
                if ref not in refs:
                    refs.append(ref)
        return refs

    def status_of(self, location: LabelLocation) -> LabelStatus:
        return self.classifier.classify(
            self.entries.get(location.term_id),
            location.vern_label,
            self.refs_for(location),
            self.verses,
        )

    def tally(self, location: LabelLocation) -> MatchTally:
        """Verse tally of a location; empty when its term has no entry."""
        entry = self.entries.get(location.term_id)
        if entry is None:
            return EMPTY_TALLY
        return self.tallier.tally(entry, self.refs_for(location), self.verses)

    def _refresh(self, term_id: str | None = None) -> None:
        for location in self.locations:
            if term_id is None or location.term_id == term_id:
                location.status = self.status_of(location)

    def initialize_locations(self) -> list[LabelLocation]:
        """Fill blank labels with their map form and compute every status."""
        for location in self.locations:
            if not location.vern_label:
                location.vern_label = self.resolver.get_map_form(
                    self.entries, location.term_id, location.alt_term_ids
                )
        self._refresh()
        logger.debug(f"Initialized {len(self.locations)} label locations")
        return self.locations

    def set_verses(self, verses: Mapping[str, str | None]) -> None:
        """Replace the verse text (e.g. once extraction finishes)."""
        self.verses = verses
        self._refresh()

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def _entry(self, term_id: str) -> TermRenderingEntry:
        entry = self.entries.get(term_id)
        if entry is None:
            entry = TermRenderingEntry()
            self.entries[term_id] = entry
        return entry

    def set_renderings(self, term_id: str, renderings: str) -> None:
        """Replace a term's renderings text. Editing approves the renderings."""
        entry = self._entry(term_id)
        entry.renderings = renderings
        entry.is_guessed = False
        self._refresh(term_id)

    def set_approved(self, term_id: str, approved: bool) -> None:
        entry = self._entry(term_id)
        entry.is_guessed = not approved
        self._refresh(term_id)

    def add_rendering(self, term_id: str, text: str) -> None:
        """Append a rendering on a new line."""
        current = self._entry(term_id).renderings.strip()
        text = text.strip()
        self.set_renderings(term_id, f"{current}\n{text}" if current else text)

    def replace_renderings(self, term_id: str, text: str) -> None:
        """Make ``text`` the only rendering and the label of the term's locations."""
        text = text.strip()
        for location in self.locations:
            if location.term_id == term_id:
                location.vern_label = text
        self.set_renderings(term_id, text)

    def toggle_denial(self, term_id: str, ref: str) -> bool:
        """Deny a verse for a term, or withdraw the denial.

        Returns:
            True if the verse is denied after the call
        """
        entry = self._entry(term_id)
        if ref in entry.denials:
            entry.denials.discard(ref)
            denied = False
        else:
            entry.denials.add(ref)
            denied = True
        self._refresh(term_id)
        return denied

    def update_vernacular(self, term_id: str, vern_label: str) -> None:
        """Set the label text of every location of a term."""
        for location in self.locations:
            if location.term_id == term_id:
                location.vern_label = vern_label
                location.status = self.status_of(location)

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------

    def status_counts(self) -> list[tuple[LabelStatus, int]]:
        """Number of locations per status, in tally sort order, omitting zeros."""
        counts = Counter(self.status_of(location) for location in self.locations)
        return [(status, counts[status]) for status in sorted_statuses() if counts[status]]

    def locations_with_status(self, statuses: Iterable[LabelStatus]) -> list[LabelLocation]:
        wanted = set(statuses)
        return [location for location in self.locations if self.status_of(location) in wanted]
