"""Derive the map form (canonical label text) of a term from its renderings."""

from collections.abc import Mapping

from loguru import logger

from maplabeler.config.constants import MULTIPLE_SEPARATOR
from maplabeler.models.renderings import TermRenderingEntry
from maplabeler.parsers.rendering_parser import display_items, explicit_form


class MapFormResolver:
    """Resolves the text that should appear on a map for a term.

    Rules, in order:
    1. No entry gives an empty map form.
    2. An explicit map form ``(@text)`` or ``(map: text)`` wins outright.
    3. Otherwise every rendering item (comments and wildcards removed) is
       joined with ``MULTIPLE_SEPARATOR``; more than one item means the user
       must still pick one.
    """

    def resolve(self, entry: TermRenderingEntry | None) -> str:
        """Return the map form of one entry (possibly empty or ambiguous)."""
        if entry is None:
            return ""

        renderings = entry.renderings.replace("*", "")
        override = explicit_form(renderings)
        if override is not None:
            return override

        return MULTIPLE_SEPARATOR.join(display_items(renderings))

    def resolve_term(
        self,
        entries: Mapping[str, TermRenderingEntry],
        term_id: str,
    ) -> str:
        """Map form of ``term_id`` looked up in ``entries``."""
        return self.resolve(entries.get(term_id))

    def get_map_form(
        self,
        entries: Mapping[str, TermRenderingEntry],
        term_id: str,
        alt_term_ids: str | None = None,
    ) -> str:
        """Map form of a term, falling back to alternate terms.

        Args:
            entries: Term renderings keyed by term id
            term_id: Primary term
            alt_term_ids: Comma-separated alternates tried in order when the
                primary term has no map form

        Returns:
            First non-empty map form, or ``""``
        """
        map_form = self.resolve_term(entries, term_id)
        if map_form or not alt_term_ids:
            return map_form

        for alt_term_id in (t.strip() for t in alt_term_ids.split(",")):
            if not alt_term_id:
                continue
            map_form = self.resolve_term(entries, alt_term_id)
            if map_form:
                logger.debug(f"Using map form of alternate term {alt_term_id} for {term_id}")
                return map_form
        return ""
