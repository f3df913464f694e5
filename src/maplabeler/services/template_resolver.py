"""Resolve label templates into literal label text.

Place-name fields are resolved from the renderings of every term of the place
name. Reference and number fields are delegated to asynchronous
collaborators, so ``resolve`` is a coroutine. Callers that start a new
resolution on every edit should tag requests with a ``ResolutionGate`` and
drop results that are no longer current.
"""

from collections.abc import Iterable, Mapping
from typing import Protocol

from loguru import logger

from maplabeler.config.constants import MULTIPLE_SEPARATOR
from maplabeler.models.catalog import PlaceNameCatalog
from maplabeler.models.renderings import EMPTY_TALLY, MatchTally, TermRenderingEntry
from maplabeler.models.template import FieldType, ResolvedTemplate, TemplateField
from maplabeler.parsers.rendering_parser import display_items, explicit_form
from maplabeler.parsers.template_parser import LabelTemplateParser
from maplabeler.services.reference_formatter import DigitConverter, VernacularReferenceFormatter
from maplabeler.services.tag_rules import LabelTagRules
from maplabeler.services.verse_tally import VerseMatchTally


class ReferenceConverter(Protocol):
    async def vern_ref(self, reference: str, use_short: bool = False) -> str: ...


class NumberConverter(Protocol):
    async def convert_digits(self, number: str) -> str: ...


class TagRuleProvider(Protocol):
    def apply_tag(self, tag: str, text: str) -> str: ...


class ResolutionGate:
    """Generation counter for discarding out-of-order results.

    Example:
        token = gate.begin()
        text = await resolver.resolve(template)
        if gate.is_current(token):
            show(text)
    """

    def __init__(self):
        self.generation = 0

    def begin(self) -> int:
        self.generation += 1
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation


class TemplateResolver:
    """Expands ``{...}`` fields of label templates.

    Args:
        entries: Term renderings keyed by term id
        catalog: Place names and merge keys of the collection
        tag_rules: Transformations for tagged place names
        references: Converts ``{r#REF}``/``{R#REF}`` fields
        numbers: Converts ``{#NUM}`` fields
    """

    def __init__(
        self,
        entries: Mapping[str, TermRenderingEntry],
        catalog: PlaceNameCatalog,
        tag_rules: TagRuleProvider | None = None,
        references: ReferenceConverter | None = None,
        numbers: NumberConverter | None = None,
        tally: VerseMatchTally | None = None,
    ):
        self.entries = entries
        self.catalog = catalog
        self.tag_rules = tag_rules or LabelTagRules()
        self.references = references or VernacularReferenceFormatter()
        self.numbers = numbers or DigitConverter()
        self.tally = tally or VerseMatchTally()
        self.parser = LabelTemplateParser()

    def place_name_items(self, place_name_id: str) -> list[str]:
        """Candidate map forms of a place name across all of its terms.

        An explicit map form on any term wins outright. Otherwise the rendering
        items of every term with renderings are collected, keeping the first
        spelling of items that differ only in case.
        """
        items: list[str] = []
        seen: set[str] = set()

        for term in self.catalog.get_terms(place_name_id):
            entry = self.entries.get(term.term_id)
            if entry is None or not entry.has_renderings:
                continue

            renderings = entry.renderings.replace("*", "")
            override = explicit_form(renderings)
            if override is not None:
                return [override]

            for item in display_items(renderings):
                key = item.casefold()
                if key not in seen:
                    seen.add(key)
                    items.append(item)

        return items

    def resolve_place_name(self, place_name_id: str, tag: str | None = None) -> str:
        """Map form of a place name, with an optional tag applied to each item."""
        items = self.place_name_items(place_name_id)
        if not items:
            logger.debug(f"No renderings for place name {place_name_id}")
        if tag:
            items = [self.tag_rules.apply_tag(tag, item) for item in items]
        return MULTIPLE_SEPARATOR.join(items)

    async def _resolve_field(self, template_field: TemplateField) -> str:
        if template_field.type == FieldType.REFERENCE:
            return await self.references.vern_ref(
                template_field.reference or "", template_field.use_short
            )
        if template_field.type == FieldType.NUMBER:
            return await self.numbers.convert_digits(template_field.number or "")
        if template_field.type == FieldType.TAGGED_PLACENAME:
            return self.resolve_place_name(template_field.place_name_id or "", template_field.tag)
        return self.resolve_place_name(template_field.place_name_id or "")

    async def resolve(self, template: str | None) -> ResolvedTemplate:
        """Replace every field of ``template`` with literal text.

        Fields are replaced from the last to the first so that the offsets
        of earlier fields stay valid.
        """
        parsed = self.parser.parse(template)
        text = parsed.template

        for template_field in sorted(parsed.fields, key=lambda f: f.start, reverse=True):
            replacement = await self._resolve_field(template_field)
            text = text[:template_field.start] + replacement + text[template_field.end:]

        return ResolvedTemplate(
            text=text,
            place_name_ids=parsed.place_name_ids,
            references=parsed.references,
        )

    async def resolve_merge_key(self, merge_key: str, strict: bool = False) -> ResolvedTemplate:
        """Resolve the label template defined for a merge key."""
        template = self.catalog.get_template(merge_key, strict=strict)
        if not template:
            logger.warning(f"No label template for merge key {merge_key}")
        return await self.resolve(template)

    def expected_refs(self, place_name_ids: Iterable[str]) -> list[str]:
        """Union of expected verses of the given place names, in first-seen order."""
        refs: list[str] = []
        seen: set[str] = set()
        for place_name_id in place_name_ids:
            for ref in self.catalog.get_refs(place_name_id):
                if ref not in seen:
                    seen.add(ref)
                    refs.append(ref)
        return refs

    def tally_place_names(
        self,
        place_name_ids: Iterable[str],
        verses: Mapping[str, str | None],
    ) -> MatchTally:
        """Verse tally summed over every term of the given place names."""
        total = EMPTY_TALLY
        for place_name_id in place_name_ids:
            for term in self.catalog.get_terms(place_name_id):
                term_tally = self.tally.tally(self.entries.get(term.term_id), term.refs, verses)
                total = total.combine(term_tally)
        return total
