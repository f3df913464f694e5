"""Unit tests for TemplateResolver.

Reference and number fields go through async collaborators, so most tests
here are coroutines.
"""

import pytest

from maplabeler.models.catalog import PlaceNameCatalog, UnknownMergeKeyError
from maplabeler.models.renderings import TermRenderingEntry
from maplabeler.services.reference_formatter import (
    BookNames,
    DigitConverter,
    VernacularReferenceFormatter,
)
from maplabeler.services.tag_rules import LabelTagRules
from maplabeler.services.template_resolver import ResolutionGate, TemplateResolver


@pytest.fixture
def catalog() -> PlaceNameCatalog:
    return PlaceNameCatalog.model_validate(
        {
            "merge_keys": {
                "jerusalem_nt": {"lblTemplate": "{Jerusalem}"},
                "road": {"lblTemplate": "{to#Jericho} ({r#LUK 10.30})"},
                "empty": {"lblTemplate": ""},
            },
            "place_names": {
                "Jerusalem": {
                    "terms": [
                        {"termId": "jerusalem_ot", "refs": ["r1", "r2"]},
                        {"termId": "jerusalem_nt", "refs": ["r2", "r3"]},
                    ],
                    "gloss": "Jerusalem",
                },
                "Jericho": {"terms": [{"termId": "jericho", "refs": ["r4"]}]},
                "Ur": {"terms": [{"termId": "ur", "refs": ["r5"]}]},
            },
        }
    )


@pytest.fixture
def entries() -> dict[str, TermRenderingEntry]:
    return {
        "jerusalem_ot": TermRenderingEntry(renderings="Yerusalem*\nYerushalem"),
        "jerusalem_nt": TermRenderingEntry(renderings="yerusalem (NT)\nSalem"),
        "jericho": TermRenderingEntry(renderings="Yeriko"),
    }


@pytest.fixture
def resolver(entries, catalog) -> TemplateResolver:
    return TemplateResolver(
        entries,
        catalog,
        tag_rules=LabelTagRules({"to": [["$", "-ward"]]}),
        references=VernacularReferenceFormatter(
            BookNames(short={"LUK": "Luke"}, abbreviated={"LUK": "Lk."})
        ),
        numbers=DigitConverter("Deva"),
    )


class FakeReferences:
    """Records reference requests."""

    def __init__(self):
        self.calls = []

    async def vern_ref(self, reference, use_short=False):
        self.calls.append((reference, use_short))
        return f"<{reference}>"


class FakeNumbers:
    async def convert_digits(self, number):
        return f"#{number}#"


class TestPlaceNames:
    """Tests for place-name fields."""

    def test_items_of_all_terms(self, resolver):
        """Test that items from every term are collected without case duplicates."""
        assert resolver.place_name_items("Jerusalem") == ["Yerusalem", "Yerushalem", "Salem"]

    def test_explicit_form_wins(self, resolver, entries):
        entries["jerusalem_nt"] = TermRenderingEntry(renderings="Salem\n(@Yerusalema)")

        assert resolver.place_name_items("Jerusalem") == ["Yerusalema"]

    def test_unknown_place_name(self, resolver):
        assert resolver.place_name_items("Nineveh") == []
        assert resolver.resolve_place_name("Nineveh") == ""

    def test_terms_without_renderings_are_skipped(self, resolver):
        assert resolver.resolve_place_name("Ur") == ""

    @pytest.mark.asyncio
    async def test_multiple_items_are_joined(self, resolver):
        resolved = await resolver.resolve("{Jerusalem}")

        assert resolved.text == "Yerusalem——Yerushalem——Salem"
        assert resolved.place_name_ids == ["Jerusalem"]

    @pytest.mark.asyncio
    async def test_tag_applies_to_each_item(self, entries, catalog):
        entries["jericho"] = TermRenderingEntry(renderings="Yeriko\nYeriho")
        resolver = TemplateResolver(entries, catalog)

        assert (await resolver.resolve("{q#Jericho}")).text == "Yeriko?——Yeriho?"

    @pytest.mark.asyncio
    async def test_tag_applies_to_explicit_form(self, entries, catalog):
        entries["jericho"] = TermRenderingEntry(renderings="(@Yeriko)\nYeriho")
        resolver = TemplateResolver(entries, catalog)

        assert (await resolver.resolve("{q#Jericho}")).text == "Yeriko?"


class TestResolve:
    """Tests for whole templates."""

    @pytest.mark.asyncio
    async def test_mixed_template(self, resolver):
        resolved = await resolver.resolve("{to#Jericho} ({r#LUK 10.30}) {#7}")

        assert resolved.text == "Yeriko-ward (Lk. 10:30) ७"
        assert resolved.references == ["LUK 10.30"]

    @pytest.mark.asyncio
    async def test_short_book_names(self, resolver):
        assert (await resolver.resolve("{R#LUK 10}")).text == "Luke 10"

    @pytest.mark.asyncio
    async def test_literal_text_is_kept(self, resolver):
        """Test that replacing fields keeps text around and between them."""
        resolved = await resolver.resolve("From {Jericho} to {Jerusalem}!")

        assert resolved.text == "From Yeriko to Yerusalem——Yerushalem——Salem!"

    @pytest.mark.asyncio
    async def test_collaborators_are_awaited(self, entries, catalog):
        references = FakeReferences()
        resolver = TemplateResolver(
            entries, catalog, references=references, numbers=FakeNumbers()
        )

        resolved = await resolver.resolve("{R#GEN 1.1} {#3}")

        assert resolved.text == "<GEN 1.1> #3#"
        assert references.calls == [("GEN 1.1", True)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("template", ["", None, "Great Sea"])
    async def test_templates_without_fields(self, resolver, template):
        assert (await resolver.resolve(template)).text == (template or "")

    @pytest.mark.asyncio
    async def test_resolve_merge_key(self, resolver):
        resolved = await resolver.resolve_merge_key("road")

        assert resolved.text == "Yeriko-ward (Lk. 10:30)"
        assert resolved.place_name_ids == ["Jericho"]

    @pytest.mark.asyncio
    async def test_unknown_merge_key(self, resolver):
        assert (await resolver.resolve_merge_key("missing")).text == ""

        with pytest.raises(UnknownMergeKeyError) as exc_info:
            await resolver.resolve_merge_key("missing", strict=True)
        assert exc_info.value.merge_key == "missing"


class TestExpectedVerses:
    """Tests for verse unions over place names."""

    def test_expected_refs(self, resolver):
        assert resolver.expected_refs(["Jerusalem", "Jericho", "Jerusalem"]) == [
            "r1",
            "r2",
            "r3",
            "r4",
        ]

    def test_tally_place_names(self, resolver):
        """Test that tallies are summed over every term."""
        verses = {
            "r1": "In Yerusalemu",
            "r2": "Babel",
            "r3": "King of Salem",
            "r4": "Yeriko",
        }

        assert resolver.tally_place_names(["Jerusalem", "Jericho"], verses) == (3, 5, False)

    def test_tally_without_verses(self, resolver):
        assert resolver.tally_place_names(["Jerusalem"], {}) == (0, 0, False)


class TestResolutionGate:
    def test_only_latest_request_is_current(self):
        gate = ResolutionGate()

        first = gate.begin()
        second = gate.begin()

        assert not gate.is_current(first)
        assert gate.is_current(second)
