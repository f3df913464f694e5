"""Tests for data models."""

import pytest

from maplabeler.models import (
    STATUS_DISPLAY,
    LabelLocation,
    LabelStatus,
    TermRenderingEntry,
    sorted_statuses,
)
from maplabeler.models.catalog import PlaceNameCatalog, UnknownMergeKeyError


class TestLabelStatus:
    def test_codes_are_stable(self):
        """Test the numeric identifiers shared with the UI."""
        assert {s.name: s.value for s in LabelStatus} == {
            "MATCHED": 0,
            "GUESSED": 1,
            "NO_RENDERINGS": 2,
            "UNMATCHED": 3,
            "BLANK": 4,
            "MULTIPLE": 5,
            "RENDERING_SHORT": 6,
            "BAD_EXPLICIT_FORM": 7,
        }
        assert LabelStatus(7) is LabelStatus.BAD_EXPLICIT_FORM

    def test_sort_order(self):
        """Test the tally order table."""
        assert sorted_statuses() == [
            LabelStatus.MATCHED,
            LabelStatus.GUESSED,
            LabelStatus.NO_RENDERINGS,
            LabelStatus.UNMATCHED,
            LabelStatus.BLANK,
            LabelStatus.MULTIPLE,
            LabelStatus.RENDERING_SHORT,
            LabelStatus.BAD_EXPLICIT_FORM,
        ]
        assert LabelStatus.BLANK.sort_rank == 4

    def test_every_status_has_display(self):
        for status in LabelStatus:
            assert {"label", "bk_color", "text_color"} <= STATUS_DISPLAY[status].keys()
        assert LabelStatus.MULTIPLE.label == "Must select one"


class TestTermRenderingEntry:
    def test_camel_case_input(self):
        """Test loading entries as stored by the project."""
        entry = TermRenderingEntry.model_validate(
            {"renderings": "Yerusalem", "isGuessed": True, "denials": ["r1", "r1"]}
        )

        assert entry.is_guessed is True
        assert entry.denials == {"r1"}

    @pytest.mark.parametrize("data", [{}, {"renderings": None, "denials": None}])
    def test_missing_values(self, data):
        entry = TermRenderingEntry.model_validate(data)

        assert entry.renderings == ""
        assert entry.denials == set()
        assert not entry.has_renderings


class TestLabelLocation:
    def test_aliases(self):
        location = LabelLocation.model_validate(
            {"mergeKey": "jerusalem", "termId": "t1", "vernLabel": "Yerusalem"}
        )

        assert location.merge_key == "jerusalem"
        assert location.alt_term_ids == ""
        assert location.vern_label == "Yerusalem"
        assert location.status is None


class TestPlaceNameCatalog:
    @pytest.fixture
    def catalog(self) -> PlaceNameCatalog:
        return PlaceNameCatalog.model_validate(
            {
                "merge_keys": {"road": {"lblTemplate": "{to#Jericho}"}},
                "place_names": {
                    "Jericho": {
                        "terms": [
                            {"termId": "a", "refs": ["r1", "r2"]},
                            {"termId": "b", "refs": ["r2", "r3"]},
                        ]
                    }
                },
            }
        )

    def test_get_template(self, catalog):
        assert catalog.get_template("road") == "{to#Jericho}"
        assert catalog.get_template("missing") == ""

    def test_strict_lookup(self, catalog):
        with pytest.raises(UnknownMergeKeyError, match="missing"):
            catalog.get_template("missing", strict=True)

    def test_refs_are_unique(self, catalog):
        assert catalog.get_refs("Jericho") == ["r1", "r2", "r3"]
        assert catalog.get_refs("Ur") == []
