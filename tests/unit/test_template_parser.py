"""Unit tests for LabelTemplateParser."""

import pytest

from maplabeler.models.template import FieldType
from maplabeler.parsers.template_parser import LabelTemplateParser


@pytest.fixture
def parser() -> LabelTemplateParser:
    return LabelTemplateParser()


class TestParse:
    """Tests for field extraction."""

    def test_single_place_name(self, parser):
        parsed = parser.parse("{Jerusalem}")

        assert len(parsed.fields) == 1
        assert parsed.fields[0].type == FieldType.PLACENAME
        assert parsed.fields[0].place_name_id == "Jerusalem"
        assert parsed.place_name_ids == ["Jerusalem"]
        assert parsed.is_valid
        assert not parsed.has_multiple_place_names

    def test_all_field_types(self, parser):
        """Test a template that uses every kind of field."""
        parsed = parser.parse("{to#Jericho} and {Jerusalem} ({r#LUK 10.30}) {#7}")

        types = [f.type for f in parsed.fields]
        assert types == [
            FieldType.TAGGED_PLACENAME,
            FieldType.PLACENAME,
            FieldType.REFERENCE,
            FieldType.NUMBER,
        ]
        assert parsed.fields[0].tag == "to"
        assert parsed.fields[0].place_name_id == "Jericho"
        assert parsed.fields[2].reference == "LUK 10.30"
        assert parsed.fields[2].use_short is False
        assert parsed.fields[3].number == "7"
        assert parsed.place_name_ids == ["Jericho", "Jerusalem"]
        assert parsed.references == ["LUK 10.30"]
        assert parsed.literal_text == "and  ()"
        assert parsed.has_multiple_place_names

    def test_field_offsets(self, parser):
        parsed = parser.parse("A {Babel} B")

        assert (parsed.fields[0].start, parsed.fields[0].end) == (2, 9)
        assert parsed.fields[0].raw == "{Babel}"

    def test_short_book_reference(self, parser):
        (ref_field,) = parser.parse("{R#JHN 2}").fields

        assert ref_field.type == FieldType.REFERENCE
        assert ref_field.use_short is True
        assert ref_field.reference == "JHN 2"

    def test_place_names_are_unique(self, parser):
        """Test that repeated place names are listed once, in order."""
        assert parser.get_place_name_ids("{Salem} {q#Babel} {Salem}") == ["Salem", "Babel"]

    def test_no_fields(self, parser):
        parsed = parser.parse("Great Sea")

        assert parsed.fields == []
        assert parsed.literal_text == "Great Sea"
        assert not parsed.is_valid

    @pytest.mark.parametrize("template", [None, ""])
    def test_empty_template(self, parser, template):
        parsed = parser.parse(template)

        assert parsed.fields == []
        assert parsed.place_name_ids == []

    def test_helpers(self, parser):
        assert parser.get_references("{r#GEN 1.1} {R#EXO 2}") == ["GEN 1.1", "EXO 2"]
        assert parser.has_multiple_place_names("{a} {b}")
        assert not parser.has_multiple_place_names("{a} {a}")


class TestValidate:
    """Tests for template syntax checks."""

    @pytest.mark.parametrize("template", [None, "", "{Jerusalem}", "{to#Jericho} {#3}", "plain"])
    def test_valid(self, template):
        result = LabelTemplateParser.validate(template)

        assert result
        assert result.errors == []

    @pytest.mark.parametrize(
        "template,error",
        [
            ("{Jerusalem", "Unmatched curly braces in template"),
            ("{a{b}}", "Nested curly braces are not allowed"),
            ("{ }", "Empty field references {} are not allowed"),
        ],
    )
    def test_invalid(self, template, error):
        result = LabelTemplateParser.validate(template)

        assert not result
        assert error in result.errors
