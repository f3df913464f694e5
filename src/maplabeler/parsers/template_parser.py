"""
Parse label templates.

Fields recognized inside curly braces:
- ``{placeNameId}`` - place name
- ``{tag#placeNameId}`` - place name transformed by a tag rule (any tag)
- ``{r#REF}`` - scripture reference with abbreviated book names ("Jn. 2")
- ``{R#REF}`` - scripture reference with short book names ("John 2")
- ``{#NUM}`` - number for digit conversion

Literal curly braces are never allowed in templates, so no escaping is needed.
"""
import re
from dataclasses import dataclass, field

from maplabeler.models.template import FieldType, ParsedTemplate, TemplateField

FIELD_PATTERN = re.compile(r"\{([^}]+)\}")


@dataclass
class TemplateValidation:
    """Result of template syntax validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.is_valid


class LabelTemplateParser:
    """Parse label template strings into fields."""

    def parse(self, template: str | None) -> ParsedTemplate:
        """Parse a template and extract all field references.

        Args:
            template: Template like ``"{Jerusalem}"`` or ``"{to#Jericho} and {from#Jerusalem}"``

        Returns:
            ParsedTemplate with fields in source order and unique place-name ids
        """
        if not template:
            return ParsedTemplate(template=template or "")

        fields: list[TemplateField] = []
        place_name_ids: list[str] = []
        references: list[str] = []

        for match in FIELD_PATTERN.finditer(template):
            template_field = self._parse_field(match)
            fields.append(template_field)
            if template_field.place_name_id is not None:
                if template_field.place_name_id not in place_name_ids:
                    place_name_ids.append(template_field.place_name_id)
            if template_field.reference is not None:
                references.append(template_field.reference)

        return ParsedTemplate(
            template=template,
            fields=fields,
            place_name_ids=place_name_ids,
            references=references,
            literal_text=self.extract_literal_text(template, fields),
        )

    @staticmethod
    def _parse_field(match: re.Match) -> TemplateField:
        content = match.group(1)
        base = {
            "raw": match.group(0),
            "content": content,
            "start": match.start(),
            "end": match.end(),
        }

        if content.startswith(("r#", "R#")):
            return TemplateField(
                **base,
                type=FieldType.REFERENCE,
                reference=content[2:].strip(),
                use_short=content.startswith("R#"),
            )
        if content.startswith("#"):
            return TemplateField(**base, type=FieldType.NUMBER, number=content[1:].strip())
        if "#" in content:
            tag, place_name_id = content.split("#", 1)
            return TemplateField(
                **base,
                type=FieldType.TAGGED_PLACENAME,
                tag=tag,
                place_name_id=place_name_id,
            )
        return TemplateField(**base, type=FieldType.PLACENAME, place_name_id=content)

    @staticmethod
    def extract_literal_text(template: str, fields: list[TemplateField]) -> str:
        """Return the template text outside of fields, trimmed."""
        if not fields:
            return template

        parts = []
        last_end = 0
        for template_field in fields:
            if template_field.start > last_end:
                parts.append(template[last_end:template_field.start])
            last_end = template_field.end
        if last_end < len(template):
            parts.append(template[last_end:])

        return "".join(parts).strip()

    def get_place_name_ids(self, template: str | None) -> list[str]:
        return self.parse(template).place_name_ids

    def get_references(self, template: str | None) -> list[str]:
        return self.parse(template).references

    def has_multiple_place_names(self, template: str | None) -> bool:
        return self.parse(template).has_multiple_place_names

    @staticmethod
    def validate(template: str | None) -> TemplateValidation:
        """Check template syntax.

        An empty template is valid. Reported problems: unmatched braces,
        nested braces and empty fields.
        """
        errors: list[str] = []
        if not template:
            return TemplateValidation(is_valid=True, errors=errors)

        if template.count("{") != template.count("}"):
            errors.append("Unmatched curly braces in template")

        if re.search(r"\{[^}]*\{", template) or re.search(r"\}[^{]*\}", template):
            errors.append("Nested curly braces are not allowed")

        if re.search(r"\{\s*\}", template):
            errors.append("Empty field references {} are not allowed")

        return TemplateValidation(is_valid=not errors, errors=errors)
