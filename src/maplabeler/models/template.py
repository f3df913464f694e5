"""Data models for label templates.

A label template such as ``"{to#Jericho} and {Jerusalem} ({r#LUK 10.30})"``
mixes literal text with fields in curly braces. These models describe the
parsed fields and the outcome of resolving a template.
"""

from dataclasses import dataclass, field
from enum import Enum


class FieldType(Enum):
    """Kinds of template fields."""

    PLACENAME = "placename"  # {placeNameId}
    TAGGED_PLACENAME = "tagged-placename"  # {tag#placeNameId}
    REFERENCE = "reference"  # {r#REF} abbreviated, {R#REF} short book names
    NUMBER = "number"  # {#NUM}


@dataclass
class TemplateField:
    """One ``{...}`` field of a template.

    Attributes:
        raw: Field text including braces
        content: Field text without braces
        start: Offset of the opening brace in the template
        end: Offset just past the closing brace
        type: Field kind
        place_name_id: Place name for (tagged) place-name fields
        tag: Tag name for tagged place-name fields
        reference: Scripture reference for reference fields
        use_short: True for ``R#`` (short book names), False for ``r#``
        number: Number text for number fields
    """

    raw: str
    content: str
    start: int
    end: int
    type: FieldType
    place_name_id: str | None = None
    tag: str | None = None
    reference: str | None = None
    use_short: bool = False
    number: str | None = None


@dataclass
class ParsedTemplate:
    """Result of parsing a label template."""

    template: str
    fields: list[TemplateField] = field(default_factory=list)
    place_name_ids: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
    literal_text: str = ""

    @property
    def is_valid(self) -> bool:
        return len(self.fields) > 0

    @property
    def has_multiple_place_names(self) -> bool:
        return len(self.place_name_ids) > 1


@dataclass
class ResolvedTemplate:
    """Literal label text produced from a template.

    ``place_name_ids`` and ``references`` list what the template referred to,
    so callers can build the union of expected verses for the whole label.
    """

    text: str
    place_name_ids: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
