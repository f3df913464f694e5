"""Data models for term renderings, verse tallies and placed labels."""

from dataclasses import dataclass
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maplabeler.models.status import LabelStatus


class TermRenderingEntry(BaseModel):
    """Renderings recorded for one biblical term.

    ``renderings`` is the raw text typed by the translation team: items are
    separated by newlines or ``||`` and may carry ``*`` wildcards,
    parenthesized comments and an explicit map form such as ``(@Yerusalem)``.
    """

    model_config = ConfigDict(populate_by_name=True)

    renderings: str = ""
    is_guessed: bool = Field(default=False, alias="isGuessed")
    denials: set[str] = Field(
        default_factory=set,
        description="Verse references accepted as legitimately lacking a rendering",
    )

    @field_validator("renderings", mode="before")
    @classmethod
    def none_to_empty(cls, v: str | None) -> str:
        """Missing renderings are stored as an empty string."""
        return v or ""

    @field_validator("denials", mode="before")
    @classmethod
    def none_to_empty_set(cls, v):
        return v or set()

    @property
    def has_renderings(self) -> bool:
        return bool(self.renderings.strip())


class MatchTally(NamedTuple):
    """How many expected verses contain a rendering of a term."""

    match_count: int
    considered_count: int
    any_denials: bool

    @property
    def is_complete(self) -> bool:
        return self.match_count == self.considered_count

    def fraction(self) -> str:
        """Progress fraction as shown next to a label, e.g. ``3/4``."""
        return f"{self.match_count}/{self.considered_count}"

    def combine(self, other: "MatchTally") -> "MatchTally":
        """Sum two tallies (e.g. over the terms of one place name)."""
        return MatchTally(
            self.match_count + other.match_count,
            self.considered_count + other.considered_count,
            self.any_denials or other.any_denials,
        )


EMPTY_TALLY = MatchTally(0, 0, False)


@dataclass(frozen=True)
class MatchSpan:
    """Location of the first rendering found in a text.

    Attributes:
        index: 1-based index of the rendering item that matched
        start: Offset of the first matched character
        end: Offset just past the last matched character
        text: The matched text
    """

    index: int
    start: int
    end: int
    text: str


class LabelLocation(BaseModel):
    """One label placed on a map or diagram template."""

    model_config = ConfigDict(populate_by_name=True)

    merge_key: str = Field(alias="mergeKey")
    term_id: str = Field(alias="termId")
    alt_term_ids: str = Field(default="", alias="altTermIds")
    vern_label: str = Field(default="", alias="vernLabel")
    status: LabelStatus | None = None
