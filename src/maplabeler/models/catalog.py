"""Place-name catalog of a map collection.

A collection describes, per merge key, the label template of a placed label,
and per place name, the biblical terms it stands for together with the verses
where each term is expected to occur.
"""

from pydantic import BaseModel, ConfigDict, Field


class MapLabelerError(Exception):
    """Base class for Map Labeler errors."""

    pass


class UnknownMergeKeyError(MapLabelerError):
    """Raised by strict catalog lookups for a merge key that is not defined."""

    def __init__(self, merge_key: str):
        super().__init__(f"Merge key not found in catalog: {merge_key}")
        self.merge_key = merge_key


class PlaceNameTerm(BaseModel):
    """A biblical term of a place name and its expected verses."""

    model_config = ConfigDict(populate_by_name=True)

    term_id: str = Field(alias="termId")
    refs: list[str] = Field(default_factory=list)


class PlaceName(BaseModel):
    """A place name and the terms (e.g. OT and NT) that denote it."""

    terms: list[PlaceNameTerm] = Field(default_factory=list)
    gloss: str = ""


class MergeKeyEntry(BaseModel):
    """Definition of one labeled location of a map template."""

    model_config = ConfigDict(populate_by_name=True)

    lbl_template: str = Field(alias="lblTemplate")
    gloss: str = ""
    context: str = ""


class PlaceNameCatalog(BaseModel):
    """Merge keys and place names of a map collection."""

    merge_keys: dict[str, MergeKeyEntry] = Field(default_factory=dict)
    place_names: dict[str, PlaceName] = Field(default_factory=dict)

    def get_template(self, merge_key: str, strict: bool = False) -> str:
        """Label template of a merge key.

        Raises:
            UnknownMergeKeyError: If ``strict`` and the merge key is unknown
        """
        entry = self.merge_keys.get(merge_key)
        if entry is None:
            if strict:
                raise UnknownMergeKeyError(merge_key)
            return ""
        return entry.lbl_template

    def get_terms(self, place_name_id: str) -> list[PlaceNameTerm]:
        place_name = self.place_names.get(place_name_id)
        return list(place_name.terms) if place_name else []

    def get_refs(self, place_name_id: str) -> list[str]:
        """Expected verses of all terms of a place name, without duplicates."""
        refs: list[str] = []
        seen: set[str] = set()
        for term in self.get_terms(place_name_id):
            for ref in term.refs:
                if ref not in seen:
                    seen.add(ref)
                    refs.append(ref)
        return refs
