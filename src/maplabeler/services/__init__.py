"""Rendering, status and template services."""

from maplabeler.services.label_session import LabelSession
from maplabeler.services.map_form import MapFormResolver
from maplabeler.services.pattern_compiler import (
    CompiledPattern,
    RenderingPatternCompiler,
    find_first_match,
    match_index,
    matches_any,
)
from maplabeler.services.reference_formatter import (
    BookNames,
    DigitConverter,
    ReferenceStyle,
    VernacularReferenceFormatter,
)
from maplabeler.services.status_classifier import LabelStatusClassifier
from maplabeler.services.tag_rules import LabelTagRules
from maplabeler.services.template_resolver import ResolutionGate, TemplateResolver
from maplabeler.services.verse_tally import VerseMatchTally

__all__ = [
    "BookNames",
    "CompiledPattern",
    "DigitConverter",
    "LabelSession",
    "LabelStatusClassifier",
    "LabelTagRules",
    "MapFormResolver",
    "ReferenceStyle",
    "RenderingPatternCompiler",
    "ResolutionGate",
    "TemplateResolver",
    "VerseMatchTally",
    "VernacularReferenceFormatter",
    "find_first_match",
    "match_index",
    "matches_any",
]
