"""Parsers for renderings text, label templates and scripture references."""

from maplabeler.parsers.reference_parser import (
    RefToken,
    make_ref,
    pretty_ref,
    tokenize_bible_refs,
)
from maplabeler.parsers.rendering_parser import (
    display_items,
    explicit_form,
    extract_rendering_patterns,
    has_explicit_form,
    matchable_items,
    split_items,
)
from maplabeler.parsers.template_parser import LabelTemplateParser, TemplateValidation

__all__ = [
    "LabelTemplateParser",
    "RefToken",
    "TemplateValidation",
    "display_items",
    "explicit_form",
    "extract_rendering_patterns",
    "has_explicit_form",
    "make_ref",
    "matchable_items",
    "pretty_ref",
    "split_items",
    "tokenize_bible_refs",
]
