"""Configuration module for Map Labeler."""

from maplabeler.config.constants import (
    BOOK_CODES,
    DIGIT_SCRIPTS,
    MULTIPLE_SEPARATOR,
    TAG_RULE_STOP,
    WORD_CLASS,
)
from maplabeler.config.settings import Config, get_config

__all__ = [
    "Config",
    "get_config",
    "BOOK_CODES",
    "DIGIT_SCRIPTS",
    "MULTIPLE_SEPARATOR",
    "TAG_RULE_STOP",
    "WORD_CLASS",
]
