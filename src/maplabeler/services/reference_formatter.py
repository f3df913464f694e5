"""Vernacular scripture references and digits.

These are the default collaborators the template resolver uses for
``{r#REF}``/``{R#REF}`` and ``{#NUM}`` fields. Book names and punctuation
come from the project; they are passed in rather than read here.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from loguru import logger

from maplabeler.config.constants import DIGIT_SCRIPTS
from maplabeler.parsers.reference_parser import PASSAGE_SEPARATOR, tokenize_bible_refs


class DigitConverter:
    """Converts Western digits to a project's digit script."""

    def __init__(self, script: str | None = "Latn"):
        self.script = script
        self._digits = DIGIT_SCRIPTS.get(script or "")

    def convert(self, number: str) -> str:
        """Replace each ASCII digit; other characters are kept."""
        if not self._digits:
            return number
        return "".join(self._digits[int(c)] if "0" <= c <= "9" else c for c in number)

    async def convert_digits(self, number: str) -> str:
        return self.convert(number)


@dataclass
class ReferenceStyle:
    """Project punctuation for scripture references."""

    chapter_verse: str = ":"
    sequence: str = ","
    verse_range: str = "-"
    chapter_range: str = "–"
    book_separator: str = "; "
    chapter_separator: str = "; "
    no_space: bool = False
    final_punctuation: str = ""


@dataclass
class BookNames:
    """Vernacular book names by book code."""

    short: dict[str, str] = field(default_factory=dict)
    abbreviated: dict[str, str] = field(default_factory=dict)

    def get(self, book_code: str, use_short: bool = False) -> str:
        """Book name, falling back to the other form and then the code."""
        if use_short:
            return self.short.get(book_code) or self.abbreviated.get(book_code) or book_code
        return self.abbreviated.get(book_code) or self.short.get(book_code) or book_code


class VernacularReferenceFormatter:
    """Formats references such as ``"1SA 2.3-5"`` in project conventions.

    Example:
        formatter = VernacularReferenceFormatter(
            BookNames(short={"JHN": "John"}, abbreviated={"JHN": "Jn."})
        )
        formatter.format("JHN 2.1", use_short=True)  # "John 2:1"
    """

    def __init__(
        self,
        book_names: BookNames | None = None,
        style: ReferenceStyle | None = None,
        digits: DigitConverter | None = None,
    ):
        self.book_names = book_names or BookNames()
        self.style = style or ReferenceStyle()
        self.digits = digits or DigitConverter()

    @classmethod
    def from_config(cls, config, book_names: BookNames | None = None) -> "VernacularReferenceFormatter":
        """Formatter using the configured punctuation and digit script."""
        return cls(book_names, config.reference_style(), DigitConverter(config.digit_script))

    def _separator(self, value: str) -> str:
        separators: Mapping[str, str] = {
            ".": self.style.chapter_verse,
            ":": self.style.chapter_verse,
            ",": self.style.sequence,
            "-": self.style.verse_range,
            "–": self.style.chapter_range,
            "—": self.style.chapter_range,
            PASSAGE_SEPARATOR: self.style.book_separator,
            ";": self.style.chapter_separator,
        }
        if value not in separators:
            logger.warning(f"Unexpected reference separator: {value!r}")
            return ""
        return separators[value]

    def format(self, reference: str, use_short: bool = False) -> str:
        """Format one reference string.

        Args:
            reference: Reference using book codes, e.g. ``"GEN 1.1-3"``
            use_short: True for short book names (``R#``), False for
                abbreviated names (``r#``)

        Returns:
            Vernacular reference text
        """
        result = []
        for token in tokenize_bible_refs(reference):
            if token.type == "book":
                result.append(self.book_names.get(token.value, use_short))
                if not self.style.no_space:
                    result.append(" ")
            elif token.type == "num":
                result.append(self.digits.convert(token.value))
            else:
                result.append(self._separator(token.value))
        result.append(self.style.final_punctuation)
        return "".join(result)

    async def vern_ref(self, reference: str, use_short: bool = False) -> str:
        return self.format(reference, use_short)
