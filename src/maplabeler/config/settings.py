"""Application settings and configuration management."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maplabeler.config.constants import DIGIT_SCRIPTS


class Config(BaseSettings):
    """Application configuration with validation."""

    model_config = SettingsConfigDict(
        env_prefix="MAPLABELER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str | None = Field(
        default=None,
        description="Optional log file (stderr only when unset)",
    )

    # Number formatting
    digit_script: str = Field(
        default="Latn",
        description="Writing script for digits in resolved labels",
    )

    # Scripture reference formatting
    chapter_verse_separator: str = Field(default=":")
    sequence_separator: str = Field(default=",")
    verse_range_separator: str = Field(default="-")
    chapter_range_separator: str = Field(default="–")
    book_separator: str = Field(default="; ")
    chapter_separator: str = Field(default="; ")
    no_space_after_book: bool = Field(default=False)
    final_punctuation: str = Field(default="")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Loguru level names are upper case."""
        return v.strip().upper()

    @field_validator("digit_script")
    @classmethod
    def validate_digit_script(cls, v: str) -> str:
        """Only Latn or a known digit script is accepted."""
        if v != "Latn" and v not in DIGIT_SCRIPTS:
            raise ValueError(
                f"Unknown digit script: {v}. Valid scripts are: Latn, {', '.join(DIGIT_SCRIPTS)}"
            )
        return v

    @field_validator("log_file")
    @classmethod
    def expand_user_path(cls, v: str | None) -> str | None:
        """Expand user home directory in paths."""
        if not v:
            return None
        return str(Path(v).expanduser())

    def reference_style(self):
        """Build the reference style used by the vernacular reference formatter."""
        from maplabeler.services.reference_formatter import ReferenceStyle

        return ReferenceStyle(
            chapter_verse=self.chapter_verse_separator,
            sequence=self.sequence_separator,
            verse_range=self.verse_range_separator,
            chapter_range=self.chapter_range_separator,
            book_separator=self.book_separator,
            chapter_separator=self.chapter_separator,
            no_space=self.no_space_after_book,
            final_punctuation=self.final_punctuation,
        )


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
