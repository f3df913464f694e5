"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from maplabeler.config.settings import Config
from maplabeler.services.reference_formatter import ReferenceStyle, VernacularReferenceFormatter


class TestConfig:
    """Test settings defaults, validation and environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MAPLABELER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("MAPLABELER_DIGIT_SCRIPT", raising=False)

        config = Config(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.digit_script == "Latn"
        assert config.chapter_verse_separator == ":"

    def test_reads_environment(self, monkeypatch):
        """Test that MAPLABELER_ variables override defaults."""
        monkeypatch.setenv("MAPLABELER_LOG_LEVEL", "debug")
        monkeypatch.setenv("MAPLABELER_DIGIT_SCRIPT", "Deva")

        config = Config(_env_file=None)

        assert config.log_level == "DEBUG"
        assert config.digit_script == "Deva"

    def test_unknown_digit_script(self):
        with pytest.raises(ValidationError, match="Unknown digit script"):
            Config(_env_file=None, digit_script="Klingon")

    def test_log_file_expands_home(self):
        config = Config(_env_file=None, log_file="~/maplabeler.log")

        assert not config.log_file.startswith("~")
        assert config.log_file.endswith("maplabeler.log")

    def test_reference_style(self):
        config = Config(
            _env_file=None,
            chapter_verse_separator=".",
            no_space_after_book=True,
            final_punctuation=".",
        )

        style = config.reference_style()

        assert isinstance(style, ReferenceStyle)
        assert style.chapter_verse == "."
        assert style.no_space is True
        assert style.final_punctuation == "."
        assert style.book_separator == "; "

    def test_formatter_from_config(self):
        """Test that configured digits and punctuation reach the formatter."""
        config = Config(_env_file=None, digit_script="Arab", final_punctuation=".")

        formatter = VernacularReferenceFormatter.from_config(config)

        assert formatter.format("GEN 1.2") == "GEN ١:٢."
