"""Tests for version module."""

import re

from maplabeler.version import VERSION, format_version_string, get_version_info


class TestVersion:
    """Test version information functions."""

    def test_version_format(self) -> None:
        """Test that VERSION is a valid semver string."""
        # Should match X.Y.Z or X.Y.Z-dev
        assert re.match(r"^\d+\.\d+\.\d+(-dev)?$", VERSION)

    def test_get_version_info(self) -> None:
        """Test get_version_info returns required fields."""
        info = get_version_info()

        assert info["version"] == VERSION
        assert info["status"] in ("development", "release")

    def test_format_version_string(self) -> None:
        version_str = format_version_string()

        assert version_str.startswith("Map Labeler v")
        assert VERSION in version_str

    def test_development_marker(self) -> None:
        """Test that development builds are labeled as such."""
        version_str = format_version_string()

        if get_version_info()["status"] == "development":
            assert version_str.endswith("(development)")
        else:
            assert "(development)" not in version_str
