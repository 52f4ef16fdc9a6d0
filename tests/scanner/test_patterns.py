"""Unit tests for scanner.patterns module."""

import pytest

from shot_catalog.models import MediaKind
from shot_catalog.scanner.patterns import (
    classify_file,
    extract_shot_id,
    get_final_extension,
)


class TestExtractShotId:
    """Tests for extract_shot_id() function."""

    @pytest.mark.parametrize("filename,expected", [
        ("shotA.png", "shotA"),
        ("shotA.MP4", "shotA"),
        ("shot_001.json", "shot_001"),
        ("take.01.png", "take.01"),
        ("photo.jpg.txt", "photo.jpg"),
        ("scene 12.webm", "scene 12"),
    ])
    def test_extract_shot_id_patterns(self, filename, expected):
        """Test that only the final extension is removed."""
        assert extract_shot_id(filename) == expected

    @pytest.mark.parametrize("filename", ["README", ".json", ".hidden", ""])
    def test_no_usable_base_name(self, filename):
        """Test names without a base name return None."""
        assert extract_shot_id(filename) is None


class TestClassification:
    """Tests for classify_file() and helpers."""

    def test_get_final_extension(self):
        assert get_final_extension("photo.jpg.TXT") == "txt"
        assert get_final_extension("README") == ""

    @pytest.mark.parametrize("filename,expected", [
        ("a.PNG", MediaKind.IMAGE),
        ("a.jpeg", MediaKind.IMAGE),
        ("a.ogv", MediaKind.VIDEO),
        ("a.txt", MediaKind.NOTE),
        ("a.psd", MediaKind.IGNORED),
        ("README", MediaKind.IGNORED),
    ])
    def test_classify_file(self, filename, expected):
        assert classify_file(filename) == expected
