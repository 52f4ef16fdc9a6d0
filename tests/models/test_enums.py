"""Unit tests for MediaKind, NoteFormat and CoverKind enums."""

import pytest

from shot_catalog.models import CoverKind, MediaKind, NoteFormat


class TestMediaKind:
    """Tests for the MediaKind enum."""

    def test_media_kind_count(self):
        """Test the expected number of MediaKind values."""
        assert len(MediaKind) == 4

    @pytest.mark.parametrize("extension,expected", [
        ("jpg", MediaKind.IMAGE),
        ("jpeg", MediaKind.IMAGE),
        ("png", MediaKind.IMAGE),
        ("webp", MediaKind.IMAGE),
        ("gif", MediaKind.IMAGE),
        ("svg", MediaKind.IMAGE),
        ("avif", MediaKind.IMAGE),
        ("mp4", MediaKind.VIDEO),
        ("webm", MediaKind.VIDEO),
        ("ogv", MediaKind.VIDEO),
        ("json", MediaKind.NOTE),
        ("txt", MediaKind.NOTE),
        ("mov", MediaKind.IGNORED),
        ("md", MediaKind.IGNORED),
        ("", MediaKind.IGNORED),
    ])
    def test_from_extension(self, extension, expected):
        """Test the fixed classification table."""
        assert MediaKind.from_extension(extension) == expected

    def test_from_extension_case_insensitive_with_dot(self):
        """Test that case and a leading dot do not matter."""
        assert MediaKind.from_extension(".PNG") == MediaKind.IMAGE
        assert MediaKind.from_extension("WebM") == MediaKind.VIDEO
        assert MediaKind.from_extension(".Json") == MediaKind.NOTE

    def test_is_media(self):
        """Test that only images and videos can be covers."""
        assert MediaKind.IMAGE.is_media is True
        assert MediaKind.VIDEO.is_media is True
        assert MediaKind.NOTE.is_media is False
        assert MediaKind.IGNORED.is_media is False


class TestNoteFormat:
    """Tests for the NoteFormat enum."""

    def test_json_is_structured(self):
        assert NoteFormat.from_extension("json") == NoteFormat.STRUCTURED
        assert NoteFormat.from_extension(".JSON") == NoteFormat.STRUCTURED

    def test_txt_is_plain(self):
        assert NoteFormat.from_extension("txt") == NoteFormat.PLAIN


class TestCoverKind:
    """Tests for the CoverKind enum."""

    def test_cover_kind_values(self):
        assert {k.value for k in CoverKind} == {"image", "video", "none"}
