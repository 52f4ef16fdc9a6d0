"""Unit tests for the Shot, MediaFile, NoteFile and RawFile dataclasses."""

from shot_catalog.models import CoverKind, MediaFile, MediaKind, NoteFile, NoteFormat, RawFile, Shot


def _shot() -> Shot:
    return Shot(
        id="shotA",
        images=[MediaFile("shotA.png", "media://img", MediaKind.IMAGE)],
        videos=[MediaFile("shotA.mp4", "media://vid", MediaKind.VIDEO)],
        notes=[
            NoteFile("shotA.json", '{"prompt": "forest"}', NoteFormat.STRUCTURED),
            NoteFile("shotA.txt", "misty morning", NoteFormat.PLAIN),
        ],
    )


class TestRawFile:
    """Tests for RawFile."""

    def test_from_path_reads_lazily(self, tmp_path):
        """Test RawFile.from_path() reads the file only when asked."""
        path = tmp_path / "shotA.txt"
        path.write_text("first", encoding="utf-8")

        raw = RawFile.from_path(path)
        path.write_text("second", encoding="utf-8")

        assert raw.name == "shotA.txt"
        assert raw.source == path
        assert raw.read_text() == "second"


class TestShot:
    """Tests for the Shot dataclass."""

    def test_defaults(self):
        """Test a new Shot has no files and no cover."""
        shot = Shot(id="empty")
        assert shot.is_empty
        assert shot.cover_kind == CoverKind.NONE
        assert shot.cover_reference is None

    def test_media_files_images_first(self):
        shot = _shot()
        assert [m.name for m in shot.media_files] == ["shotA.png", "shotA.mp4"]
        assert shot.file_count == 4

    def test_note_text_joins_contents(self):
        assert _shot().note_text == '{"prompt": "forest"} misty morning'

    def test_find_media(self):
        shot = _shot()
        assert shot.find_media("shotA.mp4") is shot.videos[0]
        assert shot.find_media("shotA.json") is None

    def test_set_cover_uses_membership(self):
        """Test cover kind comes from the sequence the file is in."""
        shot = _shot()

        shot.set_cover(shot.videos[0])
        assert shot.cover_kind == CoverKind.VIDEO
        assert shot.cover_reference == "media://vid"
        assert shot.cover_name == "shotA.mp4"

        shot.set_cover(shot.images[0])
        assert shot.cover_kind == CoverKind.IMAGE

        shot.set_cover(None)
        assert shot.cover_kind == CoverKind.NONE
        assert shot.cover_reference is None

    def test_to_dict(self):
        shot = _shot()
        shot.set_cover(shot.images[0])

        data = shot.to_dict()

        assert data["id"] == "shotA"
        assert data["image_count"] == 1
        assert data["video_count"] == 1
        assert data["note_count"] == 2
        assert data["cover_kind"] == "image"
        assert data["cover_name"] == "shotA.png"
