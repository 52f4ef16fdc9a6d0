"""
Shot and file models.

A Shot is the aggregated record for one logical media item: every file in the
scanned folder that shares a base name (the file name without its final
extension) belongs to the same Shot.

These models are designed to:
- Keep media content out of memory (media files carry an opaque reference,
  not their bytes)
- Work with pandas DataFrames for summary tables
- Allow the cover to be updated in place without a rescan
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from shot_catalog.models.enums import CoverKind, MediaKind, NoteFormat


@dataclass
class RawFile:
    """
    A file as delivered by the directory picker: a name and a content accessor.

    Attributes:
        name: File name including extension (no directory part)
        read_bytes: Callable returning the file content
        source: Where the content lives (a Path for local folders), if known
    """
    name: str
    read_bytes: Callable[[], bytes]
    source: Optional[Path] = None

    @classmethod
    def from_path(cls, file_path: Path) -> "RawFile":
        """Create a RawFile that reads ``file_path`` lazily."""
        return cls(name=file_path.name, read_bytes=file_path.read_bytes, source=file_path)

    def read_text(self, encoding: str = "utf-8") -> str:
        """Read the content as text."""
        return self.read_bytes().decode(encoding)


@dataclass
class MediaFile:
    """
    An image or video belonging to a Shot.

    Attributes:
        name: Full filename including extension
        reference: Opaque content reference minted by a ReferenceRegistry
        kind: MediaKind.IMAGE or MediaKind.VIDEO, fixed at classification time
    """
    name: str
    reference: str
    kind: MediaKind = MediaKind.IMAGE


@dataclass
class NoteFile:
    """A companion note with its content already read."""
    name: str
    content: str
    format: NoteFormat = NoteFormat.PLAIN

    @property
    def is_structured(self) -> bool:
        return self.format == NoteFormat.STRUCTURED


@dataclass
class Shot:
    """
    One logical media item built from all files sharing a base name.

    Attributes:
        id: The shared base name (unique within one scan)
        images: Image files, sorted by name
        videos: Video files, sorted by name
        notes: Note files, sorted by name
        cover_reference: Reference of the chosen cover medium (None until resolved)
        cover_kind: Which sequence the cover came from
        cover_name: File name of the chosen cover medium
    """
    id: str
    images: List[MediaFile] = field(default_factory=list)
    videos: List[MediaFile] = field(default_factory=list)
    notes: List[NoteFile] = field(default_factory=list)
    cover_reference: Optional[str] = None
    cover_kind: CoverKind = CoverKind.NONE
    cover_name: Optional[str] = None

    @property
    def media_files(self) -> List[MediaFile]:
        """Images followed by videos, the order used for cover lookups."""
        return [*self.images, *self.videos]

    @property
    def file_count(self) -> int:
        """Number of files belonging to this Shot."""
        return len(self.images) + len(self.videos) + len(self.notes)

    @property
    def is_empty(self) -> bool:
        return self.file_count == 0

    @property
    def note_text(self) -> str:
        """All note contents joined with a space, as searched by free text."""
        return " ".join(note.content for note in self.notes)

    @property
    def references(self) -> List[str]:
        """Every content reference this Shot holds."""
        return [media.reference for media in self.media_files]

    def find_media(self, name: str) -> Optional[MediaFile]:
        """Find an image or video by exact file name."""
        for media in self.media_files:
            if media.name == name:
                return media
        return None

    def set_cover(self, media: Optional[MediaFile]) -> None:
        """Point the cover at ``media`` (or clear it when None)."""
        if media is None:
            self.cover_reference = None
            self.cover_name = None
            self.cover_kind = CoverKind.NONE
            return

        self.cover_reference = media.reference
        self.cover_name = media.name
        # Membership decides the kind, not the extension
        if any(v is media for v in self.videos):
            self.cover_kind = CoverKind.VIDEO
        elif any(i is media for i in self.images):
            self.cover_kind = CoverKind.IMAGE
        else:
            self.cover_kind = CoverKind.NONE

    def to_dict(self) -> dict:
        """Convert to dictionary for pandas DataFrame (without nested files)."""
        return {
            "id": self.id,
            "image_count": len(self.images),
            "video_count": len(self.videos),
            "note_count": len(self.notes),
            "file_count": self.file_count,
            "cover_name": self.cover_name,
            "cover_kind": self.cover_kind.value,
        }
