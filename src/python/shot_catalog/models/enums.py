"""Enumerations for shot_catalog models."""

from enum import Enum


class MediaKind(Enum):
    """
    The category a file falls into once its extension is classified.

    A Shot is built from files of three useful kinds:
    - IMAGE: Still images shown in the gallery
    - VIDEO: Clips played back in the viewer
    - NOTE: Companion text or structured notes (prompts, descriptions)
    - IGNORED: Anything else found in the folder
    """
    IMAGE = "image"
    VIDEO = "video"
    NOTE = "note"
    IGNORED = "ignored"

    @classmethod
    def from_extension(cls, extension: str) -> "MediaKind":
        """
        Get MediaKind from a file extension.

        Args:
            extension: File extension (with or without leading dot), any case

        Returns:
            The matching MediaKind, or IGNORED if not recognized
        """
        ext = extension.lower().lstrip(".")

        if ext in IMAGE_EXTENSIONS:
            return cls.IMAGE
        if ext in VIDEO_EXTENSIONS:
            return cls.VIDEO
        if ext in NOTE_EXTENSIONS:
            return cls.NOTE

        return cls.IGNORED

    @property
    def is_media(self) -> bool:
        """Check if this kind can be used as a cover."""
        return self in (MediaKind.IMAGE, MediaKind.VIDEO)


class NoteFormat(Enum):
    """How the content of a note file should be interpreted."""
    STRUCTURED = "json"
    PLAIN = "text"

    @classmethod
    def from_extension(cls, extension: str) -> "NoteFormat":
        """Only ``json`` notes are structured; everything else is plain text."""
        return cls.STRUCTURED if extension.lower().lstrip(".") == "json" else cls.PLAIN


class CoverKind(Enum):
    """Which media sequence the cover of a Shot was taken from."""
    IMAGE = "image"
    VIDEO = "video"
    NONE = "none"


# Fixed classification table
IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "webp", "gif", "svg", "avif"})
VIDEO_EXTENSIONS = frozenset({"mp4", "webm", "ogv"})
NOTE_EXTENSIONS = frozenset({"json", "txt"})
