"""Data models for shot_catalog."""

from shot_catalog.models.enums import CoverKind, MediaKind, NoteFormat
from shot_catalog.models.shot import MediaFile, NoteFile, RawFile, Shot

__all__ = [
    "CoverKind",
    "MediaFile",
    "MediaKind",
    "NoteFile",
    "NoteFormat",
    "RawFile",
    "Shot",
]
