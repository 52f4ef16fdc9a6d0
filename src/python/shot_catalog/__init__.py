"""
ShotCatalog - group media folders into shots, then tag and organize them.

This package turns a flat folder of images, videos and companion notes into
Shot records, keeps shot tags and playlists in sync with a remote store, and
derives filtered views and JSON exports from that state.

Core Concepts:
- Shot: Every file sharing a base name (e.g. shotA.png, shotA.mp4, shotA.json)
- Cover: The image or video that represents a Shot
- Tag: A label on a Shot, unique per Shot ignoring case
- Playlist: A named set of Shot ids

Usage:
    from pathlib import Path
    from shot_catalog import Library, load_config

    with Library.from_config(load_config()) as library:
        library.load_remote_state()
        shots = library.load_directory(Path("/renders/session_01"))
        print(f"Found {len(shots)} shots")
"""

from shot_catalog.__version__ import __version__
from shot_catalog.config import load_config
from shot_catalog.library import Library
from shot_catalog.models import CoverKind, MediaFile, MediaKind, NoteFile, NoteFormat, RawFile, Shot
from shot_catalog.scanner import (
    ReferenceRegistry,
    ShotCollection,
    classify_file,
    extract_shot_id,
    group_files_to_shots,
    scan_directory,
)
from shot_catalog.search import SelectionState, filter_shots

__all__ = [
    "__version__",
    "load_config",
    "Library",
    # Models
    "CoverKind",
    "MediaFile",
    "MediaKind",
    "NoteFile",
    "NoteFormat",
    "RawFile",
    "Shot",
    # Scanner
    "ReferenceRegistry",
    "ShotCollection",
    "classify_file",
    "extract_shot_id",
    "group_files_to_shots",
    "scan_directory",
    # Search
    "SelectionState",
    "filter_shots",
]
