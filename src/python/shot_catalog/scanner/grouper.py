"""
Group raw files into Shots based on their base names.

This module takes the flat, unordered file list delivered by the directory
picker and groups it into Shot objects. Every file sharing a base name
belongs to the same Shot (e.g. ``shotA.png`` + ``shotA.mp4`` + ``shotA.json``).
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from shot_catalog.exceptions import ScanError
from shot_catalog.models.enums import MediaKind, NoteFormat
from shot_catalog.models.shot import MediaFile, NoteFile, RawFile, Shot
from shot_catalog.scanner.collection import ShotCollection
from shot_catalog.scanner.patterns import classify_file, extract_shot_id, get_final_extension
from shot_catalog.scanner.references import ReferenceRegistry

logger = logging.getLogger(__name__)


class FileGroup:
    """Classified files sharing one shot id, before their content is read."""

    def __init__(self):
        self.images: List[RawFile] = []
        self.videos: List[RawFile] = []
        self.notes: List[RawFile] = []

    def add(self, raw_file: RawFile, kind: MediaKind) -> None:
        if kind == MediaKind.IMAGE:
            self.images.append(raw_file)
        elif kind == MediaKind.VIDEO:
            self.videos.append(raw_file)
        elif kind == MediaKind.NOTE:
            self.notes.append(raw_file)

    @property
    def is_empty(self) -> bool:
        return not (self.images or self.videos or self.notes)


def group_files_by_shot_id(files: Iterable[RawFile]) -> Dict[str, FileGroup]:
    """
    Group raw files by shot id, classifying each one.

    Files without a usable base name are skipped. Files with unrecognized
    extensions are consumed without error but contribute nothing, so a
    group made only of ignored files is dropped here.

    Args:
        files: Raw files in any order

    Returns:
        Dictionary mapping shot id to its non-empty FileGroup
    """
    groups: Dict[str, FileGroup] = defaultdict(FileGroup)

    for raw_file in files:
        shot_id = extract_shot_id(raw_file.name)
        if not shot_id:
            logger.debug("Skipping file without base name: %s", raw_file.name)
            continue

        groups[shot_id].add(raw_file, classify_file(raw_file.name))

    return {shot_id: group for shot_id, group in groups.items() if not group.is_empty}


def _sort_key(raw_file: RawFile) -> Tuple[str, str]:
    # Same-named files from different subfolders are ordered by path
    return raw_file.name, str(raw_file.source or "")


def build_shot(shot_id: str, group: FileGroup, registry: ReferenceRegistry) -> Shot:
    """
    Build one Shot from its file group.

    Note contents are read first so that a read failure leaves no references
    behind in the registry. Each list is sorted by name, then by source path.

    Raises:
        OSError, UnicodeDecodeError: If a note cannot be read
    """
    notes = [
        NoteFile(
            name=raw.name,
            content=raw.read_text(),
            format=NoteFormat.from_extension(get_final_extension(raw.name)),
        )
        for raw in sorted(group.notes, key=_sort_key)
    ]

    images = [
        MediaFile(raw.name, registry.create(raw), MediaKind.IMAGE)
        for raw in sorted(group.images, key=_sort_key)
    ]
    videos = [
        MediaFile(raw.name, registry.create(raw), MediaKind.VIDEO)
        for raw in sorted(group.videos, key=_sort_key)
    ]

    return Shot(id=shot_id, images=images, videos=videos, notes=notes)


def group_files_to_shots(
    files: Optional[Iterable[RawFile]],
    registry: Optional[ReferenceRegistry] = None,
) -> ShotCollection:
    """
    Aggregate a flat file list into a ShotCollection.

    Covers are left unresolved; see shot_catalog.scanner.cover.

    Args:
        files: Raw files in any order
        registry: Registry for media content references (a new one if None)

    Returns:
        ShotCollection sorted by shot id, each Shot with its images, videos
        and notes sorted by name

    Raises:
        ScanError: If the input is missing or empty
    """
    if files is None:
        raise ScanError("No files were provided")

    files = list(files)
    if not files:
        raise ScanError("The selected folder contains no files")

    if registry is None:
        registry = ReferenceRegistry()
    groups = group_files_by_shot_id(files)

    shots = []
    for shot_id, group in groups.items():
        try:
            shots.append(build_shot(shot_id, group, registry))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read files for shot %s: %s", shot_id, e)

    logger.info("Grouped %d files into %d shots", len(files), len(shots))
    return ShotCollection(shots, registry)
