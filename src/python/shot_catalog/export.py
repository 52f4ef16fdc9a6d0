"""
Exporting playlists and tags as downloadable JSON documents.

Both exports produce the same shape the importers accept: a mapping of
string keys to lists of strings, pretty-printed with two-space indentation.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping

from shot_catalog.exceptions import ValidationError

logger = logging.getLogger(__name__)

PLAYLISTS_EXPORT_FILENAME = "J9-playlists-selection.json"
TAGS_EXPORT_FILENAME = "J9-tags-content-selection.json"


@dataclass
class ExportDocument:
    """An export ready to be written: its fixed filename and content."""
    filename: str
    data: Dict[str, List[str]]

    def serialize(self) -> str:
        return serialize_export(self.data)


def serialize_export(data: Mapping[str, List[str]]) -> str:
    """Pretty-print an export mapping."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def export_playlists(
    playlists: Mapping[str, List[str]],
    selected_names: Iterable[str],
) -> ExportDocument:
    """
    Export the selected playlists with their full shot id lists.

    Names that are not existing playlists are skipped.

    Raises:
        ValidationError: If there are no playlists or nothing is selected
    """
    if not playlists:
        raise ValidationError("There are no playlists to export")

    selected = list(selected_names)
    if not selected:
        raise ValidationError("No playlists were selected for export")

    data = {name: list(playlists[name]) for name in selected if name in playlists}
    return ExportDocument(PLAYLISTS_EXPORT_FILENAME, data)


def export_tags(
    tags: Mapping[str, List[str]],
    selected_tags: Iterable[str],
) -> ExportDocument:
    """
    Export every shot carrying at least one selected tag.

    Each exported shot keeps its complete tag list, including tags that were
    not selected.

    Raises:
        ValidationError: If there are no tags or nothing is selected
    """
    if not any(tags.values()):
        raise ValidationError("There are no tags to export")

    selected = set(selected_tags)
    if not selected:
        raise ValidationError("No tags were selected for export")

    data = {
        shot_id: list(shot_tags)
        for shot_id, shot_tags in tags.items()
        if selected.intersection(shot_tags)
    }
    return ExportDocument(TAGS_EXPORT_FILENAME, data)


def write_export(document: ExportDocument, directory: Path) -> Path:
    """
    Write an export into ``directory`` under its fixed filename.

    Returns:
        Path of the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / document.filename
    path.write_text(document.serialize(), encoding="utf-8")
    logger.info("Exported %d entries to %s", len(document.data), path)
    return path
