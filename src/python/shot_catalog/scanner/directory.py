"""
Directory scanning for discovering shot files.

This module walks a chosen folder recursively, turns every file into a
RawFile with a lazy content accessor, and hands the flat list to the
grouper. Summary tables are returned as pandas DataFrames.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from shot_catalog.exceptions import ScanError
from shot_catalog.models.shot import RawFile, Shot
from shot_catalog.scanner.collection import ShotCollection
from shot_catalog.scanner.grouper import group_files_to_shots
from shot_catalog.scanner.references import ReferenceRegistry

logger = logging.getLogger(__name__)


def collect_files(directory: Path) -> List[RawFile]:
    """
    Collect every file under a directory, recursively.

    Hidden files are skipped. Nothing is read here; each RawFile reads its
    content on demand.

    Args:
        directory: Directory to walk

    Returns:
        List of RawFile objects in walk order

    Raises:
        ScanError: If the directory does not exist or cannot be listed
    """
    if not directory.exists():
        raise ScanError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ScanError(f"Not a directory: {directory}")

    files = []
    try:
        for path in directory.rglob("*"):
            if not path.is_file():
                continue

            if path.name.startswith("."):
                continue

            files.append(RawFile.from_path(path))
    except OSError as e:
        raise ScanError(f"Could not read directory {directory}: {e}") from e

    return files


def scan_directory(
    directory: Path,
    registry: Optional[ReferenceRegistry] = None,
) -> ShotCollection:
    """
    Scan a directory and group its files into Shots.

    Args:
        directory: Directory to scan (recursively)
        registry: Registry for content references (a new one if None)

    Returns:
        ShotCollection with unresolved covers

    Example:
        >>> with scan_directory(Path("/renders/session_01")) as shots:
        ...     print(f"Found {len(shots)} shots")
    """
    logger.info("Scanning directory: %s", directory)
    files = collect_files(directory)
    return group_files_to_shots(files, registry)


def shots_to_dataframe(shots: Iterable[Shot]) -> pd.DataFrame:
    """
    Convert Shots to a pandas DataFrame.

    Args:
        shots: Shot objects (a ShotCollection works too)

    Returns:
        DataFrame with one row per Shot
    """
    data = [shot.to_dict() for shot in shots]
    if not data:
        return pd.DataFrame()
    return pd.DataFrame(data)


def shot_files_to_dataframe(shots: Iterable[Shot]) -> pd.DataFrame:
    """
    Convert the files of Shots to a pandas DataFrame.

    Returns:
        DataFrame with one row per file, linked to its Shot by ``shot_id``
    """
    data = []
    for shot in shots:
        for media in shot.media_files:
            data.append({
                "shot_id": shot.id,
                "filename": media.name,
                "kind": media.kind.value,
                "is_cover": media.name == shot.cover_name,
            })
        for note in shot.notes:
            data.append({
                "shot_id": shot.id,
                "filename": note.name,
                "kind": "note",
                "is_cover": False,
            })

    if not data:
        return pd.DataFrame()
    return pd.DataFrame(data)
