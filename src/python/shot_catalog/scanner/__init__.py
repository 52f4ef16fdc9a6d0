"""Scanner module for discovering files and grouping them into shots."""

from shot_catalog.scanner.collection import ShotCollection
from shot_catalog.scanner.cover import CoverResolver, apply_cover, choose_cover
from shot_catalog.scanner.directory import collect_files, scan_directory, shots_to_dataframe
from shot_catalog.scanner.grouper import group_files_by_shot_id, group_files_to_shots
from shot_catalog.scanner.patterns import classify_file, extract_shot_id
from shot_catalog.scanner.references import ReferenceRegistry

__all__ = [
    "CoverResolver",
    "ReferenceRegistry",
    "ShotCollection",
    "apply_cover",
    "choose_cover",
    "classify_file",
    "collect_files",
    "extract_shot_id",
    "group_files_by_shot_id",
    "group_files_to_shots",
    "scan_directory",
    "shots_to_dataframe",
]
