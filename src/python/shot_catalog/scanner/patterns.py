"""
Filename handling for grouping related files into Shots.

Every file is keyed by its base name, which is the file name with only the
final extension removed:

1. Plain media: shotA.png, shotA.mp4 -> shotA
2. Notes: shotA.json, shotA.txt -> shotA
3. Dotted names keep their inner dots: take.01.png -> take.01
4. Dotfiles and extensionless names have no usable base name: .hidden, README
"""

from pathlib import PurePosixPath
from typing import Optional

from shot_catalog.models.enums import MediaKind


def extract_shot_id(filename: str) -> Optional[str]:
    """
    Extract the shot id (base name) from a filename.

    Args:
        filename: The filename to analyze

    Returns:
        The filename without its final extension, or None when nothing is
        left (no extension at all, or a name such as ".json")

    Examples:
        >>> extract_shot_id("shotA.png")
        'shotA'

        >>> extract_shot_id("take.01.mp4")
        'take.01'

        >>> extract_shot_id(".json") is None
        True
    """
    if "." not in filename:
        return None

    base_name = filename.rsplit(".", 1)[0]
    return base_name or None


def get_final_extension(filename: str) -> str:
    """
    Get the final extension from a filename.

    Args:
        filename: The filename to analyze

    Returns:
        The final extension, lowercase and without the leading dot
        (empty string when there is none)
    """
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def classify_file(filename: str) -> MediaKind:
    """
    Classify a file by its final extension (case-insensitive).

    Args:
        filename: Filename or path

    Returns:
        MediaKind.IMAGE, VIDEO, NOTE, or IGNORED
    """
    return MediaKind.from_extension(get_final_extension(PurePosixPath(filename).name))
