"""
Cover selection for Shots.

The cover is the single image or video that represents a Shot in summary
views. Policy:

1. A persisted override (shot id -> media file name) wins when that file is
   still part of the Shot, searching images first, then videos.
2. Otherwise the first image by name, else the first video.
3. A Shot with neither images nor videos has no cover.

Overrides outlive scans; a stale override simply falls back to the default.
"""

import logging
from typing import Dict, Mapping, Optional

from shot_catalog.models.enums import CoverKind
from shot_catalog.models.shot import MediaFile, Shot
from shot_catalog.scanner.collection import ShotCollection
from shot_catalog.stores.local_state import LocalState

logger = logging.getLogger(__name__)


def choose_cover(shot: Shot, overrides: Mapping[str, str]) -> Optional[MediaFile]:
    """Return the media file that should be the Shot's cover, if any."""
    override = overrides.get(shot.id)
    if override:
        chosen = shot.find_media(override)
        if chosen is not None:
            return chosen
        logger.debug("Cover override %s for shot %s no longer exists", override, shot.id)

    if shot.images:
        return shot.images[0]
    if shot.videos:
        return shot.videos[0]
    return None


def apply_cover(shot: Shot, overrides: Mapping[str, str]) -> CoverKind:
    """Resolve the cover of ``shot`` in place and return its kind."""
    shot.set_cover(choose_cover(shot, overrides))
    return shot.cover_kind


class CoverResolver:
    """
    Resolves covers for a ShotCollection and persists user choices.

    Args:
        state: Local key-value state holding the cover overrides
    """

    def __init__(self, state: LocalState):
        self.state = state

    @property
    def overrides(self) -> Dict[str, str]:
        return self.state.shot_covers

    def resolve_all(self, collection: ShotCollection) -> None:
        """Resolve the cover of every Shot in the collection."""
        overrides = self.overrides
        for shot in collection:
            apply_cover(shot, overrides)

    def set_cover(self, shot: Shot, media_name: str) -> bool:
        """
        Make ``media_name`` the cover of ``shot``.

        The override is persisted and the Shot is updated in place, so every
        holder of this Shot sees the new cover without a rescan.

        Returns:
            True if the file belongs to the Shot and the cover changed,
            False if no such image or video exists (nothing is persisted)
        """
        media = shot.find_media(media_name)
        if media is None:
            logger.warning("Shot %s has no media named %s", shot.id, media_name)
            return False

        covers = self.overrides
        covers[shot.id] = media_name
        self.state.shot_covers = covers
        shot.set_cover(media)
        logger.info("Cover for shot %s set to %s", shot.id, media_name)
        return True
