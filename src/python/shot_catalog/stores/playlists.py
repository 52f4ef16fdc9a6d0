"""
Named playlists of shot ids, mirrored from the remote playlist store.

Playlist names are unique by exact (case-sensitive) comparison, unlike tags.
Shot ids inside a playlist form a set; the order they were added in carries
no meaning.

Like the tag store, every mutation calls the remote store first and only
updates the local mirror once the call succeeds.
"""

import logging
from dataclasses import dataclass
from typing import Collection, Dict, List, Mapping, Optional

from shot_catalog.exceptions import DuplicatePlaylistError, PlaylistNotFoundError, ValidationError
from shot_catalog.models.shot import Shot
from shot_catalog.remote.protocols import PlaylistRemote
from shot_catalog.stores.local_state import LocalState
from shot_catalog.validation import validate_mapping

logger = logging.getLogger(__name__)


def _dedupe(shot_ids: List[str]) -> List[str]:
    return list(dict.fromkeys(shot_ids))


@dataclass
class PlaylistImportSummary:
    """
    Result of a playlist import.

    Attributes:
        imported: Number of playlists merged
        missing_shots: Distinct referenced shot ids not in the loaded collection
    """
    imported: int
    missing_shots: int


class PlaylistStore:
    """
    Local mirror of playlist name -> shot ids, plus the active playlist.

    Args:
        remote: The remote playlist store every mutation goes through
        state: Local state used to persist the active playlist name
    """

    def __init__(self, remote: PlaylistRemote, state: Optional[LocalState] = None):
        self.remote = remote
        self.state = state
        self._playlists: Dict[str, List[str]] = {}
        self._active: Optional[str] = state.active_playlist if state is not None else None

    def load(self) -> None:
        """Replace local playlists with the remote contents."""
        self.replace(self.remote.fetch_all())

    def replace(self, mapping: Mapping[str, List[str]]) -> None:
        """Replace local playlists with an already fetched name -> shot ids mapping."""
        self._playlists = {name: _dedupe(shot_ids) for name, shot_ids in mapping.items()}
        logger.info("Loaded %d playlists", len(self._playlists))

    @property
    def active(self) -> Optional[str]:
        return self._active

    @active.setter
    def active(self, name: Optional[str]) -> None:
        self._active = name
        if self.state is not None:
            self.state.active_playlist = name

    def __contains__(self, name: str) -> bool:
        return name in self._playlists

    def __len__(self) -> int:
        return len(self._playlists)

    @property
    def names(self) -> List[str]:
        """Playlist names, sorted."""
        return sorted(self._playlists)

    def get(self, name: str) -> List[str]:
        """Shot ids of a playlist (empty list if it does not exist)."""
        return list(self._playlists.get(name, []))

    def as_dict(self) -> Dict[str, List[str]]:
        return {name: list(shot_ids) for name, shot_ids in self._playlists.items()}

    def contains(self, name: Optional[str], shot_id: str) -> bool:
        """Check if a playlist holds a shot. False when ``name`` is None."""
        if name is None:
            return False
        return shot_id in self._playlists.get(name, [])

    def shots_in(self, name: Optional[str], shots: Collection[Shot]) -> List[Shot]:
        """Shots of a playlist, in the order of ``shots``."""
        if name is None or name not in self._playlists:
            return []
        members = set(self._playlists[name])
        return [shot for shot in shots if shot.id in members]

    def _require(self, name: str) -> List[str]:
        if name not in self._playlists:
            raise PlaylistNotFoundError(f"Playlist '{name}' does not exist")
        return self._playlists[name]

    def create(self, name: str) -> str:
        """
        Create an empty playlist and make it active.

        Returns:
            The trimmed playlist name

        Raises:
            ValidationError: If the trimmed name is empty
            DuplicatePlaylistError: If a playlist with that exact name exists
        """
        clean_name = name.strip()
        if not clean_name:
            raise ValidationError("Playlist name cannot be empty")
        if clean_name in self._playlists:
            raise DuplicatePlaylistError(f"A playlist named '{clean_name}' already exists")

        self.remote.create(clean_name)

        self._playlists[clean_name] = []
        self.active = clean_name
        logger.info("Created playlist %s", clean_name)
        return clean_name

    def rename(self, old_name: str, new_name: str) -> str:
        """
        Rename a playlist, following it with the active reference.

        Returns:
            The trimmed new name

        Raises:
            ValidationError: If the trimmed new name is empty or unchanged
            DuplicatePlaylistError: If another playlist already has the name
            PlaylistNotFoundError: If ``old_name`` does not exist locally
        """
        clean_name = new_name.strip()
        if not clean_name:
            raise ValidationError("Playlist name cannot be empty")
        if clean_name == old_name:
            raise ValidationError("The new playlist name is the same as the old one")
        if clean_name in self._playlists:
            raise DuplicatePlaylistError(f"A playlist named '{clean_name}' already exists")
        self._require(old_name)

        self.remote.rename(old_name, clean_name)

        self._playlists[clean_name] = self._playlists.pop(old_name)
        if self._active == old_name:
            self.active = clean_name
        logger.info("Renamed playlist %s to %s", old_name, clean_name)
        return clean_name

    def delete(self, name: str) -> None:
        """
        Delete a playlist.

        When the active playlist is deleted, the alphabetically first
        remaining playlist becomes active (or none if the store is empty).
        """
        self._require(name)

        self.remote.delete(name)

        del self._playlists[name]
        if self._active == name:
            self.active = self.names[0] if self._playlists else None
        logger.info("Deleted playlist %s", name)

    def toggle_shot(self, name: str, shot_id: str) -> bool:
        """
        Add a shot to a playlist, or remove it if already present.

        Returns:
            True if the shot is in the playlist afterwards
        """
        shot_ids = self._require(name)

        if shot_id in shot_ids:
            self.remote.remove_shot(name, shot_id)
            self._playlists[name] = [s for s in shot_ids if s != shot_id]
            logger.debug("Removed %s from playlist %s", shot_id, name)
            return False

        self.remote.add_shot(name, shot_id)
        self._playlists[name] = [*shot_ids, shot_id]
        logger.debug("Added %s to playlist %s", shot_id, name)
        return True

    def import_merge(self, mapping: object, known_shot_ids: Collection[str]) -> PlaylistImportSummary:
        """
        Merge an imported name -> shot ids document into local state.

        Imported playlists replace existing ones with the same name, and the
        first imported playlist becomes active. Shot ids missing from
        ``known_shot_ids`` are counted but do not block the merge.

        Raises:
            ImportFormatError: If the document is not a key -> list of strings
                mapping (nothing is merged)
        """
        imported = validate_mapping(mapping, "playlists import")

        referenced = {shot_id for shot_ids in imported.values() for shot_id in shot_ids}
        known = set(known_shot_ids)
        missing = len(referenced - known)

        for name, shot_ids in imported.items():
            self._playlists[name] = _dedupe(shot_ids)

        if imported:
            self.active = next(iter(imported))

        if missing:
            logger.warning("Imported playlists reference %d shots not in the current folder", missing)
        logger.info("Imported %d playlists", len(imported))
        return PlaylistImportSummary(imported=len(imported), missing_shots=missing)
