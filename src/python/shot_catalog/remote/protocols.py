"""Interfaces of the remote persistence service."""

from abc import abstractmethod
from typing import Any, Dict, List, Protocol


class TagRemote(Protocol):
    """Remote store for shot tags."""

    @abstractmethod
    def fetch_all(self) -> Dict[str, List[str]]:
        """Return every shot's tags."""
        ...

    @abstractmethod
    def add(self, shot_id: str, tag: str) -> List[str]:
        """Add a tag to a shot. Returns the shot's tags after the change."""
        ...

    @abstractmethod
    def remove(self, shot_id: str, tag: str) -> List[str]:
        """Remove the exact tag value from a shot. Returns the remaining tags."""
        ...

    @abstractmethod
    def rename_globally(self, old_tag: str, new_tag: str) -> Any:
        """Rename a tag on every shot."""
        ...


class PlaylistRemote(Protocol):
    """
    Remote store for playlists.

    Every mutating call raises RemoteNotFoundError when the named playlist
    no longer exists server-side.
    """

    @abstractmethod
    def fetch_all(self) -> Dict[str, List[str]]:
        """Return every playlist as name -> shot ids."""
        ...

    @abstractmethod
    def create(self, name: str) -> Dict[str, Any]:
        ...

    @abstractmethod
    def rename(self, name: str, new_name: str) -> Dict[str, Any]:
        ...

    @abstractmethod
    def delete(self, name: str) -> Any:
        ...

    @abstractmethod
    def add_shot(self, name: str, shot_id: str) -> Dict[str, Any]:
        ...

    @abstractmethod
    def remove_shot(self, name: str, shot_id: str) -> Dict[str, Any]:
        ...


class DirectoryRemote(Protocol):
    """Remote list of recently opened folders."""

    @abstractmethod
    def fetch_all(self) -> List[str]:
        ...

    @abstractmethod
    def save(self, path: str) -> Any:
        ...
