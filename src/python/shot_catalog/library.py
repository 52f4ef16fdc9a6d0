"""
The application context that owns all shot_catalog state.

A Library holds the current ShotCollection, the tag and playlist stores, the
local state and the transient selection. Presentation code talks to one
Library instance and never keeps state of its own.

Usage:
    from shot_catalog.config import load_config
    from shot_catalog.library import Library

    with Library.from_config(load_config()) as library:
        library.load_remote_state()
        library.load_directory(Path("/renders/session_01"))
        for shot in library.filtered_shots():
            print(shot.id, shot.cover_name)
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from shot_catalog.config import get_remote_config, get_state_path
from shot_catalog.exceptions import (
    ImportFormatError,
    RemoteError,
    ScanError,
    ValidationError,
)
from shot_catalog.export import ExportDocument, export_playlists, export_tags
from shot_catalog.models.shot import RawFile, Shot
from shot_catalog.remote.client import (
    HttpDirectoryRemote,
    HttpPlaylistRemote,
    HttpTagRemote,
    RemoteClient,
)
from shot_catalog.remote.protocols import DirectoryRemote, PlaylistRemote, TagRemote
from shot_catalog.scanner.collection import ShotCollection
from shot_catalog.scanner.cover import CoverResolver
from shot_catalog.scanner.directory import collect_files
from shot_catalog.scanner.grouper import group_files_to_shots
from shot_catalog.scanner.references import ReferenceRegistry
from shot_catalog.search import SelectionState, filter_shots
from shot_catalog.stores.local_state import LocalState
from shot_catalog.stores.playlists import PlaylistImportSummary, PlaylistStore
from shot_catalog.stores.tags import TagStore
from shot_catalog.validation import parse_import_document

logger = logging.getLogger(__name__)


class Library:
    """
    Single owner of the shots, tags, playlists and view selection.

    Args:
        tag_remote: Remote tag store
        playlist_remote: Remote playlist store
        directory_remote: Remote list of recent folders (optional)
        state: Local persistent state (in-memory if None)
        client: HTTP client to close with the library (optional)
    """

    def __init__(
        self,
        tag_remote: TagRemote,
        playlist_remote: PlaylistRemote,
        directory_remote: Optional[DirectoryRemote] = None,
        state: Optional[LocalState] = None,
        client: Optional[RemoteClient] = None,
    ):
        self.state = state if state is not None else LocalState()
        self.registry = ReferenceRegistry()
        self.tags = TagStore(tag_remote)
        self.playlists = PlaylistStore(playlist_remote, self.state)
        self.covers = CoverResolver(self.state)
        self.directories = directory_remote
        self.selection = SelectionState()
        self.shots = ShotCollection.empty(self.registry)
        self.client = client
        self._scanning = False

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Library":
        """Build a Library talking to the configured HTTP service."""
        remote_config = get_remote_config(config)
        client = RemoteClient(remote_config["base_url"], timeout=remote_config["timeout"])
        return cls(
            tag_remote=HttpTagRemote(client),
            playlist_remote=HttpPlaylistRemote(client),
            directory_remote=HttpDirectoryRemote(client),
            state=LocalState(get_state_path(config)),
            client=client,
        )

    def __enter__(self) -> "Library":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the current shots and close the HTTP client."""
        self.shots.release()
        if self.client is not None:
            self.client.close()

    # ------------------------------------------------------------------
    # Startup

    def load_remote_state(self) -> bool:
        """
        Fetch tags and playlists from the remote store.

        Both are fetched before either store is replaced, so a failure
        leaves the stores as they were and the library stays usable
        without the service. The failure is logged.

        Returns:
            True if both stores loaded
        """
        try:
            tags = self.tags.remote.fetch_all()
            playlists = self.playlists.remote.fetch_all()
        except RemoteError as e:
            logger.error("Could not load tags and playlists: %s", e)
            return False

        self.tags.replace(tags)
        self.playlists.replace(playlists)
        return True

    # ------------------------------------------------------------------
    # Scanning

    def load_files(self, files: Iterable[RawFile], folder_name: Optional[str] = None) -> ShotCollection:
        """
        Replace the current shots with the shots built from ``files``.

        The previous collection is released before the new one is built,
        and tag filters are reset.

        Raises:
            ScanError: If a scan is already running or there are no files
        """
        if self._scanning:
            raise ScanError("A scan is already running")

        self._scanning = True
        try:
            if folder_name:
                self._remember_directory(folder_name)

            self.shots.release()
            self.shots = ShotCollection.empty(self.registry)
            self.selection.clear()

            collection = group_files_to_shots(files, self.registry)
            self.covers.resolve_all(collection)
            self.shots = collection
        finally:
            self._scanning = False

        logger.info("Loaded %d shots", len(self.shots))
        return self.shots

    def load_directory(self, directory: Path) -> ShotCollection:
        """Scan ``directory`` recursively and install its shots."""
        return self.load_files(collect_files(directory), folder_name=directory.name)

    def _remember_directory(self, folder_name: str) -> None:
        if self.directories is None:
            return
        try:
            self.directories.save(folder_name)
        except RemoteError as e:
            logger.error("Failed to save directory %s: %s", folder_name, e)

    def recent_directories(self) -> List[str]:
        """Folders previously opened, as recorded by the remote store."""
        if self.directories is None:
            return []
        return self.directories.fetch_all()

    # ------------------------------------------------------------------
    # Covers

    def set_cover(self, shot_id: str, media_name: str) -> bool:
        """Choose the cover of a loaded shot by media file name."""
        shot = self.shots.get(shot_id)
        if shot is None:
            logger.warning("No loaded shot with id %s", shot_id)
            return False
        return self.covers.set_cover(shot, media_name)

    # ------------------------------------------------------------------
    # Views

    def filtered_shots(self) -> List[Shot]:
        """Loaded shots narrowed by the current tag filters and query."""
        return filter_shots(
            self.shots,
            self.tags.as_dict(),
            self.selection.selected_tags,
            self.selection.search_query,
        )

    def active_playlist_shots(self) -> List[Shot]:
        return self.playlists.shots_in(self.playlists.active, self.shots.shots)

    def toggle_in_active_playlist(self, shot_id: str) -> bool:
        """
        Add or remove a shot from the active playlist.

        Raises:
            ValidationError: If no playlist is active
        """
        active = self.playlists.active
        if active is None:
            raise ValidationError("Select or create a playlist first")
        return self.playlists.toggle_shot(active, shot_id)

    def set_sidebar_open(self, is_open: bool) -> None:
        self.state.sidebar_open = is_open

    # ------------------------------------------------------------------
    # Import / export

    def import_tags(self, text: str) -> int:
        """
        Merge a tags export file into the tag store.

        Raises:
            ImportFormatError: If the file is not valid (nothing is merged)
        """
        result = parse_import_document(text)
        if not result.ok:
            raise ImportFormatError(result.error)
        return self.tags.import_merge(result.data)

    def import_playlists(self, text: str) -> PlaylistImportSummary:
        """
        Merge a playlists export file into the playlist store.

        Raises:
            ImportFormatError: If the file is not valid (nothing is merged)
        """
        result = parse_import_document(text)
        if not result.ok:
            raise ImportFormatError(result.error)
        return self.playlists.import_merge(result.data, self.shots.ids)

    def export_playlists(self, names: Iterable[str]) -> ExportDocument:
        return export_playlists(self.playlists.as_dict(), names)

    def export_tags(self, tags: Iterable[str]) -> ExportDocument:
        return export_tags(self.tags.as_dict(), tags)
