"""State stores kept in sync with the remote service or the local state file."""

from shot_catalog.stores.local_state import LocalState
from shot_catalog.stores.playlists import PlaylistImportSummary, PlaylistStore
from shot_catalog.stores.tags import MAX_TAGS_PER_SHOT, TagStore

__all__ = [
    "LocalState",
    "MAX_TAGS_PER_SHOT",
    "PlaylistImportSummary",
    "PlaylistStore",
    "TagStore",
]
