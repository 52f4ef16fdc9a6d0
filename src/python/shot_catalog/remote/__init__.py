"""Remote persistence interfaces and their HTTP implementations."""

from shot_catalog.remote.client import (
    HttpDirectoryRemote,
    HttpPlaylistRemote,
    HttpTagRemote,
    RemoteClient,
)
from shot_catalog.remote.protocols import DirectoryRemote, PlaylistRemote, TagRemote

__all__ = [
    "DirectoryRemote",
    "HttpDirectoryRemote",
    "HttpPlaylistRemote",
    "HttpTagRemote",
    "PlaylistRemote",
    "RemoteClient",
    "TagRemote",
]
