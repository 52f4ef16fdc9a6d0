"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable, Dict, List

import pytest

from shot_catalog.exceptions import RemoteError, RemoteNotFoundError
from shot_catalog.library import Library
from shot_catalog.models import RawFile
from shot_catalog.stores.local_state import LocalState
from shot_catalog.stores.playlists import PlaylistStore
from shot_catalog.stores.tags import TagStore


class FakeTagRemote:
    """In-memory stand-in for the remote tag service."""

    def __init__(self, tags: Dict[str, List[str]] = None):
        self.tags = {k: list(v) for k, v in (tags or {}).items()}
        self.calls = []
        self.fail = False

    def _call(self, *call):
        self.calls.append(call)
        if self.fail:
            raise RemoteError("service unavailable")

    def fetch_all(self):
        self._call("fetch_all")
        return {k: list(v) for k, v in self.tags.items()}

    def add(self, shot_id, tag):
        self._call("add", shot_id, tag)
        self.tags.setdefault(shot_id, []).append(tag)
        return list(self.tags[shot_id])

    def remove(self, shot_id, tag):
        self._call("remove", shot_id, tag)
        remaining = self.tags.get(shot_id, [])
        if tag in remaining:
            remaining.remove(tag)
        return list(remaining)

    def rename_globally(self, old_tag, new_tag):
        self._call("rename_globally", old_tag, new_tag)
        for shot_id, tags in self.tags.items():
            self.tags[shot_id] = [new_tag if t == old_tag else t for t in tags]
        return {"success": True}


class FakePlaylistRemote:
    """In-memory stand-in for the remote playlist service."""

    def __init__(self, playlists: Dict[str, List[str]] = None):
        self.playlists = {k: list(v) for k, v in (playlists or {}).items()}
        self.calls = []
        self.fail = False

    def _call(self, *call):
        self.calls.append(call)
        if self.fail:
            raise RemoteError("service unavailable")

    def _require(self, name):
        if name not in self.playlists:
            raise RemoteNotFoundError(f"Playlist {name} not found")
        return self.playlists[name]

    def fetch_all(self):
        self._call("fetch_all")
        return {k: list(v) for k, v in self.playlists.items()}

    def create(self, name):
        self._call("create", name)
        self.playlists[name] = []
        return {"name": name, "shotIds": []}

    def rename(self, name, new_name):
        self._call("rename", name, new_name)
        self._require(name)
        self.playlists[new_name] = self.playlists.pop(name)
        return {"name": new_name, "shotIds": self.playlists[new_name]}

    def delete(self, name):
        self._call("delete", name)
        self.playlists.pop(name, None)
        return {"success": True}

    def add_shot(self, name, shot_id):
        self._call("add_shot", name, shot_id)
        shot_ids = self._require(name)
        if shot_id not in shot_ids:
            shot_ids.append(shot_id)
        return {"name": name, "shotIds": shot_ids}

    def remove_shot(self, name, shot_id):
        self._call("remove_shot", name, shot_id)
        shot_ids = self._require(name)
        self.playlists[name] = [s for s in shot_ids if s != shot_id]
        return {"name": name, "shotIds": self.playlists[name]}


class FakeDirectoryRemote:
    """In-memory stand-in for the recent-directories service."""

    def __init__(self):
        self.saved = []
        self.fail = False

    def fetch_all(self):
        if self.fail:
            raise RemoteError("service unavailable")
        return list(self.saved)

    def save(self, path):
        if self.fail:
            raise RemoteError("service unavailable")
        self.saved.append(path)
        return {"success": True}


def _unreadable() -> bytes:
    raise OSError("permission denied")


@pytest.fixture
def make_raw_file() -> Callable[..., RawFile]:
    """Build RawFiles with in-memory content (or a failing reader)."""
    def _make(name: str, content: str = "", readable: bool = True) -> RawFile:
        if not readable:
            return RawFile(name=name, read_bytes=_unreadable)
        data = content.encode("utf-8")
        return RawFile(name=name, read_bytes=lambda: data)
    return _make


@pytest.fixture
def tag_remote() -> FakeTagRemote:
    return FakeTagRemote()


@pytest.fixture
def playlist_remote() -> FakePlaylistRemote:
    return FakePlaylistRemote()


@pytest.fixture
def directory_remote() -> FakeDirectoryRemote:
    return FakeDirectoryRemote()


@pytest.fixture
def state(tmp_path: Path) -> LocalState:
    return LocalState(tmp_path / "state.json")


@pytest.fixture
def tag_store(tag_remote: FakeTagRemote) -> TagStore:
    return TagStore(tag_remote)


@pytest.fixture
def playlist_store(playlist_remote: FakePlaylistRemote, state: LocalState) -> PlaylistStore:
    return PlaylistStore(playlist_remote, state)


@pytest.fixture
def library(tag_remote, playlist_remote, directory_remote, state) -> Library:
    lib = Library(tag_remote, playlist_remote, directory_remote, state)
    yield lib
    lib.close()


@pytest.fixture
def shot_folder(tmp_path: Path) -> Path:
    """A media folder with two shots and some noise."""
    folder = tmp_path / "session_01"
    (folder / "nested").mkdir(parents=True)
    (folder / "shotA.png").write_bytes(b"png")
    (folder / "shotA.mp4").write_bytes(b"mp4")
    (folder / "shotA.json").write_text('{"prompt": "misty forest"}', encoding="utf-8")
    (folder / "nested" / "shotB.txt").write_text("a red car at night", encoding="utf-8")
    (folder / "readme.md").write_text("ignored", encoding="utf-8")
    (folder / ".DS_Store").write_bytes(b"")
    return folder
