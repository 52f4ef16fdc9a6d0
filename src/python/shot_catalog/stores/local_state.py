"""
Local key-value state that persists across sessions.

The state file is a small JSON document with fixed keys:

- ``shot_covers``: shot id -> chosen cover file name
- ``active_playlist``: name of the active playlist, or null
- ``sidebar_open``: whether the playlist panel is open

It is read once at startup and written on every change. Missing, corrupt,
or wrongly shaped entries fall back to their defaults.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SHOT_COVERS_KEY = "shot_covers"
ACTIVE_PLAYLIST_KEY = "active_playlist"
SIDEBAR_OPEN_KEY = "sidebar_open"

DEFAULTS: Dict[str, Any] = {
    SHOT_COVERS_KEY: {},
    ACTIVE_PLAYLIST_KEY: None,
    SIDEBAR_OPEN_KEY: True,
}


def _valid_covers(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    )


def _valid_active(value: Any) -> bool:
    return value is None or isinstance(value, str)


def _valid_flag(value: Any) -> bool:
    return isinstance(value, bool)


VALIDATORS = {
    SHOT_COVERS_KEY: _valid_covers,
    ACTIVE_PLAYLIST_KEY: _valid_active,
    SIDEBAR_OPEN_KEY: _valid_flag,
}


class LocalState:
    """
    Persistent local state backed by a JSON file.

    Args:
        path: File to read and write. None keeps the state in memory only.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else None
        self._values: Dict[str, Any] = self._read()

    def _read(self) -> Dict[str, Any]:
        values = {key: _copy(default) for key, default in DEFAULTS.items()}
        if self.path is None or not self.path.exists():
            return values

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.debug("Ignoring unreadable state file %s: %s", self.path, e)
            return values

        if not isinstance(data, dict):
            logger.debug("Ignoring state file %s: not a mapping", self.path)
            return values

        for key, is_valid in VALIDATORS.items():
            if key in data and is_valid(data[key]):
                values[key] = data[key]
            elif key in data:
                logger.debug("Ignoring malformed state entry %s", key)

        return values

    def _write(self) -> None:
        if self.path is None:
            return

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._values, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save state to %s: %s", self.path, e)

    def get(self, key: str) -> Any:
        return _copy(self._values[key])

    def set(self, key: str, value: Any) -> None:
        if key not in VALIDATORS:
            raise KeyError(f"Unknown state key: {key}")
        if not VALIDATORS[key](value):
            raise ValueError(f"Invalid value for state key {key}: {value!r}")

        self._values[key] = _copy(value)
        self._write()

    @property
    def shot_covers(self) -> Dict[str, str]:
        return self.get(SHOT_COVERS_KEY)

    @shot_covers.setter
    def shot_covers(self, value: Dict[str, str]) -> None:
        self.set(SHOT_COVERS_KEY, value)

    @property
    def active_playlist(self) -> Optional[str]:
        return self.get(ACTIVE_PLAYLIST_KEY)

    @active_playlist.setter
    def active_playlist(self, value: Optional[str]) -> None:
        self.set(ACTIVE_PLAYLIST_KEY, value)

    @property
    def sidebar_open(self) -> bool:
        return self.get(SIDEBAR_OPEN_KEY)

    @sidebar_open.setter
    def sidebar_open(self, value: bool) -> None:
        self.set(SIDEBAR_OPEN_KEY, value)


def _copy(value: Any) -> Any:
    return dict(value) if isinstance(value, dict) else value
