"""
HTTP clients for the remote persistence service.

The service exposes a small JSON REST API under a base URL such as
``http://localhost:3001/api``:

    GET    /tags                          -> {shot_id: [tag, ...]}
    POST   /tags/<shot_id>                {"tag"} -> [tag, ...]
    DELETE /tags/<shot_id>/<tag>          -> [tag, ...]
    PUT    /tags/rename                   {"oldTag", "newTag"}
    GET    /playlists                     -> {name: [shot_id, ...]}
    POST   /playlists                     {"name"}
    PUT    /playlists/<name>              {"newName"}
    DELETE /playlists/<name>
    POST   /playlists/<name>/shots        {"shotId"}
    DELETE /playlists/<name>/shots/<shot_id>
    GET    /directories                   -> [path, ...]
    POST   /directories                   {"path"}

Calls are issued one at a time with no retries. A 404 raises
RemoteNotFoundError; any other failure raises RemoteError.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from shot_catalog.exceptions import ImportFormatError, RemoteError, RemoteNotFoundError
from shot_catalog.validation import validate_mapping

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"
DEFAULT_TIMEOUT = 10.0


class RemoteClient:
    """
    Thin JSON-over-HTTP client shared by the per-resource remotes.

    Args:
        base_url: API root, without a trailing slash
        timeout: Seconds to wait for each request
        session: Optional requests.Session to reuse
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, *segments: str) -> str:
        """Build a URL, escaping each path segment."""
        return "/".join([self.base_url, *(quote(s, safe="") for s in segments)])

    def request(self, method: str, *segments: str, payload: Optional[dict] = None) -> Any:
        """
        Send one request and return the decoded JSON body (None if empty).

        Raises:
            RemoteNotFoundError: On HTTP 404
            RemoteError: On transport errors, other non-2xx statuses,
                or a body that is not JSON
        """
        url = self.url(*segments)
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteError(f"{method} {url} failed: {e}") from e

        if response.status_code == 404:
            raise RemoteNotFoundError(f"{method} {url}: not found")

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise RemoteError(f"{method} {url} failed: {e}") from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(f"{method} {url} returned invalid JSON") from e

    def close(self) -> None:
        self.session.close()


def _expect_mapping(data: Any, what: str) -> Dict[str, List[str]]:
    try:
        return validate_mapping(data, what)
    except ImportFormatError as e:
        raise RemoteError(str(e)) from e


def _expect_list(data: Any, what: str) -> List[str]:
    if not isinstance(data, list) or not all(isinstance(v, str) for v in data):
        raise RemoteError(f"Invalid {what}: expected a list of strings")
    return data


class HttpTagRemote:
    """TagRemote backed by the REST API."""

    def __init__(self, client: RemoteClient):
        self.client = client

    def fetch_all(self) -> Dict[str, List[str]]:
        return _expect_mapping(self.client.request("GET", "tags"), "tags response")

    def add(self, shot_id: str, tag: str) -> List[str]:
        data = self.client.request("POST", "tags", shot_id, payload={"tag": tag})
        return _expect_list(data, "tags response")

    def remove(self, shot_id: str, tag: str) -> List[str]:
        data = self.client.request("DELETE", "tags", shot_id, tag)
        return _expect_list(data, "tags response")

    def rename_globally(self, old_tag: str, new_tag: str) -> Any:
        return self.client.request("PUT", "tags", "rename", payload={"oldTag": old_tag, "newTag": new_tag})


class HttpPlaylistRemote:
    """PlaylistRemote backed by the REST API."""

    def __init__(self, client: RemoteClient):
        self.client = client

    def fetch_all(self) -> Dict[str, List[str]]:
        return _expect_mapping(self.client.request("GET", "playlists"), "playlists response")

    def create(self, name: str) -> Dict[str, Any]:
        return self.client.request("POST", "playlists", payload={"name": name})

    def rename(self, name: str, new_name: str) -> Dict[str, Any]:
        return self.client.request("PUT", "playlists", name, payload={"newName": new_name})

    def delete(self, name: str) -> Any:
        return self.client.request("DELETE", "playlists", name)

    def add_shot(self, name: str, shot_id: str) -> Dict[str, Any]:
        return self.client.request("POST", "playlists", name, "shots", payload={"shotId": shot_id})

    def remove_shot(self, name: str, shot_id: str) -> Dict[str, Any]:
        return self.client.request("DELETE", "playlists", name, "shots", shot_id)


class HttpDirectoryRemote:
    """DirectoryRemote backed by the REST API."""

    def __init__(self, client: RemoteClient):
        self.client = client

    def fetch_all(self) -> List[str]:
        return _expect_list(self.client.request("GET", "directories"), "directories response")

    def save(self, path: str) -> Any:
        return self.client.request("POST", "directories", payload={"path": path})
