"""
Exception hierarchy for shot_catalog.

Validation errors are raised before any remote call is made and leave local
state unchanged. Remote errors wrap failures of the persistence service.
"""


class ShotCatalogError(Exception):
    """Base exception for all shot_catalog errors."""
    pass


class ValidationError(ShotCatalogError):
    """Raised when user input is rejected before reaching the remote store."""
    pass


class TagLimitError(ValidationError):
    """Raised when a shot already carries the maximum number of tags."""
    pass


class DuplicateTagError(ValidationError):
    """Raised when a shot already has a tag that matches case-insensitively."""
    pass


class DuplicatePlaylistError(ValidationError):
    """Raised when a playlist with the exact same name already exists."""
    pass


class ImportFormatError(ValidationError):
    """Raised when an import document is not a key -> list of strings mapping."""
    pass


class PlaylistNotFoundError(ShotCatalogError):
    """Raised when a playlist is not present in the local store."""
    pass


class RemoteError(ShotCatalogError):
    """Raised when a call to the persistence service fails."""
    pass


class RemoteNotFoundError(RemoteError):
    """Raised when the persistence service reports the target no longer exists."""
    pass


class ScanError(ShotCatalogError):
    """Raised when a directory scan cannot run at all."""
    pass
