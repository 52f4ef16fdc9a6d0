"""
Opaque content references for media files.

A Shot never holds media bytes. Each image or video is registered here and
the Shot keeps the returned ``media://`` reference; presentation code resolves
the reference back to the content when it needs it. References stay valid
until they are revoked, which happens when the owning ShotCollection is
released.
"""

import logging
import uuid
from typing import Dict, Iterable, Optional

from shot_catalog.models.shot import RawFile

logger = logging.getLogger(__name__)

REFERENCE_SCHEME = "media://"


class ReferenceRegistry:
    """Mint, resolve and revoke content references."""

    def __init__(self):
        self._entries: Dict[str, RawFile] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, reference: str) -> bool:
        return reference in self._entries

    def create(self, raw_file: RawFile) -> str:
        """Register a file and return a new reference for it."""
        reference = f"{REFERENCE_SCHEME}{uuid.uuid4().hex}"
        self._entries[reference] = raw_file
        return reference

    def resolve(self, reference: str) -> Optional[RawFile]:
        """Return the file behind a live reference, or None once revoked."""
        return self._entries.get(reference)

    def read(self, reference: str) -> bytes:
        """
        Read the content behind a reference.

        Raises:
            KeyError: If the reference is unknown or was revoked
        """
        raw_file = self._entries.get(reference)
        if raw_file is None:
            raise KeyError(f"Unknown or revoked reference: {reference}")
        return raw_file.read_bytes()

    def revoke(self, reference: str) -> bool:
        """Revoke a reference. Returns False if it was not live."""
        return self._entries.pop(reference, None) is not None

    def revoke_all(self, references: Iterable[str]) -> int:
        """Revoke several references and return how many were live."""
        revoked = sum(1 for reference in references if self.revoke(reference))
        logger.debug("Revoked %d content references", revoked)
        return revoked
