"""
The Shot collection produced by one directory scan.

A collection owns the content references of all its media files. Releasing
the collection revokes them; the library releases the previous collection
before it installs the next one, and ``with`` blocks release on exit.
"""

import logging
from typing import Dict, Iterator, List, Optional

from shot_catalog.models.shot import Shot
from shot_catalog.scanner.references import ReferenceRegistry

logger = logging.getLogger(__name__)


class ShotCollection:
    """
    Shots from one scan, sorted by id.

    Attributes:
        shots: The shots in ascending id order
        registry: The registry that minted the shots' content references
        released: True once the references have been revoked
    """

    def __init__(self, shots: List[Shot], registry: ReferenceRegistry):
        self.shots = sorted(shots, key=lambda s: s.id)
        self.registry = registry
        self.released = False
        self._by_id: Dict[str, Shot] = {shot.id: shot for shot in self.shots}

        if len(self._by_id) != len(self.shots):
            raise ValueError("Shot ids must be unique within a collection")

    @classmethod
    def empty(cls, registry: Optional[ReferenceRegistry] = None) -> "ShotCollection":
        return cls([], registry if registry is not None else ReferenceRegistry())

    def __len__(self) -> int:
        return len(self.shots)

    def __iter__(self) -> Iterator[Shot]:
        return iter(self.shots)

    def __contains__(self, shot_id: str) -> bool:
        return shot_id in self._by_id

    def __enter__(self) -> "ShotCollection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def ids(self) -> List[str]:
        return [shot.id for shot in self.shots]

    def get(self, shot_id: str) -> Optional[Shot]:
        return self._by_id.get(shot_id)

    def release(self) -> int:
        """
        Revoke every content reference held by this collection.

        Safe to call more than once; only the first call revokes anything.

        Returns:
            Number of references revoked
        """
        if self.released:
            return 0

        references = [ref for shot in self.shots for ref in shot.references]
        revoked = self.registry.revoke_all(references)
        self.released = True
        logger.debug("Released collection of %d shots (%d references)", len(self.shots), revoked)
        return revoked
