"""
Shot tags, mirrored from the remote tag store.

Tags are case-insensitively unique per shot but keep their original casing,
and each shot's list is kept sorted for display. A shot with no tags has no
entry at all.

Every mutation is write-then-reflect: the remote call is made first and the
local mirror only changes once it succeeds. If the remote call raises, the
error propagates and local state is untouched.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from shot_catalog.exceptions import (
    DuplicateTagError,
    ImportFormatError,
    TagLimitError,
    ValidationError,
)
from shot_catalog.remote.protocols import TagRemote
from shot_catalog.validation import validate_mapping

logger = logging.getLogger(__name__)

MAX_TAGS_PER_SHOT = 20


def _contains_tag(tags: Iterable[str], tag: str, skip_index: Optional[int] = None) -> bool:
    """Case-insensitive membership, optionally ignoring one position."""
    folded = tag.casefold()
    return any(i != skip_index and t.casefold() == folded for i, t in enumerate(tags))


class TagStore:
    """
    Local mirror of shot id -> tags.

    Args:
        remote: The remote tag store every mutation goes through
    """

    def __init__(self, remote: TagRemote):
        self.remote = remote
        self._tags: Dict[str, List[str]] = {}

    def load(self) -> None:
        """Replace local state with the remote contents."""
        self.replace(self.remote.fetch_all())

    def replace(self, mapping: Mapping[str, List[str]]) -> None:
        """Replace local state with an already fetched shot id -> tags mapping."""
        self._tags = self._normalize(mapping)
        logger.info("Loaded tags for %d shots", len(self._tags))

    @staticmethod
    def _normalize(mapping: Mapping[str, List[str]]) -> Dict[str, List[str]]:
        return {shot_id: sorted(tags) for shot_id, tags in mapping.items() if tags}

    def __contains__(self, shot_id: str) -> bool:
        return shot_id in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def get(self, shot_id: str) -> List[str]:
        """Tags of a shot, sorted (empty list if none)."""
        return list(self._tags.get(shot_id, []))

    def as_dict(self) -> Dict[str, List[str]]:
        return {shot_id: list(tags) for shot_id, tags in self._tags.items()}

    def all_tags(self) -> List[str]:
        """Every distinct tag across all shots, sorted."""
        return sorted({tag for tags in self._tags.values() for tag in tags})

    def add_tag(self, shot_id: str, tag: str) -> List[str]:
        """
        Add a tag to a shot.

        Args:
            shot_id: Shot to tag
            tag: Tag text; surrounding whitespace is trimmed

        Returns:
            The shot's tags after the change

        Raises:
            ValidationError: If the trimmed tag is empty
            TagLimitError: If the shot already has MAX_TAGS_PER_SHOT tags
            DuplicateTagError: If the shot has the tag in any casing
            RemoteError: If the remote store rejects the change
        """
        clean_tag = tag.strip()
        if not clean_tag:
            raise ValidationError("Tag cannot be empty")

        current = self._tags.get(shot_id, [])
        if len(current) >= MAX_TAGS_PER_SHOT:
            raise TagLimitError(f"A shot can have at most {MAX_TAGS_PER_SHOT} tags")

        if _contains_tag(current, clean_tag):
            raise DuplicateTagError(f"Tag '{clean_tag}' already exists on {shot_id}")

        self.remote.add(shot_id, clean_tag)

        self._tags[shot_id] = sorted([*current, clean_tag])
        logger.debug("Tagged %s with %s", shot_id, clean_tag)
        return self.get(shot_id)

    def remove_tag(self, shot_id: str, tag: str) -> List[str]:
        """
        Remove the exact tag value from a shot.

        The shot's entry is dropped once its last tag is removed.

        Returns:
            The shot's remaining tags
        """
        self.remote.remove(shot_id, tag)

        remaining = [t for t in self._tags.get(shot_id, []) if t != tag]
        if remaining:
            self._tags[shot_id] = remaining
        else:
            self._tags.pop(shot_id, None)

        logger.debug("Removed tag %s from %s", tag, shot_id)
        return remaining

    def rename_tag(self, old_tag: str, new_tag: str) -> int:
        """
        Rename a tag on every shot that has it (case-insensitive match).

        A shot that already carries ``new_tag`` just loses ``old_tag``, so
        renaming never creates a duplicate. Nothing happens when the trimmed
        new name is empty or equals the old one ignoring case.

        Returns:
            Number of shots that changed
        """
        clean_new = new_tag.strip()
        if not clean_new or clean_new.casefold() == old_tag.casefold():
            return 0

        self.remote.rename_globally(old_tag, clean_new)

        folded_old = old_tag.casefold()
        changed = 0
        updated: Dict[str, List[str]] = {}
        for shot_id, tags in self._tags.items():
            index = next((i for i, t in enumerate(tags) if t.casefold() == folded_old), None)
            if index is None:
                updated[shot_id] = tags
                continue

            changed += 1
            if _contains_tag(tags, clean_new, skip_index=index):
                merged = [t for t in tags if t.casefold() != folded_old]
            else:
                merged = sorted([*tags[:index], clean_new, *tags[index + 1:]])

            if merged:
                updated[shot_id] = merged

        self._tags = updated
        logger.info("Renamed tag %s to %s on %d shots", old_tag, clean_new, changed)
        return changed

    def import_merge(self, mapping: object) -> int:
        """
        Merge an imported shot id -> tags document into local state.

        Imported entries replace existing entries for the same shot id; an
        imported empty list removes the entry.

        Returns:
            Number of imported shot entries

        Raises:
            ImportFormatError: If the document is not a key -> list of strings
                mapping, or an entry has more than MAX_TAGS_PER_SHOT tags or
                the same tag twice in any casing (nothing is merged)
        """
        imported = validate_mapping(mapping, "tags import")

        for shot_id, tags in imported.items():
            if len(tags) > MAX_TAGS_PER_SHOT:
                raise ImportFormatError(
                    f"Shot {shot_id} has {len(tags)} tags; at most {MAX_TAGS_PER_SHOT} are allowed"
                )
            if any(_contains_tag(tags, tag, skip_index=i) for i, tag in enumerate(tags)):
                raise ImportFormatError(f"Shot {shot_id} has the same tag more than once")

        for shot_id, tags in imported.items():
            if tags:
                self._tags[shot_id] = sorted(tags)
            else:
                self._tags.pop(shot_id, None)

        logger.info("Imported tags for %d shots", len(imported))
        return len(imported)
