"""
Filtering the shot view by tags and free text.

This is a pure derivation over the loaded shots and tags; it holds no state
of its own apart from the transient SelectionState.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Set

from shot_catalog.models.shot import Shot


@dataclass
class SelectionState:
    """
    Transient view selection, never persisted remotely.

    Attributes:
        selected_tags: Tag filters, combined with AND
        search_query: Free-text query
    """
    selected_tags: Set[str] = field(default_factory=set)
    search_query: str = ""

    def toggle_tag_filter(self, tag: str) -> bool:
        """Select or deselect a tag filter. Returns True if now selected."""
        if tag in self.selected_tags:
            self.selected_tags.discard(tag)
            return False
        self.selected_tags.add(tag)
        return True

    def clear(self) -> None:
        self.selected_tags.clear()
        self.search_query = ""


def shot_matches_query(shot: Shot, tags: List[str], query: str) -> bool:
    """
    Check if a shot matches an already folded, non-empty query.

    The query may appear in the shot id, in its joined note contents, or in
    any of its tags.
    """
    return (
        query in shot.id.casefold()
        or query in shot.note_text.casefold()
        or any(query in tag.casefold() for tag in tags)
    )


def filter_shots(
    shots: Iterable[Shot],
    tags: Mapping[str, List[str]],
    selected_tags: Optional[Iterable[str]] = None,
    query: str = "",
) -> List[Shot]:
    """
    Filter shots by tag filters and a search query.

    Args:
        shots: Shots in display order
        tags: Shot id -> tags
        selected_tags: A shot must carry every one of these tags (exact match)
        query: Case-insensitive text searched in ids, notes and tags

    Returns:
        The matching shots, in the order they were given
    """
    required = set(selected_tags or ())
    folded_query = query.strip().casefold()

    result = []
    for shot in shots:
        shot_tags = tags.get(shot.id, [])

        if required and not required.issubset(shot_tags):
            continue

        if folded_query and not shot_matches_query(shot, shot_tags, folded_query):
            continue

        result.append(shot)

    return result
