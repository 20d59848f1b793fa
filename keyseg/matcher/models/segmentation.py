# Path: keyseg/matcher/models/segmentation.py
"""
Segmentation Model

One complete, valid assignment of matched substrings to the active
keywords of a matcher. Entries keep slot declaration order; keywords
that were inactive for the assignment never appear.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Iterator

from .keyword import keyword_name


class Segmentation(Mapping):
    """
    Immutable ordered mapping of keyword -> matched segment.

    Compares equal to any mapping holding the same items, so tests and
    callers can check results against plain dicts.

    Example:
        segmentation = matcher.analyze("Harry Potter")[0]
        segmentation[FORENAME]    # "Harry"
        segmentation.to_dict()    # {"FORENAME": "Harry", "LASTNAME": "Potter"}
    """

    __slots__ = ('_entries', '_lookup')

    def __init__(self, entries: Iterable[tuple[Any, str]] = ()):
        self._entries = tuple(entries)
        self._lookup = dict(self._entries)

    def __getitem__(self, keyword: Any) -> str:
        return self._lookup[keyword]

    def __iter__(self) -> Iterator[Any]:
        return (keyword for keyword, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ', '.join(
            f"{keyword_name(keyword)}={segment!r}" for keyword, segment in self._entries
        )
        return f"Segmentation({body})"

    @property
    def entries(self) -> tuple[tuple[Any, str], ...]:
        """The (keyword, segment) pairs in slot declaration order."""
        return self._entries

    def segments(self) -> list[str]:
        """The matched segments in slot declaration order."""
        return [segment for _, segment in self._entries]

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary keyed by keyword name."""
        return {keyword_name(keyword): segment for keyword, segment in self._entries}


__all__ = ['Segmentation']
