"""Sorted filename index implementation.

Uses sortedcontainers.SortedKeyList ordered by the configured comparator.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

from sortedcontainers import SortedKeyList

from .naming import lexicographic

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..core.types import Comparator, Filename


class SortedFilenameIndex:
    """In-memory sorted sequence of filenames.

    Args:
        comparator: Three-way order over filenames
        names: Optional initial contents

    Invariants:
        - Filenames are always kept in comparator order
        - No two filenames compare equal
        - The comparator must be a consistent total order; a broken one
          silently corrupts lookups
    """

    def __init__(self, comparator: Comparator = lexicographic, names: Iterable[Filename] = ()):
        self._comparator = comparator
        self._key = cmp_to_key(comparator)
        self._names: SortedKeyList = SortedKeyList(key=self._key)
        self.rebuild(names)

    def find(self, name: Filename) -> tuple[int, bool]:
        """Binary search for name.

        Returns:
            (position, found) where position is where name is or would be inserted
        """
        pos = self._names.bisect_key_left(self._key(name))
        found = pos < len(self._names) and self._comparator(name, self._names[pos]) == 0
        return pos, found

    def insert(self, name: Filename) -> bool:
        """Insert name if absent. Returns True if the index changed."""
        _pos, found = self.find(name)
        if found:
            return False
        self._names.add(name)
        return True

    def remove(self, name: Filename) -> bool:
        """Remove name if present. Returns True if the index changed."""
        pos, found = self.find(name)
        if not found:
            return False
        del self._names[pos]
        return True

    def rebuild(self, names: Iterable[Filename]) -> None:
        """Replace the whole index with a freshly sorted copy of names."""
        ordered = sorted(names, key=self._key)
        unique = [
            name
            for i, name in enumerate(ordered)
            if i == 0 or self._comparator(ordered[i - 1], name) != 0
        ]
        self._names = SortedKeyList(unique, key=self._key)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Filename]:
        return iter(self._names)

    def __getitem__(self, item):
        return self._names[item]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.find(name)[1]
