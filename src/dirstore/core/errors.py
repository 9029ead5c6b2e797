"""Exception hierarchy for dirstore.

Filesystem and codec failures are not wrapped; they propagate as raised.
"""

from __future__ import annotations


class DirStoreError(Exception):
    """Base exception for all dirstore errors."""
    pass


class KeyNotFoundError(DirStoreError, KeyError):
    """Raised when a key is not present in the index."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"
