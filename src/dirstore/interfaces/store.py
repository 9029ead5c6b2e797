"""Protocol definition for a directory-backed store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import Key, Page

T = TypeVar("T")


@runtime_checkable
class KeyValueStore(Protocol[T]):
    """Public API for a directory-backed key-value store."""

    def load(self) -> int:
        """Rebuild the index from the directory; return the entry count."""
        ...

    def list(self, offset: int = 0, limit: int = -1) -> Page[T]:
        """Values at index positions [offset, limit); negative limit means all."""
        ...

    def get(self, key: Key) -> T:
        """Return the value for key or raise KeyNotFoundError."""
        ...

    def put(self, key: Key, value: T) -> None:
        """Write value for key, indexing it after the write succeeds."""
        ...

    def delete(self, key: Key) -> None:
        """Remove key; no-op if absent."""
        ...
