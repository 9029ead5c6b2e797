"""Protocol definition for the filename index."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..core.types import Filename


@runtime_checkable
class FilenameIndex(Protocol):
    """Sorted in-memory sequence of filenames."""

    def find(self, name: Filename) -> tuple[int, bool]:
        """Return (insertion position, whether name is present)."""
        ...

    def insert(self, name: Filename) -> bool:
        """Insert name in order if absent; return True if inserted."""
        ...

    def remove(self, name: Filename) -> bool:
        """Remove name if present; return True if removed."""
        ...

    def rebuild(self, names: Iterable[Filename]) -> None:
        """Replace the contents with a sorted copy of names."""
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Filename]:
        ...
