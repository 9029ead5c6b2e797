"""Protocol definitions for value codecs."""

from __future__ import annotations

from typing import IO, Any, Protocol, runtime_checkable


@runtime_checkable
class ValueEncoder(Protocol):
    """Writes one value to a binary file object."""

    def __call__(self, fp: IO[bytes], value: Any) -> None:
        ...


@runtime_checkable
class ValueDecoder(Protocol):
    """Reads one value back from a binary file object."""

    def __call__(self, fp: IO[bytes]) -> Any:
        ...
