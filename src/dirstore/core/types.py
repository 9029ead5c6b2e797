"""Common type definitions for dirstore.

Defines the keys, filenames and pluggable capabilities shared by all components.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import IO, Any, Generic, TypeVar

T = TypeVar("T")

# Core primitive types
Key = str
Filename = str

# Pluggable capabilities
Comparator = Callable[[Filename, Filename], int]
Encoder = Callable[[IO[bytes], Any], None]
Decoder = Callable[[IO[bytes]], Any]


@dataclass
class Page(Generic[T]):
    """A slice of decoded values in index order.

    Attributes:
        values: Decoded values, in index order
        offset: First index position requested
        limit: Stopping position requested (negative means unbounded)
        total: Index length at the time of the read
    """

    values: list[T] = field(default_factory=list)
    offset: int = 0
    limit: int = -1
    total: int = 0
