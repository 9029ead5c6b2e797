"""Configuration for dirstore.

Defines the immutable settings a store is created with.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..components.codec import pickle_decoder, pickle_encoder
from ..components.naming import lexicographic
from .types import Comparator, Decoder, Encoder

DEFAULT_EXT = ".dat"


@dataclass(frozen=True)
class StoreConfig:
    """Configuration parameters for a directory-backed store.

    Attributes:
        data_dir: Directory holding one file per key
        ext: Filename suffix for new files and filter applied on load
        comparator: Three-way order over filenames used by the index
        encoder: Writes a value to a binary file object
        decoder: Reads a value back from a binary file object
        create_dir: Whether to create data_dir when the store is constructed
    """

    data_dir: str | Path
    ext: str = DEFAULT_EXT
    comparator: Comparator = lexicographic
    encoder: Encoder = pickle_encoder
    decoder: Decoder = pickle_decoder
    create_dir: bool = False

    def __post_init__(self):
        if not self.ext:
            object.__setattr__(self, "ext", DEFAULT_EXT)
        if os.sep in self.ext or (os.altsep and os.altsep in self.ext):
            raise ValueError(f"Extension must not contain a path separator: {self.ext!r}")
