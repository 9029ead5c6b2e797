"""dirstore - directory-backed key-value store with a sorted in-memory index."""

from .components.codec import json_decoder, json_encoder, pickle_decoder, pickle_encoder
from .components.index import SortedFilenameIndex
from .components.naming import filename_to_key, key_order, key_to_filename, lexicographic
from .components.rwlock import ReadWriteLock
from .interfaces.codec import ValueDecoder, ValueEncoder
from .interfaces.index import FilenameIndex
from .interfaces.store import KeyValueStore
from .core.config import DEFAULT_EXT, StoreConfig
from .core.errors import DirStoreError, KeyNotFoundError
from .core.store import DirStore
from .core.types import Comparator, Decoder, Encoder, Filename, Key, Page

__all__ = [
    "DEFAULT_EXT",
    "StoreConfig",
    "DirStore",
    "DirStoreError",
    "KeyNotFoundError",
    "SortedFilenameIndex",
    "FilenameIndex",
    "KeyValueStore",
    "ValueEncoder",
    "ValueDecoder",
    "ReadWriteLock",
    "key_to_filename",
    "filename_to_key",
    "lexicographic",
    "key_order",
    "pickle_encoder",
    "pickle_decoder",
    "json_encoder",
    "json_decoder",
    "Comparator",
    "Encoder",
    "Decoder",
    "Filename",
    "Key",
    "Page",
]
