"""Directory-backed store implementation - main public API.

Keeps one file per key and an in-memory sorted index of their filenames.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Generic, TypeVar

from ..components.index import SortedFilenameIndex
from ..components.naming import filename_to_key, key_to_filename
from ..components.rwlock import ReadWriteLock
from .config import StoreConfig
from .errors import KeyNotFoundError
from .types import Filename, Key, Page

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DirStore(Generic[T]):
    """Key-value store keeping each value in its own file.

    Args:
        config: Store configuration

    Public API:
        - load(): Rebuild the index from the directory
        - list(offset, limit): Page of decoded values in index order
        - get(key): Decode the value stored for key
        - put(key, value): Write value for key
        - delete(key): Remove key, no-op if absent

    Invariants:
        - The index is sorted by the configured comparator after every call
        - The index reflects the directory as of the last load(), plus this
          instance's own put() and delete() calls; changes made by anyone
          else are invisible until the next load()
        - put() writes the file before indexing it; delete() removes the
          file before unindexing it
        - load/put/delete hold the write lock, list/get hold the read lock
    """

    def __init__(self, config: StoreConfig):
        self.config = config
        self.data_dir = Path(config.data_dir)
        self.ext = config.ext
        self._encoder = config.encoder
        self._decoder = config.decoder
        self._lock = ReadWriteLock()
        self._index = SortedFilenameIndex(config.comparator)

        if config.create_dir:
            self.data_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Initialized store at {self.data_dir} (ext={self.ext})")

    @classmethod
    def from_dir(cls, data_dir: str | Path, **options: Any) -> DirStore[T]:
        """Build a store for data_dir; options are StoreConfig fields."""
        return cls(StoreConfig(data_dir=data_dir, **options))

    def path_for(self, key: Key) -> Path:
        """Return the path key is stored at."""
        return self.data_dir / key_to_filename(key, self.ext)

    def load(self) -> int:
        """Rebuild the index from the files currently in the directory.

        Returns:
            Number of indexed entries

        Raises:
            OSError: If the directory cannot be listed; the index is unchanged
        """
        with self._lock.write_locked():
            names = [name for name in os.listdir(self.data_dir) if name.endswith(self.ext)]
            self._index.rebuild(names)
            count = len(self._index)

        logger.info(f"Loaded {count} entries from {self.data_dir}")
        return count

    def list(self, offset: int = 0, limit: int = -1) -> Page[T]:
        """Decode the values at index positions [offset, limit).

        limit is an absolute stopping position, not a page size; a negative
        limit means the end of the index. The stop is clamped to the index
        length. Entries that are directories are skipped.

        Raises:
            ValueError: If offset is negative
            OSError: If an entry cannot be opened; no partial page is returned
        """
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")

        with self._lock.read_locked():
            total = len(self._index)
            stop = total if limit < 0 else min(limit, total)

            values: list[T] = []
            for name in self._index[offset:stop]:
                path = self.data_dir / name
                if path.is_dir():
                    logger.debug(f"Skipping directory entry {path}")
                    continue
                with open(path, "rb") as f:
                    values.append(self._decoder(f))

        return Page(values=values, offset=offset, limit=limit, total=total)

    def get(self, key: Key) -> T:
        """Return the value stored for key.

        The index is trusted: a file removed behind the store's back raises
        FileNotFoundError rather than KeyNotFoundError.

        Raises:
            KeyNotFoundError: If key is not indexed
        """
        name = key_to_filename(key, self.ext)

        with self._lock.read_locked():
            _pos, found = self._index.find(name)
            if not found:
                raise KeyNotFoundError(key)

            with open(self.data_dir / name, "rb") as f:
                return self._decoder(f)

    def put(self, key: Key, value: T) -> None:
        """Write value for key, replacing any previous value."""
        name = key_to_filename(key, self.ext)
        path = self.data_dir / name

        with self._lock.write_locked():
            self._write(path, value)
            inserted = self._index.insert(name)

        logger.debug(f"{'Inserted' if inserted else 'Overwrote'} {key!r} at {path}")

    def _write(self, path: Path, value: T) -> None:
        """Encode value into path (must hold write lock).

        An encode or write error wins over a close error; a close error is
        raised on its own when the write succeeded.
        """
        f = open(path, "wb")
        try:
            self._encoder(f, value)
        except BaseException:
            try:
                f.close()
            except OSError as e:
                logger.debug(f"Suppressed close error on {path} after failed write: {e}")
            raise
        f.close()

    def delete(self, key: Key) -> None:
        """Remove key. Deleting an absent key is a no-op.

        Raises:
            OSError: If the file cannot be removed; the index is unchanged
        """
        name = key_to_filename(key, self.ext)
        path = self.data_dir / name

        with self._lock.write_locked():
            _pos, found = self._index.find(name)
            if not found:
                return

            if path.is_dir():
                # Only an empty directory is pruned; anything else fails
                path.rmdir()
            else:
                path.unlink()

            self._index.remove(name)

        logger.debug(f"Deleted {key!r} from {self.data_dir}")

    def keys(self) -> list[Key]:
        """Return all indexed keys in index order.

        Files whose names no key encodes to (written by hand, or with a
        different escaping) are indexed but have no key, and are left out.
        """
        keys: list[Key] = []
        with self._lock.read_locked():
            for name in self._index:
                try:
                    keys.append(filename_to_key(name, self.ext))
                except ValueError:
                    logger.debug(f"Skipping non-canonical filename {name!r}")
        return keys

    def filenames(self) -> list[Filename]:
        """Return all indexed filenames in index order."""
        with self._lock.read_locked():
            return list(self._index)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._index)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        name = key_to_filename(key, self.ext)
        with self._lock.read_locked():
            return self._index.find(name)[1]
