"""Key to filename mapping and filename comparators.

Keys are percent-encoded as a single path segment, so any key maps to one
flat, filesystem-safe filename and distinct keys never collide.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, unquote

if TYPE_CHECKING:
    from ..core.types import Comparator, Filename, Key

# Characters left unescaped in a path segment besides letters, digits and "-_.~"
SEGMENT_SAFE = "$&+:=@"


def key_to_filename(key: Key, ext: str) -> Filename:
    """Return the on-disk filename for key.

    Keys are encoded as UTF-8 with surrogatepass, so any str, including one
    holding lone surrogates, maps to a filename.
    """
    return quote(key, safe=SEGMENT_SAFE, encoding="utf-8", errors="surrogatepass") + ext


def filename_to_key(name: Filename, ext: str) -> Key:
    """Inverse of key_to_filename.

    Only names key_to_filename can produce are accepted, so two different
    files never decode to the same key.

    Raises:
        ValueError: If name does not carry the extension or is not the
            canonical encoding of any key
    """
    if not name.endswith(ext):
        raise ValueError(f"{name!r} does not end with {ext!r}")
    key = unquote(name[: len(name) - len(ext)], encoding="utf-8", errors="surrogatepass")
    if key_to_filename(key, ext) != name:
        raise ValueError(f"{name!r} is not a canonical key encoding")
    return key


def lexicographic(a: Filename, b: Filename) -> int:
    """Default comparator: plain code-point order."""
    return (a > b) - (a < b)


def key_order(compare: Comparator, ext: str) -> Comparator:
    """Lift a comparator over logical keys to one over filenames.

    Both filenames are decoded before being handed to compare, so callers can
    order by key without accounting for the percent-encoding or extension.
    Names that decode to equal keys are ordered by filename, so distinct
    files never compare equal.
    """

    def _decode(name: Filename) -> Key:
        stem = name[: len(name) - len(ext)] if name.endswith(ext) else name
        return unquote(stem, encoding="utf-8", errors="replace")

    def _compare(a: Filename, b: Filename) -> int:
        return compare(_decode(a), _decode(b)) or lexicographic(a, b)

    return _compare
