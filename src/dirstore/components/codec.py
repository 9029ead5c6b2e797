"""Value codecs.

An encoder writes one value to a binary file object; a decoder reads one back.
Any callable with the same shape can be configured instead.
"""

from __future__ import annotations

import json
import pickle
from typing import IO, Any


def pickle_encoder(fp: IO[bytes], value: Any) -> None:
    """Default encoder: pickle with the highest protocol."""
    pickle.dump(value, fp, protocol=pickle.HIGHEST_PROTOCOL)


def pickle_decoder(fp: IO[bytes]) -> Any:
    """Default decoder."""
    return pickle.load(fp)


def json_encoder(fp: IO[bytes], value: Any) -> None:
    """Write value as UTF-8 JSON.

    The value is serialized fully before anything is written, so an
    unserializable value leaves the file empty rather than half written.
    """
    data = json.dumps(value, ensure_ascii=False, sort_keys=True)
    fp.write(data.encode("utf-8"))


def json_decoder(fp: IO[bytes]) -> Any:
    return json.loads(fp.read())
