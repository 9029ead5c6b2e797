# Minimal CLI using argparse: builds a store over a directory, loads it, runs one operation.
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dirstore.components.codec import json_decoder, json_encoder, pickle_decoder, pickle_encoder
from dirstore.core.config import DEFAULT_EXT, StoreConfig
from dirstore.core.errors import KeyNotFoundError
from dirstore.core.store import DirStore

CODECS = {
    "json": (json_encoder, json_decoder),
    "pickle": (pickle_encoder, pickle_decoder),
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dirstore", description="Read and edit a directory-backed key-value store"
    )
    p.add_argument("directory", type=Path, help="Store directory")
    p.add_argument("--ext", default=DEFAULT_EXT, help=f"File extension (default: {DEFAULT_EXT})")
    p.add_argument(
        "--codec",
        choices=sorted(CODECS),
        default="json",
        help="Value codec (default: json)",
    )
    p.add_argument("--create", action="store_true", help="Create the directory if missing")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="Print a page of values in index order")
    ls.add_argument("--offset", type=int, default=0, help="First index position")
    ls.add_argument(
        "--limit", type=int, default=-1, help="Index position to stop at (negative: end)"
    )

    sub.add_parser("keys", help="Print all keys in index order")

    get = sub.add_parser("get", help="Print the value for a key")
    get.add_argument("key")

    put = sub.add_parser("put", help="Store a value for a key")
    put.add_argument("key")
    put.add_argument("value", help="JSON value; anything that does not parse is stored as a string")

    delete = sub.add_parser("delete", help="Remove a key")
    delete.add_argument("key")

    return p


def parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=True, default=repr)


def run(store: DirStore, args: argparse.Namespace) -> None:
    if args.command == "list":
        page = store.list(args.offset, args.limit)
        print(dump({"values": page.values, "offset": page.offset, "limit": page.limit, "total": page.total}))
    elif args.command == "keys":
        for key in store.keys():
            print(key)
    elif args.command == "get":
        print(dump(store.get(args.key)))
    elif args.command == "put":
        store.put(args.key, parse_value(args.value))
    elif args.command == "delete":
        store.delete(args.key)


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    encoder, decoder = CODECS[args.codec]

    try:
        store = DirStore(
            StoreConfig(
                data_dir=args.directory,
                ext=args.ext,
                encoder=encoder,
                decoder=decoder,
                create_dir=args.create,
            )
        )
        store.load()
        run(store, args)
    except KeyNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
