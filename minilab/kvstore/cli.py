"""Interactive command shell for the key-value store."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass

from minilab.kvstore.store import KVStore

DEFAULT_STORE_FILE = "store.txt"
BANNER = "Mini Key-Value Store. Commands: PUT, GET, DEL, LIST, EXIT"
NOT_FOUND = "Key not found."

_WORD_PATTERN = re.compile(r"\s*(\S*)(.*)", re.DOTALL)


@dataclass(frozen=True)
class Reply:
    """Lines to show for a command, and whether the session should end."""

    lines: tuple[str, ...] = ()
    done: bool = False


def _split_word(text: str) -> tuple[str, str]:
    match = _WORD_PATTERN.match(text)
    assert match is not None
    return match.group(1), match.group(2)


def execute(store: KVStore, line: str) -> Reply:
    """Run one command line against ``store`` and describe the result.

    ``EXIT`` only signals the end of the session; saving is left to the caller.
    """
    command, rest = _split_word(line)

    if command == "PUT":
        key, value = _split_word(rest)
        if value.startswith(" "):
            value = value[1:]
        store.put(key, value)
        return Reply((f"Stored [{key} => {value}]",))
    if command == "GET":
        key, _ = _split_word(rest)
        try:
            return Reply((store.get(key),))
        except KeyError:
            return Reply((NOT_FOUND,))
    if command == "DEL":
        key, _ = _split_word(rest)
        store.delete(key)
        return Reply((f"Deleted key [{key}]",))
    if command == "LIST":
        return Reply(tuple(f"{key} => {value}" for key, value in store.items()))
    if command == "EXIT":
        return Reply(("Data saved successfully.",), done=True)
    return Reply(("Unknown command.",))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell, loading and saving the store file."""
    parser = argparse.ArgumentParser(
        prog="minilab-kv",
        description="Interactive key-value store persisted to a text file.",
    )
    parser.add_argument(
        "--file",
        default=DEFAULT_STORE_FILE,
        help=f"store file (default: {DEFAULT_STORE_FILE})",
    )
    args = parser.parse_args(argv)

    store = KVStore()
    if not store.load(args.file):
        print("No existing store file. Starting fresh.")

    print(BANNER)
    while True:
        try:
            line = input("> ")
        except EOFError:
            line = "EXIT"
        reply = execute(store, line)
        if reply.done:
            store.save(args.file)
        for text in reply.lines:
            print(text)
        if reply.done:
            return 0