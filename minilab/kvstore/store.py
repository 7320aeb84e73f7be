"""Thread-safe in-memory key-value store with a simple line-based file format."""

from __future__ import annotations

import os
import threading
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class KVStore:
    """Maps string keys to string values; every operation holds a lock.

    On disk each entry is two lines: the key, then the value.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    def put(self, key: str, value: str) -> None:
        """Insert or replace the value stored under ``key``."""
        with self._lock:
            self._data[key] = value

    def get(self, key: str) -> str:
        """Return the value under ``key``; raise ``KeyError`` if absent."""
        with self._lock:
            return self._data[key]

    def delete(self, key: str) -> None:
        """Remove ``key`` if present; missing keys are ignored."""
        with self._lock:
            self._data.pop(key, None)

    def items(self) -> list[tuple[str, str]]:
        """Snapshot of all ``(key, value)`` pairs."""
        with self._lock:
            return list(self._data.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def load(self, path: PathLike) -> bool:
        """Merge entries from ``path`` into the store.

        Returns ``False`` when the file does not exist, ``True`` otherwise.
        A trailing key without a value line is ignored.
        """
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except FileNotFoundError:
            return False

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        with self._lock:
            self._data.update(zip(lines[0::2], lines[1::2]))
        return True

    def save(self, path: PathLike) -> None:
        """Write every entry to ``path``, replacing its contents."""
        with self._lock:
            payload = "".join(f"{key}\n{value}\n" for key, value in self._data.items())
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(payload)