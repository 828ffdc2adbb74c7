from __future__ import annotations

import os
import threading
from collections.abc import Mapping

from ._exceptions import NonUtf8PathError
from ._pattern import compile_wildcard, decode_text, has_wildcards
from ._store import TextStore


def _key(name: str | bytes | os.PathLike) -> str:
    return os.fsdecode(name)


class MemoryTextStore(TextStore):
    """:class:`TextStore` keeping every entry in a dict.

    Names are opaque keys, not paths: there are no directories, so
    :meth:`list_names` matches the whole pattern against whole keys and
    ``"dir/*"`` matches every key that starts with ``"dir/"``.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, str] = {}
        if initial:
            for name, content in initial.items():
                self.write_text(name, content)

    def list_names(self, pattern: str | bytes | os.PathLike) -> list[str]:
        text = decode_text(pattern)
        if not has_wildcards(text):
            with self._lock:
                return [text] if text in self._entries else []

        matches = compile_wildcard(text)
        with self._lock:
            names = list(self._entries)
        result: list[str] = []
        for name in names:
            try:
                candidate = decode_text(name)
            except NonUtf8PathError:
                continue
            if matches(candidate):
                result.append(name)
        return result

    def read_text(self, name: str | bytes | os.PathLike) -> str:
        key = _key(name)
        with self._lock:
            try:
                return self._entries[key]
            except KeyError:
                raise FileNotFoundError(f"No such entry: '{key}'") from None

    def write_text(self, name: str | bytes | os.PathLike, content: str) -> None:
        if not isinstance(content, str):
            raise TypeError(
                f"content must be str, not {type(content).__name__}"
            )
        key = _key(name)
        with self._lock:
            self._entries[key] = content

    def export(self) -> dict[str, str]:
        """Return a snapshot of every stored entry."""
        with self._lock:
            return dict(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, bytes, os.PathLike)):
            return False
        with self._lock:
            return _key(name) in self._entries
