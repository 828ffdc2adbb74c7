"""Directory access consumed by :class:`~textglob.FileTextStore`.

The file-system backend never touches :mod:`os` directly for existence checks
or enumeration; it goes through a :class:`DirectoryProvider` so tests can
substitute a fake directory tree.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Protocol


class DirectoryEntry(Protocol):
    """The subset of :class:`os.DirEntry` the resolver relies on."""

    @property
    def name(self) -> str: ...

    def is_file(self, *, follow_symlinks: bool = True) -> bool: ...

    def is_symlink(self) -> bool: ...


class DirectoryProvider(Protocol):
    def is_file(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def scandir(self, path: str) -> Iterator[DirectoryEntry]: ...


class OSDirectoryProvider:
    """:class:`DirectoryProvider` backed by the real file system."""

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def scandir(self, path: str) -> Iterator[os.DirEntry[str]]:
        with os.scandir(path) as it:
            yield from it
