from __future__ import annotations

import os
from abc import ABC, abstractmethod


class TextStore(ABC):
    """Whole-file text storage addressed by name.

    Implemented by :class:`~textglob.FileTextStore` for the real file system
    and by :class:`~textglob.MemoryTextStore` as an in-memory double. Callers
    should depend on this interface only.
    """

    @abstractmethod
    def list_names(self, pattern: str | bytes | os.PathLike) -> list[str]:
        """Return the existing names matching *pattern*, in no particular order.

        Only the last path component of *pattern* may contain the wildcards
        ``*`` and ``?``. A pattern without wildcards yields itself when it
        exists and nothing otherwise.
        """

    @abstractmethod
    def read_text(self, name: str | bytes | os.PathLike) -> str:
        """Return the whole content stored under *name*.

        Raises :class:`FileNotFoundError` when nothing is stored there.
        """

    @abstractmethod
    def write_text(self, name: str | bytes | os.PathLike, content: str) -> None:
        """Replace the content stored under *name* with *content*."""
