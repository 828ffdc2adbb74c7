from __future__ import annotations

import codecs
import logging
import os

from ._exceptions import NonexistentParentError, NonUtf8PathError
from ._path import join_child, split_pattern, unify_separators
from ._pattern import compile_wildcard, decode_text, has_wildcards
from ._provider import DirectoryEntry, DirectoryProvider, OSDirectoryProvider
from ._store import TextStore

logger = logging.getLogger(__name__)


class FileTextStore(TextStore):
    """:class:`TextStore` over the real file system.

    Parameters
    ----------
    encoding:
        Text encoding used by :meth:`read_text` and :meth:`write_text`.
    errors:
        Codec error handling (default ``"strict"``).
    provider:
        Source of existence checks and directory listings for
        :meth:`list_names`. Defaults to :class:`OSDirectoryProvider`.
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        errors: str = "strict",
        provider: DirectoryProvider | None = None,
    ) -> None:
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {encoding!r}") from None
        try:
            codecs.lookup_error(errors)
        except LookupError:
            raise ValueError(f"Unknown error handler: {errors!r}") from None
        self._encoding = encoding
        self._errors = errors
        self._provider: DirectoryProvider = (
            provider if provider is not None else OSDirectoryProvider()
        )

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def errors(self) -> str:
        return self._errors

    def list_names(self, pattern: str | bytes | os.PathLike) -> list[str]:
        """Return the plain files matching *pattern*.

        Without wildcards the pattern itself is returned when it names a plain
        file; any error while checking (a permission error, say) counts as
        "no such file". With wildcards, every plain file or symlink to a plain
        file in the parent directory whose name matches the last component is
        returned, joined to the parent as written in the pattern.

        Raises
        ------
        NonUtf8PathError
            The pattern is not valid UTF-8 text.
        WildcardInParentError
            A wildcard occurs before the last component.
        NonexistentParentError
            The parent directory does not exist.
        OSError
            Listing the parent directory failed.
        """
        text = decode_text(pattern)
        if not has_wildcards(text):
            if self._provider.is_file(unify_separators(text)):
                return [text]
            return []

        parent, last = split_pattern(text)
        directory = parent or "."
        if not self._provider.is_dir(directory):
            raise NonexistentParentError(text, directory)

        matches = compile_wildcard(last)
        logger.debug("scanning %r for %r", directory, last)
        names: list[str] = []
        for entry in self._provider.scandir(directory):
            name = self._file_name(entry)
            if name is not None and matches(name):
                names.append(join_child(parent, name))
        return names

    def _file_name(self, entry: DirectoryEntry) -> str | None:
        """Return the entry's name if it is a plain file or links to one."""
        try:
            name = decode_text(entry.name)
        except NonUtf8PathError:
            logger.debug("skipping entry with undecodable name %r", entry.name)
            return None
        try:
            if entry.is_symlink():
                # Follows the link; False for dangling links.
                is_file = entry.is_file()
            else:
                is_file = entry.is_file(follow_symlinks=False)
        except OSError as exc:
            logger.debug("skipping entry %r: %s", name, exc)
            return None
        return name if is_file else None

    def read_text(self, name: str | bytes | os.PathLike) -> str:
        with open(
            name, "r", encoding=self._encoding, errors=self._errors, newline=""
        ) as f:
            return f.read()

    def write_text(self, name: str | bytes | os.PathLike, content: str) -> None:
        with open(
            name, "w", encoding=self._encoding, errors=self._errors, newline=""
        ) as f:
            f.write(content)
