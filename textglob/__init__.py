from ._exceptions import (
    NonexistentParentError,
    NonUtf8PathError,
    PathError,
    PatternCompileError,
    WildcardInParentError,
)
from ._fs import FileTextStore
from ._memory import MemoryTextStore
from ._pattern import compile_wildcard, has_wildcards
from ._provider import DirectoryEntry, DirectoryProvider, OSDirectoryProvider
from ._store import TextStore

__all__ = [
    "TextStore",
    "FileTextStore",
    "MemoryTextStore",
    "DirectoryEntry",
    "DirectoryProvider",
    "OSDirectoryProvider",
    "PathError",
    "NonUtf8PathError",
    "WildcardInParentError",
    "NonexistentParentError",
    "PatternCompileError",
    "compile_wildcard",
    "has_wildcards",
]
__version__ = "0.1.0"
