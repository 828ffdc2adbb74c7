"""pytest fixture plugin.

Installed as a ``pytest11`` entry point, so the fixtures are available as soon
as the package is installed::

    def test_something(memory_store):
        memory_store.write_text("a.txt", "hello")
        assert memory_store.list_names("*.txt") == ["a.txt"]
"""

import pytest

from ._fs import FileTextStore
from ._memory import MemoryTextStore


@pytest.fixture
def memory_store() -> MemoryTextStore:
    """An empty :class:`MemoryTextStore`, independent per test."""
    return MemoryTextStore()


@pytest.fixture
def file_store() -> FileTextStore:
    """A :class:`FileTextStore` with the default UTF-8 configuration.

    Combine with ``tmp_path`` to keep the test inside a scratch directory.
    """
    return FileTextStore()
