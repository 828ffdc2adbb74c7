import os

import pytest


@pytest.fixture
def playground(tmp_path):
    """dummy1.fil, dummy2.fil, notes.txt and a subdirectory named sub.fil."""
    for name in ("dummy1.fil", "dummy2.fil", "notes.txt"):
        (tmp_path / name).write_text(name, encoding="utf-8")
    (tmp_path / "sub.fil").mkdir()
    return tmp_path


@pytest.fixture
def make_symlink():
    def _make(target, link) -> None:
        try:
            os.symlink(target, link)
        except (OSError, NotImplementedError) as exc:
            pytest.skip(f"symlinks not available: {exc}")

    return _make

