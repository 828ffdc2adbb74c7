"""Wildcard detection and translation of a name pattern into a matcher.

Only ``*`` (zero or more characters) and ``?`` (exactly one character) are
wildcards. Every other character matches itself, so ``a.txt`` never matches
``axtxt`` and ``[`` has no special meaning.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable

from ._exceptions import NonUtf8PathError, PatternCompileError

_WILDCARDS = re.compile(r"[?*]")


def decode_text(path: str | bytes | os.PathLike) -> str:
    """Return *path* as text, raising :class:`NonUtf8PathError` if it is not UTF-8.

    ``bytes`` must decode strictly. A ``str`` is rejected when it carries
    surrogate escapes, which is how Python represents undecodable OS names.
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise NonUtf8PathError(raw) from None
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        raise NonUtf8PathError(raw) from None
    return raw


def has_wildcards(segment: str | bytes | os.PathLike) -> bool:
    return _WILDCARDS.search(decode_text(segment)) is not None


def translate(pattern: str) -> str:
    """Translate a wildcard pattern into an anchored regular expression."""
    parts = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return r"\A" + "".join(parts) + r"\Z"


def compile_wildcard(pattern: str) -> Callable[[str], bool]:
    """Build a predicate that is true for names matching *pattern* in full."""
    try:
        regex = re.compile(translate(pattern), re.DOTALL)
    except re.error as exc:
        raise PatternCompileError(pattern, str(exc)) from exc

    def matches(name: str) -> bool:
        return regex.match(name) is not None

    return matches
