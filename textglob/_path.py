from __future__ import annotations

import enum
import logging
import os
from typing import NamedTuple

from ._exceptions import WildcardInParentError
from ._pattern import decode_text, has_wildcards

logger = logging.getLogger(__name__)

# Drive and UNC prefixes exist only on Windows; elsewhere this never splits.
_splitdrive = os.path.splitdrive


class ComponentKind(enum.Enum):
    PREFIX = "prefix"
    ROOT = "root"
    CURRENT = "current"
    PARENT = "parent"
    NAMED = "named"


class PathComponent(NamedTuple):
    kind: ComponentKind
    text: str


def unify_separators(path: str) -> str:
    return path.replace("\\", "/")


def split_components(path: str) -> list[PathComponent]:
    """Split *path* into its structural components.

    Backslashes count as separators. Empty segments are dropped, and so is
    every ``.`` except a leading one. A drive or UNC prefix is recognized
    only where the platform has them, so on POSIX ``c:`` is a plain name
    and ``//tmp`` is the root followed by ``tmp``.
    """
    converted = unify_separators(path)
    drive, rest = _splitdrive(converted)
    components: list[PathComponent] = []
    if drive:
        components.append(PathComponent(ComponentKind.PREFIX, drive))
    if rest.startswith("/"):
        components.append(PathComponent(ComponentKind.ROOT, "/"))
    for part in rest.split("/"):
        if not part:
            continue
        if part == ".":
            if not components:
                components.append(PathComponent(ComponentKind.CURRENT, part))
        elif part == "..":
            components.append(PathComponent(ComponentKind.PARENT, part))
        else:
            components.append(PathComponent(ComponentKind.NAMED, part))
    return components


def join_components(components: list[PathComponent]) -> str:
    prefix = ""
    root = ""
    names: list[str] = []
    for component in components:
        if component.kind is ComponentKind.PREFIX:
            prefix = component.text
        elif component.kind is ComponentKind.ROOT:
            root = "/"
        else:
            names.append(component.text)
    return prefix + root + "/".join(names)


def split_pattern(pattern: str | bytes | os.PathLike) -> tuple[str, str]:
    """Split a glob pattern into ``(parent, last)``.

    Components are visited from the end of the path toward the root; the
    first one visited is the last component and is the only one allowed to
    carry wildcards. ``parent`` is ``""`` when the pattern has a single
    component.

    Raises
    ------
    NonUtf8PathError
        The pattern is not valid UTF-8 text.
    WildcardInParentError
        A prefix or named component other than the last contains a wildcard.
    """
    text = decode_text(pattern)
    components = split_components(text)
    if not components:
        return "", ""
    is_last = True
    for component in reversed(components):
        logger.debug("component: %r", component)
        if (
            not is_last
            and component.kind in (ComponentKind.PREFIX, ComponentKind.NAMED)
            and has_wildcards(component.text)
        ):
            raise WildcardInParentError(text, component.text)
        is_last = False
    return join_components(components[:-1]), components[-1].text


def join_child(parent: str, name: str) -> str:
    """Append an entry name to a parent as written in a pattern."""
    if not parent:
        return name
    if parent.endswith("/"):
        return parent + name
    drive, rest = _splitdrive(parent)
    if drive and not rest and not drive.startswith("/"):
        # Drive-relative parent such as "c:".
        return parent + name
    return parent + "/" + name
