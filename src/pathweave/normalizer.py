# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse raw path strings into their canonical rooted-or-relative form.

The canonical form uses :data:`SEPARATOR` exclusively, records the root (if
any) with exactly one trailing separator, and stores the remaining components
with ``.`` and ``..`` already resolved. Rooted paths clamp excess ``..``
components at the root; relative paths keep leading ``..`` components that
cannot be collapsed.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import InvalidPathError

SEPARATOR: Final[str] = os.sep
RECOGNISED_SEPARATORS: Final[tuple[str, ...]] = ("/", "\\")
CURRENT_DIRECTORY: Final[str] = "."
PARENT_DIRECTORY: Final[str] = ".."

_DRIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:")
_UNC_PREFIX: Final[str] = SEPARATOR * 2


class PathKind(str, Enum):
    """Enumerate the variants a canonical path can take."""

    ROOTED = "rooted"
    RELATIVE = "relative"
    EMPTY = "empty"
    NULL = "null"


@dataclass(frozen=True, slots=True)
class CanonicalPath:
    """Fully normalised path representation.

    Attributes:
        kind: Variant describing whether the path is rooted, relative or one of
            the ``EMPTY``/``NULL`` sentinels.
        root: Root prefix ending in exactly one separator; blank unless
            ``kind`` is :attr:`PathKind.ROOTED`.
        segments: Resolved components following the root.
    """

    kind: PathKind
    root: str = ""
    segments: tuple[str, ...] = ()

    @property
    def raw(self) -> str:
        """Return the canonical string form."""

        if self.kind in (PathKind.EMPTY, PathKind.NULL):
            return ""
        body = SEPARATOR.join(self.segments)
        if self.kind is PathKind.ROOTED:
            return f"{self.root}{body}"
        return body or CURRENT_DIRECTORY

    @property
    def is_rooted(self) -> bool:
        """Return ``True`` when the path is anchored to a root."""

        return self.kind is PathKind.ROOTED

    def with_segments(self, segments: Sequence[str]) -> CanonicalPath:
        """Return a copy of the path with ``segments`` replacing its components.

        Args:
            segments: Already resolved components to store.

        Returns:
            CanonicalPath: Path sharing this instance's root. A relative path
            without components collapses to the ``EMPTY`` variant.
        """

        if self.kind is PathKind.ROOTED:
            return CanonicalPath(PathKind.ROOTED, self.root, tuple(segments))
        if not segments:
            return EMPTY_CANONICAL
        return CanonicalPath(PathKind.RELATIVE, "", tuple(segments))


EMPTY_CANONICAL: Final[CanonicalPath] = CanonicalPath(PathKind.EMPTY)
NULL_CANONICAL: Final[CanonicalPath] = CanonicalPath(PathKind.NULL)


def unify_separators(text: str) -> str:
    """Return ``text`` with every recognised separator replaced by :data:`SEPARATOR`."""

    for candidate in RECOGNISED_SEPARATORS:
        if candidate != SEPARATOR:
            text = text.replace(candidate, SEPARATOR)
    return text


def split_root(text: str) -> tuple[str, str]:
    """Split separator-unified ``text`` into its root and the remainder.

    Args:
        text: Path string whose separators were already unified.

    Returns:
        tuple[str, str]: Canonical root (blank for relative paths) and the
        remaining text following it.
    """

    if _DRIVE_PATTERN.match(text):
        return f"{text[:2]}{SEPARATOR}", text[2:]
    if text.startswith(_UNC_PREFIX):
        pieces = text[len(_UNC_PREFIX) :].split(SEPARATOR, 2)
        server = pieces[0]
        if not server:
            return SEPARATOR, text.lstrip(SEPARATOR)
        share = pieces[1] if len(pieces) > 1 else ""
        remainder = pieces[2] if len(pieces) > 2 else ""
        if not share:
            return f"{_UNC_PREFIX}{server}{SEPARATOR}", remainder
        return f"{_UNC_PREFIX}{server}{SEPARATOR}{share}{SEPARATOR}", remainder
    if text.startswith(SEPARATOR):
        return SEPARATOR, text.lstrip(SEPARATOR)
    return "", text


def resolve_segments(existing: Iterable[str], components: Iterable[str], *, rooted: bool) -> tuple[str, ...]:
    """Resolve ``components`` on top of ``existing`` collapsing traversals.

    Args:
        existing: Components that were already resolved.
        components: Raw components to append. Blank, whitespace-only and ``.``
            entries are dropped.
        rooted: When ``True`` a ``..`` that would climb above the root is
            discarded; otherwise it is retained as a leading ``..``.

    Returns:
        tuple[str, ...]: Resolved components.
    """

    resolved = list(existing)
    for component in components:
        if not component.strip() or component == CURRENT_DIRECTORY:
            continue
        if component != PARENT_DIRECTORY:
            resolved.append(component)
        elif resolved and resolved[-1] != PARENT_DIRECTORY:
            resolved.pop()
        elif not rooted:
            resolved.append(PARENT_DIRECTORY)
    return tuple(resolved)


def normalize(raw: str | None) -> CanonicalPath:
    """Parse ``raw`` into its canonical form.

    Args:
        raw: Path string to parse.

    Returns:
        CanonicalPath: Rooted or relative canonical representation. A relative
        path whose components cancel out is represented by ``.``.

    Raises:
        InvalidPathError: If ``raw`` is ``None``, empty or whitespace only.
    """

    if raw is None or not raw.strip():
        raise InvalidPathError("Path must not be null or empty", parameter="path")
    root, remainder = split_root(unify_separators(raw))
    rooted = bool(root)
    segments = resolve_segments((), remainder.split(SEPARATOR), rooted=rooted)
    kind = PathKind.ROOTED if rooted else PathKind.RELATIVE
    return CanonicalPath(kind, root, segments)


def append(base: CanonicalPath, segment: str) -> CanonicalPath:
    """Append ``segment`` to ``base`` as if joined by a separator and re-parsed.

    The segment is concatenated literally: a rooted-looking segment is not
    substituted for ``base``. When ``base`` is the ``EMPTY`` variant or a
    relative path whose components cancelled out (``.``), the segment is
    parsed on its own so a root may be introduced.

    Args:
        base: Canonical path to extend.
        segment: Non-blank text to append.

    Returns:
        CanonicalPath: Combined canonical path.
    """

    if base.kind is PathKind.EMPTY or not (base.root or base.segments):
        return normalize(segment)
    components = unify_separators(segment).split(SEPARATOR)
    return CanonicalPath(
        base.kind,
        base.root,
        resolve_segments(base.segments, components, rooted=base.is_rooted),
    )


__all__ = [
    "CURRENT_DIRECTORY",
    "EMPTY_CANONICAL",
    "NULL_CANONICAL",
    "PARENT_DIRECTORY",
    "RECOGNISED_SEPARATORS",
    "SEPARATOR",
    "CanonicalPath",
    "PathKind",
    "append",
    "normalize",
    "resolve_segments",
    "split_root",
    "unify_separators",
]
