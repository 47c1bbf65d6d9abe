# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Glob-based file enumeration rooted at a :class:`ChainablePath`."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cache
from os import PathLike
from pathlib import Path
from typing import Protocol, runtime_checkable

from .chainable import ChainablePath
from .errors import ArgumentError, InvalidPathError

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class GlobMatcher(Protocol):
    """Capability producing the files under a root that match one pattern."""

    def match(self, root: str, pattern: str) -> Sequence[str]:
        """Return paths of files beneath ``root`` matching ``pattern``.

        Args:
            root: Directory the pattern is evaluated against.
            pattern: Glob supporting ``*``, ``**`` and ``?``.

        Returns:
            Sequence[str]: Matching file paths in traversal order.
        """
        ...


class PathlibGlobMatcher:
    """:class:`GlobMatcher` backed by :meth:`pathlib.Path.glob`."""

    def match(self, root: str, pattern: str) -> Sequence[str]:
        """Return sorted file paths beneath ``root`` matching ``pattern``.

        Directories are never reported and a missing ``root`` yields no
        matches.
        """

        base = Path(root)
        if not base.is_dir():
            return ()
        return tuple(sorted(str(candidate) for candidate in base.glob(pattern) if candidate.is_file()))


@cache
def default_matcher() -> PathlibGlobMatcher:
    """Return the process-wide :class:`PathlibGlobMatcher` instance."""

    return PathlibGlobMatcher()


def glob_files(
    root: str | PathLike[str] | ChainablePath,
    *patterns: str,
    matcher: GlobMatcher | None = None,
) -> list[ChainablePath]:
    """Return the files beneath ``root`` matching any of ``patterns``.

    Results are pattern-major: every match of the first pattern in traversal
    order, then the new matches of the second pattern, and so on. A file
    matched by several patterns is reported once, at its first position.

    Args:
        root: Directory the patterns are evaluated against.
        *patterns: One or more glob patterns.
        matcher: Glob capability; defaults to :class:`PathlibGlobMatcher`.

    Returns:
        list[ChainablePath]: Matching files; empty when nothing matches.

    Raises:
        ArgumentError: If no pattern is given or any pattern is empty.
        InvalidPathError: If ``root`` is empty or one of the ``EMPTY``/``NULL``
            sentinels.
    """

    if not patterns:
        raise ArgumentError("At least one pattern must be provided", parameter="patterns")
    if any(not pattern for pattern in patterns):
        raise ArgumentError("Patterns must not be null or empty", parameter="patterns")
    base = ChainablePath.from_string(root)
    if base.is_empty or base.is_null:
        raise InvalidPathError("Glob root must not be the empty or null path", parameter="root")
    active = default_matcher() if matcher is None else matcher
    results: list[ChainablePath] = []
    seen: set[ChainablePath] = set()
    for pattern in patterns:
        matches = active.match(base.raw, pattern)
        LOGGER.debug("pattern %s matched %d file(s) under %s", pattern, len(matches), base)
        for match in matches:
            path = ChainablePath.from_string(match)
            if path in seen:
                continue
            seen.add(path)
            results.append(path)
    return results


__all__ = ["GlobMatcher", "PathlibGlobMatcher", "default_matcher", "glob_files"]
