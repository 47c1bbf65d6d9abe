# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Selection and ancestor-walk algorithms built on :class:`ChainablePath`."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from fnmatch import fnmatchcase
from os import PathLike

from .chainable import EMPTY, NULL, ChainablePath
from .environment import PathEnvironment
from .errors import ArgumentError, InvalidArgumentError
from .filesystem import FileSystem, resolve_filesystem

LOGGER = logging.getLogger(__name__)

_Candidate = str | PathLike[str] | ChainablePath


def find_first(
    paths: Sequence[_Candidate] | None,
    *,
    filesystem: FileSystem | None = None,
) -> ChainablePath:
    """Return the first candidate that exists as a file or directory.

    Args:
        paths: Ordered candidates; input order is the only tie-break.
        filesystem: Filesystem used for existence checks.

    Returns:
        ChainablePath: First existing candidate, or ``EMPTY`` when none exist.

    Raises:
        ArgumentError: If ``paths`` is ``None`` or empty.
    """

    if not paths:
        raise ArgumentError("At least one path must be provided", parameter="paths")
    fs = resolve_filesystem(filesystem)
    for candidate in paths:
        path = ChainablePath.from_string(candidate)
        if path.exists(fs):
            LOGGER.debug("first existing candidate is %s", path)
            return path
    LOGGER.debug("none of %d candidates exist", len(paths))
    return EMPTY


def resolve_file(
    path: _Candidate,
    file_name: str | None,
    *,
    filesystem: FileSystem | None = None,
) -> ChainablePath:
    """Locate ``file_name`` at or directly inside ``path`` ignoring case.

    Args:
        path: File or directory to inspect.
        file_name: Name of the file to locate.
        filesystem: Filesystem used for lookups.

    Returns:
        ChainablePath: ``path`` itself when it is a file named ``file_name``,
        the matching child file when ``path`` is a directory containing one,
        otherwise ``EMPTY``.

    Raises:
        InvalidArgumentError: If ``file_name`` is ``None`` or empty.
    """

    if not file_name:
        raise InvalidArgumentError("File name must not be null or empty", parameter="file_name")
    fs = resolve_filesystem(filesystem)
    location = ChainablePath.from_string(path)
    if location.is_file(fs):
        return location if location.has_name(file_name) else EMPTY
    if location.is_directory(fs):
        wanted = file_name.casefold()
        for name in fs.list_immediate_files(location.raw):
            if name.casefold() == wanted:
                return location / name
    return EMPTY


def find_parent_with_file_matching(
    path: _Candidate,
    *wildcards: str,
    filesystem: FileSystem | None = None,
    environment: PathEnvironment | None = None,
) -> ChainablePath:
    """Return the closest ancestor directory holding a file matching a wildcard.

    The walk starts at ``path`` when it is a directory, otherwise at its
    containing directory, and climbs towards the root. Each directory's
    immediate files are compared against every wildcard using ``*``/``?``
    semantics without regard to case. Every other character, ``[`` included,
    matches itself.

    Args:
        path: Starting file or directory. Relative paths are anchored to the
            working directory first.
        *wildcards: One or more file name patterns.
        filesystem: Filesystem used to list directories.
        environment: Process snapshot used to anchor relative paths.

    Returns:
        ChainablePath: Closest matching ancestor, or ``NULL`` when the walk
        reaches the root without a match.

    Raises:
        ArgumentError: If no wildcard is given or any wildcard is empty.
    """

    if not wildcards:
        raise ArgumentError("At least one wildcard must be provided", parameter="wildcards")
    if any(not wildcard for wildcard in wildcards):
        raise ArgumentError("Wildcards must not be null or empty", parameter="wildcards")
    fs = resolve_filesystem(filesystem)
    patterns = tuple(_escape_brackets(wildcard.casefold()) for wildcard in wildcards)
    start = ChainablePath.from_string(path).to_absolute(environment=environment)
    if not start.is_directory(fs):
        start = start.directory
    for ancestor in _iter_ancestors(start):
        names = fs.list_immediate_files(ancestor.raw)
        if _any_match(names, patterns):
            LOGGER.debug("found %s in %s", ", ".join(wildcards), ancestor)
            return ancestor
    LOGGER.debug("no ancestor of %s holds %s", start, ", ".join(wildcards))
    return NULL


def _iter_ancestors(start: ChainablePath) -> Iterator[ChainablePath]:
    current = start
    while not current.is_empty:
        yield current
        current = current.directory


def _escape_brackets(wildcard: str) -> str:
    # Only * and ? are wildcards; fnmatch would read [...] as a character class.
    return wildcard.replace("[", "[[]")


def _any_match(names: Iterable[str], patterns: Sequence[str]) -> bool:
    return any(fnmatchcase(name.casefold(), pattern) for name in names for pattern in patterns)


__all__ = ["find_first", "find_parent_with_file_matching", "resolve_file"]
