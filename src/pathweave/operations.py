# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem mutations expressed in terms of :class:`ChainablePath` values."""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Iterable

from .chainable import ChainablePath
from .errors import InvalidArgumentError
from .filesystem import FileSystem, resolve_filesystem

LOGGER = logging.getLogger(__name__)


def create_directory_recursively(path: ChainablePath, *, filesystem: FileSystem | None = None) -> None:
    """Create the directory at ``path`` including any missing parents."""

    resolve_filesystem(filesystem).create_directory(path.raw)


def delete_file_or_directory(path: ChainablePath, *, filesystem: FileSystem | None = None) -> None:
    """Delete the file or directory tree at ``path``.

    Missing paths are ignored.
    """

    fs = resolve_filesystem(filesystem)
    if path.is_file(fs):
        fs.delete_file(path.raw)
    elif path.is_directory(fs):
        fs.delete_directory_recursively(path.raw)
    else:
        LOGGER.debug("nothing to delete at %s", path)


def delete_files_or_directories(paths: Iterable[ChainablePath], *, filesystem: FileSystem | None = None) -> None:
    """Delete every file or directory tree in ``paths``."""

    fs = resolve_filesystem(filesystem)
    for path in paths:
        delete_file_or_directory(path, filesystem=fs)


def move_file_or_directory(
    source: ChainablePath,
    destination_directory: ChainablePath,
    new_name: str | None = None,
    *,
    filesystem: FileSystem | None = None,
) -> ChainablePath:
    """Move ``source`` into ``destination_directory``.

    Args:
        source: File or directory to move.
        destination_directory: Directory receiving the entry.
        new_name: Name to give the entry at its destination; the current name
            is kept when omitted.
        filesystem: Filesystem performing the move.

    Returns:
        ChainablePath: Location of the entry after the move.

    Raises:
        InvalidArgumentError: If ``new_name`` is given but blank. Raised
            before the filesystem is touched.
        FileExistsError: If an entry already occupies the target location.
            Nothing is moved in that case.
    """

    if new_name is not None and not new_name.strip():
        raise InvalidArgumentError("Renaming requires a valid name", parameter="new_name")
    fs = resolve_filesystem(filesystem)
    target = destination_directory / (source.name if new_name is None else new_name)
    if fs.exists(target.raw):
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), target.raw)
    if source.is_file(fs):
        fs.move_file(source.raw, target.raw)
    else:
        fs.move_directory(source.raw, target.raw)
    return target


def move_files_or_directories(
    paths: Iterable[ChainablePath],
    destination_directory: ChainablePath,
    *,
    filesystem: FileSystem | None = None,
) -> list[ChainablePath]:
    """Move every entry in ``paths`` into ``destination_directory`` keeping names."""

    fs = resolve_filesystem(filesystem)
    return [move_file_or_directory(path, destination_directory, filesystem=fs) for path in paths]


__all__ = [
    "create_directory_recursively",
    "delete_file_or_directory",
    "delete_files_or_directories",
    "move_file_or_directory",
    "move_files_or_directories",
]
