# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem capabilities consumed by path queries and search algorithms."""

from __future__ import annotations

import errno
import logging
import os
import shutil
from collections.abc import Sequence
from datetime import UTC, datetime
from functools import cache
from os import PathLike
from typing import Final, Protocol, runtime_checkable

LOGGER = logging.getLogger(__name__)

_Pathish = str | PathLike[str]

MISSING_TIMESTAMP: Final[datetime] = datetime.min.replace(tzinfo=UTC)


@runtime_checkable
class FileSystem(Protocol):
    """Capabilities required from the host filesystem."""

    def exists(self, path: _Pathish) -> bool:
        """Return ``True`` when ``path`` refers to a file or directory."""
        ...

    def is_file(self, path: _Pathish) -> bool:
        """Return ``True`` when ``path`` refers to an existing file."""
        ...

    def is_directory(self, path: _Pathish) -> bool:
        """Return ``True`` when ``path`` refers to an existing directory."""
        ...

    def list_immediate_files(self, directory: _Pathish) -> Sequence[str]:
        """Return the names of the files directly inside ``directory``."""
        ...

    def last_write_time_utc(self, path: _Pathish) -> datetime:
        """Return the modification time of ``path`` or :data:`MISSING_TIMESTAMP`."""
        ...

    def create_directory(self, path: _Pathish) -> None:
        """Create ``path`` and any missing parents."""
        ...

    def move_file(self, source: _Pathish, destination: _Pathish) -> None:
        """Move the file at ``source`` to ``destination``, which must not exist."""
        ...

    def move_directory(self, source: _Pathish, destination: _Pathish) -> None:
        """Move the directory at ``source`` to ``destination``, which must not exist."""
        ...

    def delete_file(self, path: _Pathish) -> None:
        """Delete the file at ``path``."""
        ...

    def delete_directory_recursively(self, path: _Pathish) -> None:
        """Delete the directory at ``path`` together with its contents."""
        ...


class LocalFileSystem:
    """:class:`FileSystem` implementation backed by the host operating system."""

    def exists(self, path: _Pathish) -> bool:
        """Return ``True`` when ``path`` refers to a file or directory.

        Args:
            path: Location to check.

        Returns:
            bool: ``True`` if the location exists.
        """

        return os.path.exists(path)

    def is_file(self, path: _Pathish) -> bool:
        """Return ``True`` when ``path`` refers to an existing file."""

        return os.path.isfile(path)

    def is_directory(self, path: _Pathish) -> bool:
        """Return ``True`` when ``path`` refers to an existing directory."""

        return os.path.isdir(path)

    def list_immediate_files(self, directory: _Pathish) -> Sequence[str]:
        """Return the sorted names of files directly inside ``directory``.

        Args:
            directory: Directory whose entries should be listed.

        Returns:
            Sequence[str]: File names; empty when ``directory`` is missing.
        """

        if not os.path.isdir(directory):
            return ()
        with os.scandir(directory) as entries:
            return tuple(sorted(entry.name for entry in entries if entry.is_file()))

    def last_write_time_utc(self, path: _Pathish) -> datetime:
        """Return the modification time of ``path`` in UTC.

        Args:
            path: Location to inspect.

        Returns:
            datetime: Timezone-aware modification time, or
            :data:`MISSING_TIMESTAMP` when ``path`` does not exist.
        """

        try:
            stamp = os.stat(path).st_mtime
        except (FileNotFoundError, NotADirectoryError):
            return MISSING_TIMESTAMP
        return datetime.fromtimestamp(stamp, tz=UTC)

    def create_directory(self, path: _Pathish) -> None:
        """Create ``path`` and any missing parents."""

        LOGGER.debug("creating directory %s", path)
        os.makedirs(path, exist_ok=True)

    def move_file(self, source: _Pathish, destination: _Pathish) -> None:
        """Move the file at ``source`` to ``destination``.

        Raises:
            FileExistsError: If ``destination`` already exists.
        """

        LOGGER.debug("moving file %s -> %s", source, destination)
        _move_to_vacant(source, destination)

    def move_directory(self, source: _Pathish, destination: _Pathish) -> None:
        """Move the directory at ``source`` to ``destination``.

        Raises:
            FileExistsError: If ``destination`` already exists.
        """

        LOGGER.debug("moving directory %s -> %s", source, destination)
        _move_to_vacant(source, destination)

    def delete_file(self, path: _Pathish) -> None:
        """Delete the file at ``path``."""

        LOGGER.debug("deleting file %s", path)
        os.remove(path)

    def delete_directory_recursively(self, path: _Pathish) -> None:
        """Delete the directory at ``path`` together with its contents."""

        LOGGER.debug("deleting directory tree %s", path)
        shutil.rmtree(path)


def _move_to_vacant(source: _Pathish, destination: _Pathish) -> None:
    # shutil.move nests into an existing directory and replaces an existing file.
    target = os.fspath(destination)
    if os.path.lexists(target):
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), target)
    shutil.move(os.fspath(source), target)


@cache
def default_filesystem() -> LocalFileSystem:
    """Return the process-wide :class:`LocalFileSystem` instance."""

    return LocalFileSystem()


def resolve_filesystem(filesystem: FileSystem | None) -> FileSystem:
    """Return ``filesystem`` or the default local implementation."""

    return default_filesystem() if filesystem is None else filesystem


__all__ = [
    "MISSING_TIMESTAMP",
    "FileSystem",
    "LocalFileSystem",
    "default_filesystem",
    "resolve_filesystem",
]
