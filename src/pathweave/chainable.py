# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable, chainable path value type."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import ClassVar, Final

from .environment import PathEnvironment, resolve_environment
from .errors import IncompatiblePathError, InvalidArgumentError, InvalidPathError, NullSegmentError
from .filesystem import MISSING_TIMESTAMP, FileSystem, resolve_filesystem
from .normalizer import (
    EMPTY_CANONICAL,
    NULL_CANONICAL,
    PARENT_DIRECTORY,
    CanonicalPath,
    PathKind,
    append,
    normalize,
)

_EXTENSION_MARKER: Final[str] = "."


@dataclass(frozen=True, slots=True, repr=False)
class ChainablePath:
    """Immutable filesystem path that composes through chaining.

    Values compare by their canonical form. Every operation that appears to
    modify a path returns a new value instead.

    Attributes:
        canonical: Normalised representation backing the value.
    """

    canonical: CanonicalPath

    EMPTY: ClassVar[ChainablePath]
    NULL: ClassVar[ChainablePath]
    NEW: ClassVar[ChainablePath]

    # Construction ----------------------------------------------------------------

    @classmethod
    def from_string(cls, raw: str | PathLike[str] | ChainablePath | None) -> ChainablePath:
        """Parse ``raw`` into a canonical path.

        Args:
            raw: Path text, path-like object or an existing value.

        Returns:
            ChainablePath: Canonical rooted or relative path. Existing values
            are returned unchanged.

        Raises:
            InvalidPathError: If ``raw`` is ``None`` or empty.
        """

        if isinstance(raw, ChainablePath):
            return raw
        if raw is None:
            raise InvalidPathError("Path must not be null or empty", parameter="path")
        return cls(normalize(os.fspath(raw)))

    @classmethod
    def current(cls, environment: PathEnvironment | None = None) -> ChainablePath:
        """Return the working directory of ``environment`` (default: the live process)."""

        return cls.from_string(resolve_environment(environment).working_directory)

    @classmethod
    def temp(cls, environment: PathEnvironment | None = None) -> ChainablePath:
        """Return the temp directory of ``environment`` (default: the live process)."""

        return cls.from_string(resolve_environment(environment).temp_directory)

    # Canonical state -------------------------------------------------------------

    @property
    def raw(self) -> str:
        """Return the canonical string form."""

        return self.canonical.raw

    @property
    def kind(self) -> PathKind:
        """Return the variant of the underlying canonical path."""

        return self.canonical.kind

    @property
    def is_rooted(self) -> bool:
        """Return ``True`` when the path is anchored to a filesystem root."""

        return self.canonical.is_rooted

    @property
    def is_empty(self) -> bool:
        """Return ``True`` for the ``EMPTY`` sentinel (also used as ``NEW``)."""

        return self.canonical.kind is PathKind.EMPTY

    @property
    def is_null(self) -> bool:
        """Return ``True`` for the ``NULL`` "no result" sentinel."""

        return self.canonical.kind is PathKind.NULL

    # Derived properties ----------------------------------------------------------

    @property
    def root(self) -> ChainablePath:
        """Return the rooted prefix, or ``EMPTY`` for relative paths and sentinels."""

        if not self.is_rooted:
            return EMPTY
        return ChainablePath(CanonicalPath(PathKind.ROOTED, self.canonical.root))

    @property
    def directory(self) -> ChainablePath:
        """Return the parent path.

        Returns:
            ChainablePath: Parent directory; ``EMPTY`` for a root, for a
            single-component relative path and for ``EMPTY`` itself. ``NULL``
            maps onto itself.
        """

        if self.is_null:
            return self
        segments = self.canonical.segments
        if not segments:
            return EMPTY
        return ChainablePath(self.canonical.with_segments(segments[:-1]))

    @property
    def parent(self) -> ChainablePath:
        """Alias for :attr:`directory`."""

        return self.directory

    @property
    def directory_name(self) -> str:
        """Return the string form of :attr:`directory`."""

        return self.directory.raw

    @property
    def name(self) -> str:
        """Return the final component, or an empty string when there is none."""

        segments = self.canonical.segments
        return segments[-1] if segments else ""

    @property
    def extension(self) -> str:
        """Return the suffix of :attr:`name` starting at its last dot.

        A trailing dot yields an empty extension while a leading dot followed
        by characters (``.gitignore``) makes the whole name the extension.
        """

        name = self.name
        index = name.rfind(_EXTENSION_MARKER)
        if index < 0 or index == len(name) - 1:
            return ""
        return name[index:]

    # Predicates ------------------------------------------------------------------

    def has_extension(self, extension: str | None) -> bool:
        """Return whether the path ends in ``extension`` ignoring case.

        Args:
            extension: Extension with or without its leading dot.

        Returns:
            bool: ``True`` when :attr:`extension` matches.

        Raises:
            InvalidArgumentError: If ``extension`` is ``None`` or empty.
        """

        if not extension:
            raise InvalidArgumentError("Extension must not be null or empty", parameter="extension")
        if not extension.startswith(_EXTENSION_MARKER):
            extension = f"{_EXTENSION_MARKER}{extension}"
        return self.extension.casefold() == extension.casefold()

    def has_name(self, name: str | None) -> bool:
        """Return whether the final component equals ``name`` ignoring case.

        Raises:
            InvalidArgumentError: If ``name`` is ``None`` or empty.
        """

        if not name:
            raise InvalidArgumentError("Name must not be null or empty", parameter="name")
        return self.name.casefold() == name.casefold()

    # Composition -----------------------------------------------------------------

    def chain(self, segment: str | PathLike[str] | ChainablePath | None) -> ChainablePath:
        """Return a new path with ``segment`` appended.

        Args:
            segment: Text, path-like object or another value to append. Its
                separators are normalised and any ``..`` is resolved against
                this path. Rooted segments are appended literally.

        Returns:
            ChainablePath: Combined path, or ``self`` when ``segment`` is blank.

        Raises:
            NullSegmentError: If ``segment`` is ``None`` or the ``NULL`` sentinel.
            InvalidPathError: If this path is the ``NULL`` sentinel.
        """

        if segment is None or (isinstance(segment, ChainablePath) and segment.is_null):
            raise NullSegmentError("Cannot chain a null segment", parameter="segment")
        if self.is_null:
            raise InvalidPathError("Cannot chain onto the null path", parameter="path")
        text = segment.raw if isinstance(segment, ChainablePath) else os.fspath(segment)
        if not text.strip():
            return self
        return ChainablePath(append(self.canonical, text))

    def __truediv__(self, segment: str | PathLike[str] | ChainablePath) -> ChainablePath:
        return self.chain(segment)

    def add_extension(self, suffix: str | None) -> ChainablePath:
        """Return a new path with ``suffix`` appended to the final component.

        No separator is inserted and the suffix is not required to start with
        a dot.

        Raises:
            InvalidArgumentError: If ``suffix`` is ``None``.
            InvalidPathError: If this path is the ``NULL`` sentinel.
        """

        if suffix is None:
            raise InvalidArgumentError("Suffix must not be null", parameter="suffix")
        if self.is_null:
            raise InvalidPathError("Cannot extend the null path", parameter="path")
        if not suffix:
            return self
        return ChainablePath(normalize(f"{self.raw}{suffix}"))

    def __add__(self, suffix: str) -> ChainablePath:
        return self.add_extension(suffix)

    def to_absolute(
        self,
        anchor: str | PathLike[str] | ChainablePath | None = None,
        *,
        environment: PathEnvironment | None = None,
    ) -> ChainablePath:
        """Return a rooted version of this path.

        Args:
            anchor: Directory used to anchor a relative path. Defaults to the
                working directory of ``environment``; a relative anchor is made
                absolute first.
            environment: Process snapshot consulted for the working directory.

        Returns:
            ChainablePath: ``self`` when already rooted; otherwise the path
            chained onto the anchor.

        Raises:
            InvalidArgumentError: If ``anchor`` is empty or a sentinel.
            InvalidPathError: If this path is the ``NULL`` sentinel.
        """

        if self.is_null:
            raise InvalidPathError("The null path cannot be made absolute", parameter="path")
        if self.is_rooted:
            return self
        if anchor is None:
            base = ChainablePath.current(environment)
        else:
            if isinstance(anchor, ChainablePath):
                blank = anchor.is_empty or anchor.is_null
            else:
                blank = not os.fspath(anchor).strip()
            if blank:
                raise InvalidArgumentError("Anchor must not be null or empty", parameter="anchor")
            base = ChainablePath.from_string(anchor).to_absolute(environment=environment)
        return base.chain(self)

    def as_relative_to(
        self,
        base: str | PathLike[str] | ChainablePath,
        *,
        environment: PathEnvironment | None = None,
    ) -> ChainablePath:
        """Return the shortest relative path leading from ``base`` to this path.

        Relative inputs are anchored to the working directory first. ``EMPTY``
        stands for the working directory itself.

        Args:
            base: Starting directory.
            environment: Process snapshot used to anchor relative inputs.

        Returns:
            ChainablePath: Relative path; ``.`` when both paths are equal.

        Raises:
            IncompatiblePathError: If the two paths have different roots.
            InvalidPathError: If either path is the ``NULL`` sentinel.
        """

        origin = ChainablePath.from_string(base)
        if self.is_null or origin.is_null:
            raise InvalidPathError("The null path has no relative form", parameter="base")
        if not (self.is_rooted and origin.is_rooted):
            environment = resolve_environment(environment)
        target = self.to_absolute(environment=environment)
        origin = origin.to_absolute(environment=environment)
        if target.canonical.root.casefold() != origin.canonical.root.casefold():
            raise IncompatiblePathError(
                f"'{self.raw}' and '{origin.raw}' do not share a root",
                parameter="base",
            )
        target_segments = target.canonical.segments
        origin_segments = origin.canonical.segments
        shared = 0
        for left, right in zip(target_segments, origin_segments):
            if left != right:
                break
            shared += 1
        climb = (PARENT_DIRECTORY,) * (len(origin_segments) - shared)
        return ChainablePath(CanonicalPath(PathKind.RELATIVE, "", climb + target_segments[shared:]))

    # Filesystem queries ----------------------------------------------------------

    def exists(self, filesystem: FileSystem | None = None) -> bool:
        """Return ``True`` when the path refers to an existing file or directory."""

        if self.is_empty or self.is_null:
            return False
        return resolve_filesystem(filesystem).exists(self.raw)

    def is_file(self, filesystem: FileSystem | None = None) -> bool:
        """Return ``True`` when the path refers to an existing file."""

        if self.is_empty or self.is_null:
            return False
        return resolve_filesystem(filesystem).is_file(self.raw)

    def is_directory(self, filesystem: FileSystem | None = None) -> bool:
        """Return ``True`` when the path refers to an existing directory."""

        if self.is_empty or self.is_null:
            return False
        return resolve_filesystem(filesystem).is_directory(self.raw)

    file_exists = is_file
    directory_exists = is_directory

    def last_write_time_utc(self, filesystem: FileSystem | None = None) -> datetime:
        """Return the modification time, or :data:`MISSING_TIMESTAMP` when absent."""

        if self.is_empty or self.is_null:
            return MISSING_TIMESTAMP
        return resolve_filesystem(filesystem).last_write_time_utc(self.raw)

    def to_pathlib(self) -> Path:
        """Return the path as a :class:`pathlib.Path`.

        Raises:
            InvalidPathError: If the path is a sentinel.
        """

        if self.is_empty or self.is_null:
            raise InvalidPathError("Sentinel paths have no filesystem location", parameter="path")
        return Path(self.raw)

    # Dunder protocol -------------------------------------------------------------

    def __str__(self) -> str:
        return self.raw

    def __fspath__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        if self.is_null:
            return "ChainablePath.NULL"
        if self.is_empty:
            return "ChainablePath.EMPTY"
        return f"ChainablePath({self.raw!r})"


EMPTY: Final[ChainablePath] = ChainablePath(EMPTY_CANONICAL)
NULL: Final[ChainablePath] = ChainablePath(NULL_CANONICAL)
NEW: Final[ChainablePath] = EMPTY

ChainablePath.EMPTY = EMPTY
ChainablePath.NULL = NULL
ChainablePath.NEW = NEW


__all__ = ["EMPTY", "NEW", "NULL", "ChainablePath"]
