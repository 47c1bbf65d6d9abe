# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable, chainable filesystem paths and the searches built on them."""

from __future__ import annotations

from importlib import metadata

from .chainable import EMPTY, NEW, NULL, ChainablePath
from .environment import PathEnvironment
from .errors import (
    ArgumentError,
    IncompatiblePathError,
    InvalidArgumentError,
    InvalidPathError,
    NullSegmentError,
    PathweaveError,
)
from .filesystem import MISSING_TIMESTAMP, FileSystem, LocalFileSystem
from .globbing import GlobMatcher, PathlibGlobMatcher, glob_files
from .normalizer import SEPARATOR, PathKind
from .operations import (
    create_directory_recursively,
    delete_file_or_directory,
    delete_files_or_directories,
    move_file_or_directory,
    move_files_or_directories,
)
from .search import find_first, find_parent_with_file_matching, resolve_file

try:
    __version__ = metadata.version("pathweave")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "EMPTY",
    "MISSING_TIMESTAMP",
    "NEW",
    "NULL",
    "SEPARATOR",
    "ArgumentError",
    "ChainablePath",
    "FileSystem",
    "GlobMatcher",
    "IncompatiblePathError",
    "InvalidArgumentError",
    "InvalidPathError",
    "LocalFileSystem",
    "NullSegmentError",
    "PathEnvironment",
    "PathKind",
    "PathlibGlobMatcher",
    "PathweaveError",
    "__version__",
    "create_directory_recursively",
    "delete_file_or_directory",
    "delete_files_or_directories",
    "find_first",
    "find_parent_with_file_matching",
    "glob_files",
    "move_file_or_directory",
    "move_files_or_directories",
    "resolve_file",
]
