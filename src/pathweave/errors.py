# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by pathweave operations."""

from __future__ import annotations


class PathweaveError(ValueError):
    """Base class for precondition violations raised by pathweave."""

    def __init__(self, message: str, *, parameter: str | None = None) -> None:
        """Initialise the error with a message and the offending parameter.

        Args:
            message: Human-readable description of the violated precondition.
            parameter: Name of the argument that failed validation, if any.
        """

        super().__init__(message)
        self.parameter = parameter


class InvalidPathError(PathweaveError):
    """Raised when a raw path string is ``None``, empty or unparseable."""


class NullSegmentError(PathweaveError):
    """Raised when ``None`` is chained onto a path."""


class InvalidArgumentError(PathweaveError):
    """Raised when a required scalar argument is ``None`` or empty."""


class ArgumentError(PathweaveError):
    """Raised when a collection argument is ``None`` or empty."""


class IncompatiblePathError(PathweaveError):
    """Raised when two paths cannot be expressed relative to one another."""


__all__ = [
    "ArgumentError",
    "IncompatiblePathError",
    "InvalidArgumentError",
    "InvalidPathError",
    "NullSegmentError",
    "PathweaveError",
]
