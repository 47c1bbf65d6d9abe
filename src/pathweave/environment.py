# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Snapshot of the process-wide directories consulted by path operations."""

from __future__ import annotations

import os
import tempfile
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalizer import normalize

TEMP_DIR_ENV: Final[str] = "PATHWEAVE_TEMP_DIR"


class PathEnvironment(BaseModel):
    """Working and temporary directories used to anchor relative paths.

    Instances are immutable snapshots. :meth:`capture` reads the live process
    state every time it is called, so two captures separated by a ``chdir``
    observe different working directories.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    working_directory: str = Field(description="Absolute directory used to anchor relative paths.")
    temp_directory: str = Field(description="Absolute directory returned by the temp accessor.")

    @field_validator("working_directory", "temp_directory")
    @classmethod
    def _require_absolute(cls, value: str) -> str:
        """Reject blank directories and directories without a root.

        Args:
            value: Candidate directory supplied by the caller.

        Returns:
            str: The validated directory.

        Raises:
            ValueError: If ``value`` is blank or not rooted.
        """

        if not value or not value.strip():
            raise ValueError("directory must not be empty")
        if not normalize(value).is_rooted:
            raise ValueError(f"directory '{value}' must be absolute")
        return value

    @classmethod
    def capture(cls) -> PathEnvironment:
        """Return a snapshot of the current process environment.

        ``PATHWEAVE_TEMP_DIR`` overrides the temp directory when set.

        Returns:
            PathEnvironment: Environment reflecting the state at call time.
        """

        temp_override = os.environ.get(TEMP_DIR_ENV)
        temp_directory = temp_override if temp_override else tempfile.gettempdir()
        return cls(working_directory=os.getcwd(), temp_directory=os.path.abspath(temp_directory))


def resolve_environment(environment: PathEnvironment | None) -> PathEnvironment:
    """Return ``environment`` or a fresh capture when it is ``None``."""

    return PathEnvironment.capture() if environment is None else environment


__all__ = ["TEMP_DIR_ENV", "PathEnvironment", "resolve_environment"]
