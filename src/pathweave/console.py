# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console used for status lines, kept apart from command results.

Commands print their results to stdout so they can be piped into other tools.
Status, warnings and failures go through the console built here, which always
writes to stderr.
"""

from __future__ import annotations

import sys
from functools import cache
from typing import TextIO

from rich.console import Console


def stream_is_terminal(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stderr by default) is a terminal."""

    target = sys.stderr if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


def status_console(*, emoji: bool, color: bool | None = None) -> Console:
    """Return the stderr console for the given presentation preferences.

    Args:
        emoji: ``True`` when Rich should render emoji shortcodes.
        color: Explicit colour preference. ``None`` enables colour only when
            stderr is a terminal.

    Returns:
        Console: Shared console writing to whatever ``sys.stderr`` is at print
        time.
    """

    terminal = stream_is_terminal()
    return _build_console(emoji, terminal if color is None else color and terminal, terminal)


@cache
def _build_console(emoji: bool, color: bool, terminal: bool) -> Console:
    return Console(
        stderr=True,
        color_system="auto" if color else None,
        force_terminal=terminal,
        no_color=not color,
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


__all__ = ["status_console", "stream_is_terminal"]
