# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status messages shown by the command line, written to stderr."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from .console import status_console

# level -> (emoji marker, rich style)
_MARKERS: Final[dict[str, tuple[str, str]]] = {
    "ok": ("✅", "green"),
    "warn": ("⚠️", "yellow"),
    "fail": ("❌", "red"),
}


def _report(level: str, msg: str, *, use_emoji: bool, use_color: bool | None) -> None:
    marker, style = _MARKERS[level]
    console = status_console(emoji=use_emoji, color=use_color)
    line = Text(f"{marker} {msg}" if use_emoji else msg)
    if console.color_system is not None:
        line.stylize(style)
    console.print(line)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a successful outcome."""

    _report("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report an empty or inconclusive outcome."""

    _report("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report an error that aborts the command."""

    _report("fail", msg, use_emoji=use_emoji, use_color=use_color)


__all__ = ["fail", "ok", "warn"]
