# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the status message helpers."""

from __future__ import annotations

import io

import pytest

from pathweave.console import status_console, stream_is_terminal
from pathweave.logging import fail, ok, warn


@pytest.mark.parametrize(
    ("report", "marker"),
    [(ok, "✅"), (warn, "⚠️"), (fail, "❌")],
)
def test_status_messages_go_to_stderr(capsys: pytest.CaptureFixture[str], report, marker: str) -> None:
    report("all done", use_emoji=True)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == f"{marker} all done"


def test_status_messages_without_emoji(capsys: pytest.CaptureFixture[str]) -> None:
    warn("nothing found", use_emoji=False, use_color=True)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "nothing found\n"


def test_colour_needs_a_terminal() -> None:
    assert status_console(emoji=False, color=True).color_system is None


def test_stream_is_terminal_for_plain_buffers() -> None:
    assert not stream_is_terminal(io.StringIO())
