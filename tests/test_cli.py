# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the pathweave command line interface."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from pathweave import SEPARATOR
from pathweave.cli import app

runner = CliRunner()


def test_show_prints_derived_properties() -> None:
    result = runner.invoke(app, ["--no-emoji", "show", "C:\\temp\\report.txt"])

    assert result.exit_code == 0
    assert f"canonical: C:{SEPARATOR}temp{SEPARATOR}report.txt" in result.stdout
    assert "rooted: true" in result.stdout
    assert "name: report.txt" in result.stdout
    assert "extension: .txt" in result.stdout


def test_show_reports_invalid_paths() -> None:
    result = runner.invoke(app, ["--no-emoji", "show", ""])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "null or empty" in result.stderr


def test_relative_command() -> None:
    result = runner.invoke(app, ["relative", "/a/b/c", "/a"])

    assert result.exit_code == 0
    assert result.stdout.strip() == f"b{SEPARATOR}c"


def test_relative_command_rejects_different_roots() -> None:
    result = runner.invoke(app, ["--no-emoji", "relative", "C:/a", "D:/b"])

    assert result.exit_code == 1
    assert "do not share a root" in result.stderr


def test_find_first_command(tmp_path: Path) -> None:
    existing = tmp_path / "present.txt"
    existing.write_text("x", encoding="utf-8")

    result = runner.invoke(app, ["find-first", str(tmp_path / "absent.txt"), str(existing)])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(existing)


def test_find_first_command_without_matches(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--no-emoji", "find-first", str(tmp_path / "absent.txt")])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "None of the candidates exist" in result.stderr


def test_find_parent_command(solution_tree: Path) -> None:
    child = solution_tree / "Grandparent" / "Parent" / "Child"

    result = runner.invoke(app, ["find-parent", str(child), "*.sln"])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(child.parent)


def test_glob_command(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "b.doc").write_text("b", encoding="utf-8")

    result = runner.invoke(app, ["--no-emoji", "glob", str(tmp_path), "*.txt", "*.doc"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [str(tmp_path / "a.txt"), str(tmp_path / "b.doc")]
    assert result.stderr.strip() == "2 file(s) matched"


def test_glob_command_reports_status_with_emoji(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")

    result = runner.invoke(app, ["glob", str(tmp_path), "*.txt"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [str(tmp_path / "a.txt")]
    assert result.stderr.strip() == "✅ 1 file(s) matched"
