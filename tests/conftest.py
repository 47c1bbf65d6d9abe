# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathweave import PathEnvironment


@pytest.fixture
def environment(tmp_path: Path) -> PathEnvironment:
    """Return a fixed environment rooted inside ``tmp_path``."""
    work = tmp_path / "work"
    temp = tmp_path / "scratch"
    work.mkdir()
    temp.mkdir()
    return PathEnvironment(working_directory=str(work), temp_directory=str(temp))


@pytest.fixture
def solution_tree(tmp_path: Path) -> Path:
    """Create ``Grandparent/Parent/Child`` with solution files at two levels."""
    child = tmp_path / "Grandparent" / "Parent" / "Child"
    child.mkdir(parents=True)
    (tmp_path / "Grandparent" / "outer.sln").write_text("outer", encoding="utf-8")
    (tmp_path / "Grandparent" / "Parent" / "project.sln").write_text("project", encoding="utf-8")
    (child / "program.cs").write_text("class Program {}", encoding="utf-8")
    return tmp_path
