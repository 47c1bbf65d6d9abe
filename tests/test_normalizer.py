# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for path parsing and canonicalisation."""

from __future__ import annotations

import pytest

from pathweave.errors import InvalidPathError
from pathweave.normalizer import (
    EMPTY_CANONICAL,
    SEPARATOR,
    CanonicalPath,
    PathKind,
    append,
    normalize,
    resolve_segments,
    split_root,
    unify_separators,
)

SEP = SEPARATOR


def _join(*parts: str) -> str:
    return SEP.join(parts)


@pytest.mark.parametrize("raw", ["C:", "C:/", "C:\\", "C://"])
def test_drive_letters_gain_a_single_trailing_separator(raw: str) -> None:
    result = normalize(raw)

    assert result.kind is PathKind.ROOTED
    assert result.raw == "C:" + SEP
    assert result.segments == ()


def test_drive_letter_case_is_preserved() -> None:
    assert normalize("c:/").raw == "c:" + SEP
    assert normalize("c:/").raw.casefold() == normalize("C:").raw.casefold()


def test_drive_relative_form_is_treated_as_rooted() -> None:
    assert normalize("D:temp").raw == "D:" + SEP + "temp"


def test_mixed_separators_are_unified() -> None:
    assert normalize("C:\\temp/dir\\file.txt").raw == "C:" + SEP + _join("temp", "dir", "file.txt")
    assert unify_separators("a\\b/c") == _join("a", "b", "c")


def test_trailing_separator_is_stripped() -> None:
    assert normalize("C:\\temp\\").raw == "C:" + SEP + "temp"
    assert normalize("/var/log/").raw == SEP + _join("var", "log")
    assert normalize("dir/sub/").raw == _join("dir", "sub")


def test_duplicate_separators_collapse() -> None:
    assert normalize("a//b///c").raw == _join("a", "b", "c")


def test_rooted_traversals_are_resolved() -> None:
    assert normalize("/a/b/../c/./d").raw == SEP + _join("a", "c", "d")


def test_traversals_above_the_root_are_clamped() -> None:
    assert normalize("/../../etc").raw == SEP + "etc"
    assert normalize("C:/..").raw == "C:" + SEP


def test_relative_traversals_keep_uncollapsible_parents() -> None:
    assert normalize("a/../../b").raw == _join("..", "b")
    assert normalize("../../x").segments == ("..", "..", "x")


def test_relative_path_collapsing_to_nothing_is_current_directory() -> None:
    result = normalize("a/b/../..")

    assert result.kind is PathKind.RELATIVE
    assert result.raw == "."


def test_single_leading_separator_is_rooted() -> None:
    result = normalize("/usr/lib")

    assert result.root == SEP
    assert result.segments == ("usr", "lib")


def test_unc_paths_keep_server_and_share_in_the_root() -> None:
    result = normalize("\\\\server\\share\\dir\\file.txt")

    assert result.root == SEP * 2 + "server" + SEP + "share" + SEP
    assert result.segments == ("dir", "file.txt")
    assert normalize("//server/share/..").raw == result.root


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_input_is_rejected(raw: str | None) -> None:
    with pytest.raises(InvalidPathError) as excinfo:
        normalize(raw)

    assert excinfo.value.parameter == "path"


def test_whitespace_only_components_are_discarded() -> None:
    assert normalize("a/ /b").raw == _join("a", "b")


def test_split_root_forms() -> None:
    assert split_root("C:" + SEP + "x") == ("C:" + SEP, SEP + "x")
    assert split_root(SEP + "x") == (SEP, "x")
    assert split_root("x" + SEP + "y") == ("", "x" + SEP + "y")
    assert split_root(SEP * 2 + "host") == (SEP * 2 + "host" + SEP, "")


def test_resolve_segments_only_clamps_rooted_paths() -> None:
    assert resolve_segments(("a",), ["..", ".."], rooted=True) == ()
    assert resolve_segments(("a",), ["..", ".."], rooted=False) == ("..",)


def test_append_onto_a_root_does_not_create_a_unc_prefix() -> None:
    root = normalize("/")

    assert append(root, "/x").raw == SEP + "x"


def test_append_onto_empty_parses_the_segment_on_its_own() -> None:
    assert append(EMPTY_CANONICAL, "c:").raw == "c:" + SEP
    assert append(EMPTY_CANONICAL, "docs/readme.md").kind is PathKind.RELATIVE


def test_append_onto_a_cancelled_out_relative_path_parses_the_segment() -> None:
    base = normalize("a/..")

    assert append(base, "C:") == normalize("C:")
    assert append(base, "C:").kind is PathKind.ROOTED
    assert append(base, "docs").raw == "docs"
    assert append(base, "..").segments == ("..",)


def test_append_treats_rooted_segments_literally() -> None:
    base = normalize("/base")

    assert append(base, "C:/other").raw == SEP + _join("base", "C:", "other")


def test_append_resolves_traversals_against_the_base() -> None:
    base = normalize("/a/b")

    assert append(base, "../../../c").raw == SEP + "c"


def test_sentinels_render_as_empty_strings() -> None:
    assert EMPTY_CANONICAL.raw == ""
    assert CanonicalPath(PathKind.NULL).raw == ""
    assert CanonicalPath(PathKind.NULL) != EMPTY_CANONICAL
