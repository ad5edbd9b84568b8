#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for junction primitives."""

from __future__ import annotations

import pytest

from winscratch.junctions import (
    build_junction_command,
    create_junction,
    is_junction,
    remove_junction,
)


class TestBuildJunctionCommand:
    """Tests for the composite cmd.exe command."""

    def test_single_junction(self):
        command = build_junction_command(r"C:\tmp\t1", {"link1": "target1"})

        assert command == r'cmd.exe /c mklink /j "C:\tmp\t1/link1" "C:\tmp\t1/target1"'

    def test_junctions_are_chained_in_order(self):
        command = build_junction_command(r"C:\s", {"a": "b", "c\\d": "e"})

        assert command == (
            r'cmd.exe /c mklink /j "C:\s/a" "C:\s/b" && mklink /j "C:\s/c\d" "C:\s/e"'
        )

    def test_empty_map_rejected(self):
        with pytest.raises(ValueError, match="At least one junction"):
            build_junction_command(r"C:\s", {})


class TestCreateJunction:
    """Tests for direct junction creation."""

    def test_link_resolves_to_target(self, tmp_path):
        target = tmp_path / "target"
        target.mkdir()
        (target / "file.txt").write_text("content")
        link = tmp_path / "link"

        create_junction(link, target)

        assert link.exists()
        assert is_junction(link)
        assert (link / "file.txt").read_text() == "content"

    def test_dangling_target_is_allowed(self, tmp_path):
        link = tmp_path / "link"

        create_junction(link, tmp_path / "missing")

        assert is_junction(link)
        assert not link.exists()

    def test_existing_link_path_fails(self, tmp_path):
        (tmp_path / "target").mkdir()
        (tmp_path / "link").mkdir()

        with pytest.raises(OSError):
            create_junction(tmp_path / "link", tmp_path / "target")


class TestJunctionDetection:
    """Tests for is_junction and remove_junction."""

    def test_plain_directory_is_not_junction(self, tmp_path):
        assert not is_junction(tmp_path)

    def test_missing_path_is_not_junction(self, tmp_path):
        assert not is_junction(tmp_path / "nothing")

    def test_remove_keeps_target_contents(self, tmp_path):
        target = tmp_path / "target"
        target.mkdir()
        (target / "keep.txt").write_text("keep")
        link = tmp_path / "link"
        create_junction(link, target)

        remove_junction(link)

        assert not link.exists()
        assert not is_junction(link)
        assert (target / "keep.txt").read_text() == "keep"


# 🔼⚙️🔚
