#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pytest plugin exposing scratch fixtures.

Registered through the ``pytest11`` entry point, so installing the package
makes ``scratch_root`` and ``scratch`` available to every test."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from winscratch.helper import ScratchHelper

WINDOWS_ONLY_MARKER = "windows_only"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", f"{WINDOWS_ONLY_MARKER}: test requires Windows (junctions, cmd.exe)")


def pytest_runtest_setup(item: pytest.Item) -> None:
    if item.get_closest_marker(WINDOWS_ONLY_MARKER) and sys.platform != "win32":
        pytest.skip("requires Windows")


@pytest.fixture
def scratch_root(tmp_path: Path) -> Path:
    """A private, empty scratch root for one test."""
    root = tmp_path / "scratch"
    root.mkdir()
    return root


@pytest.fixture
def scratch(scratch_root: Path) -> ScratchHelper:
    """ScratchHelper bound to ``scratch_root``."""
    return ScratchHelper(scratch_root)


# 🔼⚙️🔚
