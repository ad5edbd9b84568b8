#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for winscratch tests.

The ``scratch_root`` and ``scratch`` fixtures come from the package's own
pytest plugin."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from tests.helpers.fakes import FakeFileSystem
from winscratch import native
from winscratch.config import ScratchConfig
from winscratch.helper import ScratchHelper

# Also registered through the pytest11 entry point under the same name.
pytest_plugins = ["winscratch.pytest_plugin"]


@pytest.fixture
def fast_config() -> ScratchConfig:
    """Config with a short command timeout for timeout tests."""
    return ScratchConfig(command_timeout=0.5)


@pytest.fixture
def fast_helper(scratch_root: Path, fast_config: ScratchConfig) -> ScratchHelper:
    return ScratchHelper(scratch_root, config=fast_config)


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def clean_native() -> Generator[None, None, None]:
    """Isolate tests from libraries loaded by earlier tests."""
    native.reset()
    yield
    native.reset()


@pytest.fixture
def no_runfiles_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("RUNFILES_MANIFEST_FILE", "RUNFILES_DIR", "TEST_SRCDIR"):
        monkeypatch.delenv(var, raising=False)


# 🔼⚙️🔚
