#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Scratch filesystem and process helpers for tests running on Windows.

Usage:
    helper = ScratchHelper(tmp_path)
    helper.scratch_dir("target")
    helper.create_junctions({"link": "target"})
    helper.scratch_file("target/hello.txt", "hello", "world")
    helper.delete_all_under("link")
"""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Callable
from pathlib import Path
from typing import Any

from provide.foundation.logger import get_logger

from winscratch import junctions, native, process, runfiles
from winscratch.config import ScratchConfig
from winscratch.errors import JunctionError
from winscratch.types import Command, FileSystem, JunctionMap

log = get_logger(__name__)


def _clear_readonly(func: Callable[[str], Any], path: str, exc: BaseException) -> None:
    """Make a read-only entry writable and retry ``func`` once.

    Used as the rmtree error hook and for single files.
    """
    if not isinstance(exc, PermissionError):
        raise exc
    os.chmod(path, stat.S_IWRITE)
    func(path)


class ScratchHelper:
    """Creates and removes test fixtures under one scratch root.

    The scratch root is NOT owned by this class. It is only used to resolve
    relative paths, and is removed only by ``delete_all_under()`` without a
    path.
    """

    def __init__(self, scratch_root: str | os.PathLike[str], config: ScratchConfig | None = None) -> None:
        self._root = Path(scratch_root).absolute()
        self._config = config if config is not None else ScratchConfig.from_env()
        self._log = log.bind(scratch_root=str(self._root))

    @property
    def scratch_root(self) -> Path:
        return self._root

    @property
    def config(self) -> ScratchConfig:
        return self._config

    @staticmethod
    def load_native(name: str | None = None) -> None:
        """Ensure the native support library is loaded."""
        native.ensure_loaded(name or ScratchConfig.from_env().native_library)

    def create_junctions(self, links: JunctionMap, *, via_shell: bool = False) -> None:
        """Create directory junctions, then assert that they exist.

        Each key is a link path and each value a link target, both relative
        to the scratch root.

        Args:
            links: Mapping of link path to target path
            via_shell: Create all junctions with one ``cmd.exe`` invocation
                instead of one OS call per junction (Windows only)

        Raises:
            JunctionError: If a junction could not be created
            CommandFailedError: If the batched ``cmd.exe`` invocation failed
        """
        if not links:
            return

        if via_shell:
            if not junctions.IS_WINDOWS:
                link, target = next(iter(links.items()))
                raise JunctionError(link, target, "shell-batched junctions require cmd.exe")
            self.run_command(junctions.build_junction_command(str(self._root), links))
        else:
            for link, target in links.items():
                try:
                    junctions.create_junction(self._root / link, self._root / target)
                except OSError as e:
                    self._log.error("Junction creation failed", link=link, target=target, error=str(e))
                    raise JunctionError(link, target, str(e)) from e

        for link, target in links.items():
            link_path = self._root / link
            if not link_path.exists():
                self._log.error("Junction missing after creation", link=link, target=target)
                if junctions.is_junction(link_path):
                    junctions.remove_junction(link_path)
                raise JunctionError(link, target)

        self._log.debug("Created junctions", count=len(links), via_shell=via_shell)

    def delete_all_under(self, path: str | None = None) -> None:
        """Delete everything under ``path``, relative to the scratch root.

        Without a path the scratch root itself is removed. Nothing happens if
        the location does not exist.
        """
        location = self._root / path if path else self._root
        if not os.path.lexists(location):
            return

        if junctions.is_junction(location):
            junctions.remove_junction(location)
        elif location.is_dir():
            shutil.rmtree(location, onexc=_clear_readonly)
        else:
            try:
                os.unlink(location)
            except PermissionError as e:
                _clear_readonly(os.unlink, str(location), e)
        self._log.debug("Deleted scratch tree", path=str(location))

    def scratch_dir(self, path: str) -> Path:
        """Create a directory under ``path``, relative to the scratch root."""
        directory = self._root / path
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def scratch_file(self, path: str, *lines: str) -> Path:
        """Create a file with the given lines under ``path``, relative to the scratch root.

        Each line is written followed by ``\\n``; existing content is replaced.
        """
        file_path = self._root / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
        return file_path

    def run_command(self, cmd: Command) -> Any:
        """Run a command and assert it succeeds within the configured timeout."""
        return process.run_command(cmd, timeout=self._config.command_timeout)

    @staticmethod
    def get_runfile(runfiles_path: str) -> str:
        return runfiles.get_runfile(runfiles_path)

    def create_vfs_path(self, fs: FileSystem, path: str) -> Any:
        return fs.get_path(f"{self._root}/{path}")


# 🔼⚙️🔚
