#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Directory junction primitives.

Junctions are created here directly rather than through any production
filesystem layer under test, so a bug there cannot mask itself in fixtures.
On Windows the junction is made with ``_winapi.CreateJunction``. Other
platforms have no junctions; a directory symlink is the closest alias and
keeps the helper usable on POSIX CI."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from provide.foundation.logger import get_logger

from winscratch.types import JunctionMap

log = get_logger(__name__)

IS_WINDOWS = sys.platform == "win32"

# Composite command used by the batched shell mode
SHELL_PREFIX = "cmd.exe /c"
SHELL_AND = "&&"
MKLINK_FORMAT = 'mklink /j "{root}/{link}" "{root}/{target}"'


def create_junction(link: Path, target: Path) -> None:
    """Create one junction at ``link`` pointing at ``target``.

    The parent of ``link`` must exist. ``target`` does not have to.
    """
    if IS_WINDOWS:
        import _winapi

        _winapi.CreateJunction(str(target), str(link))
    else:
        os.symlink(target, link, target_is_directory=True)
    log.debug("Created junction", link=str(link), target=str(target))


def is_junction(path: Path) -> bool:
    """Check whether ``path`` is a junction (a symlink off Windows)."""
    if IS_WINDOWS:
        return os.path.isjunction(path) or os.path.islink(path)
    return os.path.islink(path)


def remove_junction(path: Path) -> None:
    """Remove the alias at ``path`` without touching what it points at."""
    if IS_WINDOWS and os.path.isjunction(path):
        os.rmdir(path)
    else:
        os.unlink(path)
    log.debug("Removed junction", path=str(path))


def build_junction_command(root: str, links: JunctionMap) -> str:
    """Build the single ``cmd.exe`` invocation that creates all junctions.

    Running ``cmd.exe /c command1 args && command2 args && ...`` creates every
    junction within one process. Paths are quoted but not escaped, so link and
    target names must not contain double quotes.
    """
    if not links:
        raise ValueError("At least one junction is required")

    args: list[str] = []
    for link, target in links.items():
        args.append(SHELL_AND if args else SHELL_PREFIX)
        args.append(MKLINK_FORMAT.format(root=root, link=link, target=target))
    return " ".join(args)


# 🔼⚙️🔚
