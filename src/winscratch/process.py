#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Blocking command runner that asserts success."""

from __future__ import annotations

import shlex
import sys
from pathlib import Path
from typing import Any

from provide.foundation.errors.process import ProcessError, ProcessTimeoutError
from provide.foundation.logger import get_logger
from provide.foundation.process import run

from winscratch.config import DEFAULT_COMMAND_TIMEOUT
from winscratch.errors import CommandFailedError, CommandTimeoutError
from winscratch.types import Command

log = get_logger(__name__)

IS_WINDOWS = sys.platform == "win32"


def split_command(cmd: Command) -> str | list[str]:
    """Turn a command into what is handed to the OS.

    Windows takes a command line natively, so strings are passed on verbatim
    there. Elsewhere strings are tokenised with POSIX shell rules. Sequences
    always become a list of argument tokens.
    """
    if isinstance(cmd, str):
        if not cmd.strip():
            raise ValueError("Cannot run an empty command")
        return cmd if IS_WINDOWS else shlex.split(cmd)

    args = [str(arg) for arg in cmd]
    if not args:
        raise ValueError("Cannot run an empty command")
    return args


def format_command(cmd: Command) -> str:
    """Printable form of a command for log and failure messages."""
    if isinstance(cmd, str):
        return cmd
    return shlex.join(str(arg) for arg in cmd)


def run_command(
    cmd: Command,
    timeout: float = DEFAULT_COMMAND_TIMEOUT,
    cwd: Path | None = None,
) -> Any:
    """Run a command once, wait for it and assert it exited with status 0.

    Args:
        cmd: Command string or argument tokens
        timeout: Seconds to wait before the process is killed
        cwd: Working directory for the process

    Returns:
        The completed process (``returncode``, ``stdout``, ``stderr``)

    Raises:
        CommandTimeoutError: If the process did not finish in time
        CommandFailedError: If the process exited non-zero or could not start
    """
    args = split_command(cmd)
    printable = format_command(cmd)
    log.debug("Running command", command=printable, timeout=timeout)

    try:
        result = run(args, cwd=cwd, timeout=timeout, check=False)
    except ProcessTimeoutError as e:
        log.error("Command timed out", command=printable, timeout=timeout)
        raise CommandTimeoutError(printable, timeout) from e
    except ProcessError as e:
        reason = str(e.__cause__ or e)
        log.error("Command could not be started", command=printable, error=reason)
        raise CommandFailedError(printable, None, stderr=reason) from e

    if result.returncode != 0:
        log.error("Command failed", command=printable, returncode=result.returncode)
        raise CommandFailedError(printable, result.returncode, result.stdout or "", result.stderr or "")

    log.debug("Command succeeded", command=printable)
    return result


# 🔼⚙️🔚
