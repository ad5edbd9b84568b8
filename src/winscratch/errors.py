#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Failure types raised by the scratch helper.

Every check the helper makes on its own work fails with a subclass of
``ScratchError``. It derives from ``AssertionError`` so that a broken fixture
shows up as a test failure, not as an error in the test harness."""

from __future__ import annotations


class ScratchError(AssertionError):
    """Base exception for scratch helper failures."""

    def __init__(self, message: str, operation: str):
        self.operation = operation
        super().__init__(message)


class JunctionError(ScratchError):
    """Raised when a junction could not be created."""

    def __init__(self, link: str, target: str, reason: str | None = None):
        self.link = link
        self.target = target
        message = f"Could not create junction '{link}' -> '{target}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, "create_junctions")


class CommandFailedError(ScratchError):
    """Raised when a command exits non-zero or cannot be started."""

    def __init__(
        self,
        command: str,
        returncode: int | None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        message = f"Command failed: {command}"
        if returncode is not None:
            message += f"\nExit code: {returncode}"
        if stdout.strip():
            message += f"\nstdout: {stdout.strip()}"
        if stderr.strip():
            message += f"\nstderr: {stderr.strip()}"
        super().__init__(message, "run_command")


class CommandTimeoutError(ScratchError):
    """Raised when a command does not finish within its timeout."""

    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"Command timed out after {timeout}s: {command}", "run_command")


class NativeLoadError(ScratchError):
    """Raised when the native support library cannot be loaded."""

    def __init__(self, library: str, reason: str):
        self.library = library
        super().__init__(f"Failed to load native library '{library}': {reason}", "load_native")


class RunfileNotFoundError(ScratchError):
    """Raised when a runfiles path cannot be resolved."""

    def __init__(self, path: str, reason: str = "not found in runfiles"):
        self.path = path
        super().__init__(f"Runfile '{path}' {reason}", "get_runfile")


class ConfigurationError(ValueError):
    """Raised for invalid scratch helper configuration."""


# 🔼⚙️🔚
