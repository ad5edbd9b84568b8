#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""One-time loader for the native support library."""

from __future__ import annotations

import ctypes
import ctypes.util
import sys
import threading

from provide.foundation.logger import get_logger

from winscratch.errors import NativeLoadError

log = get_logger(__name__)

_loaded: dict[str, ctypes.CDLL] = {}
_lock = threading.Lock()


def default_library_name() -> str:
    return "kernel32" if sys.platform == "win32" else "c"


def ensure_loaded(name: str | None = None) -> ctypes.CDLL:
    """Load a native library once per process and return its handle.

    Args:
        name: Library name or path; defaults to the platform's system library

    Raises:
        NativeLoadError: If the library cannot be found or loaded
    """
    library = name or default_library_name()
    with _lock:
        handle = _loaded.get(library)
        if handle is not None:
            return handle

        resolved = ctypes.util.find_library(library) or library
        try:
            handle = ctypes.CDLL(resolved)
        except OSError as e:
            log.error("Failed to load native library", library=library, resolved=resolved, error=str(e))
            raise NativeLoadError(library, str(e)) from e

        _loaded[library] = handle
        log.debug("Loaded native library", library=library, resolved=resolved)
        return handle


def is_loaded(name: str | None = None) -> bool:
    with _lock:
        return (name or default_library_name()) in _loaded


def reset() -> None:
    """Forget every loaded library. Handles stay mapped in the process."""
    with _lock:
        _loaded.clear()


# 🔼⚙️🔚
