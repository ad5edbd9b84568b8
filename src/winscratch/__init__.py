#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Scratch files, directories, junctions and commands for Windows tests."""

from provide.foundation.utils.versioning import get_version

from winscratch.config import ScratchConfig
from winscratch.errors import (
    CommandFailedError,
    CommandTimeoutError,
    ConfigurationError,
    JunctionError,
    NativeLoadError,
    RunfileNotFoundError,
    ScratchError,
)
from winscratch.helper import ScratchHelper

__version__ = get_version("winscratch", caller_file=__file__)

__all__ = [
    "CommandFailedError",
    "CommandTimeoutError",
    "ConfigurationError",
    "JunctionError",
    "NativeLoadError",
    "RunfileNotFoundError",
    "ScratchConfig",
    "ScratchError",
    "ScratchHelper",
    "__version__",
]

# 🔼⚙️🔚
