#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Common type definitions shared by the helper modules."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TypeAlias, runtime_checkable

# Relative link path -> relative target path
JunctionMap: TypeAlias = Mapping[str, str]

# A single command string or its argument tokens
Command: TypeAlias = str | Sequence[str]


@runtime_checkable
class FileSystem(Protocol):
    """Filesystem abstraction able to build path handles from strings."""

    def get_path(self, path: str) -> Any: ...


# 🔼⚙️🔚
