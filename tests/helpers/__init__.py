#
# SPDX-FileCopyrightText: Copyright (c) provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test helper modules for winscratch testing.

This package contains fakes for the filesystem abstraction and builders for
runfiles layouts."""

from __future__ import annotations

# 🔼⚙️🔚
