#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Runfiles resolution for tests launched by Bazel.

Bazel exposes a test's data dependencies either through a manifest file
(``RUNFILES_MANIFEST_FILE``, the default on Windows) or a runfiles directory
tree (``RUNFILES_DIR`` / ``TEST_SRCDIR``). ``Runfiles.create()`` picks
whichever the environment provides, preferring the manifest."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from provide.foundation.logger import get_logger

from winscratch.errors import RunfileNotFoundError

log = get_logger(__name__)

ENV_MANIFEST_FILE = "RUNFILES_MANIFEST_FILE"
ENV_RUNFILES_DIR = "RUNFILES_DIR"
ENV_TEST_SRCDIR = "TEST_SRCDIR"


def parse_manifest(manifest_path: Path) -> dict[str, str]:
    """Read ``<logical path> <real path>`` lines into a mapping."""
    entries: dict[str, str] = {}
    with manifest_path.open(encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if not line:
                continue
            logical, sep, real = line.partition(" ")
            entries[logical] = real if sep else logical
    return entries


class Runfiles:
    """Resolves logical runfiles paths to real paths."""

    def __init__(self, manifest: Mapping[str, str] | None = None, directory: Path | None = None) -> None:
        if manifest is None and directory is None:
            raise ValueError("Runfiles need a manifest or a directory")
        self._manifest = dict(manifest) if manifest is not None else None
        self._directory = directory

    @classmethod
    def from_manifest(cls, manifest_path: Path) -> Runfiles:
        return cls(manifest=parse_manifest(manifest_path))

    @classmethod
    def from_directory(cls, directory: Path) -> Runfiles:
        return cls(directory=directory)

    @classmethod
    def create(cls, environ: Mapping[str, str] | None = None) -> Runfiles:
        """Create a resolver from the environment of the running test.

        Raises:
            RunfileNotFoundError: If no manifest or runfiles directory is set
        """
        env = os.environ if environ is None else environ

        manifest = env.get(ENV_MANIFEST_FILE)
        if manifest and Path(manifest).is_file():
            log.debug("Using runfiles manifest", manifest=manifest)
            return cls.from_manifest(Path(manifest))

        for var in (ENV_RUNFILES_DIR, ENV_TEST_SRCDIR):
            directory = env.get(var)
            if directory and Path(directory).is_dir():
                log.debug("Using runfiles directory", directory=directory, source=var)
                return cls.from_directory(Path(directory))

        raise RunfileNotFoundError(
            "<runfiles>",
            f"unavailable: set {ENV_MANIFEST_FILE}, {ENV_RUNFILES_DIR} or {ENV_TEST_SRCDIR}",
        )

    def rlocation(self, path: str) -> str:
        """Return the real absolute path for a runfiles-relative ``path``.

        Raises:
            ValueError: If ``path`` is empty
            RunfileNotFoundError: If ``path`` is not part of the runfiles
        """
        if not path:
            raise ValueError("Runfiles path must not be empty")
        if os.path.isabs(path):
            return path

        if self._manifest is not None:
            return self._lookup_manifest(path)

        assert self._directory is not None
        candidate = self._directory / path
        if not candidate.exists():
            raise RunfileNotFoundError(path, f"not found under {self._directory}")
        return str(candidate)

    def _lookup_manifest(self, path: str) -> str:
        assert self._manifest is not None
        real = self._manifest.get(path)
        if real is not None:
            return real

        # Directory entries map a prefix; look for the longest one.
        prefix = path
        while "/" in prefix:
            prefix, _, _ = prefix.rpartition("/")
            base = self._manifest.get(prefix)
            if base is not None:
                return base + path[len(prefix) :]

        raise RunfileNotFoundError(path)


def get_runfile(path: str, environ: Mapping[str, str] | None = None) -> str:
    """Resolve ``path`` through the runfiles of the current environment."""
    return Runfiles.create(environ).rlocation(path)


# 🔼⚙️🔚
