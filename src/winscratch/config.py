#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration model for the scratch helper.

Values come from keyword arguments or from ``WINSCRATCH_*`` environment
variables via ``ScratchConfig.from_env()``."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from attrs import define, field
from provide.foundation.logger import get_logger

from winscratch.errors import ConfigurationError

log = get_logger(__name__)

# Wait no longer than this for a spawned command to finish.
DEFAULT_COMMAND_TIMEOUT = 5.0

ENV_COMMAND_TIMEOUT = "WINSCRATCH_COMMAND_TIMEOUT"
ENV_NATIVE_LIBRARY = "WINSCRATCH_NATIVE_LIBRARY"


def _positive(instance: Any, attribute: Any, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


@define(frozen=True)
class ScratchConfig:
    """Settings for ScratchHelper and the command runner."""

    command_timeout: float = field(default=DEFAULT_COMMAND_TIMEOUT, converter=float, validator=_positive)
    native_library: str | None = field(default=None)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScratchConfig:
        """Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}

        raw_timeout = env.get(ENV_COMMAND_TIMEOUT, "").strip()
        if raw_timeout:
            try:
                kwargs["command_timeout"] = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_COMMAND_TIMEOUT} must be a number of seconds, got {raw_timeout!r}"
                ) from e

        native_library = env.get(ENV_NATIVE_LIBRARY, "").strip()
        if native_library:
            kwargs["native_library"] = native_library

        try:
            config = cls(**kwargs)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        log.debug("Loaded scratch config", **{k: str(v) for k, v in kwargs.items()})
        return config


# 🔼⚙️🔚
