# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and TOML loading for the static code checks step."""

from __future__ import annotations

from ..errors import ConfigError
from .loader import DEFAULT_CONFIG_NAME, TomlConfigSource, build_config, load_config, resolve_step_values
from .models import STEP_NAME, StaticCodeChecksConfig

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "STEP_NAME",
    "ConfigError",
    "StaticCodeChecksConfig",
    "TomlConfigSource",
    "build_config",
    "load_config",
    "resolve_step_values",
]
