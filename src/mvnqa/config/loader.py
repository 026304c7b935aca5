# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load :class:`StaticCodeChecksConfig` from TOML pipeline configuration.

A configuration file may look like::

    include = ["shared/maven.toml"]

    [general]
    m2Path = "${HOME}/.m2/repository"

    [steps.mavenExecuteStaticCodeChecks]
    spotBugs = true
    pmdFailurePriority = 2
    mavenModulesExcludes = ["docs"]

Values from ``[general]`` apply to every step, so only keys known to this step
are taken from it. The step table overrides ``[general]`` and must not contain
unknown keys. Command line overrides are applied last.
"""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from ..errors import ConfigError
from .models import STEP_NAME, StaticCodeChecksConfig

DEFAULT_CONFIG_NAME: Final[str] = ".mvnqa.toml"
INCLUDE_KEY: Final[str] = "include"
GENERAL_KEY: Final[str] = "general"
STEPS_KEY: Final[str] = "steps"

_ENV_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(current, value)
        else:
            result[key] = value
    return result


def _expand_env(value: Any, env: Mapping[str, str]) -> Any:
    """Recursively replace ``${VAR}`` references in strings with values from ``env``.

    Unknown variables are left untouched.
    """

    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda match: env.get(match.group(1), match.group(0)), value)
    if isinstance(value, Mapping):
        return {key: _expand_env(entry, env) for key, entry in value.items()}
    if isinstance(value, list):
        return [_expand_env(entry, env) for entry in value]
    return value


class TomlConfigSource:
    """Load a TOML document, resolving ``include`` directives depth first."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        self._root_path = path
        self._env = env if env is not None else os.environ

    def load(self) -> Mapping[str, Any]:
        """Return the merged document, or an empty mapping when the file is absent.

        Raises:
            ConfigError: On circular includes, TOML syntax errors or
                malformed include declarations.
        """

        return self._load(self._root_path, ())

    def _load(self, path: Path, stack: tuple[Path, ...]) -> Mapping[str, Any]:
        if not path.exists():
            return {}
        resolved = path.resolve()
        if resolved in stack:
            include_chain = " -> ".join(str(entry) for entry in (*stack, resolved))
            raise ConfigError(f"Circular include detected: {include_chain}")
        try:
            with resolved.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
        document: dict[str, Any] = dict(data)
        includes = document.pop(INCLUDE_KEY, None)
        merged: dict[str, Any] = {}
        for include_path in self._coerce_includes(includes, resolved.parent):
            merged = _deep_merge(merged, self._load(include_path, (*stack, resolved)))
        merged = _deep_merge(merged, document)
        return _expand_env(merged, self._env)

    @staticmethod
    def _coerce_includes(raw: Any, base_dir: Path) -> Iterable[Path]:
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
            raise ConfigError(f"Unsupported include declaration: {raw!r}")
        return [path if (path := Path(item)).is_absolute() else base_dir / path for item in raw]


def _table(document: Mapping[str, Any], key: str, source: Path) -> Mapping[str, Any]:
    value = document.get(key, {})
    if not isinstance(value, MutableMapping):
        raise ConfigError(f"'{key}' in {source} must be a table")
    return value


def resolve_step_values(document: Mapping[str, Any], source: Path) -> dict[str, Any]:
    """Merge ``[general]`` and the step table of ``document`` into raw field values.

    Args:
        document: Parsed TOML document with includes already applied.
        source: Path of the document, used in error messages.

    Returns:
        dict[str, Any]: Field values keyed by their configuration names.

    Raises:
        ConfigError: When a section is not a table or the step table holds
            unknown keys.
    """

    known = StaticCodeChecksConfig.field_keys()
    general = _table(document, GENERAL_KEY, source)
    step = _table(_table(document, STEPS_KEY, source), STEP_NAME, source)
    unknown = sorted(key for key in step if key not in known)
    if unknown:
        raise ConfigError(f"Unknown option(s) for {STEP_NAME} in {source}: {', '.join(unknown)}")
    values = {key: value for key, value in general.items() if key in known}
    values.update(step)
    return values


def build_config(values: Mapping[str, Any], overrides: Mapping[str, Any] | None = None) -> StaticCodeChecksConfig:
    """Validate ``values`` and ``overrides`` into a :class:`StaticCodeChecksConfig`.

    Both mappings may use snake_case or camelCase keys; entries in
    ``overrides`` whose value is ``None`` are ignored.

    Raises:
        ConfigError: When validation fails.
    """

    fields = StaticCodeChecksConfig.model_fields
    normalised: dict[str, Any] = {}
    for key, value in values.items():
        normalised[_field_name(key, fields)] = value
    for key, value in (overrides or {}).items():
        if value is not None:
            normalised[_field_name(key, fields)] = value
    try:
        return StaticCodeChecksConfig.model_validate(normalised)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _field_name(key: str, fields: Mapping[str, Any]) -> str:
    if key in fields:
        return key
    for name, info in fields.items():
        if info.alias == key:
            return name
    return key


def load_config(
    project_root: Path,
    *,
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> StaticCodeChecksConfig:
    """Load configuration for ``project_root``.

    Args:
        project_root: Directory holding the default ``.mvnqa.toml``.
        config_path: Explicit configuration file; must exist when given.
        overrides: Values that take precedence over the file, typically from
            command line options.
        env: Environment used for ``${VAR}`` expansion, defaults to ``os.environ``.

    Returns:
        StaticCodeChecksConfig: Validated, immutable configuration.

    Raises:
        ConfigError: When the file is missing, malformed or invalid.
    """

    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Configuration file {config_path} does not exist")
    path = config_path if config_path is not None else project_root / DEFAULT_CONFIG_NAME
    document = TomlConfigSource(path, env=env).load()
    return build_config(resolve_step_values(document, path), overrides)


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "TomlConfigSource",
    "build_config",
    "load_config",
    "resolve_step_values",
]
