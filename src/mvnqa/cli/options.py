# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer option declarations shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

from ..config import StaticCodeChecksConfig, load_config

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Maven project root (working directory for mvn)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file (defaults to <root>/.mvnqa.toml)."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
]
SPOT_BUGS_OPTION = Annotated[
    bool | None,
    typer.Option("--spot-bugs/--no-spot-bugs", help="Run the SpotBugs check."),
]
PMD_OPTION = Annotated[
    bool | None,
    typer.Option("--pmd/--no-pmd", help="Run the PMD check."),
]
SPOT_BUGS_INCLUDE_OPTION = Annotated[
    str | None,
    typer.Option("--spot-bugs-include-filter-file", help="SpotBugs include filter file."),
]
SPOT_BUGS_EXCLUDE_OPTION = Annotated[
    str | None,
    typer.Option("--spot-bugs-exclude-filter-file", help="SpotBugs exclude filter file."),
]
SPOT_BUGS_MAX_OPTION = Annotated[
    int | None,
    typer.Option("--spot-bugs-max-allowed-violations", help="Bugs tolerated before failing (0 = unset)."),
]
PMD_MAX_OPTION = Annotated[
    int | None,
    typer.Option("--pmd-max-allowed-violations", help="Violations tolerated before failing (0 = unset)."),
]
PMD_PRIORITY_OPTION = Annotated[
    int | None,
    typer.Option("--pmd-failure-priority", help="Lowest PMD priority (1-5) that fails the build (0 = unset)."),
]
EXCLUDE_MODULE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--exclude-module", help="Maven module excluded from the checks (repeatable)."),
]
INSTALL_OPTION = Annotated[
    bool | None,
    typer.Option("--install-artifacts/--no-install-artifacts", help="Install project artifacts first."),
]
M2_PATH_OPTION = Annotated[
    str | None,
    typer.Option("--m2-path", help="Local Maven repository path."),
]
PROJECT_SETTINGS_OPTION = Annotated[
    str | None,
    typer.Option("--project-settings-file", help="Maven project settings file."),
]
GLOBAL_SETTINGS_OPTION = Annotated[
    str | None,
    typer.Option("--global-settings-file", help="Maven global settings file."),
]
TRANSFERS_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--log-successful-maven-transfers/--no-log-successful-maven-transfers",
        help="Keep Maven's artifact transfer logging.",
    ),
]


@dataclass(slots=True)
class StaticChecksCLIOptions:
    """Normalised CLI inputs shared by ``static-checks`` and ``plan``."""

    root: Path
    config_path: Path | None
    use_emoji: bool
    overrides: dict[str, Any]

    def load(self) -> StaticCodeChecksConfig:
        """Return the configuration file merged with the command line overrides.

        Raises:
            ConfigError: When the configuration is missing or invalid.
        """

        return load_config(self.root, config_path=self.config_path, overrides=self.overrides)


def build_static_checks_options(
    *,
    root: Path,
    config: Path | None,
    emoji: bool,
    spot_bugs: bool | None,
    pmd: bool | None,
    spot_bugs_include_filter_file: str | None,
    spot_bugs_exclude_filter_file: str | None,
    spot_bugs_max_allowed_violations: int | None,
    pmd_max_allowed_violations: int | None,
    pmd_failure_priority: int | None,
    exclude_module: list[str] | None,
    install_artifacts: bool | None,
    m2_path: str | None,
    project_settings_file: str | None,
    global_settings_file: str | None,
    log_successful_maven_transfers: bool | None,
) -> StaticChecksCLIOptions:
    """Construct :class:`StaticChecksCLIOptions` from Typer parameters.

    Options left at ``None`` keep the value from the configuration file.
    """

    overrides: dict[str, Any] = {
        "spot_bugs": spot_bugs,
        "pmd": pmd,
        "spot_bugs_include_filter_file": spot_bugs_include_filter_file,
        "spot_bugs_exclude_filter_file": spot_bugs_exclude_filter_file,
        "spot_bugs_max_allowed_violations": spot_bugs_max_allowed_violations,
        "pmd_max_allowed_violations": pmd_max_allowed_violations,
        "pmd_failure_priority": pmd_failure_priority,
        "maven_modules_excludes": exclude_module or None,
        "install_artifacts": install_artifacts,
        "m2_path": m2_path,
        "project_settings_file": project_settings_file,
        "global_settings_file": global_settings_file,
        "log_successful_maven_transfers": log_successful_maven_transfers,
    }
    return StaticChecksCLIOptions(
        root=root.resolve(),
        config_path=config,
        use_emoji=emoji,
        overrides={key: value for key, value in overrides.items() if value is not None},
    )


__all__ = ["StaticChecksCLIOptions", "build_static_checks_options"]
