# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``static-checks`` and ``plan`` CLI commands."""

from __future__ import annotations

import shlex
from pathlib import Path

import typer

from ..checks.orchestrator import NO_CHECKS_MESSAGE, build_invocation_plan, maven_execute_static_code_checks
from ..config import ConfigError, StaticCodeChecksConfig
from ..logging import fail, ok, warn
from ..maven.execute import MAVEN_EXECUTABLE, get_parameters_from_options
from ..runtime.utils import new_static_code_checks_utils
from ..telemetry import CustomData
from .options import (
    CONFIG_OPTION,
    EMOJI_OPTION,
    EXCLUDE_MODULE_OPTION,
    GLOBAL_SETTINGS_OPTION,
    INSTALL_OPTION,
    M2_PATH_OPTION,
    PMD_MAX_OPTION,
    PMD_OPTION,
    PMD_PRIORITY_OPTION,
    PROJECT_SETTINGS_OPTION,
    ROOT_OPTION,
    SPOT_BUGS_EXCLUDE_OPTION,
    SPOT_BUGS_INCLUDE_OPTION,
    SPOT_BUGS_MAX_OPTION,
    SPOT_BUGS_OPTION,
    TRANSFERS_OPTION,
    StaticChecksCLIOptions,
    build_static_checks_options,
)

CONFIG_ERROR_EXIT_CODE = 2


def _load_or_exit(options: StaticChecksCLIOptions) -> StaticCodeChecksConfig:
    try:
        return options.load()
    except ConfigError as exc:
        fail(f"Invalid configuration: {exc}", use_emoji=options.use_emoji)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc


def static_checks_command(
    root: ROOT_OPTION = Path(),
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
    spot_bugs: SPOT_BUGS_OPTION = None,
    pmd: PMD_OPTION = None,
    spot_bugs_include_filter_file: SPOT_BUGS_INCLUDE_OPTION = None,
    spot_bugs_exclude_filter_file: SPOT_BUGS_EXCLUDE_OPTION = None,
    spot_bugs_max_allowed_violations: SPOT_BUGS_MAX_OPTION = None,
    pmd_max_allowed_violations: PMD_MAX_OPTION = None,
    pmd_failure_priority: PMD_PRIORITY_OPTION = None,
    exclude_module: EXCLUDE_MODULE_OPTION = None,
    install_artifacts: INSTALL_OPTION = None,
    m2_path: M2_PATH_OPTION = None,
    project_settings_file: PROJECT_SETTINGS_OPTION = None,
    global_settings_file: GLOBAL_SETTINGS_OPTION = None,
    log_successful_maven_transfers: TRANSFERS_OPTION = None,
) -> None:
    """Run SpotBugs and/or PMD as one Maven invocation.

    Exits with status 1 when artifact installation or the Maven run fails and
    with status 2 when the configuration is invalid.
    """

    options = build_static_checks_options(
        root=root,
        config=config,
        emoji=emoji,
        spot_bugs=spot_bugs,
        pmd=pmd,
        spot_bugs_include_filter_file=spot_bugs_include_filter_file,
        spot_bugs_exclude_filter_file=spot_bugs_exclude_filter_file,
        spot_bugs_max_allowed_violations=spot_bugs_max_allowed_violations,
        pmd_max_allowed_violations=pmd_max_allowed_violations,
        pmd_failure_priority=pmd_failure_priority,
        exclude_module=exclude_module,
        install_artifacts=install_artifacts,
        m2_path=m2_path,
        project_settings_file=project_settings_file,
        global_settings_file=global_settings_file,
        log_successful_maven_transfers=log_successful_maven_transfers,
    )
    step_config = _load_or_exit(options)
    maven_execute_static_code_checks(step_config, CustomData(), root=options.root, use_emoji=options.use_emoji)
    if step_config.spot_bugs or step_config.pmd:
        ok("Static code checks passed.", use_emoji=options.use_emoji)


def plan_command(
    root: ROOT_OPTION = Path(),
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
    spot_bugs: SPOT_BUGS_OPTION = None,
    pmd: PMD_OPTION = None,
    spot_bugs_include_filter_file: SPOT_BUGS_INCLUDE_OPTION = None,
    spot_bugs_exclude_filter_file: SPOT_BUGS_EXCLUDE_OPTION = None,
    spot_bugs_max_allowed_violations: SPOT_BUGS_MAX_OPTION = None,
    pmd_max_allowed_violations: PMD_MAX_OPTION = None,
    pmd_failure_priority: PMD_PRIORITY_OPTION = None,
    exclude_module: EXCLUDE_MODULE_OPTION = None,
    install_artifacts: INSTALL_OPTION = None,
    m2_path: M2_PATH_OPTION = None,
    project_settings_file: PROJECT_SETTINGS_OPTION = None,
    global_settings_file: GLOBAL_SETTINGS_OPTION = None,
    log_successful_maven_transfers: TRANSFERS_OPTION = None,
) -> None:
    """Print the consolidated Maven command line without running it."""

    options = build_static_checks_options(
        root=root,
        config=config,
        emoji=emoji,
        spot_bugs=spot_bugs,
        pmd=pmd,
        spot_bugs_include_filter_file=spot_bugs_include_filter_file,
        spot_bugs_exclude_filter_file=spot_bugs_exclude_filter_file,
        spot_bugs_max_allowed_violations=spot_bugs_max_allowed_violations,
        pmd_max_allowed_violations=pmd_max_allowed_violations,
        pmd_failure_priority=pmd_failure_priority,
        exclude_module=exclude_module,
        install_artifacts=install_artifacts,
        m2_path=m2_path,
        project_settings_file=project_settings_file,
        global_settings_file=global_settings_file,
        log_successful_maven_transfers=log_successful_maven_transfers,
    )
    step_config = _load_or_exit(options)
    if not step_config.spot_bugs and not step_config.pmd:
        warn(NO_CHECKS_MESSAGE, use_emoji=options.use_emoji)
        raise typer.Exit(code=0)
    utils = new_static_code_checks_utils(options.root)
    plan = build_invocation_plan(step_config, utils, use_emoji=options.use_emoji)
    typer.echo(shlex.join([MAVEN_EXECUTABLE, *get_parameters_from_options(plan)]))


__all__ = ["plan_command", "static_checks_command"]
