# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compose and run the consolidated Maven static code checks invocation.

The orchestrator turns one :class:`StaticCodeChecksConfig` into at most two
external runs: an optional installation of the project's artifacts and exactly
one ``mvn`` call carrying the goals and defines of every enabled check. Any
failure of either run is re-raised unchanged; Maven's exit status is the only
verdict and nothing is retried.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..config.models import StaticCodeChecksConfig
from ..errors import MvnqaError
from ..interfaces import StaticCheckUtils
from ..logging import fail, warn
from ..maven.execute import execute
from ..maven.install import install_maven_artifacts
from ..maven.modules import get_module_excludes, get_test_modules_excludes
from ..maven.options import EvaluateOptions, ExecuteOptions
from ..runtime.utils import new_static_code_checks_utils
from ..telemetry import CustomData
from .pmd import get_pmd_maven_parameters
from .spotbugs import get_spot_bugs_maven_parameters

Executor = Callable[[ExecuteOptions, StaticCheckUtils], str]
Installer = Callable[..., None]

NO_CHECKS_MESSAGE = "Neither SpotBugs nor Pmd are configured. Skipping step execution"


def build_invocation_plan(
    config: StaticCodeChecksConfig,
    utils: StaticCheckUtils,
    *,
    use_emoji: bool = True,
) -> ExecuteOptions:
    """Merge module exclusions and every enabled check into one invocation.

    Defines start with the detected test-module exclusions, followed by a
    ``-pl``/``!<module>`` pair per configured module. SpotBugs then PMD append
    their goal and defines. Environment paths are copied from ``config``.

    Args:
        config: Step configuration.
        utils: Capability bundle used to detect test modules.
        use_emoji: Toggle emoji prefixes on warnings.

    Returns:
        ExecuteOptions: Plan for the consolidated Maven run.
    """

    goals: list[str] = []
    defines: list[str] = [
        *get_test_modules_excludes(utils),
        *get_module_excludes(config.maven_modules_excludes),
    ]
    if config.spot_bugs:
        spot_bugs = get_spot_bugs_maven_parameters(config)
        defines.extend(spot_bugs.defines)
        goals.extend(spot_bugs.goals)
    if config.pmd:
        pmd = get_pmd_maven_parameters(config, use_emoji=use_emoji)
        defines.extend(pmd.defines)
        goals.extend(pmd.goals)
    return ExecuteOptions(
        goals=tuple(goals),
        defines=tuple(defines),
        project_settings_file=config.project_settings_file,
        global_settings_file=config.global_settings_file,
        m2_path=config.m2_path,
        log_successful_maven_transfers=config.log_successful_maven_transfers,
    )


def run_maven_static_code_checks(
    config: StaticCodeChecksConfig,
    utils: StaticCheckUtils,
    telemetry: CustomData | None = None,
    *,
    executor: Executor = execute,
    installer: Installer = install_maven_artifacts,
    use_emoji: bool = True,
) -> ExecuteOptions | None:
    """Run the enabled checks as a single Maven invocation.

    Args:
        config: Step configuration.
        utils: Capability bundle handed to the installer and executor.
        telemetry: Optional sink receiving run metadata.
        executor: Runs one Maven invocation.
        installer: Installs project artifacts into the local repository.
        use_emoji: Toggle emoji prefixes on warnings.

    Returns:
        ExecuteOptions | None: The executed plan, or ``None`` when no check is
        enabled and nothing ran.

    Raises:
        MvnqaError: Installation or invocation failures, propagated unchanged.
    """

    if not config.spot_bugs and not config.pmd:
        warn(NO_CHECKS_MESSAGE, use_emoji=use_emoji)
        return None

    if config.install_artifacts:
        installer(
            utils,
            EvaluateOptions(
                m2_path=config.m2_path,
                project_settings_file=config.project_settings_file,
                global_settings_file=config.global_settings_file,
            ),
            use_emoji=use_emoji,
        )

    plan = build_invocation_plan(config, utils, use_emoji=use_emoji)
    if telemetry is not None:
        telemetry.enabled_checks = [
            name for name, enabled in (("spotBugs", config.spot_bugs), ("pmd", config.pmd)) if enabled
        ]
        telemetry.goal_count = len(plan.goals)
        telemetry.install_artifacts = config.install_artifacts
    executor(plan, utils)
    return plan


def maven_execute_static_code_checks(
    config: StaticCodeChecksConfig,
    telemetry: CustomData | None = None,
    *,
    root: Path | None = None,
    use_emoji: bool = True,
) -> None:
    """Step entry point: run the checks in ``root`` and exit on failure.

    Args:
        config: Step configuration.
        telemetry: Optional telemetry sink.
        root: Project directory; defaults to the current directory.
        use_emoji: Toggle emoji prefixes on console output.

    Raises:
        SystemExit: With status 1 when installation or the Maven run fails.
    """

    utils = new_static_code_checks_utils(root)
    try:
        run_maven_static_code_checks(config, utils, telemetry, use_emoji=use_emoji)
    except MvnqaError as exc:
        fail(f"step execution failed: {exc}", use_emoji=use_emoji)
        raise SystemExit(1) from exc


__all__ = [
    "Executor",
    "Installer",
    "NO_CHECKS_MESSAGE",
    "build_invocation_plan",
    "maven_execute_static_code_checks",
    "run_maven_static_code_checks",
]
