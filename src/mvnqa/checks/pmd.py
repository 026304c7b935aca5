# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""PMD contribution to the consolidated Maven invocation."""

from __future__ import annotations

from typing import Final

from ..config.models import StaticCodeChecksConfig
from ..logging import warn
from ..maven.options import ExecuteOptions

# The check goal runs the pmd goal first and fails the build on violations.
PMD_CHECK_GOAL: Final[str] = "org.apache.maven.plugins:maven-pmd-plugin:3.13.0:check"
MIN_FAILURE_PRIORITY: Final[int] = 1
MAX_FAILURE_PRIORITY: Final[int] = 5


def get_pmd_maven_parameters(config: StaticCodeChecksConfig, *, use_emoji: bool = True) -> ExecuteOptions:
    """Return the PMD goal and defines for ``config``.

    A non-zero failure priority outside ``[1, 5]`` is dropped with a warning
    rather than clamped, leaving the plugin default in effect.

    Args:
        config: Step configuration.
        use_emoji: Toggle emoji prefixes on the warning.

    Returns:
        ExecuteOptions: The pinned check goal plus violation threshold and
        failure priority defines, each only when set.
    """

    defines: list[str] = []
    if config.pmd_max_allowed_violations != 0:
        defines.append(f"-Dpmd.maxAllowedViolations={config.pmd_max_allowed_violations}")
    priority = config.pmd_failure_priority
    if MIN_FAILURE_PRIORITY <= priority <= MAX_FAILURE_PRIORITY:
        defines.append(f"-Dpmd.failurePriority={priority}")
    elif priority != 0:
        warn(
            f"Pmd failure priority must be a value between {MIN_FAILURE_PRIORITY} and {MAX_FAILURE_PRIORITY}. "
            f"{priority} was configured. Defaulting to {MAX_FAILURE_PRIORITY}.",
            use_emoji=use_emoji,
        )
    return ExecuteOptions(goals=(PMD_CHECK_GOAL,), defines=tuple(defines))


__all__ = ["PMD_CHECK_GOAL", "get_pmd_maven_parameters"]
