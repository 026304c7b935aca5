# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""SpotBugs contribution to the consolidated Maven invocation."""

from __future__ import annotations

from typing import Final

from ..config.models import StaticCodeChecksConfig
from ..maven.options import ExecuteOptions

# The check goal runs the spotbugs goal first and fails the build on findings.
SPOTBUGS_CHECK_GOAL: Final[str] = "com.github.spotbugs:spotbugs-maven-plugin:4.1.4:check"


def get_spot_bugs_maven_parameters(config: StaticCodeChecksConfig) -> ExecuteOptions:
    """Return the SpotBugs goal and defines for ``config``.

    Filter files are passed through without checking that they exist.

    Args:
        config: Step configuration.

    Returns:
        ExecuteOptions: The pinned check goal plus include filter, exclude
        filter and violation threshold defines, each only when set.
    """

    defines: list[str] = []
    if config.spot_bugs_include_filter_file:
        defines.append(f"-Dspotbugs.includeFilterFile={config.spot_bugs_include_filter_file}")
    if config.spot_bugs_exclude_filter_file:
        defines.append(f"-Dspotbugs.excludeFilterFile={config.spot_bugs_exclude_filter_file}")
    if config.spot_bugs_max_allowed_violations != 0:
        defines.append(f"-Dspotbugs.maxAllowedViolations={config.spot_bugs_max_allowed_violations}")
    return ExecuteOptions(goals=(SPOTBUGS_CHECK_GOAL,), defines=tuple(defines))


__all__ = ["SPOTBUGS_CHECK_GOAL", "get_spot_bugs_maven_parameters"]
