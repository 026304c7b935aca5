# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""SpotBugs and PMD parameter builders and the check orchestrator."""

from __future__ import annotations

from .orchestrator import build_invocation_plan, maven_execute_static_code_checks, run_maven_static_code_checks
from .pmd import PMD_CHECK_GOAL, get_pmd_maven_parameters
from .spotbugs import SPOTBUGS_CHECK_GOAL, get_spot_bugs_maven_parameters

__all__ = [
    "PMD_CHECK_GOAL",
    "SPOTBUGS_CHECK_GOAL",
    "build_invocation_plan",
    "get_pmd_maven_parameters",
    "get_spot_bugs_maven_parameters",
    "maven_execute_static_code_checks",
    "run_maven_static_code_checks",
]
