# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the SpotBugs parameter builder."""

from __future__ import annotations

import pytest

from mvnqa.checks.spotbugs import SPOTBUGS_CHECK_GOAL, get_spot_bugs_maven_parameters
from mvnqa.config import StaticCodeChecksConfig


def test_spotbugs_goal_is_pinned_without_defines_by_default() -> None:
    parameters = get_spot_bugs_maven_parameters(StaticCodeChecksConfig())

    assert parameters.goals == ("com.github.spotbugs:spotbugs-maven-plugin:4.1.4:check",)
    assert parameters.goals == (SPOTBUGS_CHECK_GOAL,)
    assert parameters.defines == ()


def test_spotbugs_defines_follow_filter_then_threshold_order() -> None:
    config = StaticCodeChecksConfig(
        spot_bugs_include_filter_file="include.xml",
        spot_bugs_exclude_filter_file="exclude.xml",
        spot_bugs_max_allowed_violations=10,
    )

    parameters = get_spot_bugs_maven_parameters(config)

    assert parameters.defines == (
        "-Dspotbugs.includeFilterFile=include.xml",
        "-Dspotbugs.excludeFilterFile=exclude.xml",
        "-Dspotbugs.maxAllowedViolations=10",
    )


def test_spotbugs_filter_files_are_not_checked_for_existence(tmp_path) -> None:
    missing = str(tmp_path / "does-not-exist.xml")

    parameters = get_spot_bugs_maven_parameters(StaticCodeChecksConfig(spot_bugs_exclude_filter_file=missing))

    assert parameters.defines == (f"-Dspotbugs.excludeFilterFile={missing}",)


@pytest.mark.parametrize("violations", [1, 5, 250, -3])
def test_spotbugs_non_zero_threshold_adds_exactly_one_define(violations: int) -> None:
    parameters = get_spot_bugs_maven_parameters(StaticCodeChecksConfig(spot_bugs_max_allowed_violations=violations))

    matching = [define for define in parameters.defines if define.startswith("-Dspotbugs.maxAllowedViolations=")]
    assert matching == [f"-Dspotbugs.maxAllowedViolations={violations}"]


def test_spotbugs_zero_threshold_means_unset() -> None:
    parameters = get_spot_bugs_maven_parameters(
        StaticCodeChecksConfig(spot_bugs_include_filter_file="include.xml", spot_bugs_max_allowed_violations=0)
    )

    assert parameters.defines == ("-Dspotbugs.includeFilterFile=include.xml",)
