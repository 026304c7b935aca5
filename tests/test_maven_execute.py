# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for Maven command line assembly and execution."""

from __future__ import annotations

import pytest

from mvnqa.errors import MavenEvaluationError, MavenExecutionError
from mvnqa.maven import EvaluateOptions, ExecuteOptions, evaluate, execute, get_parameters_from_options
from mvnqa.maven.evaluate import EVALUATE_GOAL
from mvnqa.maven.execute import SILENT_TRANSFER_LOGGER_DEFINE
from mvnqa.runtime.process import SubprocessExecutionError


def test_parameters_follow_maven_argument_order() -> None:
    options = ExecuteOptions(
        goals=("verify", "site"),
        defines=("-pl", "!docs", "-Dpmd.failurePriority=2"),
        flags=("-U",),
        pom_path="module/pom.xml",
        project_settings_file="settings.xml",
        global_settings_file="global.xml",
        m2_path="/tmp/m2",
    )

    assert get_parameters_from_options(options) == [
        "--global-settings",
        "global.xml",
        "--settings",
        "settings.xml",
        "-Dmaven.repo.local=/tmp/m2",
        "--file",
        "module/pom.xml",
        "-U",
        "-pl",
        "!docs",
        "-Dpmd.failurePriority=2",
        SILENT_TRANSFER_LOGGER_DEFINE,
        "--batch-mode",
        "verify",
        "site",
    ]


def test_successful_transfers_keep_maven_logging() -> None:
    parameters = get_parameters_from_options(ExecuteOptions(goals=("verify",), log_successful_maven_transfers=True))

    assert parameters == ["--batch-mode", "verify"]


def test_execute_runs_mvn_once(fake_utils) -> None:
    output = execute(ExecuteOptions(goals=("verify",)), fake_utils)

    assert output == ""
    assert fake_utils.calls == [("mvn", SILENT_TRANSFER_LOGGER_DEFINE, "--batch-mode", "verify")]


def test_execute_returns_captured_stdout(fake_utils) -> None:
    fake_utils.outputs["verify"] = "captured"

    output = execute(ExecuteOptions(goals=("verify",), return_stdout=True), fake_utils)

    assert output == "captured"


def test_execute_wraps_process_failure(fake_utils) -> None:
    fake_utils.failing.add("verify")

    with pytest.raises(MavenExecutionError) as excinfo:
        execute(ExecuteOptions(goals=("verify",)), fake_utils)

    assert isinstance(excinfo.value.__cause__, SubprocessExecutionError)
    assert excinfo.value.command[0] == "mvn"
    assert "failed to run executable" in str(excinfo.value)


def test_execute_wraps_missing_executable() -> None:
    class MissingMaven:
        def stdout(self, out) -> None:
            pass

        def stderr(self, err) -> None:
            pass

        def run_executable(self, executable: str, *params: str) -> None:
            raise FileNotFoundError(f"Executable '{executable}' was not found on PATH")

        def file_exists(self, filename: str) -> bool:
            return False

        def glob(self, pattern: str) -> list[str]:
            return []

    with pytest.raises(MavenExecutionError) as excinfo:
        execute(ExecuteOptions(goals=("verify",)), MissingMaven())

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_evaluate_uses_help_plugin(fake_utils) -> None:
    fake_utils.outputs["-Dexpression=project.packaging"] = "jar"

    value = evaluate(EvaluateOptions(pom_path="core/pom.xml", m2_path=".m2"), "project.packaging", fake_utils)

    assert value == "jar"
    [call] = fake_utils.calls
    assert call[-1] == EVALUATE_GOAL
    assert call[1:4] == ("-Dmaven.repo.local=.m2", "--file", "core/pom.xml")
    assert "-DforceStdout" in call
    assert "-q" in call


def test_evaluate_rejects_unresolved_expression(fake_utils) -> None:
    fake_utils.outputs["-Dexpression=project.nope"] = "null object or invalid expression"

    with pytest.raises(MavenEvaluationError):
        evaluate(EvaluateOptions(pom_path="pom.xml"), "project.nope", fake_utils)
