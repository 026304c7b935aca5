# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the subprocess wrapper and the default capability bundle."""

from __future__ import annotations

import io
import sys
from dataclasses import fields
from pathlib import Path

import pytest

from mvnqa.runtime.process import CommandOptions, SubprocessExecutionError, run_command
from mvnqa.runtime.utils import CommandUtils


def test_run_command_captures_output() -> None:
    completed = run_command([sys.executable, "-c", "print('hello')"])

    assert completed.returncode == 0
    assert completed.stdout.strip() == "hello"


def test_run_command_raises_on_failure() -> None:
    with pytest.raises(SubprocessExecutionError) as excinfo:
        run_command([sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"])

    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == "bad"


def test_run_command_without_check_returns_status() -> None:
    completed = run_command([sys.executable, "-c", "raise SystemExit(2)"], options=CommandOptions(check=False))

    assert completed.returncode == 2


def test_run_command_reports_missing_executable() -> None:
    with pytest.raises(FileNotFoundError):
        run_command(["definitely-not-an-installed-mvn-binary"])


def test_command_utils_forwards_output_to_streams(tmp_path: Path) -> None:
    utils = CommandUtils(tmp_path)
    out = io.StringIO()
    err = io.StringIO()
    utils.stdout(out)
    utils.stderr(err)

    utils.run_executable(sys.executable, "-c", "import os, sys; print(os.getcwd()); sys.stderr.write('warn')")

    assert Path(out.getvalue().strip()).resolve() == tmp_path.resolve()
    assert err.getvalue() == "warn"


def test_command_utils_forwards_output_of_failed_runs(tmp_path: Path) -> None:
    utils = CommandUtils(tmp_path)
    out = io.StringIO()
    utils.stdout(out)
    utils.stderr(io.StringIO())

    with pytest.raises(SubprocessExecutionError):
        utils.run_executable(sys.executable, "-c", "print('[ERROR] 3 bugs'); raise SystemExit(1)")

    assert "[ERROR] 3 bugs" in out.getvalue()


def test_command_utils_probes_files_relative_to_root(tmp_path: Path) -> None:
    (tmp_path / "unit-tests").mkdir()
    (tmp_path / "unit-tests" / "pom.xml").write_text("<project/>", encoding="utf-8")
    (tmp_path / "pom.xml").write_text("<project/>", encoding="utf-8")
    utils = CommandUtils(tmp_path)

    assert utils.file_exists("unit-tests/pom.xml")
    assert not utils.file_exists("integration-tests/pom.xml")
    assert not utils.file_exists("unit-tests")
    assert utils.glob("**/pom.xml") == ["pom.xml", str(Path("unit-tests") / "pom.xml")]


def test_command_options_carry_only_supported_settings() -> None:
    assert [field.name for field in fields(CommandOptions)] == ["cwd", "check", "capture_output", "discard_stdin"]


def test_run_command_closes_stdin_for_children() -> None:
    completed = run_command([sys.executable, "-c", "import sys; print(repr(sys.stdin.read()))"])

    assert completed.stdout.strip() == "''"
