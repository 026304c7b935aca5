# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any

import pytest

from mvnqa.interfaces import OutputStream
from mvnqa.runtime.process import SubprocessExecutionError


@dataclass
class FakeUtils:
    """In-memory capability bundle recording every executable call.

    ``outputs`` maps a parameter (e.g. ``-Dexpression=project.packaging``) to
    the text written to stdout when a call contains it; ``failing`` lists
    parameters whose presence makes the call exit with status 1.
    """

    files: set[str] = field(default_factory=set)
    glob_results: dict[str, list[str]] = field(default_factory=dict)
    outputs: dict[str, Any] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)
    calls: list[tuple[str, ...]] = field(default_factory=list)
    out: OutputStream = field(default=sys.stdout)
    err: OutputStream = field(default=sys.stderr)

    def stdout(self, out: OutputStream) -> None:
        self.out = out

    def stderr(self, err: OutputStream) -> None:
        self.err = err

    def run_executable(self, executable: str, *params: str) -> None:
        command = (executable, *params)
        self.calls.append(command)
        for needle, text in self.outputs.items():
            if needle in params:
                self.out.write(text(params) if callable(text) else text)
        if self.failing.intersection(params):
            raise SubprocessExecutionError(command, 1, None, "BUILD FAILURE")

    def file_exists(self, filename: str) -> bool:
        return filename in self.files

    def glob(self, pattern: str) -> list[str]:
        return list(self.glob_results.get(pattern, []))


@pytest.fixture
def fake_utils() -> FakeUtils:
    """Return an empty :class:`FakeUtils`."""
    return FakeUtils()


@pytest.fixture
def recorded_warnings(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Capture warnings emitted by the check modules instead of printing them."""

    messages: list[str] = []

    def fake_warn(msg: str, *, use_emoji: bool = True, use_color: bool | None = None) -> None:
        messages.append(msg)

    for target in ("mvnqa.checks.pmd.warn", "mvnqa.checks.orchestrator.warn", "mvnqa.maven.install.warn"):
        monkeypatch.setattr(target, fake_warn)
    return messages

