# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the static code check orchestrator."""

from __future__ import annotations


class MvnqaError(Exception):
    """Base class for failures that terminate a static code check run."""


class ConfigError(MvnqaError):
    """Raised when configuration input is invalid."""


class MavenExecutionError(MvnqaError):
    """Raised when the Maven executable could not run or exited unsuccessfully."""

    def __init__(self, command: tuple[str, ...], cause: BaseException) -> None:
        """Initialise the error with the failing command line and its cause.

        Args:
            command: Full command line (executable followed by parameters).
            cause: Underlying error reported by the process layer.
        """

        super().__init__(f"failed to run executable, command: '{list(command)}', error: {cause}")
        self.command = command
        self.cause = cause


class MavenEvaluationError(MvnqaError):
    """Raised when ``help:evaluate`` cannot resolve an expression."""


class MavenInstallError(MvnqaError):
    """Raised when installing project artifacts into the local repository fails."""


__all__ = [
    "ConfigError",
    "MavenEvaluationError",
    "MavenExecutionError",
    "MavenInstallError",
    "MvnqaError",
]
