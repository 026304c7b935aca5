# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the capabilities injected into the check orchestrator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputStream(Protocol):
    """Minimal writable text stream receiving child process output."""

    def write(self, text: str) -> int:
        """Write ``text`` to the stream and return the number of characters written."""

        raise NotImplementedError("OutputStream.write must be implemented")

    def flush(self) -> None:
        """Flush buffered output."""

        raise NotImplementedError("OutputStream.flush must be implemented")


@runtime_checkable
class StaticCheckUtils(Protocol):
    """Process and filesystem capabilities consumed by the Maven helpers."""

    def stdout(self, out: OutputStream) -> None:
        """Route standard output of subsequent executions to ``out``.

        Args:
            out: Stream receiving the captured standard output.
        """

        raise NotImplementedError("StaticCheckUtils.stdout must be implemented")

    def stderr(self, err: OutputStream) -> None:
        """Route standard error of subsequent executions to ``err``.

        Args:
            err: Stream receiving the captured standard error.
        """

        raise NotImplementedError("StaticCheckUtils.stderr must be implemented")

    def run_executable(self, executable: str, *params: str) -> None:
        """Run ``executable`` with ``params`` and block until it exits.

        Args:
            executable: Name or path of the program to launch.
            *params: Arguments passed to the program verbatim.

        Raises:
            Exception: Implementations raise when the program cannot be started
                or exits with a non-zero status.
        """

        raise NotImplementedError("StaticCheckUtils.run_executable must be implemented")

    def file_exists(self, filename: str) -> bool:
        """Return ``True`` when ``filename`` exists and is a regular file.

        Args:
            filename: Path to probe, relative to the working directory.

        Returns:
            bool: ``True`` when the file exists.
        """

        raise NotImplementedError("StaticCheckUtils.file_exists must be implemented")

    def glob(self, pattern: str) -> list[str]:
        """Return paths matching ``pattern`` relative to the working directory.

        Args:
            pattern: Glob pattern supporting ``**`` for recursive matches.

        Returns:
            list[str]: Sorted matching paths.
        """

        raise NotImplementedError("StaticCheckUtils.glob must be implemented")


__all__ = ["OutputStream", "StaticCheckUtils"]
