# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default capability bundle backed by the real filesystem and subprocesses."""

from __future__ import annotations

import sys
from pathlib import Path

from ..interfaces import OutputStream, StaticCheckUtils
from ..logging import log_writer
from .process import CommandOptions, SubprocessExecutionError, run_command


class CommandUtils(StaticCheckUtils):
    """Run executables through :func:`run_command` and probe files under ``root``.

    Output of every executable is captured and forwarded to the streams
    registered through :meth:`stdout` and :meth:`stderr` once the process exits.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = root
        self._stdout: OutputStream = sys.stdout
        self._stderr: OutputStream = sys.stderr

    def stdout(self, out: OutputStream) -> None:
        self._stdout = out

    def stderr(self, err: OutputStream) -> None:
        self._stderr = err

    def run_executable(self, executable: str, *params: str) -> None:
        try:
            completed = run_command([executable, *params], options=CommandOptions(cwd=self._root, check=True))
        except SubprocessExecutionError as exc:
            self._forward(exc.stdout, exc.stderr)
            raise
        self._forward(completed.stdout, completed.stderr)

    def file_exists(self, filename: str) -> bool:
        return self._resolve(filename).is_file()

    def glob(self, pattern: str) -> list[str]:
        base = self._root or Path()
        return sorted(str(path.relative_to(base)) for path in base.glob(pattern))

    def _resolve(self, filename: str) -> Path:
        path = Path(filename)
        if path.is_absolute() or self._root is None:
            return path
        return self._root / path

    def _forward(self, stdout: str | None, stderr: str | None) -> None:
        if stdout:
            self._stdout.write(stdout)
            self._stdout.flush()
        if stderr:
            self._stderr.write(stderr)
            self._stderr.flush()


def new_static_code_checks_utils(root: Path | None = None) -> CommandUtils:
    """Return a :class:`CommandUtils` whose output streams feed the console log.

    Args:
        root: Working directory for Maven and file probes; defaults to the
            current directory.

    Returns:
        CommandUtils: Capability bundle ready for the orchestrator.
    """

    utils = CommandUtils(root)
    utils.stdout(log_writer())
    utils.stderr(log_writer())
    return utils


__all__ = ["CommandUtils", "new_static_code_checks_utils"]
