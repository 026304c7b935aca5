# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate :class:`ExecuteOptions` into an ``mvn`` command line and run it."""

from __future__ import annotations

import io
from typing import Final

from ..errors import MavenExecutionError
from ..interfaces import StaticCheckUtils
from ..logging import log_writer
from ..runtime.process import SubprocessExecutionError
from .options import ExecuteOptions

MAVEN_EXECUTABLE: Final[str] = "mvn"
BATCH_MODE_FLAG: Final[str] = "--batch-mode"
SILENT_TRANSFER_LOGGER_DEFINE: Final[str] = (
    "-Dorg.slf4j.simpleLogger.log.org.apache.maven.cli.transfer.Slf4jMavenTransferListener=warn"
)


def get_parameters_from_options(options: ExecuteOptions) -> list[str]:
    """Return the ``mvn`` argument list for ``options`` (executable excluded).

    Args:
        options: Invocation description assembled by the caller.

    Returns:
        list[str]: Settings, repository, POM, flags, defines, logging switches
        and goals, in the order Maven expects them.
    """

    parameters: list[str] = []
    if options.global_settings_file:
        parameters.extend(("--global-settings", options.global_settings_file))
    if options.project_settings_file:
        parameters.extend(("--settings", options.project_settings_file))
    if options.m2_path:
        parameters.append(f"-Dmaven.repo.local={options.m2_path}")
    if options.pom_path:
        parameters.extend(("--file", options.pom_path))
    parameters.extend(options.flags)
    parameters.extend(options.defines)
    if not options.log_successful_maven_transfers:
        parameters.append(SILENT_TRANSFER_LOGGER_DEFINE)
    parameters.append(BATCH_MODE_FLAG)
    parameters.extend(options.goals)
    return parameters


def execute(options: ExecuteOptions, utils: StaticCheckUtils) -> str:
    """Run Maven once with ``options``.

    Args:
        options: Goals, defines and environment paths for the run.
        utils: Capability bundle used to launch the executable.

    Returns:
        str: Captured standard output when ``options.return_stdout`` is set,
        otherwise an empty string.

    Raises:
        MavenExecutionError: When Maven cannot be started or exits with a
            non-zero status.
    """

    buffer = io.StringIO() if options.return_stdout else None
    utils.stdout(buffer if buffer is not None else log_writer())
    utils.stderr(log_writer())
    parameters = get_parameters_from_options(options)
    try:
        utils.run_executable(MAVEN_EXECUTABLE, *parameters)
    except (SubprocessExecutionError, OSError) as exc:
        raise MavenExecutionError((MAVEN_EXECUTABLE, *parameters), exc) from exc
    finally:
        if buffer is not None:
            utils.stdout(log_writer())
    return buffer.getvalue() if buffer is not None else ""


__all__ = [
    "BATCH_MODE_FLAG",
    "MAVEN_EXECUTABLE",
    "SILENT_TRANSFER_LOGGER_DEFINE",
    "execute",
    "get_parameters_from_options",
]
