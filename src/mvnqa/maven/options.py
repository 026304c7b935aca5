# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value objects describing a single Maven invocation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExecuteOptions:
    """Goals, defines and environment paths for one ``mvn`` run.

    Attributes:
        goals: Goals executed in order, e.g. fully qualified plugin goals.
        defines: ``-D`` properties and reactor switches such as ``-pl``.
        flags: Additional command line flags placed before the defines.
        pom_path: Optional POM passed via ``--file``.
        project_settings_file: Optional ``--settings`` file.
        global_settings_file: Optional ``--global-settings`` file.
        m2_path: Optional local repository passed as ``maven.repo.local``.
        log_successful_maven_transfers: Keep Maven's transfer progress logging.
        return_stdout: Capture standard output and return it to the caller.
    """

    goals: tuple[str, ...] = ()
    defines: tuple[str, ...] = ()
    flags: tuple[str, ...] = ()
    pom_path: str = ""
    project_settings_file: str = ""
    global_settings_file: str = ""
    m2_path: str = ""
    log_successful_maven_transfers: bool = False
    return_stdout: bool = False


@dataclass(frozen=True, slots=True)
class EvaluateOptions:
    """Environment paths shared by evaluation and installation runs."""

    pom_path: str = ""
    project_settings_file: str = ""
    global_settings_file: str = ""
    m2_path: str = ""


__all__ = ["EvaluateOptions", "ExecuteOptions"]
