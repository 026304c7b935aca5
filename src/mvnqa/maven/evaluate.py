# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve POM expressions through ``maven-help-plugin``."""

from __future__ import annotations

from typing import Final

from ..errors import MavenEvaluationError
from ..interfaces import StaticCheckUtils
from .execute import execute
from .options import EvaluateOptions, ExecuteOptions

EVALUATE_GOAL: Final[str] = "org.apache.maven.plugins:maven-help-plugin:3.1.0:evaluate"
UNRESOLVED_PREFIX: Final[str] = "null object or invalid expression"


def evaluate(options: EvaluateOptions, expression: str, utils: StaticCheckUtils) -> str:
    """Return the value of ``expression`` for the POM described by ``options``.

    Args:
        options: POM and environment paths used for the lookup.
        expression: Maven expression such as ``project.packaging``.
        utils: Capability bundle used to launch Maven.

    Returns:
        str: Resolved value with surrounding whitespace removed.

    Raises:
        MavenEvaluationError: When Maven reports the expression as unresolved.
        MavenExecutionError: When the Maven run itself fails.
    """

    value = execute(
        ExecuteOptions(
            goals=(EVALUATE_GOAL,),
            defines=(f"-Dexpression={expression}", "-DforceStdout", "-q"),
            pom_path=options.pom_path,
            project_settings_file=options.project_settings_file,
            global_settings_file=options.global_settings_file,
            m2_path=options.m2_path,
            return_stdout=True,
        ),
        utils,
    )
    if value.startswith(UNRESOLVED_PREFIX):
        raise MavenEvaluationError(f"expression '{expression}' in file '{options.pom_path}' could not be resolved")
    return value.strip()


__all__ = ["EVALUATE_GOAL", "evaluate"]
