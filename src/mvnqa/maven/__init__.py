# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Maven invocation helpers: argument assembly, evaluation and installation."""

from __future__ import annotations

from .evaluate import evaluate
from .execute import execute, get_parameters_from_options
from .install import install_maven_artifacts
from .modules import get_module_excludes, get_test_modules_excludes
from .options import EvaluateOptions, ExecuteOptions

__all__ = [
    "EvaluateOptions",
    "ExecuteOptions",
    "evaluate",
    "execute",
    "get_module_excludes",
    "get_parameters_from_options",
    "get_test_modules_excludes",
    "install_maven_artifacts",
]
