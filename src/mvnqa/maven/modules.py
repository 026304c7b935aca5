# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reactor exclusions for conventional test-only sub-modules."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..interfaces import StaticCheckUtils

TEST_MODULES: Final[tuple[str, ...]] = ("unit-tests", "integration-tests")


def get_test_modules_excludes(utils: StaticCheckUtils) -> list[str]:
    """Return ``-pl !<module>`` pairs for test modules present in the project.

    Args:
        utils: Capability bundle used to probe for ``<module>/pom.xml``.

    Returns:
        list[str]: Exclusion parameters, empty when no test module exists.
    """

    excludes: list[str] = []
    for module in TEST_MODULES:
        if utils.file_exists(f"{module}/pom.xml"):
            excludes.extend(("-pl", f"!{module}"))
    return excludes


def get_module_excludes(modules: Sequence[str]) -> list[str]:
    """Return one ``-pl``/``!<module>`` pair per entry, preserving order."""

    excludes: list[str] = []
    for module in modules:
        excludes.extend(("-pl", f"!{module}"))
    return excludes


__all__ = ["TEST_MODULES", "get_module_excludes", "get_test_modules_excludes"]
