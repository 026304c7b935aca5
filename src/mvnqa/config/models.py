# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for the Maven static code checks step."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

STEP_NAME: Final[str] = "mavenExecuteStaticCodeChecks"


class StaticCodeChecksConfig(BaseModel):
    """Options of one static code checks run.

    Every field accepts both its snake_case name and the camelCase name used in
    pipeline configuration files (``spotBugs``, ``pmdFailurePriority``,
    ``mavenModulesExcludes``, ``m2Path``, ...). Zero-valued thresholds and
    empty paths mean "not set".
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    spot_bugs: bool = True
    pmd: bool = True
    spot_bugs_include_filter_file: str = ""
    spot_bugs_exclude_filter_file: str = ""
    spot_bugs_max_allowed_violations: int = 0
    pmd_max_allowed_violations: int = 0
    pmd_failure_priority: int = 0
    maven_modules_excludes: tuple[str, ...] = Field(default_factory=tuple)
    install_artifacts: bool = False
    m2_path: str = ""
    project_settings_file: str = ""
    global_settings_file: str = ""
    log_successful_maven_transfers: bool = False

    @classmethod
    def field_keys(cls) -> frozenset[str]:
        """Return every accepted key, snake_case and camelCase alike."""

        keys: set[str] = set()
        for name, info in cls.model_fields.items():
            keys.add(name)
            if info.alias:
                keys.add(info.alias)
        return frozenset(keys)


__all__ = ["STEP_NAME", "StaticCodeChecksConfig"]
