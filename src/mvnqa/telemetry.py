# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Telemetry custom data recorded by a step run."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class CustomData:
    """Step-specific telemetry values.

    The orchestrator only writes to this object; emitting it is left to the
    embedding automation.
    """

    enabled_checks: list[str] = field(default_factory=list)
    goal_count: int = 0
    install_artifacts: bool = False


__all__ = ["CustomData"]
