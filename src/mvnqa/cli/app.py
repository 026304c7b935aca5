# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .commands import plan_command, static_checks_command

app = typer.Typer(help="Maven static code checks orchestrator (SpotBugs and PMD).", no_args_is_help=True)
app.command("static-checks")(static_checks_command)
app.command("plan")(plan_command)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
