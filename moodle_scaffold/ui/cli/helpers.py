"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from moodle_scaffold.adapters.io.console import ConsoleIO
from moodle_scaffold.core.services.scaffolder import ScaffoldResult


def resolve_root(ctx: click.Context) -> Path:
    """Installation root from context, or the working directory."""
    root: Path | None = ctx.obj.get("root") if ctx.obj else None
    return root if root is not None else Path.cwd()


def make_io(ctx: click.Context) -> ConsoleIO:
    """Console I/O honouring --no-interaction and a non-TTY stdin."""
    if ctx.obj and ctx.obj.get("no_interaction"):
        return ConsoleIO(interactive=False)
    return ConsoleIO()


def exit_for(result: ScaffoldResult) -> None:
    """Exit 1 when the run was aborted; the caller owns the exit code."""
    if not result.ok:
        sys.exit(1)
