"""
Moodle scaffold — CLI entrypoint.

Usage:
    python -m moodle_scaffold.main --help
    python -m moodle_scaffold.main scaffold
    python -m moodle_scaffold.main config generate
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from moodle_scaffold import __version__
from moodle_scaffold.core.observability.logging_config import setup_logging
from moodle_scaffold.ui.cli.helpers import exit_for, make_io, resolve_root


@click.group()
@click.version_option(version=__version__, prog_name="moodle-scaffold")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--root",
    "-r",
    "root",
    type=click.Path(file_okay=False),
    default=None,
    help="Moodle installation root (default: current directory).",
)
@click.option(
    "--no-interaction",
    "-n",
    is_flag=True,
    help="Never prompt; configuration generation is skipped.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    root: str | None,
    no_interaction: bool,
) -> None:
    """Moodle scaffold — generate a Moodle installation's config.php."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["no_interaction"] = no_interaction

    from moodle_scaffold.core.context import set_install_root as _set_ctx_root

    install_root = Path(root).resolve() if root else Path.cwd()
    ctx.obj["root"] = install_root
    _set_ctx_root(install_root)

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("MOODLE_SCAFFOLD_LOG_LEVEL", "WARNING")

    setup_logging(level, log_file=os.environ.get("MOODLE_SCAFFOLD_LOG_FILE"))


@cli.command()
@click.pass_context
def scaffold(ctx: click.Context) -> None:
    """Scaffold Moodle core files (shim, then config.php if missing)."""
    from moodle_scaffold.core.config.loader import SettingsError, load_settings
    from moodle_scaffold.core.services.generators.base import ScaffoldError
    from moodle_scaffold.core.services.hooks import HookError, HookRegistry
    from moodle_scaffold.core.services.scaffolder import Scaffolder

    root = resolve_root(ctx)

    try:
        settings = load_settings(root)
        scaffolder = Scaffolder(
            make_io(ctx),
            root=root,
            hooks=HookRegistry.from_settings(settings, root),
        )
        result = scaffolder.scaffold()
    except (SettingsError, HookError, ScaffoldError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    except OSError as e:
        click.secho(f"❌ Scaffolding failed: {e}", fg="red")
        sys.exit(1)

    exit_for(result)


# ── Register sub-command groups from moodle_scaffold/ui/cli/ ──────

from moodle_scaffold.ui.cli.config import config  # noqa: E402

cli.add_command(config)


if __name__ == "__main__":
    cli()
