"""
CLI commands for config.php.

Thin wrappers over ``moodle_scaffold.core.services.scaffolder`` and
the generators.
"""

from __future__ import annotations

import sys

import click

from moodle_scaffold.ui.cli.helpers import exit_for, make_io, resolve_root


@click.group()
def config() -> None:
    """Moodle configuration file — generate and inspect config.php."""


@config.command("generate")
@click.pass_context
def config_generate(ctx: click.Context) -> None:
    """Prompt for the site configuration and (over)write config.php."""
    from moodle_scaffold.core.services.generators.base import ScaffoldError
    from moodle_scaffold.core.services.scaffolder import Scaffolder

    scaffolder = Scaffolder(make_io(ctx), root=resolve_root(ctx))

    try:
        result = scaffolder.generate_configuration_file()
    except ScaffoldError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    except OSError as e:
        click.secho(f"❌ Generation failed: {e}", fg="red")
        sys.exit(1)

    exit_for(result)


@config.command("status")
@click.pass_context
def config_status(ctx: click.Context) -> None:
    """Show whether config.php and the moodle/ shim exist."""
    from moodle_scaffold.core.services.generators.config_file import ConfigFile
    from moodle_scaffold.core.services.generators.shim_config_file import ShimConfigFile

    io = make_io(ctx)
    root = resolve_root(ctx)

    click.secho(f"\n📋 {root}", fg="cyan", bold=True)
    for label, generator in (
        ("Configuration", ConfigFile(io, root)),
        ("Shim", ShimConfigFile(io, root)),
    ):
        if generator.exists():
            click.secho(f"   ✓ {label}", fg="green", nl=False)
        else:
            click.secho(f"   ✗ {label}", fg="red", nl=False)
        click.echo(f"  → {generator.path}")
    click.echo()
