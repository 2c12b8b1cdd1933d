#!/usr/bin/env python3
"""
Soyuz CLI
---------

Command line interface for writing and publishing Gemini posts.

Commands:
    - help: Show this help
    - settings: Create or edit the settings file
    - write: Create or edit today's post
    - publish: Update the homepage and year archive, then publish
    - sync: rsync wrapper (sync [up|down [--overwrite|--delete]])

Usage:
    soyuz write
    soyuz publish
    soyuz sync down
    soyuz sync up --delete

Anything the CLI does not understand prints this help and exits 0.
"""
from __future__ import annotations

from pathlib import Path

import click

from soyuz import __version__
from soyuz.core.cli import setup_logger
from soyuz.core.cli_options import config_option, log_dir_option, verbose_option


class HelpFallbackGroup(click.Group):
    """Click group that prints help instead of failing on bad usage."""

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            click.echo(ctx.get_help())
            ctx.exit(0)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except click.UsageError:
            click.echo(ctx.get_help())
            ctx.exit(0)


@click.group(cls=HelpFallbackGroup, invoke_without_command=True)
@config_option
@log_dir_option
@verbose_option
@click.version_option(__version__, prog_name="soyuz")
@click.pass_context
def cli(ctx: click.Context, config_path: str, log_dir: str, verbose: bool) -> None:
    """Soyuz - a command line program for publishing Gemini posts."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    ctx.obj["logger"] = setup_logger(Path(log_dir), ctx.invoked_subcommand)


# Import and register commands from submodules
from .publish import publish
from .settings import help_command, settings
from .sync import sync
from .write import write

cli.add_command(help_command)
cli.add_command(settings)
cli.add_command(write)
cli.add_command(publish)
cli.add_command(sync)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
