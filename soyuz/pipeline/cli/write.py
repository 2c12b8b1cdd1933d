"""
Write Command
-------------

Commands:
    - write: Create or edit today's post in the configured editor

The server is checked first: once today's post has been published it
must be synced down before it is edited again.
"""
from __future__ import annotations

import click

from soyuz.core.config import load_config
from soyuz.core.logging_manager import SoyuzLogger, handle_cli_error
from soyuz.pipeline.editor import write_today
from soyuz.pipeline.mirror import RemoteChecker


@click.command()
@click.pass_context
def write(ctx: click.Context) -> None:
    """Create or edit today's post using the editor from the settings file."""
    logger: SoyuzLogger = ctx.obj["logger"]

    click.echo("Checking server for latest post...")

    try:
        config = load_config(ctx.obj["config_path"])
        checker = RemoteChecker(timeout=config.sync_timeout, logger=logger)
        path = write_today(config, checker, logger=logger)
    except Exception as e:
        handle_cli_error(ctx, e, "write")
        return

    if path is None:
        click.secho("You have already published today!", fg="red", bold=True)
        click.echo("To edit your post, run 'sync down' first.")


__all__ = ["write"]
