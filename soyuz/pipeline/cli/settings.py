"""
Settings and Help Commands
--------------------------

Commands:
    - settings: Create the settings file if needed and open it
    - help: Show the command overview
"""
from __future__ import annotations

from pathlib import Path

import click

from soyuz.core.config import load_editor, write_default_config
from soyuz.core.logging_manager import SoyuzLogger, handle_cli_error
from soyuz.pipeline.editor import open_in_editor


@click.command()
@click.pass_context
def settings(ctx: click.Context) -> None:
    """Create or edit the settings file."""
    logger: SoyuzLogger = ctx.obj["logger"]
    config_path: Path = ctx.obj["config_path"]

    try:
        if write_default_config(config_path):
            click.echo(f"Created settings file: {config_path}")
            logger.log_operation("settings_created", {"path": str(config_path)})
        open_in_editor(load_editor(config_path), config_path, logger)
    except Exception as e:
        handle_cli_error(ctx, e, "settings", additional_context={"path": str(config_path)})


@click.command("help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show this help screen."""
    click.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())


__all__ = ["settings", "help_command"]
