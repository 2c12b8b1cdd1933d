"""
Publish Command
---------------

Commands:
    - publish: Sync down, update the indexes, sync up

If you want to make manual homepage changes, run ``soyuz sync down``
first so the server copy is not overwritten by an older local one.
"""
from __future__ import annotations

from typing import Optional

import click

from soyuz.core.config import load_config
from soyuz.core.logging_manager import SoyuzLogger, handle_cli_error
from soyuz.pipeline.publish import PublishOrchestrator


@click.command()
@click.pass_context
def publish(ctx: click.Context) -> None:
    """
    Update the homepage and year archive lists of posts, and publish.

    Syncs new or changed files from the server before updating the
    indexes and syncing up.
    """
    logger: SoyuzLogger = ctx.obj["logger"]
    orchestrator: Optional[PublishOrchestrator] = None

    click.echo("Publishing, please wait...")

    try:
        config = load_config(ctx.obj["config_path"])
        orchestrator = PublishOrchestrator(config, logger=logger)
        stats = orchestrator.run()
    except Exception as e:
        stage = orchestrator.stage.value if orchestrator and orchestrator.stage else None
        handle_cli_error(ctx, e, "publish", additional_context={"stage": stage})
        return

    if stats.latest_post is None:
        click.echo("No posts for this year yet; synced without indexing.")
    else:
        click.echo(f"  Latest post: {stats.latest_post}")
        click.echo(f"  Archive: {'updated' if stats.archive_updated else 'already listed'}")
        click.echo(f"  Homepage: {'updated' if stats.homepage_updated else 'already listed'}")
    click.echo("🎉 published!")


__all__ = ["publish"]
