"""
Sync Command
------------

Commands:
    - sync: Mirror the capsule between this machine and the server

This is a wrapper around rsync; the default transfer is ``rsync -rtOq
--update``, which never replaces a file that is newer at the destination.
"""
from __future__ import annotations

from typing import Optional

import click

from soyuz.core.cli_options import delete_option, overwrite_option
from soyuz.core.config import load_config
from soyuz.core.logging_manager import SoyuzLogger, handle_cli_error
from soyuz.pipeline.mirror import Mirror, SyncPolicy


def resolve_policy(overwrite: bool, delete: bool) -> SyncPolicy:
    """
    Transfer policy for the sync flags.

    Raises:
        click.UsageError: If both flags are given
    """
    if overwrite and delete:
        raise click.UsageError("--overwrite and --delete cannot be combined")
    if overwrite:
        return SyncPolicy.OVERWRITE
    if delete:
        return SyncPolicy.DELETE
    return SyncPolicy.UPDATE


@click.command()
@click.argument("direction", required=False, type=click.Choice(["up", "down"]))
@overwrite_option
@delete_option
@click.pass_context
def sync(
    ctx: click.Context,
    direction: Optional[str],
    overwrite: bool,
    delete: bool,
) -> None:
    """
    Synchronise files between this machine and the server.

    DIRECTION is 'up' (local to server, the default) or 'down' (server
    to local). Without flags only new or changed files are copied;
    files edited more recently at the destination are left alone.
    """
    if direction is None and (overwrite or delete):
        raise click.UsageError("--overwrite and --delete need an explicit direction")

    logger: SoyuzLogger = ctx.obj["logger"]
    direction = direction or "up"
    policy = resolve_policy(overwrite, delete)

    try:
        config = load_config(ctx.obj["config_path"])
        if direction == "down":
            source, destination = config.remote_root, config.local_root
        else:
            source, destination = config.local_root, config.remote_root

        Mirror(timeout=config.sync_timeout, logger=logger).sync(source, destination, policy)
    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "sync",
            additional_context={"direction": direction, "policy": policy.value},
        )
        return

    click.echo("Sync complete.")


__all__ = ["sync", "resolve_policy"]
