#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click options for the soyuz command line.

Usage:
    from soyuz.core.cli_options import config_option, log_dir_option, verbose_option

    @click.group()
    @config_option
    @log_dir_option
    @verbose_option
    def cli(config, log_dir, verbose):
        pass
"""
import click

from soyuz.core.paths import CONFIG_PATH, LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# GLOBAL OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_PATH),
    envvar="SOYUZ_CONFIG",
    show_default=True,
    help="Settings file",
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files",
)

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show full tracebacks on errors",
)


# ═══════════════════════════════════════════════════════════════════════════
# SYNC OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

overwrite_option = click.option(
    "--overwrite",
    is_flag=True,
    help="Overwrite all files at the destination regardless of last edit date",
)

delete_option = click.option(
    "--delete",
    is_flag=True,
    help="Delete files at the destination that do not exist at the source",
)
