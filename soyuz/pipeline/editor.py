#!/usr/bin/env python3
"""
editor.py
---------
Open files in the user's editor and prepare today's post.

Usage:
    from soyuz.pipeline.editor import open_in_editor, write_today

    open_in_editor("nano", path)
    write_today(config, checker)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shlex
import subprocess
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

# --- Local imports ---
from soyuz.core.config import Config
from soyuz.core.exceptions import EditorError
from soyuz.core.logging_manager import SoyuzLogger, safe_logger
from soyuz.pipeline.mirror import RemoteChecker
from soyuz.utils.fs import post_filename


def open_in_editor(
    editor: str, path: Path, logger: Optional[SoyuzLogger] = None
) -> int:
    """
    Open ``path`` in ``editor`` and wait for it to exit.

    The editor setting may carry arguments (``code -w``).

    Args:
        editor: Editor command line
        path: File to open
        logger: Optional logger

    Returns:
        Editor exit status

    Raises:
        EditorError: If the editor command is empty or cannot be started
    """
    log = safe_logger(logger)
    command = shlex.split(editor)
    if not command:
        raise EditorError("No editor configured")

    try:
        result = subprocess.run([*command, str(path)])
    except OSError as e:
        raise EditorError(f"Failed to run {editor} {path}: {e.strerror or e}") from e

    if result.returncode != 0:
        log.log_warning(f"Editor exited with status {result.returncode}", {"file": str(path)})
    else:
        log.log_debug("Editor closed", {"file": str(path)})
    return result.returncode


@dataclass(frozen=True)
class TodayPost:
    """Where today's post lives locally and on the server."""

    local_path: Path
    remote_host: str
    remote_path: str


def today_post(config: Config, today: Optional[date] = None) -> TodayPost:
    """
    Locations of the post for ``today``.

    Raises:
        ConfigUnavailableError: If ``remote_dir`` has no host part
    """
    today = today or date.today()
    filename = post_filename(today)
    host, remote_root = config.remote_host_and_path()
    return TodayPost(
        local_path=config.year_dir(today.year) / filename,
        remote_host=host,
        remote_path=f"{remote_root}/{today.year:04d}/{filename}",
    )


def write_today(
    config: Config,
    checker: RemoteChecker,
    today: Optional[date] = None,
    logger: Optional[SoyuzLogger] = None,
) -> Optional[Path]:
    """
    Open today's post for writing unless it is already on the server.

    Args:
        config: Loaded settings
        checker: Remote existence check
        today: Date to write for (defaults to today)
        logger: Optional logger

    Returns:
        Path of the opened post, or None if today's post is already published

    Raises:
        SyncError: If the server cannot be checked
        UnexpectedRemoteResponseError: If the check output is not understood
        EditorError: If the editor cannot be started
    """
    log = safe_logger(logger)
    target = today_post(config, today)

    if checker.exists(target.remote_host, target.remote_path):
        log.log_info("Post already published", {"remote": target.remote_path})
        return None

    target.local_path.parent.mkdir(parents=True, exist_ok=True)
    open_in_editor(config.editor, target.local_path, logger)
    return target.local_path
