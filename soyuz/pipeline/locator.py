#!/usr/bin/env python3
"""
locator.py
----------
Find the most recent dated post in a year directory.

Usage:
    from soyuz.pipeline.locator import PostLocator

    post = PostLocator().find_latest(config.year_dir(2024))
    if post is not None:
        print(post.filename, post.title)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Local imports ---
from soyuz.core.exceptions import DirectoryUnavailableError
from soyuz.core.logging_manager import SoyuzLogger, safe_logger
from soyuz.dataclasses.post import Post
from soyuz.utils.fs import post_sort_key, post_stem


class PostLocator:
    """
    Select the chronologically latest ``YYYY-MM-DD.gmi`` file in a directory.

    Files that do not match the naming scheme (``index.gmi``, ``notes.txt``,
    ``2024-1-5.gmi``) are skipped, as are directories. Dates are compared
    on their digits only, so day and month values are not checked against
    the calendar.
    """

    def __init__(self, logger: Optional[SoyuzLogger] = None) -> None:
        self.logger = safe_logger(logger)

    def latest_filename(self, directory: Path) -> Optional[str]:
        """
        Filename of the latest dated post in ``directory``.

        Args:
            directory: Year directory to scan

        Returns:
            Filename, or None if the directory holds no dated posts

        Raises:
            DirectoryUnavailableError: If the directory cannot be listed
        """
        try:
            entries = list(Path(directory).iterdir())
        except OSError as e:
            raise DirectoryUnavailableError(
                f"Cannot list directory {directory}: {e.strerror or e}",
                directory=directory,
            ) from e

        latest: Optional[str] = None
        latest_key = -1
        for entry in entries:
            stem = post_stem(entry.name)
            if stem is None or not entry.is_file():
                continue
            key = post_sort_key(stem)
            if key >= latest_key:
                latest, latest_key = entry.name, key

        self.logger.log_debug(
            "Scanned year directory",
            {"directory": str(directory), "entries": len(entries), "latest": latest},
        )
        return latest

    def find_latest(self, directory: Path) -> Optional[Post]:
        """
        Latest dated post in ``directory``, read from disk.

        Raises:
            DirectoryUnavailableError: If the directory cannot be listed
            MalformedPostError: If the latest post has no title heading
        """
        filename = self.latest_filename(directory)
        if filename is None:
            return None
        return Post.from_file(Path(directory) / filename)
