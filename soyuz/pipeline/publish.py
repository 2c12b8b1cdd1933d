#!/usr/bin/env python3
"""
publish.py
----------
The publish workflow.

Stages, in order:
    1. SYNC_DOWN       rsync server -> local, update-only
    2. LOCATE_LATEST   latest dated post in this year's directory
                       (directory created once if missing)
    3. UPDATE_INDEXES  year archive, then homepage
    4. SYNC_UP         rsync local -> server, update-only

Any failure stops the run; nothing after the failing stage happens.
Index updates are idempotent, so publishing twice in a row changes
nothing the second time.

Programmatic API:
    from soyuz.pipeline.publish import PublishOrchestrator
    stats = PublishOrchestrator(config, logger=logger).run()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from enum import Enum
from typing import Optional, Tuple

# --- Local imports ---
from soyuz.core.cli import PublishStats
from soyuz.core.config import Config
from soyuz.core.exceptions import DirectoryUnavailableError
from soyuz.core.logging_manager import SoyuzLogger, safe_logger
from soyuz.dataclasses.post import Post
from soyuz.pipeline.archive import ArchiveIndex
from soyuz.pipeline.homepage import HomepageIndex
from soyuz.pipeline.locator import PostLocator
from soyuz.pipeline.mirror import Mirror, SyncPolicy


class PublishStage(Enum):
    """Stages of a publish run."""

    SYNC_DOWN = "sync_down"
    LOCATE_LATEST = "locate_latest"
    UPDATE_INDEXES = "update_indexes"
    SYNC_UP = "sync_up"
    PUBLISHED = "published"


class PublishOrchestrator:
    """
    Sync down, index the latest post, sync up.

    Attributes:
        config: Loaded settings
        mirror: rsync wrapper
        locator: Latest post finder
        logger: Logger (NullLogger if none given)
        stage: Stage currently running (or reached, after a failure)
    """

    def __init__(
        self,
        config: Config,
        mirror: Optional[Mirror] = None,
        locator: Optional[PostLocator] = None,
        logger: Optional[SoyuzLogger] = None,
    ) -> None:
        self.config = config
        self.logger = safe_logger(logger)
        self.mirror = mirror or Mirror(timeout=config.sync_timeout, logger=logger)
        self.locator = locator or PostLocator(logger=logger)
        self.stage: Optional[PublishStage] = None

    def run(self, today: Optional[date] = None) -> PublishStats:
        """
        Publish the capsule.

        Args:
            today: Date used to pick the year directory (defaults to today)

        Returns:
            PublishStats describing what changed

        Raises:
            SyncError: If either rsync transfer fails or times out
            DirectoryUnavailableError: If the year directory cannot be created or listed
            MalformedPostError: If the latest post has no title heading
        """
        stats = PublishStats()
        year = (today or date.today()).year
        self.logger.log_info("Publish started", {"year": year})

        self.stage = PublishStage.SYNC_DOWN
        self.sync_down()
        stats.syncs += 1

        self.stage = PublishStage.LOCATE_LATEST
        post = self.locate_latest(year, stats)

        if post is not None:
            self.stage = PublishStage.UPDATE_INDEXES
            stats.latest_post = post.filename
            stats.archive_updated, stats.homepage_updated = self.update_indexes(post, year)
        else:
            self.logger.log_info("No dated post this year", {"year": year})

        self.stage = PublishStage.SYNC_UP
        self.sync_up()
        stats.syncs += 1

        self.stage = PublishStage.PUBLISHED
        self.logger.log_operation("publish", stats.to_dict())
        return stats

    # ---- Stages ----
    def sync_down(self) -> None:
        """Pull files that are newer on the server."""
        self.mirror.sync(self.config.remote_root, self.config.local_root, SyncPolicy.UPDATE)

    def sync_up(self) -> None:
        """Push files that are newer locally; nothing is deleted."""
        self.mirror.sync(self.config.local_root, self.config.remote_root, SyncPolicy.UPDATE)

    def locate_latest(
        self, year: int, stats: Optional[PublishStats] = None
    ) -> Optional[Post]:
        """
        Latest post of ``year``, creating the year directory if needed.

        A missing directory is created once and scanned again; a second
        failure is not retried.

        Raises:
            DirectoryUnavailableError: If creation fails or the retry fails
            MalformedPostError: If the latest post has no title heading
        """
        year_dir = self.config.year_dir(year)
        try:
            return self.locator.find_latest(year_dir)
        except DirectoryUnavailableError:
            self.logger.log_info("Creating year directory", {"directory": str(year_dir)})

        try:
            year_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryUnavailableError(
                f"Cannot create directory {year_dir}: {e.strerror or e}",
                directory=year_dir,
            ) from e
        if stats is not None:
            stats.directories_created += 1

        return self.locator.find_latest(year_dir)

    def update_indexes(self, post: Post, year: int) -> Tuple[bool, bool]:
        """
        List ``post`` in the year archive, then on the homepage.

        Returns:
            Tuple of (archive written, homepage written)
        """
        archive = ArchiveIndex(self.config.archive_path(year), year, logger=self.logger)
        homepage = HomepageIndex(
            self.config.homepage_path,
            self.config.index_heading,
            year,
            window=self.config.latest_notes,
            logger=self.logger,
        )
        return archive.update(post), homepage.update(post)
