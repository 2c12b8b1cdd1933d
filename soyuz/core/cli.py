#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and run statistics for soyuz commands.

Functions:
    setup_logger: Initialize SoyuzLogger for a CLI component

Classes:
    OperationStats: Base class for run statistics
    PublishStats: Outcome of one publish run

Usage:
    from soyuz.core.cli import setup_logger, PublishStats

    logger = setup_logger(log_dir, "publish")
    stats = PublishStats()
    stats.archive_updated = True
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from soyuz.core.logging_manager import SoyuzLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> SoyuzLogger:
    """
    Setup logging for CLI operations.

    Creates ``<log_dir>/operations`` if needed and returns a SoyuzLogger
    for the component.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier (e.g. 'publish', 'sync')

    Returns:
        Configured SoyuzLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return SoyuzLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """
        Get elapsed time in seconds (cached after first call).

        Returns:
            Seconds elapsed since start_time
        """
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return f"{self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {"errors": self.errors, "duration": self.duration()}


@dataclass
class PublishStats(OperationStats):
    """
    Statistics for a publish run.

    Attributes:
        latest_post: Filename of the latest post found (None if none)
        directories_created: Year directories created during the run
        archive_updated: Whether the year archive was rewritten
        homepage_updated: Whether the homepage was rewritten
        syncs: Number of rsync transfers completed
    """
    latest_post: Optional[str] = None
    directories_created: int = 0
    archive_updated: bool = False
    homepage_updated: bool = False
    syncs: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.directories_created < 0:
            raise ValueError(
                f"directories_created must be non-negative, got {self.directories_created}"
            )
        if self.syncs < 0:
            raise ValueError(f"syncs must be non-negative, got {self.syncs}")

    def summary(self) -> str:
        """Get formatted summary of what the run changed."""
        if self.latest_post is None:
            post = "no dated post this year"
        else:
            post = f"latest post {self.latest_post}"
        return (
            f"{post}, "
            f"archive {'updated' if self.archive_updated else 'unchanged'}, "
            f"homepage {'updated' if self.homepage_updated else 'unchanged'}, "
            f"{self.syncs} syncs, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "latest_post": self.latest_post,
            "directories_created": self.directories_created,
            "archive_updated": self.archive_updated,
            "homepage_updated": self.homepage_updated,
            "syncs": self.syncs,
        })
        return d
