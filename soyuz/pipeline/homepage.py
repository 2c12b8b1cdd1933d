#!/usr/bin/env python3
"""
homepage.py
-----------
Capsule homepage: ``<local_dir>/index.gmi``.

The homepage keeps a short "latest notes" window under the configured
heading. Publishing a post puts it at the top of the window and drops
the oldest entry once the window is full. Anything above the heading or
below the window is left alone:

    # My capsule

    Welcome!

    ## Latest notes

    => /2024/2024-06-02.gmi 2024-06-02 (Second post)
    => /2024/2024-06-01.gmi 2024-06-01 (My First Post)

    => /2024/ Archive

A post counts as listed when its full homepage entry line is present.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Local imports ---
from soyuz.core.config import DEFAULT_LATEST_NOTES
from soyuz.core.logging_manager import SoyuzLogger
from soyuz.dataclasses.post import Post
from soyuz.pipeline.index import IndexFile


class HomepageIndex(IndexFile):
    """
    Bounded list of the most recent posts under a fixed heading.

    Attributes:
        year: Year directory the linked posts live in
        window: Number of entries kept under the heading
    """

    def __init__(
        self,
        path: Path,
        heading: str,
        year: int,
        window: int = DEFAULT_LATEST_NOTES,
        logger: Optional[SoyuzLogger] = None,
    ) -> None:
        super().__init__(path, heading, logger=logger)
        if window < 1:
            raise ValueError(f"window must be at least 1, got {window}")
        self.year = year
        self.window = window

    def format_entry(self, post: Post) -> str:
        return f"=> /{self.year:04d}/{post.filename} {post.stem} ({post.title})"

    def entry_key(self, post: Post) -> str:
        return self.format_entry(post)
