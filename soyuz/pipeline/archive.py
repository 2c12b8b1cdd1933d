#!/usr/bin/env python3
"""
archive.py
----------
Year archive index: ``<local_dir>/<year>/index.gmi``.

The archive lists every post of the year, newest first:

    # 2024

    => 2024-06-02.gmi 2024-06-02 (Second post)
    => 2024-06-01.gmi 2024-06-01 (My First Post)

A post counts as listed when its filename appears anywhere in the file.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Local imports ---
from soyuz.core.logging_manager import SoyuzLogger
from soyuz.dataclasses.index_document import contains_entry, new_document_text
from soyuz.dataclasses.post import Post
from soyuz.pipeline.index import IndexFile


def archive_heading(year: int) -> str:
    """Heading line of the archive for ``year``."""
    return f"# {year:04d}"


class ArchiveIndex(IndexFile):
    """
    Index of all posts for one year; the list grows by one per post.

    Attributes:
        year: Year this archive covers
    """

    def __init__(
        self,
        path: Path,
        year: int,
        logger: Optional[SoyuzLogger] = None,
    ) -> None:
        super().__init__(path, archive_heading(year), logger=logger)
        self.year = year

    def format_entry(self, post: Post) -> str:
        return f"=> {post.filename} {post.stem} ({post.title})"

    def entry_key(self, post: Post) -> str:
        return post.filename

    def render(self, text: Optional[str], post: Post) -> str:
        # Heading and blank only (or less): start the list over
        if (
            text is not None
            and not contains_entry(text, self.entry_key(post))
            and len(text.splitlines()) <= 2
        ):
            return new_document_text(self.heading, self.format_entry(post))
        return super().render(text, post)
