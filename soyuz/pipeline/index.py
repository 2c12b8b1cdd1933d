#!/usr/bin/env python3
"""
index.py
--------
Shared read-modify-write logic for index documents on disk.

IndexFile reads a document (missing files are fine), decides through
``soyuz.dataclasses.index_document.upsert`` whether the post needs
listing, and rewrites the file only when the text changes. Subclasses
supply the heading, the entry format, the entry key and the size of the
list window.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Local imports ---
from soyuz.core.logging_manager import SoyuzLogger, safe_logger
from soyuz.dataclasses.index_document import IndexDocument, upsert
from soyuz.dataclasses.post import Post
from soyuz.utils.fs import read_text_if_exists, write_text_atomic


class IndexFile:
    """
    Base class for a heading + link list document on disk.

    Attributes:
        path: Document file path
        heading: Heading line the entries live under
        window: Maximum number of entries kept (None: unbounded)
        logger: Logger (NullLogger if none given)
    """

    window: Optional[int] = None

    def __init__(
        self,
        path: Path,
        heading: str,
        logger: Optional[SoyuzLogger] = None,
    ) -> None:
        self.path = Path(path)
        self.heading = heading
        self.logger = safe_logger(logger)

    # ---- Subclass hooks ----
    def format_entry(self, post: Post) -> str:
        """Link line for ``post`` in this document."""
        raise NotImplementedError

    def entry_key(self, post: Post) -> str:
        """Substring whose presence means ``post`` is already listed."""
        raise NotImplementedError

    # ---- Text transformation ----
    def render(self, text: Optional[str], post: Post) -> str:
        """
        Document text with ``post`` listed.

        Args:
            text: Current text, or None if the file does not exist
            post: Post to list

        Returns:
            New text (identical to ``text`` when already listed)
        """
        return upsert(
            text,
            self.format_entry(post),
            self.heading,
            key=self.entry_key(post),
            limit=self.window,
        )

    # ---- Disk update ----
    def update(self, post: Post) -> bool:
        """
        List ``post`` in the document on disk.

        Args:
            post: Post to list

        Returns:
            True if the file was written, False if it already listed the post
        """
        text = read_text_if_exists(self.path)
        new_text = self.render(text, post)

        if new_text == text:
            self.logger.log_debug(
                "Already listed", {"index": str(self.path), "post": post.filename}
            )
            return False

        if text and IndexDocument.parse(text, self.heading) is None:
            self.logger.log_warning(
                f"{self.path} has no '{self.heading}' line; replacing its contents"
            )

        write_text_atomic(self.path, new_text)
        self.logger.log_operation(
            "index_updated",
            {
                "index": str(self.path),
                "post": post.filename,
                "created": text is None,
            },
        )
        return True
