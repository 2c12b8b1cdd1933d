#!/usr/bin/env python3
"""
post.py
-------------------

Defines the Post dataclass: one dated Gemini post read from disk.

A post file is named ``YYYY-MM-DD.gmi`` and its first line is the title
heading (``# My First Post``). Posts are never written back; only their
filename and title are referenced from the index documents.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

# ---- Local imports ----
from soyuz.core.exceptions import MalformedPostError
from soyuz.core.paths import POST_EXTENSION
from soyuz.utils.fs import parse_date_from_stem, post_stem


# ----- Constants -----
TITLE_PREFIX = "# "


# ----- Dataclass -----
@dataclass(frozen=True)
class Post:
    """
    A dated post.

    Attributes:
        filename: Bare filename, e.g. ``2024-06-01.gmi``
        title: Title taken from the first line, without the ``# `` prefix
        date: Calendar date of the post, or None when the filename digits
            do not form a real date (``2024-02-30``)
    """

    filename: str
    title: str
    date: Optional[date] = None

    @property
    def stem(self) -> str:
        """Filename without extension, e.g. ``2024-06-01``."""
        if self.filename.endswith(POST_EXTENSION):
            return self.filename[: -len(POST_EXTENSION)]
        return self.filename

    # ---- Public constructors ----
    @classmethod
    def from_text(cls, filename: str, text: str) -> Post:
        """
        Build a Post from a filename and the file's contents.

        Raises:
            MalformedPostError: If the first line does not start with ``# ``
        """
        lines = text.splitlines()
        first_line = lines[0] if lines else ""
        if not first_line.startswith(TITLE_PREFIX):
            raise MalformedPostError(
                f"{filename}: first line must start with '{TITLE_PREFIX}' "
                f"followed by the post title, got {first_line!r}"
            )

        stem = post_stem(filename) or filename
        return cls(
            filename=filename,
            title=first_line[len(TITLE_PREFIX):],
            date=parse_date_from_stem(stem),
        )

    @classmethod
    def from_file(cls, path: Path) -> Post:
        """
        Read a post from disk.

        Raises:
            MalformedPostError: If the first line lacks the title prefix
            OSError: If the file cannot be read
        """
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_text(Path(path).name, text)
