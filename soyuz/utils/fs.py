#!/usr/bin/env python3
"""
fs.py
-------------------
Filename utilities for dated posts.

Posts are named ``YYYY-MM-DD.gmi``. The pattern is checked on digit
width only: ``2024-02-30.gmi`` is a valid post name even though the
date does not exist, while ``2024-1-5.gmi`` is not.

Functions:
    post_stem: Return the date stem of a post filename, or None
    post_sort_key: Integer key for chronological comparison
    post_filename: Post filename for a date
    parse_date_from_stem: Calendar date for a stem, when it is a real date

Usage:
    from soyuz.utils.fs import post_stem, post_sort_key

    stem = post_stem("2024-06-01.gmi")    # "2024-06-01"
    key = post_sort_key(stem)             # 20240601
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
from datetime import date
from pathlib import Path
from typing import Optional

# --- Local imports ---
from soyuz.core.paths import POST_EXTENSION


POST_STEM_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def post_stem(filename: str, extension: str = POST_EXTENSION) -> Optional[str]:
    """
    Return the date stem of a post filename.

    Args:
        filename: Bare filename (no directory)
        extension: Required extension including the dot

    Returns:
        The ``YYYY-MM-DD`` stem, or None if the name is not a dated post

    Examples:
        >>> post_stem("2024-06-01.gmi")
        '2024-06-01'
        >>> post_stem("index.gmi") is None
        True
        >>> post_stem("2024-1-5.gmi") is None
        True
    """
    if not filename.endswith(extension):
        return None
    stem = filename[: -len(extension)]
    if POST_STEM_PATTERN.fullmatch(stem):
        return stem
    return None


def post_sort_key(stem: str) -> int:
    """Digits of the stem as one integer: ``2024-06-01`` -> ``20240601``."""
    return int(stem.replace("-", ""))


def post_filename(day: date, extension: str = POST_EXTENSION) -> str:
    """
    Filename for the post written on ``day``.

    Examples:
        >>> post_filename(date(2024, 6, 1))
        '2024-06-01.gmi'
    """
    return f"{day.isoformat()}{extension}"


def read_text_if_exists(path: Path) -> Optional[str]:
    """File contents, or None if the file does not exist."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def write_text_atomic(path: Path, text: str) -> None:
    """
    Replace a file's contents in one step.

    Writes a sibling temp file and renames it over ``path`` so a crash
    never leaves a half-written index behind.
    """
    path = Path(path)
    tmp_path = path.with_name(f".{path.name}.tmp")
    tmp_path.write_text(text, encoding="utf-8")
    os.replace(tmp_path, path)


def parse_date_from_stem(stem: str) -> Optional[date]:
    """
    Parse a ``YYYY-MM-DD`` stem into a date.

    Stems that match the pattern but are not real calendar dates
    (``2024-02-30``) return None rather than raising.
    """
    if not POST_STEM_PATTERN.fullmatch(stem):
        return None
    year, month, day = map(int, stem.split("-"))
    try:
        return date(year, month, day)
    except ValueError:
        return None
