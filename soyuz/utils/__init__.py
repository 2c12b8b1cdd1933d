"""
Utilities package for Soyuz.

- fs: Post filename matching and date helpers

Import commonly-used utilities directly from this package:
    from soyuz.utils import post_stem, post_sort_key, post_filename
"""

from .fs import (
    POST_STEM_PATTERN,
    post_stem,
    post_sort_key,
    post_filename,
    read_text_if_exists,
    write_text_atomic,
    parse_date_from_stem,
)

__all__ = [
    "POST_STEM_PATTERN",
    "post_stem",
    "post_sort_key",
    "post_filename",
    "read_text_if_exists",
    "write_text_atomic",
    "parse_date_from_stem",
]
