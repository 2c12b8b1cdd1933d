"""
Dataclasses for posts and index documents.

- Post: One dated post read from disk
- IndexDocument: Parsed heading + link list document (archive, homepage)
"""
from .post import Post, TITLE_PREFIX
from .index_document import (
    IndexDocument,
    LINK_PREFIX,
    contains_entry,
    is_entry_line,
    upsert,
)

__all__ = [
    "Post",
    "TITLE_PREFIX",
    "IndexDocument",
    "LINK_PREFIX",
    "contains_entry",
    "is_entry_line",
    "upsert",
]
