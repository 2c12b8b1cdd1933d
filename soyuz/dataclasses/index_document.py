#!/usr/bin/env python3
"""
index_document.py
-------------------

Defines the IndexDocument dataclass: a Gemini page holding a list of
link lines under a heading.

Well-formed layout:

    <preamble lines, optional>
    <heading>
    <blank>
    => link entry (most recent)
    => link entry
    ...
    <postamble lines, optional>

The year archive and the homepage are both IndexDocuments. They differ in
the heading they use, the key that decides whether a post is "already
listed", and whether the entry list grows or is kept to a fixed window.

Membership is a plain substring test over the whole file text: any line
containing the key counts as a match.

Only lines shaped like post entries (``=> 2024-06-01.gmi ...`` or
``=> /2024/2024-06-01.gmi ...``) belong to the entry block; any other
link right below it is kept as text after the list.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import re
from dataclasses import dataclass, field
from typing import List, Optional

# ---- Local imports ----
from soyuz.core.paths import POST_EXTENSION


# ----- Constants -----
LINK_PREFIX = "=>"
ENTRY_PATTERN = re.compile(
    rf"{LINK_PREFIX} (?:/[0-9]{{4}}/)?[0-9]{{4}}-[0-9]{{2}}-[0-9]{{2}}"
    rf"{re.escape(POST_EXTENSION)}(?: |$)"
)


# ----- Functions -----
def is_entry_line(line: str) -> bool:
    """True if ``line`` is a post entry (archive or homepage form)."""
    return ENTRY_PATTERN.match(line) is not None


def contains_entry(text: str, key: str) -> bool:
    """True if ``key`` occurs anywhere in ``text``."""
    return key in text


def new_document_text(heading: str, entry_line: str) -> str:
    """Text of a fresh document: heading, blank line, single entry."""
    return f"{heading}\n\n{entry_line}"


# ----- Dataclass -----
@dataclass
class IndexDocument:
    """
    Parsed index document.

    Attributes:
        heading: Heading line, matched verbatim
        entries: Post entry lines directly below the heading, most recent first
        preamble: Lines above the heading, kept verbatim
        postamble: Lines after the entry block, kept verbatim
        trailing_newline: Whether the source text ended with a newline
    """

    heading: str
    entries: List[str] = field(default_factory=list)
    preamble: List[str] = field(default_factory=list)
    postamble: List[str] = field(default_factory=list)
    trailing_newline: bool = False

    # ---- Public constructors ----
    @classmethod
    def parse(cls, text: str, heading: str) -> Optional[IndexDocument]:
        """
        Parse ``text`` around the first line equal to ``heading``.

        Args:
            text: Full document text
            heading: Heading line to look for (exact match)

        Returns:
            IndexDocument, or None if the text has no line equal to heading
        """
        lines = text.splitlines()
        try:
            head_idx = lines.index(heading)
        except ValueError:
            return None

        start = head_idx + 1
        while start < len(lines) and not lines[start].strip():
            start += 1

        end = start
        while end < len(lines) and is_entry_line(lines[end]):
            end += 1

        postamble = lines[end:]
        if start == end and postamble:
            # No entries yet: keep a blank between the future entries and the text below
            postamble = [""] + postamble

        return cls(
            heading=heading,
            entries=lines[start:end],
            preamble=lines[:head_idx],
            postamble=postamble,
            trailing_newline=text.endswith("\n"),
        )

    # ---- Mutation ----
    def push_front(self, entry_line: str, limit: Optional[int] = None) -> None:
        """
        Insert an entry at the top of the list.

        Args:
            entry_line: Link line to insert
            limit: Keep at most this many entries (oldest dropped); None keeps all
        """
        self.entries.insert(0, entry_line)
        if limit is not None:
            del self.entries[limit:]

    # ---- Output ----
    def serialize(self) -> str:
        """Render the document back to text."""
        lines = [*self.preamble, self.heading, "", *self.entries, *self.postamble]
        text = "\n".join(lines)
        if self.trailing_newline:
            text += "\n"
        return text


def upsert(
    text: Optional[str],
    entry_line: str,
    heading: str,
    key: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """
    Return the document text with ``entry_line`` listed.

    Handles the four on-disk states:
        - absent (``text`` is None): new document with the single entry
        - already containing ``key``: returned unchanged
        - empty, or no line equal to ``heading``: replaced by a new document
          (existing content is discarded)
        - well-formed: entry inserted at the top of the list

    Args:
        text: Current document text, or None if the file does not exist
        entry_line: Link line to add
        heading: Heading line the list lives under
        key: Substring that marks the entry as already listed
            (defaults to the entry line itself)
        limit: Maximum number of entries to keep (None: unbounded)

    Returns:
        New document text (identical to ``text`` when nothing changed)
    """
    if key is None:
        key = entry_line

    if text is None:
        return new_document_text(heading, entry_line)

    if contains_entry(text, key):
        return text

    document = IndexDocument.parse(text, heading)
    if document is None:
        return new_document_text(heading, entry_line)

    document.push_front(entry_line, limit)
    return document.serialize()
