"""
test_homepage_index.py
----------------------
Unit tests for HomepageIndex (latest notes window on the homepage).
"""
import pytest

from soyuz.dataclasses.post import Post
from soyuz.pipeline.homepage import HomepageIndex


HEADING = "## Latest notes"
POST = Post.from_text("2024-06-01.gmi", "# My First Post\n")
ENTRY = "=> /2024/2024-06-01.gmi 2024-06-01 (My First Post)"


def _homepage(tmp_dir, window: int = 5) -> HomepageIndex:
    return HomepageIndex(tmp_dir / "index.gmi", HEADING, 2024, window=window)


def _older(count: int):
    return [f"=> /2024/2024-05-{d:02d}.gmi 2024-05-{d:02d} (Post {d})" for d in range(count, 0, -1)]


class TestHomepageFormat:
    """Test entry line and entry key."""

    def test_entry_line_has_year_prefix(self, tmp_dir):
        assert _homepage(tmp_dir).format_entry(POST) == ENTRY

    def test_entry_key_is_full_entry(self, tmp_dir):
        assert _homepage(tmp_dir).entry_key(POST) == ENTRY

    def test_window_must_be_positive(self, tmp_dir):
        with pytest.raises(ValueError):
            _homepage(tmp_dir, window=0)


class TestHomepageRender:
    """Test HomepageIndex.render."""

    def test_absent(self, tmp_dir):
        assert _homepage(tmp_dir).render(None, POST) == f"{HEADING}\n\n{ENTRY}"

    def test_missing_heading_discards_content(self, tmp_dir):
        old = "# My capsule\n\nWelcome to my capsule.\n"
        assert _homepage(tmp_dir).render(old, POST) == f"{HEADING}\n\n{ENTRY}"

    def test_full_window_drops_oldest(self, tmp_dir):
        older = _older(5)
        text = "\n".join(["# My capsule", "", HEADING, "", *older, "", "=> /2024/ Archive", ""])
        rendered = _homepage(tmp_dir).render(text, POST)

        expected = "\n".join(
            ["# My capsule", "", HEADING, "", ENTRY, *older[:4], "", "=> /2024/ Archive", ""]
        )
        assert rendered == expected
        assert len(rendered.splitlines()) == len(text.splitlines())

    def test_full_window_keeps_adjacent_link(self, tmp_dir):
        """A hand-written link right below the list is not a post entry."""
        older = _older(5)
        text = "\n".join([HEADING, "", *older, "=> /2024/ Archive"])
        rendered = _homepage(tmp_dir).render(text, POST)
        assert rendered == "\n".join([HEADING, "", ENTRY, *older[:4], "=> /2024/ Archive"])

    def test_partial_window_grows(self, tmp_dir):
        older = _older(2)
        text = "\n".join([HEADING, "", *older])
        assert _homepage(tmp_dir).render(text, POST) == "\n".join([HEADING, "", ENTRY, *older])

    def test_short_window_is_not_corrupted(self, tmp_dir):
        """A single existing entry followed by footer text stays intact."""
        text = "\n".join([HEADING, "", _older(1)[0], "", "Footer line", "More footer"])
        rendered = _homepage(tmp_dir).render(text, POST)
        assert rendered == "\n".join(
            [HEADING, "", ENTRY, _older(1)[0], "", "Footer line", "More footer"]
        )

    def test_custom_window(self, tmp_dir):
        text = "\n".join([HEADING, "", *_older(3)])
        rendered = _homepage(tmp_dir, window=2).render(text, POST)
        assert rendered == "\n".join([HEADING, "", ENTRY, _older(3)[0]])

    def test_same_filename_different_title_is_not_listed(self, tmp_dir):
        """The homepage key is the whole entry, stricter than the archive's."""
        text = "\n".join([HEADING, "", "=> /2024/2024-06-01.gmi 2024-06-01 (Draft title)"])
        rendered = _homepage(tmp_dir).render(text, POST)
        assert rendered.splitlines()[2] == ENTRY


class TestHomepageUpdate:
    """Test HomepageIndex.update on disk."""

    def test_idempotent(self, tmp_dir):
        homepage = _homepage(tmp_dir)
        homepage.path.write_text("\n".join([HEADING, "", *_older(5)]) + "\n", encoding="utf-8")

        assert homepage.update(POST) is True
        first = homepage.path.read_bytes()
        assert homepage.update(POST) is False
        assert homepage.path.read_bytes() == first
