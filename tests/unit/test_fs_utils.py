"""
test_fs_utils.py
----------------
Unit tests for soyuz.utils.fs module.

Tests post filename matching, chronological keys, date parsing and the
atomic write helper.
"""
import pytest
from datetime import date

from soyuz.utils.fs import (
    parse_date_from_stem,
    post_filename,
    post_sort_key,
    post_stem,
    read_text_if_exists,
    write_text_atomic,
)


class TestPostStem:
    """Test post_stem function."""

    def test_dated_post(self):
        assert post_stem("2024-06-01.gmi") == "2024-06-01"

    def test_impossible_day_still_matches(self):
        """Digit width is checked, calendar validity is not."""
        assert post_stem("2024-02-30.gmi") == "2024-02-30"

    @pytest.mark.parametrize(
        "name",
        [
            "index.gmi",
            "notes.txt",
            "2024-1-5.gmi",
            "2024-06-01.txt",
            "2024-06-01.gmi.bak",
            "draft-2024-06-01.gmi",
            "2024-06-01-2.gmi",
            "24-06-01.gmi",
            "٢٠٢٤-٠١-٠١.gmi",
            "2024-01-01\n.gmi",
        ],
    )
    def test_non_posts(self, name):
        assert post_stem(name) is None

    def test_custom_extension(self):
        assert post_stem("2024-06-01.md", extension=".md") == "2024-06-01"


class TestPostSortKey:
    """Test post_sort_key function."""

    def test_digits_concatenated(self):
        assert post_sort_key("2024-06-01") == 20240601

    def test_ordering(self):
        assert post_sort_key("2024-12-31") > post_sort_key("2024-02-30") > post_sort_key("2024-01-05")


class TestDates:
    """Test post_filename and parse_date_from_stem."""

    def test_post_filename(self):
        assert post_filename(date(2024, 6, 1)) == "2024-06-01.gmi"

    def test_parse_real_date(self):
        assert parse_date_from_stem("2024-06-01") == date(2024, 6, 1)

    def test_parse_impossible_date(self):
        assert parse_date_from_stem("2024-02-30") is None

    def test_parse_non_matching(self):
        assert parse_date_from_stem("June 1st") is None


class TestFileHelpers:
    """Test read_text_if_exists and write_text_atomic."""

    def test_missing_file(self, tmp_dir):
        assert read_text_if_exists(tmp_dir / "index.gmi") is None

    def test_empty_file(self, tmp_dir):
        path = tmp_dir / "index.gmi"
        path.write_text("", encoding="utf-8")
        assert read_text_if_exists(path) == ""

    def test_atomic_write_replaces(self, tmp_dir):
        path = tmp_dir / "index.gmi"
        path.write_text("old", encoding="utf-8")
        write_text_atomic(path, "new")
        assert path.read_text(encoding="utf-8") == "new"
        assert sorted(p.name for p in tmp_dir.iterdir()) == ["index.gmi"]
