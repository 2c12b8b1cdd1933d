"""
test_editor.py
--------------
Unit tests for the editor launcher and today's post preparation.
"""
import subprocess
import pytest
from datetime import date
from unittest.mock import MagicMock, patch

from soyuz.core.config import Config
from soyuz.core.exceptions import EditorError
from soyuz.pipeline.editor import open_in_editor, today_post, write_today
from soyuz.pipeline.mirror import RemoteChecker


class TestOpenInEditor:
    """Test open_in_editor."""

    @patch("soyuz.pipeline.editor.subprocess.run")
    def test_editor_with_arguments(self, mock_run, tmp_dir):
        mock_run.return_value = subprocess.CompletedProcess([], 0)
        open_in_editor("code -w", tmp_dir / "post.gmi")
        mock_run.assert_called_once_with(["code", "-w", str(tmp_dir / "post.gmi")])

    @patch("soyuz.pipeline.editor.subprocess.run")
    def test_missing_editor(self, mock_run, tmp_dir):
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")
        with pytest.raises(EditorError):
            open_in_editor("not-an-editor", tmp_dir / "post.gmi")

    def test_empty_editor(self, tmp_dir):
        with pytest.raises(EditorError):
            open_in_editor("   ", tmp_dir / "post.gmi")

    @patch("soyuz.pipeline.editor.subprocess.run")
    def test_non_zero_exit_is_returned(self, mock_run, tmp_dir):
        mock_run.return_value = subprocess.CompletedProcess([], 1)
        assert open_in_editor("vim", tmp_dir / "post.gmi") == 1


class TestTodayPost:
    """Test today_post locations."""

    def test_locations(self, config, local_dir):
        target = today_post(config, date(2024, 6, 1))
        assert target.local_path == local_dir / "2024" / "2024-06-01.gmi"
        assert target.remote_host == "gemini.example.org"
        assert target.remote_path == "/var/gemini/capsule/2024/2024-06-01.gmi"

    def test_home_relative_remote(self, local_dir):
        """A ~/ remote reaches the ssh check unquoted so the server expands it."""
        config = Config.from_dict(
            {"local_dir": str(local_dir), "remote_dir": "gemini.example.org:~/gemini/"}
        )
        target = today_post(config, date(2024, 6, 1))
        assert target.remote_path == "~/gemini/2024/2024-06-01.gmi"

        command = RemoteChecker().command(target.remote_host, target.remote_path)
        assert "[[ -f ~/gemini/2024/2024-06-01.gmi ]]" in command[3]


class TestWriteToday:
    """Test write_today."""

    @patch("soyuz.pipeline.editor.open_in_editor")
    def test_opens_new_post(self, mock_open, config, local_dir):
        checker = MagicMock()
        checker.exists.return_value = False

        path = write_today(config, checker, today=date(2024, 6, 1))

        assert path == local_dir / "2024" / "2024-06-01.gmi"
        assert path.parent.is_dir()
        checker.exists.assert_called_once_with(
            "gemini.example.org", "/var/gemini/capsule/2024/2024-06-01.gmi"
        )
        mock_open.assert_called_once_with("nano", path, None)

    @patch("soyuz.pipeline.editor.open_in_editor")
    def test_already_published(self, mock_open, config, local_dir):
        checker = MagicMock()
        checker.exists.return_value = True

        assert write_today(config, checker, today=date(2024, 6, 1)) is None
        mock_open.assert_not_called()
        assert not (local_dir / "2024").exists()
