#!/usr/bin/env python3
"""
End-to-end publish tests.

rsync is emulated by copying between a local capsule and a directory
standing in for the server, so a run can be checked from the server's
point of view.
"""
import shutil
import pytest
from datetime import date
from pathlib import Path

from soyuz.core.config import Config
from soyuz.pipeline.mirror import SyncPolicy
from soyuz.pipeline.publish import PublishOrchestrator


class CopyMirror:
    """Mirror that copies trees with shutil instead of running rsync."""

    def __init__(self, remote_dir: Path):
        self.remote_dir = remote_dir
        self.calls = []

    def sync(self, source: str, destination: str, policy: SyncPolicy = SyncPolicy.UPDATE) -> None:
        self.calls.append((source, destination, policy))
        src = self._local(source)
        dst = self._local(destination)
        shutil.copytree(src, dst, dirs_exist_ok=True)

    def _local(self, root: str) -> Path:
        if root.startswith("server:"):
            return self.remote_dir
        return Path(root)


@pytest.fixture
def capsule_config(local_dir):
    return Config(local_dir=local_dir, remote_dir="server:/var/gemini")


class TestPublishEndToEnd:
    """Publish against an emulated server."""

    def test_first_post_of_the_year(self, capsule_config, local_dir, remote_dir, post_factory):
        post_factory(local_dir / "2024", "2024-06-01", title="My First Post")
        mirror = CopyMirror(remote_dir)

        stats = PublishOrchestrator(capsule_config, mirror=mirror).run(today=date(2024, 6, 1))

        archive = (remote_dir / "2024" / "index.gmi").read_text(encoding="utf-8")
        homepage = (remote_dir / "index.gmi").read_text(encoding="utf-8")
        assert archive.startswith("# 2024\n\n=> 2024-06-01.gmi 2024-06-01 (My First Post)")
        assert "=> /2024/2024-06-01.gmi 2024-06-01 (My First Post)" in homepage
        assert (remote_dir / "2024" / "2024-06-01.gmi").exists()
        assert stats.syncs == 2

    def test_server_homepage_is_kept(self, capsule_config, local_dir, remote_dir, post_factory):
        """Hand edits made on the server survive a publish."""
        (remote_dir / "index.gmi").write_text(
            "# My capsule\n\nWelcome!\n\n## Latest notes\n\n"
            "=> /2024/2024-05-01.gmi 2024-05-01 (May)\n\n=> /about.gmi About\n",
            encoding="utf-8",
        )
        post_factory(local_dir / "2024", "2024-06-01", title="June")

        PublishOrchestrator(capsule_config, mirror=CopyMirror(remote_dir)).run(
            today=date(2024, 6, 1)
        )

        assert (remote_dir / "index.gmi").read_text(encoding="utf-8") == (
            "# My capsule\n\nWelcome!\n\n## Latest notes\n\n"
            "=> /2024/2024-06-01.gmi 2024-06-01 (June)\n"
            "=> /2024/2024-05-01.gmi 2024-05-01 (May)\n\n=> /about.gmi About\n"
        )

    def test_publishing_twice_is_byte_identical(
        self, capsule_config, local_dir, remote_dir, post_factory
    ):
        post_factory(local_dir / "2024", "2024-06-01", title="My First Post")
        PublishOrchestrator(capsule_config, mirror=CopyMirror(remote_dir)).run(
            today=date(2024, 6, 1)
        )
        first = {
            path: path.read_bytes() for path in sorted(remote_dir.rglob("*")) if path.is_file()
        }

        PublishOrchestrator(capsule_config, mirror=CopyMirror(remote_dir)).run(
            today=date(2024, 6, 1)
        )
        second = {
            path: path.read_bytes() for path in sorted(remote_dir.rglob("*")) if path.is_file()
        }

        assert second == first
