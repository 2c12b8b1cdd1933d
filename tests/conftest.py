"""
conftest.py
-----------
Shared pytest fixtures for Soyuz tests.

Provides fixtures for:
- Temporary capsule (local) and server (remote) directories
- Config objects and settings files pointing at them
- Post file factories
- A recording stand-in for the rsync mirror
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import List, Tuple

from soyuz.core.config import Config
from soyuz.pipeline.mirror import SyncPolicy


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def local_dir(tmp_dir):
    """Empty local capsule directory."""
    path = tmp_dir / "capsule"
    path.mkdir()
    return path


@pytest.fixture
def remote_dir(tmp_dir):
    """Empty directory standing in for the server copy."""
    path = tmp_dir / "server"
    path.mkdir()
    return path


@pytest.fixture
def log_dir(tmp_dir):
    """Log directory for CLI runs."""
    return tmp_dir / "logs"


# ----- Config Fixtures -----

@pytest.fixture
def config(local_dir):
    """Config for the temporary capsule with a ssh-style remote."""
    return Config(
        local_dir=local_dir,
        remote_dir="gemini.example.org:/var/gemini/capsule",
        editor="nano",
        index_heading="## Latest notes",
    )


@pytest.fixture
def config_file(tmp_dir, local_dir):
    """Settings file for the temporary capsule."""
    path = tmp_dir / "config.yaml"
    path.write_text(
        f'local_dir: "{local_dir}/"\n'
        'remote_dir: "gemini.example.org:/var/gemini/capsule/"\n'
        'editor: "nano"\n'
        'index_heading: "## Latest notes"\n',
        encoding="utf-8",
    )
    return path


# ----- Post Factories -----

def write_post(directory: Path, stem: str, title: str = "A post", body: str = "Body text.") -> Path:
    """Write ``<directory>/<stem>.gmi`` with a title heading."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{stem}.gmi"
    path.write_text(f"# {title}\n\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def post_factory():
    """Factory writing dated posts into a directory."""
    return write_post


# ----- Mirror Stand-in -----

class RecordingMirror:
    """Mirror replacement that records transfers instead of running rsync."""

    def __init__(self, fail_on: int = -1, error: Exception = None):
        self.calls: List[Tuple[str, str, SyncPolicy]] = []
        self.fail_on = fail_on
        self.error = error

    def sync(self, source: str, destination: str, policy: SyncPolicy = SyncPolicy.UPDATE) -> None:
        if len(self.calls) == self.fail_on:
            raise self.error
        self.calls.append((source, destination, policy))


@pytest.fixture
def recording_mirror():
    """Mirror that records calls."""
    return RecordingMirror()


@pytest.fixture
def mirror_factory():
    """Factory for mirrors that fail on a given call."""
    return RecordingMirror
