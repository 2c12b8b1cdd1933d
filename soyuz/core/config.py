#!/usr/bin/env python3
"""
config.py
---------
Settings file loading for soyuz.

The settings live in a small YAML document (``~/.config/soyuz/config.yaml``
by default):

    local_dir: ~/gemini/capsule
    remote_dir: myserver:/var/gemini/capsule
    editor: nano
    index_heading: "## Latest notes"

``local_dir`` and ``remote_dir`` are required. Everything else has a
default. The settings are read once per command and the resulting
``Config`` is handed to every component that needs it.

Usage:
    from soyuz.core.config import load_config

    config = load_config()
    archive = config.year_dir(2024) / "index.gmi"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from soyuz.core.exceptions import ConfigUnavailableError
from soyuz.core.paths import CONFIG_PATH, INDEX_FILENAME


# ----- Defaults -----
DEFAULT_EDITOR = "nano"
DEFAULT_INDEX_HEADING = "## Latest notes"
DEFAULT_LATEST_NOTES = 5
DEFAULT_SYNC_TIMEOUT = 300.0

REQUIRED_FIELDS = ("local_dir", "remote_dir")

DEFAULT_CONFIG_TEMPLATE = f"""\
# Soyuz settings
# local_dir:  capsule directory on this machine
# remote_dir: rsync destination, e.g. myserver:/var/gemini/capsule
local_dir: ""
remote_dir: ""
editor: "{DEFAULT_EDITOR}"
index_heading: "{DEFAULT_INDEX_HEADING}"
latest_notes: {DEFAULT_LATEST_NOTES}
sync_timeout: {int(DEFAULT_SYNC_TIMEOUT)}
"""


def normalize_dir(value: str) -> str:
    """
    Expand ``~`` and strip trailing separators from a directory setting.

    Remote ``host:path`` values are only stripped; ``~`` after the host
    is left for the remote shell.

    Args:
        value: Raw directory string from the settings file

    Returns:
        Normalized directory string without a trailing ``/``

    Examples:
        >>> normalize_dir("/srv/capsule///")
        '/srv/capsule'
        >>> normalize_dir("host:/srv/capsule/")
        'host:/srv/capsule'
    """
    value = value.strip()
    if value.startswith("~"):
        value = str(Path(value).expanduser())
    stripped = value.rstrip("/")
    return stripped if stripped else "/"


@dataclass(frozen=True)
class Config:
    """
    Validated, normalized soyuz settings.

    Attributes:
        local_dir: Local capsule root (absolute, no trailing separator)
        remote_dir: rsync remote root, usually ``host:/path`` (no trailing separator)
        editor: Command used to open posts and the settings file
        index_heading: Homepage heading above the latest notes list
        latest_notes: Number of entries kept in the homepage window
        sync_timeout: Seconds before an rsync/ssh call is abandoned
    """

    local_dir: Path
    remote_dir: str
    editor: str = DEFAULT_EDITOR
    index_heading: str = DEFAULT_INDEX_HEADING
    latest_notes: int = DEFAULT_LATEST_NOTES
    sync_timeout: float = DEFAULT_SYNC_TIMEOUT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Config:
        """
        Build a Config from a parsed settings mapping.

        Args:
            data: Mapping loaded from the YAML settings file

        Returns:
            Config instance

        Raises:
            ConfigUnavailableError: If required keys are missing or a value is invalid
        """
        for name in REQUIRED_FIELDS:
            value = data.get(name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigUnavailableError(
                    f"Required setting '{name}' missing or empty"
                )

        editor = data.get("editor") or DEFAULT_EDITOR
        index_heading = data.get("index_heading") or DEFAULT_INDEX_HEADING
        if not isinstance(editor, str) or not isinstance(index_heading, str):
            raise ConfigUnavailableError("'editor' and 'index_heading' must be strings")

        latest_notes = data.get("latest_notes", DEFAULT_LATEST_NOTES)
        if isinstance(latest_notes, bool) or not isinstance(latest_notes, int) or latest_notes < 1:
            raise ConfigUnavailableError(
                f"'latest_notes' must be a positive integer, got {latest_notes!r}"
            )

        sync_timeout = data.get("sync_timeout", DEFAULT_SYNC_TIMEOUT)
        if (
            isinstance(sync_timeout, bool)
            or not isinstance(sync_timeout, (int, float))
            or sync_timeout <= 0
        ):
            raise ConfigUnavailableError(
                f"'sync_timeout' must be a positive number, got {sync_timeout!r}"
            )

        return cls(
            local_dir=Path(normalize_dir(data["local_dir"])),
            remote_dir=normalize_dir(data["remote_dir"]),
            editor=editor.strip(),
            index_heading=index_heading.rstrip("\n"),
            latest_notes=latest_notes,
            sync_timeout=float(sync_timeout),
        )

    # ---- Capsule paths ----
    def year_dir(self, year: int) -> Path:
        """Local directory holding the posts of ``year``."""
        return self.local_dir / f"{year:04d}"

    def archive_path(self, year: int) -> Path:
        """Year archive document for ``year``."""
        return self.year_dir(year) / INDEX_FILENAME

    @property
    def homepage_path(self) -> Path:
        """Homepage document at the capsule root."""
        return self.local_dir / INDEX_FILENAME

    # ---- rsync endpoints ----
    @property
    def local_root(self) -> str:
        """Local root with exactly one trailing separator (rsync copies contents)."""
        return f"{str(self.local_dir).rstrip('/')}/"

    @property
    def remote_root(self) -> str:
        """Remote root with exactly one trailing separator."""
        return f"{self.remote_dir.rstrip('/')}/"

    def remote_host_and_path(self) -> Tuple[str, str]:
        """
        Split ``remote_dir`` into its ssh host and remote path.

        Returns:
            Tuple of (host, path) with no trailing separator on path

        Raises:
            ConfigUnavailableError: If ``remote_dir`` has no ``host:`` part
        """
        host, sep, path = self.remote_dir.partition(":")
        if not sep or not host or "/" in host:
            raise ConfigUnavailableError(
                f"'remote_dir' must look like host:/path, got {self.remote_dir!r}"
            )
        return host, path.rstrip("/")


def load_config(path: Optional[Path] = None) -> Config:
    """
    Read and validate the settings file.

    Args:
        path: Settings file (defaults to CONFIG_PATH)

    Returns:
        Config instance

    Raises:
        ConfigUnavailableError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigUnavailableError(
            f"Config file not found: {config_path} (run 'soyuz settings' to create it)"
        ) from e
    except OSError as e:
        raise ConfigUnavailableError(f"Cannot read config file {config_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigUnavailableError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigUnavailableError(f"Config file {config_path} must contain a mapping")

    return Config.from_dict(data)


def load_editor(path: Optional[Path] = None) -> str:
    """
    Editor command from the settings, falling back to ``nano``.

    The editor is the only setting with a fallback: the settings file
    itself has to be editable before it is valid, so the other keys are
    not checked here.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        return DEFAULT_EDITOR

    editor = data.get("editor") if isinstance(data, dict) else None
    if isinstance(editor, str) and editor.strip():
        return editor.strip()
    return DEFAULT_EDITOR


def write_default_config(path: Optional[Path] = None) -> bool:
    """
    Create the settings file from the template if it does not exist.

    Args:
        path: Settings file (defaults to CONFIG_PATH)

    Returns:
        True if a new file was written, False if one already existed
    """
    config_path = Path(path) if path is not None else CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with config_path.open("x", encoding="utf-8") as fh:
            fh.write(DEFAULT_CONFIG_TEMPLATE)
    except FileExistsError:
        return False
    return True
