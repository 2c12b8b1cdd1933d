#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and file naming conventions for the Soyuz project.

Soyuz keeps no data of its own inside the package: posts live in the
user's capsule directory (``local_dir`` in the settings file), settings
live under the XDG config home and logs under the XDG state home.

The capsule structure:
    <local_dir>/
    ├── index.gmi            # Homepage (latest notes window)
    ├── 2024/
    │   ├── index.gmi        # Year archive
    │   ├── 2024-06-01.gmi
    │   └── ...
    └── 2025/
        └── ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _xdg_dir(variable: str, fallback: str) -> Path:
    """
    Resolve an XDG base directory.

    Args:
        variable: Environment variable name (e.g. ``XDG_CONFIG_HOME``)
        fallback: Default location relative to the home directory

    Returns:
        Absolute Path for the base directory
    """
    value = os.environ.get(variable)
    if value:
        return Path(value).expanduser()
    return Path(fallback).expanduser()


# ----- Settings -----
CONFIG_DIR: Path = _xdg_dir("XDG_CONFIG_HOME", "~/.config") / "soyuz"
CONFIG_PATH: Path = CONFIG_DIR / "config.yaml"

# ----- Logs -----
STATE_DIR: Path = _xdg_dir("XDG_STATE_HOME", "~/.local/state") / "soyuz"
LOG_DIR: Path = STATE_DIR / "logs"

# ----- Capsule layout -----
POST_EXTENSION = ".gmi"
INDEX_FILENAME = f"index{POST_EXTENSION}"
