"""Utilities for resolving system-level config paths consistently across OSes.

Provides helpers to locate the OS user configuration directory for FlipLedger
and to construct the system `.env` file path. Trade data lives in the same
directory unless `FLIPLEDGER_DATA_DIR` points elsewhere.
"""

import os
import sys
from pathlib import Path


def get_system_env_dir() -> Path:
    """Return the OS user configuration directory for FlipLedger.

    - macOS: ~/Library/Application Support/FlipLedger
    - Linux: ~/.config/flipledger
    - Windows: %APPDATA%\\FlipLedger
    """
    home = Path.home()
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        base = Path(appdata) if appdata else (home / "AppData" / "Roaming")
        return base / "FlipLedger"
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "FlipLedger"
    return home / ".config" / "flipledger"


def get_system_env_path() -> Path:
    """Return the full path to the system `.env` file."""
    return get_system_env_dir() / ".env"


def ensure_dir(path: Path) -> Path:
    """Ensure `path` exists as a directory and return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path
