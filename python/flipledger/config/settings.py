"""Runtime settings resolved from the environment."""

import os
from functools import lru_cache
from pathlib import Path

from flipledger.utils.env import get_system_env_dir


class Settings:
    """Process-level settings.

    Values come from environment variables (optionally loaded from the system
    `.env` at import time) and fall back to per-OS defaults.
    """

    def __init__(self) -> None:
        data_dir = os.getenv("FLIPLEDGER_DATA_DIR")
        self.DATA_DIR: Path = (
            Path(data_dir).expanduser() if data_dir else get_system_env_dir()
        )
        self.TRADES_FILE: str = os.getenv("FLIPLEDGER_TRADES_FILE", "trades.json")

    @property
    def trades_path(self) -> Path:
        return self.DATA_DIR / self.TRADES_FILE


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
