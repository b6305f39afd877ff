"""FlipLedger - trade history engine for exchange offer flipping."""

__version__ = "0.1.0"
__author__ = "FlipLedger Team"
__description__ = "Turns noisy exchange offer updates into a clean flip ledger"

__all__ = [
    "__version__",
    "__author__",
    "__description__",
]

import logging
import os

from dotenv import load_dotenv

from flipledger.utils.env import get_system_env_path

logger = logging.getLogger(__name__)


def load_env_file_early() -> None:
    """Load environment variables from the system application directory.

    Behavior:
    - Loads from the system path (e.g., ~/.config/flipledger/.env on Linux)
    - Values in the file override variables already set in the process
    - A missing file is not an error
    """
    sys_env = get_system_env_path()
    if not sys_env.exists():
        if os.getenv("FLIPLEDGER_DEBUG", "false").lower() == "true":
            logger.info(f"No system .env file found at {sys_env}")
        return

    try:
        load_dotenv(sys_env, override=True)
    except OSError as e:
        logger.warning(f"Failed to load .env file {sys_env}: {e}")
        return

    if os.getenv("FLIPLEDGER_DEBUG", "false").lower() == "true":
        logger.info(f"Environment variables loaded from {sys_env}")


# Load environment variables immediately when package is imported
load_env_file_early()
