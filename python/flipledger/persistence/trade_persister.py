"""JSON file storage for per-account trade data.

The file holds one object mapping account display names to AccountData. The
history engine's processed state is written as-is, so loading it back never
re-runs standardization or truncation.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from flipledger.account.models import AccountData
from flipledger.config.settings import get_settings
from flipledger.utils.env import ensure_dir

from .interfaces import BaseTradeStore, TradePersistenceError

_ACCOUNTS_ADAPTER = TypeAdapter(Dict[str, AccountData])


class TradePersister(BaseTradeStore):
    """Stores trades at `{data_dir}/{file_name}` (defaults from settings)."""

    def __init__(
        self, data_dir: Optional[Path] = None, file_name: Optional[str] = None
    ) -> None:
        settings = get_settings()
        self.data_dir = Path(data_dir) if data_dir is not None else settings.DATA_DIR
        self.trades_file = self.data_dir / (file_name or settings.TRADES_FILE)

    def setup(self) -> None:
        """Ensure the data directory and trades file exist.

        Raises OSError when either cannot be created.
        """
        if not self.data_dir.exists():
            logger.info("Data directory {} doesn't exist yet, creating it", self.data_dir)
            ensure_dir(self.data_dir)

        if not self.trades_file.exists():
            logger.info("Trades file {} doesn't exist yet, creating it", self.trades_file)
            self.trades_file.touch()

    def load_trades(self) -> Dict[str, AccountData]:
        if not self.trades_file.exists():
            return {}

        raw = self.trades_file.read_bytes()
        if not raw.strip():
            return {}

        try:
            accounts = _ACCOUNTS_ADAPTER.validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            logger.warning("Failed to decode trades file {}: {}", self.trades_file, e)
            raise TradePersistenceError(
                f"unable to decode trades file {self.trades_file}"
            ) from e

        logger.info(
            "Loaded trades for {} account(s) from {}", len(accounts), self.trades_file
        )
        return accounts

    def store_trades(self, accounts: Dict[str, AccountData]) -> None:
        payload = _ACCOUNTS_ADAPTER.dump_json(accounts, indent=2)
        ensure_dir(self.data_dir)

        # Write next to the target so the replace stays on one filesystem
        fd, tmp_name = tempfile.mkstemp(
            dir=self.data_dir, prefix=".trades-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_name, self.trades_file)
        except OSError:
            logger.exception("Failed to store trades to {}", self.trades_file)
            Path(tmp_name).unlink(missing_ok=True)
            raise
