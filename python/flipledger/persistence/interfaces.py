from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict

from flipledger.account.models import AccountData

# Contracts for trade storage (module-local abstract interfaces).


class TradePersistenceError(Exception):
    """Stored trade data exists but cannot be decoded."""


class BaseTradeStore(ABC):
    """Loads and stores the account name -> AccountData mapping."""

    @abstractmethod
    def load_trades(self) -> Dict[str, AccountData]:
        """Return every stored account; an empty store yields an empty dict."""
        raise NotImplementedError

    @abstractmethod
    def store_trades(self, accounts: Dict[str, AccountData]) -> None:
        """Replace the stored accounts with `accounts`."""
        raise NotImplementedError
