"""Trade data storage."""

from .interfaces import BaseTradeStore, TradePersistenceError
from .trade_persister import TradePersister

__all__ = ["BaseTradeStore", "TradePersister", "TradePersistenceError"]
