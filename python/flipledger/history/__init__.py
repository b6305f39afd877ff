"""Offer history engine: standardization, truncation, limits, flips, profit."""

from .flips import calculate_profit, extract_flips
from .ge_limit import GeLimitTracker
from .manager import HistoryManager
from .models import Flip, HistorySnapshot, OfferEvent, OfferState
from .standardizer import OfferStandardizer, SlotTracker
from .truncator import truncate_offers

__all__ = [
    "HistoryManager",
    "OfferEvent",
    "OfferState",
    "Flip",
    "HistorySnapshot",
    "OfferStandardizer",
    "SlotTracker",
    "GeLimitTracker",
    "truncate_offers",
    "extract_flips",
    "calculate_profit",
]
