from typing import List, Optional

from loguru import logger

from .flips import calculate_profit, extract_flips
from .ge_limit import GeLimitTracker
from .models import Flip, HistorySnapshot, OfferEvent
from .standardizer import OfferStandardizer
from .truncator import truncate_offers


class HistoryManager:
    """Trade history of one item for one account.

    Raw slot snapshots go in through `update_history`; the manager keeps the
    standardized, truncated ledger and the buy-limit window, and answers flip
    and profit queries from them. Not thread-safe: hold one instance per item
    per account and feed it from a single thread.

    Notes:
    - the ledger keeps arrival order, it is never re-sorted by time
    - a closed order's partial snapshots are merged into its terminal entry
    - `snapshot()`/`from_snapshot()` carry the processed state verbatim, so a
      restored manager never re-standardizes events it already handled
    """

    def __init__(self) -> None:
        self._standardizer = OfferStandardizer()
        self._ge_limit = GeLimitTracker()
        self._standardized_offers: List[OfferEvent] = []

    def update_history(self, offer: OfferEvent) -> OfferEvent:
        """Ingest one raw snapshot and return its standardized form."""
        standardized = self._standardizer.standardize_offer(offer)
        if standardized.is_buy:
            self._ge_limit.update(standardized)

        self._standardized_offers.append(standardized)
        if standardized.is_terminal:
            before = len(self._standardized_offers)
            truncate_offers(self._standardized_offers)
            merged = before - len(self._standardized_offers)
            if merged:
                logger.debug(
                    "Merged {} partial offers into terminal {} in slot {}",
                    merged,
                    standardized.state.value,
                    standardized.slot,
                )
        return standardized

    def get_standardized_offers(self) -> List[OfferEvent]:
        return list(self._standardized_offers)

    def get_intervals_history(self, since_ts: int) -> List[OfferEvent]:
        """Return ledger entries at or after `since_ts`, in ledger order."""
        return [offer for offer in self._standardized_offers if offer.ts >= since_ts]

    def get_flips(self, since_ts: int) -> List[Flip]:
        """Return flips closed at or after `since_ts`, most recent first."""
        return extract_flips(self._standardized_offers, since_ts=since_ts)

    def current_profit(self, offers: List[OfferEvent]) -> int:
        """Realized profit of the flips derivable from `offers` alone."""
        return calculate_profit(offers)

    def get_items_bought_this_limit_window(self) -> int:
        return self._ge_limit.items_bought_this_limit_window

    def get_next_ge_limit_refresh(self) -> Optional[int]:
        return self._ge_limit.next_ge_limit_refresh

    def snapshot(self) -> HistorySnapshot:
        return HistorySnapshot(
            standardized_offers=list(self._standardized_offers),
            slot_quantities=self._standardizer.slot_quantities(),
            ge_window_start_ts=self._ge_limit.window_start_ts,
            items_bought_this_limit_window=self._ge_limit.items_bought_this_limit_window,
        )

    @classmethod
    def from_snapshot(cls, snapshot: HistorySnapshot) -> "HistoryManager":
        manager = cls()
        manager._standardizer = OfferStandardizer(snapshot.slot_quantities)
        manager._ge_limit = GeLimitTracker(
            window_start_ts=snapshot.ge_window_start_ts,
            items_bought_this_limit_window=snapshot.items_bought_this_limit_window,
        )
        manager._standardized_offers = list(snapshot.standardized_offers)
        return manager
