from typing import Optional

from .constants import GE_LIMIT_WINDOW_MS
from .models import OfferEvent


class GeLimitTracker:
    """Tracks units bought inside the rolling exchange buy-limit window.

    The window opens at the first counted buy and lasts GE_LIMIT_WINDOW_MS.
    A buy at or after the refresh time opens a new window starting at that
    buy; anything earlier, including clock-skewed buys that predate the window
    start, is added to the current window.
    """

    def __init__(
        self,
        window_start_ts: Optional[int] = None,
        items_bought_this_limit_window: int = 0,
    ) -> None:
        self.window_start_ts = window_start_ts
        self.items_bought_this_limit_window = items_bought_this_limit_window

    @property
    def next_ge_limit_refresh(self) -> Optional[int]:
        if self.window_start_ts is None:
            return None
        return self.window_start_ts + GE_LIMIT_WINDOW_MS

    def update(self, offer: OfferEvent) -> None:
        """Account a standardized offer; sell-side offers are ignored."""
        if not offer.is_buy:
            return

        refresh = self.next_ge_limit_refresh
        if refresh is None or offer.ts >= refresh:
            self.window_start_ts = offer.ts
            self.items_bought_this_limit_window = offer.quantity_since_last_offer
        else:
            self.items_bought_this_limit_window += offer.quantity_since_last_offer
