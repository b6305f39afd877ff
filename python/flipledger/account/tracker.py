from typing import Dict, List, Optional

from loguru import logger

from flipledger.history.manager import HistoryManager
from flipledger.history.models import Flip, OfferEvent

from .models import AccountData, FlippingItemRecord


class FlippingItem:
    """One traded item: its history engine plus the latest margin-check prices."""

    def __init__(
        self,
        item_id: int,
        item_name: Optional[str] = None,
        history: Optional[HistoryManager] = None,
    ) -> None:
        self.item_id = item_id
        self.item_name = item_name
        self.history = history or HistoryManager()
        self.margin_check_buy_price: Optional[int] = None
        self.margin_check_buy_ts: Optional[int] = None
        self.margin_check_sell_price: Optional[int] = None
        self.margin_check_sell_ts: Optional[int] = None

    def update(self, offer: OfferEvent) -> None:
        self.history.update_history(offer)
        if not (offer.is_margin_check and offer.is_terminal):
            return
        if offer.is_buy:
            self.margin_check_buy_price = offer.price
            self.margin_check_buy_ts = offer.ts
        else:
            self.margin_check_sell_price = offer.price
            self.margin_check_sell_ts = offer.ts

    def to_record(self) -> FlippingItemRecord:
        return FlippingItemRecord(
            item_id=self.item_id,
            item_name=self.item_name,
            history=self.history.snapshot(),
            margin_check_buy_price=self.margin_check_buy_price,
            margin_check_buy_ts=self.margin_check_buy_ts,
            margin_check_sell_price=self.margin_check_sell_price,
            margin_check_sell_ts=self.margin_check_sell_ts,
        )

    @classmethod
    def from_record(cls, record: FlippingItemRecord) -> "FlippingItem":
        item = cls(
            item_id=record.item_id,
            item_name=record.item_name,
            history=HistoryManager.from_snapshot(record.history),
        )
        item.margin_check_buy_price = record.margin_check_buy_price
        item.margin_check_buy_ts = record.margin_check_buy_ts
        item.margin_check_sell_price = record.margin_check_sell_price
        item.margin_check_sell_ts = record.margin_check_sell_ts
        return item


def _is_repeat(previous: Optional[OfferEvent], offer: OfferEvent) -> bool:
    if previous is None:
        return False
    return (
        previous.item_id == offer.item_id
        and previous.is_buy == offer.is_buy
        and previous.state == offer.state
        and previous.price == offer.price
        and previous.current_quantity_in_trade == offer.current_quantity_in_trade
        and previous.total_quantity_in_trade == offer.total_quantity_in_trade
    )


class AccountTracker:
    """Routes one account's slot snapshots to per-item histories.

    The exchange client re-reports unchanged slots (e.g. on login or when the
    offer screen is reopened); a snapshot identical to the last one seen in
    its slot carries no new information and is dropped before it reaches the
    history engine.

    Timestamps are not compared, so a new order whose first snapshot matches
    the slot's previous terminal snapshot field for field (an instant refill
    at the same price and size) cannot be told apart from a re-report and is
    dropped too.
    """

    def __init__(self) -> None:
        self._items: Dict[int, FlippingItem] = {}
        self._last_offers: Dict[int, OfferEvent] = {}

    def record_offer(self, offer: OfferEvent, item_name: Optional[str] = None) -> bool:
        """Feed one raw snapshot; return False when it was a repeat."""
        if _is_repeat(self._last_offers.get(offer.slot), offer):
            logger.debug(
                "Dropping repeated {} snapshot for item {} in slot {}",
                offer.state.value,
                offer.item_id,
                offer.slot,
            )
            return False

        item = self._items.get(offer.item_id)
        if item is None:
            item = FlippingItem(item_id=offer.item_id, item_name=item_name)
            self._items[offer.item_id] = item
        elif item_name and not item.item_name:
            item.item_name = item_name

        item.update(offer)
        self._last_offers[offer.slot] = offer
        return True

    def get_item(self, item_id: int) -> Optional[FlippingItem]:
        return self._items.get(item_id)

    def items(self) -> List[FlippingItem]:
        return list(self._items.values())

    def get_flips(self, since_ts: int) -> List[Flip]:
        """Flips of every item closed at or after `since_ts`, most recent first."""
        flips: List[Flip] = []
        for item in self._items.values():
            flips.extend(item.history.get_flips(since_ts))
        return sorted(flips, key=lambda flip: flip.ts, reverse=True)

    def current_profit(self, since_ts: int) -> int:
        total = 0
        for item in self._items.values():
            history = item.history
            total += history.current_profit(history.get_intervals_history(since_ts))
        return total

    def to_account_data(self) -> AccountData:
        return AccountData(
            trades=[item.to_record() for item in self._items.values()],
            last_offers=dict(self._last_offers),
        )

    @classmethod
    def from_account_data(cls, data: AccountData) -> "AccountTracker":
        tracker = cls()
        for record in data.trades:
            tracker._items[record.item_id] = FlippingItem.from_record(record)
        tracker._last_offers = dict(data.last_offers)
        return tracker
