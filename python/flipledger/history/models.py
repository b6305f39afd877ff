from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import GE_LIMIT_WINDOW_MS


class OfferState(str, Enum):
    """Lifecycle state of the order occupying an exchange slot.

    BUYING/SELLING are in-progress snapshots; every other state closes the
    order, after which the slot starts over with a new order.
    """

    BUYING = "BUYING"
    BOUGHT = "BOUGHT"
    SELLING = "SELLING"
    SOLD = "SOLD"
    CANCELLED_BUY = "CANCELLED_BUY"
    CANCELLED_SELL = "CANCELLED_SELL"

    @property
    def is_terminal(self) -> bool:
        return self not in (OfferState.BUYING, OfferState.SELLING)

    @property
    def is_buy_side(self) -> bool:
        return self in (
            OfferState.BUYING,
            OfferState.BOUGHT,
            OfferState.CANCELLED_BUY,
        )


class OfferEvent(BaseModel):
    """One observed snapshot of an exchange order slot.

    Raw events arrive with `quantity_since_last_offer` unset (0); the history
    engine stores standardized copies where it holds the units filled since
    the previous snapshot of the same order.
    """

    model_config = ConfigDict(frozen=True)

    slot: int = Field(..., ge=0, description="Exchange slot the order occupies")
    is_buy: bool
    price: int = Field(..., gt=0, description="Price per unit at this snapshot")
    current_quantity_in_trade: int = Field(
        ..., ge=0, description="Cumulative units filled for the order so far"
    )
    total_quantity_in_trade: int = Field(
        ..., gt=0, description="Full requested size of the order"
    )
    quantity_since_last_offer: int = Field(
        default=0, ge=0, description="Units filled since the previous snapshot"
    )
    ts: int = Field(..., description="Snapshot timestamp in ms")
    state: OfferState
    is_margin_check: bool = Field(
        default=False,
        description="1-unit exploratory trade used to probe the current price",
    )
    item_id: int = Field(default=0, ge=0, description="Traded item identifier")

    @field_validator("is_margin_check", mode="before")
    @classmethod
    def _default_margin_check(cls, value):
        return False if value is None else value

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal


class Flip(BaseModel):
    """A closed buy/sell round trip derived from a terminal sell entry."""

    model_config = ConfigDict(frozen=True)

    buy_price: int = Field(..., gt=0)
    sell_price: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)
    ts: int = Field(..., description="Timestamp of the closing sell in ms")
    is_margin_check: bool = Field(default=False)

    @property
    def profit(self) -> int:
        return self.quantity * (self.sell_price - self.buy_price)


class HistorySnapshot(BaseModel):
    """Post-processing state of one HistoryManager, stored verbatim."""

    standardized_offers: List[OfferEvent] = Field(default_factory=list)
    slot_quantities: Dict[int, int] = Field(
        default_factory=dict,
        description="Previous cumulative quantity per slot for open orders",
    )
    ge_window_start_ts: Optional[int] = Field(
        default=None, description="Timestamp of the first buy in the limit window"
    )
    items_bought_this_limit_window: int = Field(default=0, ge=0)

    @property
    def next_ge_limit_refresh(self) -> Optional[int]:
        if self.ge_window_start_ts is None:
            return None
        return self.ge_window_start_ts + GE_LIMIT_WINDOW_MS
