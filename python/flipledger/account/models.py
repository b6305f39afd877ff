from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from flipledger.history.models import HistorySnapshot, OfferEvent


class FlippingItemRecord(BaseModel):
    """Persisted form of one traded item and its history."""

    item_id: int = Field(..., ge=0)
    item_name: Optional[str] = Field(default=None, description="Display name")
    history: HistorySnapshot = Field(default_factory=HistorySnapshot)
    margin_check_buy_price: Optional[int] = Field(
        default=None, description="Price of the latest margin-check buy"
    )
    margin_check_buy_ts: Optional[int] = Field(default=None)
    margin_check_sell_price: Optional[int] = Field(
        default=None, description="Price of the latest margin-check sell"
    )
    margin_check_sell_ts: Optional[int] = Field(default=None)


class AccountData(BaseModel):
    """Everything stored for one account: item histories and last slot offers."""

    trades: List[FlippingItemRecord] = Field(default_factory=list)
    last_offers: Dict[int, OfferEvent] = Field(
        default_factory=dict,
        description="Most recent raw snapshot per slot, used to drop repeats",
    )
