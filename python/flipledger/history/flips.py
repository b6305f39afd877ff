"""Flip extraction and realized profit over a standardized ledger.

A flip is emitted for every terminal sell entry (SOLD or CANCELLED_SELL) that
realized at least one unit; a cancelled sell still transacted the units it
filled before the cancel. The buy side of the flip is the price of the most
recent buy entry that precedes the sell in the ledger and is not later than
the sell. Buy entries never produce flips themselves.
"""

from typing import List, Optional, Sequence

from loguru import logger

from .models import Flip, OfferEvent


def _find_buy_price(offers: Sequence[OfferEvent], sell_index: int) -> Optional[int]:
    sell = offers[sell_index]
    for idx in range(sell_index - 1, -1, -1):
        offer = offers[idx]
        if (
            offer.is_buy
            and offer.quantity_since_last_offer > 0
            and offer.ts <= sell.ts
        ):
            return offer.price
    return None


def extract_flips(
    offers: Sequence[OfferEvent], since_ts: Optional[int] = None
) -> List[Flip]:
    """Derive flips from `offers`, newest first.

    `since_ts` limits which sells produce flips; buy prices are still looked up
    across the whole sequence.
    """
    flips: List[Flip] = []
    for idx, offer in enumerate(offers):
        if offer.is_buy or not offer.is_terminal:
            continue
        if since_ts is not None and offer.ts < since_ts:
            continue
        if offer.quantity_since_last_offer <= 0:
            continue

        buy_price = _find_buy_price(offers, idx)
        if buy_price is None:
            logger.debug(
                "No buy found before sell in slot {} at ts={}; skipping flip",
                offer.slot,
                offer.ts,
            )
            continue

        flips.append(
            Flip(
                buy_price=buy_price,
                sell_price=offer.price,
                quantity=offer.quantity_since_last_offer,
                ts=offer.ts,
                is_margin_check=offer.is_margin_check,
            )
        )

    # Later ledger entries win ties on equal timestamps
    return sorted(reversed(flips), key=lambda flip: flip.ts, reverse=True)


def calculate_profit(offers: Sequence[OfferEvent]) -> int:
    """Sum the realized margin of every flip derivable from `offers`."""
    return sum(flip.profit for flip in extract_flips(offers))
