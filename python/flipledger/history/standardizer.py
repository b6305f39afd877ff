from dataclasses import dataclass
from typing import Dict, Optional

from loguru import logger

from .models import OfferEvent


@dataclass
class SlotTracker:
    """Running fill state for the order currently occupying one slot."""

    previous_quantity_in_trade: int = 0


class OfferStandardizer:
    """Derives `quantity_since_last_offer` for raw slot snapshots.

    Each snapshot carries the cumulative fill of its order, so the units filled
    since the previous snapshot are the difference to the last cumulative value
    seen in that slot. A terminal snapshot closes the order and the slot starts
    counting from zero again.
    """

    def __init__(self, slot_quantities: Optional[Dict[int, int]] = None) -> None:
        self._slots: Dict[int, SlotTracker] = {
            slot: SlotTracker(previous_quantity_in_trade=qty)
            for slot, qty in (slot_quantities or {}).items()
        }

    def standardize_offer(self, offer: OfferEvent) -> OfferEvent:
        tracker = self._slots.setdefault(offer.slot, SlotTracker())
        delta = offer.current_quantity_in_trade - tracker.previous_quantity_in_trade
        if delta < 0:
            logger.debug(
                "Clamping negative fill delta {} in slot {} (state={})",
                delta,
                offer.slot,
                offer.state.value,
            )
            delta = 0

        tracker.previous_quantity_in_trade = offer.current_quantity_in_trade
        if offer.is_terminal:
            tracker.previous_quantity_in_trade = 0

        return offer.model_copy(update={"quantity_since_last_offer": delta})

    def slot_quantities(self) -> Dict[int, int]:
        """Return the non-zero running quantities, keyed by slot."""
        return {
            slot: tracker.previous_quantity_in_trade
            for slot, tracker in self._slots.items()
            if tracker.previous_quantity_in_trade
        }
