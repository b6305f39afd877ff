from typing import List

from .models import OfferEvent


def truncate_offers(offers: List[OfferEvent]) -> None:
    """Collapse the partial-fill run of the most recently closed order, in place.

    Only acts when the last entry is terminal. The run is every earlier entry
    of the same slot back to (not including) the previous terminal entry of
    that slot; entries of other slots in between are left where they are. The
    run is replaced by a single copy of the terminal entry carrying the summed
    fill, placed where the terminal entry was.
    """
    if not offers:
        return

    last = offers[-1]
    if not last.is_terminal:
        return

    run_indices = [len(offers) - 1]
    for idx in range(len(offers) - 2, -1, -1):
        offer = offers[idx]
        if offer.slot != last.slot:
            continue
        if offer.is_terminal:
            break
        run_indices.append(idx)

    if len(run_indices) == 1:
        return

    total = sum(offers[idx].quantity_since_last_offer for idx in run_indices)
    for idx in run_indices[1:]:
        del offers[idx]
    offers[-1] = last.model_copy(update={"quantity_since_last_offer": total})
