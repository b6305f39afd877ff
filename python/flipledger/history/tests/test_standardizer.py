from flipledger.history.models import OfferEvent, OfferState
from flipledger.history.standardizer import OfferStandardizer

TS = 1_700_000_000_000


def _offer(
    is_buy: bool, current: int, slot: int, state: OfferState, total: int
) -> OfferEvent:
    return OfferEvent(
        slot=slot,
        is_buy=is_buy,
        price=100,
        current_quantity_in_trade=current,
        total_quantity_in_trade=total,
        ts=TS,
        state=state,
    )


def test_deltas_across_interleaved_slots():
    standardizer = OfferStandardizer()
    raw = [
        _offer(True, 10, 1, OfferState.BUYING, 50),
        _offer(True, 25, 1, OfferState.BUYING, 50),
        _offer(True, 15, 3, OfferState.BUYING, 20),
        _offer(True, 20, 4, OfferState.BUYING, 500),
        _offer(True, 500, 4, OfferState.BOUGHT, 500),
        _offer(True, 50, 1, OfferState.BOUGHT, 50),
    ]

    deltas = [standardizer.standardize_offer(o).quantity_since_last_offer for o in raw]

    assert deltas == [10, 15, 15, 20, 480, 25]


def test_sum_of_deltas_equals_final_fill():
    standardizer = OfferStandardizer()
    fills = [3, 3, 9, 17, 40]
    states = [OfferState.SELLING] * 4 + [OfferState.SOLD]

    total = sum(
        standardizer.standardize_offer(
            _offer(False, qty, 0, state, 40)
        ).quantity_since_last_offer
        for qty, state in zip(fills, states)
    )

    assert total == 40


def test_terminal_offer_resets_slot():
    standardizer = OfferStandardizer()
    standardizer.standardize_offer(_offer(True, 24, 1, OfferState.BOUGHT, 24))

    new_order = standardizer.standardize_offer(
        _offer(False, 10, 1, OfferState.SELLING, 30)
    )

    assert new_order.quantity_since_last_offer == 10
    assert standardizer.slot_quantities() == {1: 10}


def test_cancelled_offer_also_resets_slot():
    standardizer = OfferStandardizer()
    standardizer.standardize_offer(_offer(True, 4, 2, OfferState.BUYING, 10))
    standardizer.standardize_offer(_offer(True, 4, 2, OfferState.CANCELLED_BUY, 10))

    assert standardizer.slot_quantities() == {}
    fresh = standardizer.standardize_offer(_offer(True, 2, 2, OfferState.BUYING, 5))
    assert fresh.quantity_since_last_offer == 2


def test_decreasing_quantity_is_clamped_to_zero():
    standardizer = OfferStandardizer()
    standardizer.standardize_offer(_offer(True, 30, 1, OfferState.BUYING, 50))

    glitch = standardizer.standardize_offer(_offer(True, 20, 1, OfferState.BUYING, 50))
    assert glitch.quantity_since_last_offer == 0

    # the lower value becomes the new baseline
    recovered = standardizer.standardize_offer(
        _offer(True, 35, 1, OfferState.BUYING, 50)
    )
    assert recovered.quantity_since_last_offer == 15


def test_standardizing_returns_copy():
    standardizer = OfferStandardizer()
    raw = _offer(True, 10, 1, OfferState.BUYING, 50)

    standardized = standardizer.standardize_offer(raw)

    assert raw.quantity_since_last_offer == 0
    assert standardized.quantity_since_last_offer == 10
    assert standardized.model_copy(update={"quantity_since_last_offer": 0}) == raw


def test_restored_slot_quantities_seed_deltas():
    standardizer = OfferStandardizer({5: 12})
    offer = standardizer.standardize_offer(_offer(True, 20, 5, OfferState.BUYING, 40))
    assert offer.quantity_since_last_offer == 8
