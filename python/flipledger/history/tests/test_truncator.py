from flipledger.history.models import OfferEvent, OfferState
from flipledger.history.truncator import truncate_offers

TS = 1_700_000_000_000


def _offer(
    is_buy: bool,
    current: int,
    slot: int,
    state: OfferState,
    total: int,
    since_last: int,
) -> OfferEvent:
    return OfferEvent(
        slot=slot,
        is_buy=is_buy,
        price=100,
        current_quantity_in_trade=current,
        total_quantity_in_trade=total,
        quantity_since_last_offer=since_last,
        ts=TS,
        state=state,
    )


def test_non_terminal_offers_are_left_alone():
    offers = [
        _offer(True, 10, 1, OfferState.BUYING, 50, 10),
        _offer(True, 5, 2, OfferState.BUYING, 20, 5),
        _offer(True, 25, 1, OfferState.BUYING, 50, 15),
    ]
    expected = list(offers)

    truncate_offers(offers)

    assert offers == expected


def test_completed_offer_merges_its_run():
    offers = [
        _offer(True, 10, 1, OfferState.BUYING, 50, 10),
        _offer(True, 5, 2, OfferState.BUYING, 20, 5),
        _offer(True, 25, 1, OfferState.BUYING, 50, 15),
        _offer(True, 50, 1, OfferState.BOUGHT, 50, 25),
    ]

    truncate_offers(offers)

    assert offers == [
        _offer(True, 5, 2, OfferState.BUYING, 20, 5),
        _offer(True, 50, 1, OfferState.BOUGHT, 50, 50),
    ]


def test_single_terminal_offer_is_not_truncated():
    offers = [
        _offer(True, 5, 2, OfferState.BUYING, 20, 5),
        _offer(True, 50, 1, OfferState.BOUGHT, 50, 50),
        _offer(False, 20, 3, OfferState.SOLD, 20, 20),
    ]
    expected = list(offers)

    truncate_offers(offers)

    assert offers == expected


def test_run_stops_at_previous_order_in_slot():
    offers = [
        _offer(True, 24, 1, OfferState.BOUGHT, 24, 24),
        _offer(False, 10, 1, OfferState.SELLING, 30, 10),
        _offer(False, 20, 1, OfferState.SELLING, 30, 10),
        _offer(False, 30, 1, OfferState.SOLD, 30, 10),
    ]

    truncate_offers(offers)

    assert offers == [
        _offer(True, 24, 1, OfferState.BOUGHT, 24, 24),
        _offer(False, 30, 1, OfferState.SOLD, 30, 30),
    ]


def test_cancelled_sell_keeps_realized_quantity():
    offers = [
        _offer(False, 3, 4, OfferState.SELLING, 5, 3),
        _offer(False, 3, 4, OfferState.CANCELLED_SELL, 5, 0),
    ]

    truncate_offers(offers)

    assert offers == [_offer(False, 3, 4, OfferState.CANCELLED_SELL, 5, 3)]


def test_empty_list_is_a_no_op():
    offers = []
    truncate_offers(offers)
    assert offers == []
