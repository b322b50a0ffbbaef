from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sparts.logic.ledger import GameLedger
from sparts.logic.models import DEFAULT_SEAT_NAMES, Hand, PlayerEntry

if TYPE_CHECKING:
    from collections.abc import Sequence


# ============================================================================
# Hand Builder Helpers
# ============================================================================


def create_entry(
    bid: int = 0,
    took: int = 0,
    *,
    hearts: int = 0,
    penalty_card: bool = False,
    name: str = "",
) -> PlayerEntry:
    """Create a PlayerEntry with terse keyword names for test tables."""
    return PlayerEntry(name=name, bid=bid, took=took, hearts_taken=hearts, took_penalty_card=penalty_card)


def create_hand(
    bids: Sequence[int] = (0, 0, 0, 0),
    took: Sequence[int] = (0, 0, 0, 0),
    *,
    hearts: Sequence[int] = (0, 0, 0, 0),
    penalty_seat: int | None = None,
    moon_a: bool = False,
    moon_b: bool = False,
    names: Sequence[str] = DEFAULT_SEAT_NAMES,
) -> Hand:
    """Create a Hand from per-seat columns, seats 0-1 team A and 2-3 team B."""
    players = tuple(
        create_entry(bid, tk, hearts=h, penalty_card=seat == penalty_seat, name=name)
        for seat, (bid, tk, h, name) in enumerate(zip(bids, took, hearts, names, strict=True))
    )
    return Hand(players=players, team_a_shot_moon=moon_a, team_b_shot_moon=moon_b)


def load_hands(ledger: GameLedger, hands: Sequence[Hand]) -> GameLedger:
    """Replace the ledger's blank first hand and append the rest, through the public API."""
    for index, hand in enumerate(hands):
        if index > 0:
            ledger.add_hand()
        ledger.mutate_hand(index, lambda _current, hand=hand: hand)
    return ledger


@pytest.fixture
def ledger() -> GameLedger:
    return GameLedger()


# Five legal hands (13 tricks each); hand 3 is a team A moon shot.
SAMPLE_HANDS = (
    create_hand(bids=(4, 2, 3, 3), took=(4, 3, 3, 3), hearts=(2, 1, 6, 4), penalty_seat=2),
    create_hand(bids=(0, 5, 4, 3), took=(0, 6, 4, 3), hearts=(0, 3, 5, 5), penalty_seat=1),
    create_hand(bids=(3, 3, 0, 4), took=(2, 3, 1, 7), hearts=(4, 4, 0, 5), penalty_seat=3),
    create_hand(bids=(2, 2, 4, 4), took=(3, 3, 3, 4), hearts=(13, 0, 0, 0), penalty_seat=0, moon_a=True),
    create_hand(bids=(5, 1, 2, 2), took=(5, 4, 2, 2), hearts=(1, 2, 3, 7), penalty_seat=3),
)
