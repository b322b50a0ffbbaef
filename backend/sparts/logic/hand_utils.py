"""
Immutable hand update utilities using Pydantic model_copy.

These helpers never mutate the input hand - they always return a new Hand.
They are meant to be passed to GameLedger.mutate_hand, e.g.
``ledger.mutate_hand(2, lambda h: update_player(h, 0, bid=4))``.
"""

from sparts.logic.enums import Team
from sparts.logic.models import Hand, PlayerEntry

_PLAYER_FIELDS = set(PlayerEntry.model_fields)


def update_player(hand: Hand, seat: int, **updates: object) -> Hand:
    """
    Return new hand with updated player entry at seat.

    Args:
        hand: Current hand
        seat: Player seat to update (0-3)
        **updates: Fields to update on the player entry

    Returns:
        New Hand with updated player entry

    Raises:
        ValueError: If seat is out of bounds or update fields are invalid

    """
    if not (0 <= seat < len(hand.players)):
        raise ValueError(f"Invalid seat {seat}, expected 0-{len(hand.players) - 1}")
    invalid_fields = set(updates) - _PLAYER_FIELDS
    if invalid_fields:
        raise ValueError(f"Invalid player fields: {invalid_fields}")
    players = list(hand.players)
    players[seat] = hand.players[seat].model_copy(update=updates)
    return hand.model_copy(update={"players": tuple(players)})


def set_moon_flag(hand: Hand, team: Team, *, shot: bool) -> Hand:
    """
    Return new hand with the team's moon flag set.

    Setting a flag clears the other team's flag so the two stay exclusive.
    """
    own_field = "team_a_shot_moon" if team is Team.A else "team_b_shot_moon"
    other_field = "team_b_shot_moon" if team is Team.A else "team_a_shot_moon"
    updates: dict[str, bool] = {own_field: shot}
    if shot:
        updates[other_field] = False
    return hand.model_copy(update=updates)


def rename_player(hand: Hand, seat: int, name: str) -> Hand:
    """Return new hand with the seat renamed."""
    return update_player(hand, seat, name=name)
