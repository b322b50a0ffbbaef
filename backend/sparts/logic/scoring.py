"""
Scoring calculation for one Sparts hand.

The spades side settles each team's contract, bags and nil bids. The hearts
side charges penalty cards and redistributes a moon shot. Everything here is
a pure function of its arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sparts.logic.enums import NUM_SEATS, Team
from sparts.logic.exceptions import InvalidHandInputError, InvariantViolationError
from sparts.logic.models import HandResult, TeamHandScore
from sparts.logic.settings import DEFAULT_SETTINGS, ScoringSettings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sparts.logic.models import Hand, PlayerEntry


@dataclass(frozen=True)
class SpadesOutcome:
    """
    Result of the spades side for one team.
    """

    points: int  # contract, bag penalties and nil settlement combined
    hand_bags: int  # bags generated this hand, before rollover
    outgoing_bags: int  # bag remainder carried into the next hand


def _check_count(value: int, *, field: str, seat: int | None, limit: int | None) -> None:
    # edits through model_copy skip pydantic validation; bool is an int subclass
    if type(value) is not int:
        raise InvalidHandInputError(field=field, seat=seat, value=value)
    if value < 0 or (limit is not None and value > limit):
        raise InvalidHandInputError(field=field, seat=seat, value=value)


def validate_hand(
    hand: Hand,
    incoming_bags_a: int,
    incoming_bags_b: int,
    settings: ScoringSettings = DEFAULT_SETTINGS,
) -> None:
    """
    Reject input the scorer must not guess about.

    Raises:
        InvalidHandInputError: seat count is not 4, a bid, trick or heart count
            is outside 0..tricks_per_hand, or an incoming bag remainder is negative
        InvariantViolationError: both teams are flagged as shooting the moon

    """
    if len(hand.players) != NUM_SEATS:
        raise InvalidHandInputError(field="seat_count", value=len(hand.players))
    limit = settings.tricks_per_hand
    for seat, entry in enumerate(hand.players):
        _check_count(entry.bid, field="bid", seat=seat, limit=limit)
        _check_count(entry.took, field="took", seat=seat, limit=limit)
        _check_count(entry.hearts_taken, field="hearts_taken", seat=seat, limit=limit)
        if type(entry.took_penalty_card) is not bool:
            raise InvalidHandInputError(field="took_penalty_card", seat=seat, value=entry.took_penalty_card)
    _check_count(incoming_bags_a, field="incoming_bags_a", seat=None, limit=None)
    _check_count(incoming_bags_b, field="incoming_bags_b", seat=None, limit=None)
    if hand.team_a_shot_moon and hand.team_b_shot_moon:
        raise InvariantViolationError("both teams cannot shoot the moon in the same hand")


def score_spades(
    entries: Sequence[PlayerEntry],
    incoming_bags: int,
    settings: ScoringSettings = DEFAULT_SETTINGS,
) -> SpadesOutcome:
    """
    Score one team's spades side.

    Only tricks won by non-nil bidders count toward the team contract. Tricks
    won by a nil bidder are always bags, even when the team is set, while
    overtricks only bag when the contract is made. Bags roll over into a
    penalty every bag_threshold, and each nil bid settles on its own.

    Args:
        entries: The team's two player entries
        incoming_bags: Team bag remainder before this hand
        settings: Scoring constants

    Returns:
        SpadesOutcome with points, bags generated this hand and the new remainder

    """
    team_bid = sum(entry.bid for entry in entries if entry.bid > 0)
    non_nil_tricks = sum(entry.took for entry in entries if entry.bid > 0)
    nil_tricks = sum(entry.took for entry in entries if entry.bid == 0)

    if non_nil_tricks >= team_bid:
        points = settings.points_per_bid * team_bid
        hand_bags = nil_tricks + max(0, non_nil_tricks - team_bid)
    else:
        points = -settings.points_per_bid * team_bid
        hand_bags = nil_tricks

    bags = incoming_bags + hand_bags
    while bags >= settings.bag_threshold:
        points += settings.bag_penalty
        bags -= settings.bag_threshold

    for entry in entries:
        if entry.bid == 0:
            points += settings.nil_bonus if entry.took == 0 else -settings.nil_bonus

    return SpadesOutcome(points=points, hand_bags=hand_bags, outgoing_bags=bags)


def score_hearts(
    entries: Sequence[PlayerEntry],
    *,
    shot_moon: bool,
    settings: ScoringSettings = DEFAULT_SETTINGS,
) -> int:
    """
    Score one team's own hearts penalty, before any moon redistribution.

    A team that shot the moon takes no penalty; the opposing team's moon
    charge is added by score_hand.
    """
    if shot_moon:
        return 0
    hearts_count = sum(entry.hearts_taken for entry in entries)
    took_penalty_card = any(entry.took_penalty_card for entry in entries)
    return hearts_count * settings.per_card_value + (settings.penalty_card_value if took_penalty_card else 0)


def score_hand(
    hand: Hand,
    incoming_bags_a: int = 0,
    incoming_bags_b: int = 0,
    settings: ScoringSettings = DEFAULT_SETTINGS,
) -> tuple[HandResult, int, int]:
    """
    Score a single hand for both teams.

    Args:
        hand: The hand's raw inputs (the cached result is ignored)
        incoming_bags_a: Team A bag remainder before this hand
        incoming_bags_b: Team B bag remainder before this hand
        settings: Scoring constants

    Returns:
        Tuple of (HandResult, outgoing bags for A, outgoing bags for B)

    Raises:
        InvalidHandInputError: malformed input, see validate_hand
        InvariantViolationError: both moon flags set

    """
    validate_hand(hand, incoming_bags_a, incoming_bags_b, settings)

    incoming = {Team.A: incoming_bags_a, Team.B: incoming_bags_b}
    spades = {team: score_spades(hand.team_entries(team), incoming[team], settings) for team in Team}
    hearts = {
        team: score_hearts(hand.team_entries(team), shot_moon=hand.shot_moon(team), settings=settings) for team in Team
    }

    # moon redistribution runs after both base penalties are known
    for team in Team:
        if hand.shot_moon(team):
            hearts[team.other] += settings.moon_charge()

    scores = {
        team: TeamHandScore(
            spades_points=spades[team].points,
            hearts_points=hearts[team],
            hand_bags=spades[team].hand_bags,
        )
        for team in Team
    }
    result = HandResult(team_a=scores[Team.A], team_b=scores[Team.B])
    return result, spades[Team.A].outgoing_bags, spades[Team.B].outgoing_bags
