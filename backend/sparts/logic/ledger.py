"""
Game ledger: the ordered hand sequence and the totals folded over it.

Every mutation is followed by a full recompute from the first hand. Bag
rollover depends on the remainder carried out of every earlier hand, so
editing hand k can change what hand k+1 scores; patching totals in place
would drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from sparts.logic.enums import Team
from sparts.logic.exceptions import HandIndexError, InvariantViolationError, SpartsError
from sparts.logic.hand_utils import rename_player, set_moon_flag
from sparts.logic.models import (
    DEFAULT_SEAT_NAMES,
    Hand,
    RunningTotals,
    ScoresheetRow,
    TeamTotals,
)
from sparts.logic.scoring import score_hand
from sparts.logic.settings import DEFAULT_SETTINGS, ScoringSettings, validate_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = structlog.get_logger()


@dataclass(frozen=True)
class FoldResult:
    """Outcome of folding the scorer over a hand sequence."""

    hands: tuple[Hand, ...]  # input hands with their cached results refreshed
    totals: RunningTotals
    rows: tuple[ScoresheetRow, ...]


def _team_totals(spades: int, hearts: int, bags: int, settings: ScoringSettings) -> TeamTotals:
    return TeamTotals(
        spades_points=spades,
        hearts_points=hearts,
        all_bags=bags,
        ends_game=spades >= settings.game_end_score or hearts >= settings.game_end_score,
    )


def fold_hands(hands: Sequence[Hand], settings: ScoringSettings = DEFAULT_SETTINGS) -> FoldResult:
    """
    Fold score_hand over the hands, left to right, from an empty state.

    Raises whatever score_hand raises; nothing is returned for a partial fold.
    """
    bags = {Team.A: 0, Team.B: 0}
    spades = {Team.A: 0, Team.B: 0}
    hearts = {Team.A: 0, Team.B: 0}
    scored: list[Hand] = []
    rows: list[ScoresheetRow] = []

    for index, hand in enumerate(hands):
        result, bags[Team.A], bags[Team.B] = score_hand(hand, bags[Team.A], bags[Team.B], settings)
        scored.append(hand.model_copy(update={"result": result}))
        for team in Team:
            team_result = result.for_team(team)
            spades[team] += team_result.spades_points
            hearts[team] += team_result.hearts_points
            rows.append(
                ScoresheetRow(
                    hand_index=index,
                    team=team,
                    spades_score=team_result.spades_points,
                    hearts_score=team_result.hearts_points,
                    hand_score=team_result.net,
                    hand_bags=team_result.hand_bags,
                    all_bags=bags[team],
                    spades_total=spades[team],
                    hearts_total=hearts[team],
                    game_total=spades[team] - hearts[team],
                ),
            )

    totals = RunningTotals(
        team_a=_team_totals(spades[Team.A], hearts[Team.A], bags[Team.A], settings),
        team_b=_team_totals(spades[Team.B], hearts[Team.B], bags[Team.B], settings),
    )
    return FoldResult(hands=tuple(scored), totals=totals, rows=tuple(rows))


def _resolve_moon_flags(before: Hand, after: Hand) -> Hand:
    """Keep the moon flags exclusive after an edit; the flag just raised wins."""
    if not (after.team_a_shot_moon and after.team_b_shot_moon):
        return after
    raised_a = not before.team_a_shot_moon
    raised_b = not before.team_b_shot_moon
    if raised_a and raised_b:
        raise InvariantViolationError("an edit cannot set both teams' moon flags")
    if raised_a:
        return after.model_copy(update={"team_b_shot_moon": False})
    if raised_b:
        return after.model_copy(update={"team_a_shot_moon": False})
    raise InvariantViolationError("hand already has both teams' moon flags set")


class GameLedger:
    """
    Sole owner of a game's hands and running totals.

    The sequence is never empty: a new ledger starts with one blank hand, and
    removing the last hand seeds a fresh one with the same seat names. Each
    mutating call recomputes the whole sequence before returning. When a
    recompute fails the ledger keeps its previous hands, results and totals.
    """

    def __init__(
        self,
        settings: ScoringSettings | None = None,
        seat_names: Sequence[str] | None = None,
    ) -> None:
        self._settings = settings if settings is not None else DEFAULT_SETTINGS
        validate_settings(self._settings)
        names = tuple(seat_names) if seat_names is not None else DEFAULT_SEAT_NAMES
        self._hands: tuple[Hand, ...] = (Hand.with_names(names),)
        self._totals = RunningTotals()
        self._rows: tuple[ScoresheetRow, ...] = ()
        self.recompute()

    @property
    def settings(self) -> ScoringSettings:
        return self._settings

    @property
    def hands(self) -> tuple[Hand, ...]:
        return self._hands

    def __len__(self) -> int:
        return len(self._hands)

    def hand(self, at: int) -> Hand:
        self._check_index(at)
        return self._hands[at]

    def totals(self) -> RunningTotals:
        return self._totals

    def rows(self) -> tuple[ScoresheetRow, ...]:
        """Scoresheet lines, two per hand (team A then team B), in hand order."""
        return self._rows

    def recompute(self) -> RunningTotals:
        """Rescore every hand from the start and publish the new totals."""
        self._commit(self._hands)
        return self._totals

    def add_hand(self) -> Hand:
        """Append a blank hand carrying the last hand's seat names."""
        new_hand = self._hands[-1].cleared()
        self._commit((*self._hands, new_hand))
        logger.info("hand added", hand_index=len(self._hands) - 1, hand_count=len(self._hands))
        return self._hands[-1]

    def remove_hand(self, at: int) -> Hand:
        """Remove and return the hand at index; an emptied ledger gets one blank hand."""
        self._check_index(at)
        removed = self._hands[at]
        remaining = self._hands[:at] + self._hands[at + 1 :]
        if not remaining:
            remaining = (removed.cleared(),)
        self._commit(remaining)
        logger.info("hand removed", hand_index=at, hand_count=len(self._hands))
        return removed

    def mutate_hand(self, at: int, edit_fn: Callable[[Hand], Hand]) -> Hand:
        """
        Replace the hand at index with edit_fn(hand) and recompute.

        A moon flag raised by the edit clears the other team's flag. An edit
        that raises both at once is rejected with InvariantViolationError and
        the ledger is left unchanged.
        """
        self._check_index(at)
        current = self._hands[at]
        edited = edit_fn(current)
        try:
            edited = _resolve_moon_flags(current, edited)
        except InvariantViolationError:
            logger.warning("rejected hand edit", hand_index=at, reason="both moon flags set")
            raise
        self._commit(self._replace(at, edited))
        logger.info("hand edited", hand_index=at)
        return self._hands[at]

    def set_moon(self, at: int, team: Team, *, shot: bool) -> Hand:
        """Set or clear a team's moon flag; setting it clears the other team's."""
        return self.mutate_hand(at, lambda hand: set_moon_flag(hand, team, shot=shot))

    def rename_seat(self, seat: int, name: str) -> None:
        """Rename a seat on every hand."""
        self._commit(tuple(rename_player(hand, seat, name) for hand in self._hands))
        logger.info("seat renamed", seat=seat)

    def reset(self) -> None:
        """Start a new game with one blank hand, keeping the first hand's seat names."""
        self._commit((self._hands[0].cleared(),))
        logger.info("game reset")

    def _replace(self, at: int, hand: Hand) -> tuple[Hand, ...]:
        return (*self._hands[:at], hand, *self._hands[at + 1 :])

    def _check_index(self, at: int) -> None:
        if not (0 <= at < len(self._hands)):
            raise HandIndexError(at, len(self._hands))

    def _commit(self, hands: Sequence[Hand]) -> None:
        """Fold the candidate sequence and publish it only if every hand scores."""
        try:
            folded = fold_hands(hands, self._settings)
        except SpartsError as e:
            logger.warning("recompute failed", error=str(e), hand_count=len(hands))
            raise
        was_over = self._totals.ends_game
        self._hands = folded.hands
        self._totals = folded.totals
        self._rows = folded.rows
        logger.debug(
            "recomputed",
            hand_count=len(self._hands),
            game_score_a=self._totals.team_a.game_score,
            game_score_b=self._totals.team_b.game_score,
        )
        if self._totals.ends_game and not was_over:
            logger.info(
                "game end reached",
                team_a_ends=self._totals.team_a.ends_game,
                team_b_ends=self._totals.team_b.ends_game,
            )
