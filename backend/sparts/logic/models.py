"""
Pydantic models for the scoring engine's data.

Raw inputs (PlayerEntry, Hand) are what the presentation layer edits.
Derived values (TeamHandScore, HandResult, TeamTotals, RunningTotals,
ScoresheetRow) are only ever produced by the scorer and the ledger.
All models are frozen; edits produce new objects via model_copy.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sparts.logic.enums import NUM_SEATS, Team

DEFAULT_SEAT_NAMES = ("P1", "P2", "P3", "P4")


class PlayerEntry(BaseModel):
    """One seat's raw input for one hand. A bid of 0 is a nil bid."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    bid: int = 0
    took: int = 0
    hearts_taken: int = 0
    took_penalty_card: bool = False

    @classmethod
    def from_inputs(
        cls,
        name: str = "",
        *,
        bid: int | None = None,
        took: int | None = None,
        hearts_taken: int | None = None,
        took_penalty_card: bool = False,
    ) -> PlayerEntry:
        """
        Build an entry from UI values where None means "not entered yet".

        Unset counts resolve to 0 here, so the engine only ever sees concrete
        integers. Note that an unset bid therefore scores as a nil bid.
        """
        return cls(
            name=name,
            bid=bid if bid is not None else 0,
            took=took if took is not None else 0,
            hearts_taken=hearts_taken if hearts_taken is not None else 0,
            took_penalty_card=took_penalty_card,
        )

    def cleared(self) -> PlayerEntry:
        """Return a fresh entry for the same seat with every input reset."""
        return PlayerEntry(name=self.name)


class TeamHandScore(BaseModel):
    """One team's share of a hand's result."""

    model_config = ConfigDict(frozen=True)

    spades_points: int = 0
    hearts_points: int = 0
    hand_bags: int = 0  # bags generated this hand, before rollover

    @property
    def net(self) -> int:
        return self.spades_points - self.hearts_points


class HandResult(BaseModel):
    """Derived score of one hand. Overwritten on every recompute."""

    model_config = ConfigDict(frozen=True)

    team_a: TeamHandScore = Field(default_factory=TeamHandScore)
    team_b: TeamHandScore = Field(default_factory=TeamHandScore)

    @property
    def net_a(self) -> int:
        return self.team_a.net

    @property
    def net_b(self) -> int:
        return self.team_b.net

    def for_team(self, team: Team) -> TeamHandScore:
        return self.team_a if team is Team.A else self.team_b


class Hand(BaseModel):
    """
    One dealt and played round.

    Seats 0 and 1 form team A, seats 2 and 3 team B. At most one of the moon
    flags may be true; the ledger enforces this on every mutation.
    """

    model_config = ConfigDict(frozen=True)

    players: tuple[PlayerEntry, ...] = Field(
        default_factory=lambda: tuple(PlayerEntry(name=name) for name in DEFAULT_SEAT_NAMES),
    )
    team_a_shot_moon: bool = False
    team_b_shot_moon: bool = False
    result: HandResult = Field(default_factory=HandResult)

    @classmethod
    def with_names(cls, names: tuple[str, ...] | list[str]) -> Hand:
        """Create an empty hand with the given seat names."""
        if len(names) != NUM_SEATS:
            raise ValueError(f"expected {NUM_SEATS} seat names, got {len(names)}")
        return cls(players=tuple(PlayerEntry(name=name) for name in names))

    @property
    def seat_names(self) -> tuple[str, ...]:
        return tuple(player.name for player in self.players)

    def team_entries(self, team: Team) -> tuple[PlayerEntry, PlayerEntry]:
        first, second = team.seats
        return self.players[first], self.players[second]

    def shot_moon(self, team: Team) -> bool:
        return self.team_a_shot_moon if team is Team.A else self.team_b_shot_moon

    def cleared(self) -> Hand:
        """Return a new hand keeping seat names with every input and result reset."""
        return Hand(players=tuple(player.cleared() for player in self.players))


class TeamTotals(BaseModel):
    """One team's cumulative state after a fold over the hand sequence."""

    model_config = ConfigDict(frozen=True)

    spades_points: int = 0
    hearts_points: int = 0
    all_bags: int = 0  # remainder after rollovers, always below the bag threshold
    ends_game: bool = False

    @property
    def game_score(self) -> int:
        return self.spades_points - self.hearts_points


class RunningTotals(BaseModel):
    """Game-level totals for both teams."""

    model_config = ConfigDict(frozen=True)

    team_a: TeamTotals = Field(default_factory=TeamTotals)
    team_b: TeamTotals = Field(default_factory=TeamTotals)

    @property
    def ends_game(self) -> bool:
        return self.team_a.ends_game or self.team_b.ends_game


class ScoresheetRow(BaseModel):
    """One team's line of the scoresheet for one hand, with totals after that hand."""

    model_config = ConfigDict(frozen=True)

    hand_index: int
    team: Team
    spades_score: int
    hearts_score: int
    hand_score: int
    hand_bags: int
    all_bags: int
    spades_total: int
    hearts_total: int
    game_total: int
