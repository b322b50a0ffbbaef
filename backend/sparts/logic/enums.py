"""Enumerations and the fixed seat partition."""

from __future__ import annotations

from enum import Enum

NUM_SEATS = 4
SEATS_PER_TEAM = 2


class Team(str, Enum):
    """Partnership. Seats 0 and 1 play for A, seats 2 and 3 for B."""

    A = "a"
    B = "b"

    @property
    def other(self) -> Team:
        return Team.B if self is Team.A else Team.A

    @property
    def seats(self) -> tuple[int, int]:
        first = 0 if self is Team.A else SEATS_PER_TEAM
        return first, first + 1

