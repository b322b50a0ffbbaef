"""Typed domain exceptions for the Sparts scoring engine.

Every engine failure is a subclass of SpartsError. None of them describe a
normal game outcome: a set contract, a failed nil or a moon shot are all
scored, never raised. These exceptions signal that a caller upstream handed
the engine data it must not receive.
"""


class SpartsError(Exception):
    """Base exception for scoring engine errors."""


class InvalidHandInputError(SpartsError):
    """Raw hand input is malformed (seat count, out-of-range counts, negative bags).

    Raised by the scorer. The ledger lets it propagate so that an unclamped
    UI value surfaces as a visible failure instead of being coerced.

    Attributes:
        field: Name of the offending input (e.g. "bid", "took", "incoming_bags").
        seat: Seat index of the offending player, or None for hand-level input.
        value: The rejected value.

    """

    def __init__(self, *, field: str, value: object, seat: int | None = None) -> None:
        self.field = field
        self.seat = seat
        self.value = value
        if seat is None:
            super().__init__(f"invalid {field}: {value!r}")
        else:
            super().__init__(f"invalid {field} for seat {seat}: {value!r}")


class InvariantViolationError(SpartsError):
    """A hand would break a ledger invariant (both teams shooting the moon)."""


class HandIndexError(SpartsError, IndexError):
    """Hand index does not address a hand in the ledger."""

    def __init__(self, index: int, hand_count: int) -> None:
        self.index = index
        self.hand_count = hand_count
        super().__init__(f"hand index {index} out of range for {hand_count} hand(s)")


class UnsupportedSettingsError(SpartsError):
    """Scoring settings contain values the engine cannot score with."""
