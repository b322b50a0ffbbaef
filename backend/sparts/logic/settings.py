"""Centralized scoring settings for Sparts - every constant the scorer uses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from sparts.logic.exceptions import UnsupportedSettingsError

SUPPORTED_TRICKS_PER_HAND = 13


class ScoringSettings(BaseModel):
    """
    Configuration for the spades side, the hearts side and the game ceiling.

    All fields default to the house rules the scoresheet was built around.
    """

    model_config = ConfigDict(frozen=True)

    # --- Spades ---
    points_per_bid: int = 10
    nil_bonus: int = 100  # +nil_bonus for a clean nil, -nil_bonus for a broken one
    bag_threshold: int = 10
    bag_penalty: int = -100  # applied once per bag_threshold bags

    # --- Hearts ---
    tricks_per_hand: int = 13
    per_card_value: int = 4
    penalty_card_value: int = 52  # 13 * per_card_value
    moon_penalty: int | None = None  # None follows full_hand_penalty(); charged to the team that did not shoot

    # --- Game ---
    game_end_score: int = 600

    def full_hand_penalty(self) -> int:
        """Every penalty card of a hand: all hearts plus the single penalty card."""
        return self.tricks_per_hand * self.per_card_value + self.penalty_card_value

    def moon_charge(self) -> int:
        """Hearts charged to the opposing team when a team shoots the moon."""
        return self.moon_penalty if self.moon_penalty is not None else self.full_hand_penalty()


DEFAULT_SETTINGS = ScoringSettings()


def validate_settings(settings: ScoringSettings) -> None:
    """Validate that all settings values can be scored with.

    Raises UnsupportedSettingsError listing every offending field.
    """
    errors: list[str] = []

    if settings.tricks_per_hand != SUPPORTED_TRICKS_PER_HAND:
        errors.append(f"tricks_per_hand={settings.tricks_per_hand} is not supported (only 52-card deals)")

    for name in ("points_per_bid", "bag_threshold", "game_end_score"):
        value = getattr(settings, name)
        if value <= 0:
            errors.append(f"{name}={value} must be positive")

    for name in ("per_card_value", "penalty_card_value", "nil_bonus"):
        value = getattr(settings, name)
        if value < 0:
            errors.append(f"{name}={value} must not be negative")

    if settings.moon_penalty is not None and settings.moon_penalty < 0:
        errors.append(f"moon_penalty={settings.moon_penalty} must not be negative")

    if settings.bag_penalty > 0:
        errors.append(f"bag_penalty={settings.bag_penalty} must not be positive")

    if errors:
        raise UnsupportedSettingsError("; ".join(errors))
