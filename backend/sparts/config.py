"""Sparts configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings

from sparts.logic.settings import DEFAULT_SETTINGS, ScoringSettings, validate_settings


class SpartsSettings(BaseSettings):
    model_config = {"env_prefix": "SPARTS_"}

    log_dir: str | None = Field(default=None, min_length=1)

    # scoring overrides; unset fields keep the ScoringSettings defaults
    points_per_bid: int = DEFAULT_SETTINGS.points_per_bid
    nil_bonus: int = DEFAULT_SETTINGS.nil_bonus
    bag_threshold: int = DEFAULT_SETTINGS.bag_threshold
    bag_penalty: int = DEFAULT_SETTINGS.bag_penalty
    tricks_per_hand: int = DEFAULT_SETTINGS.tricks_per_hand
    per_card_value: int = DEFAULT_SETTINGS.per_card_value
    penalty_card_value: int = DEFAULT_SETTINGS.penalty_card_value
    moon_penalty: int | None = DEFAULT_SETTINGS.moon_penalty
    game_end_score: int = DEFAULT_SETTINGS.game_end_score

    def to_scoring_settings(self) -> ScoringSettings:
        """Build the frozen scoring settings, failing fast on unsupported values."""
        settings = ScoringSettings(**self.model_dump(include=set(ScoringSettings.model_fields)))
        validate_settings(settings)
        return settings
