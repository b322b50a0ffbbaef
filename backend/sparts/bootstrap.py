"""Entry point wiring for a presentation layer: logging, settings and a fresh ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from shared.logging import setup_logging
from sparts.config import SpartsSettings
from sparts.logic.ledger import GameLedger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger()


def create_ledger(
    settings: SpartsSettings | None = None,
    seat_names: Sequence[str] | None = None,
) -> GameLedger:
    """Configure logging from settings and return a ledger scoring with them."""
    if settings is None:
        settings = SpartsSettings()
    log_file = setup_logging(log_dir=settings.log_dir)
    ledger = GameLedger(settings=settings.to_scoring_settings(), seat_names=seat_names)
    logger.info("ledger created", log_file=str(log_file) if log_file else None, seats=list(ledger.hands[0].seat_names))
    return ledger
