"""
Domain event del torneo.

Gli eventi sono semplici valori restituiti insieme all'esito positivo;
li dispaccia il chiamante dopo il commit (oggi: una riga di log strutturata).
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MatchResultRecorded:
    match_id: int
    home_goals: int
    away_goals: int
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class TeamCreated:
    team_id: int
    team_name: str
    occurred_at: datetime = field(default_factory=_utcnow)


def dispatch_events(events: Iterable[object]) -> int:
    """Logga ogni evento già committato. Ritorna il numero di eventi dispacciati."""
    count = 0
    for event in events:
        logger.info(
            "DomainEvent processed: %s at %s %s",
            type(event).__name__,
            event.occurred_at.isoformat(),
            {k: v for k, v in vars(event).items() if k != "occurred_at"},
        )
        count += 1
    return count
