"""
Servizio classifica: legge squadre e partite giocate con risultato,
delega il calcolo all'aggregatore puro (analytics.standings).
"""

import logging

from sqlalchemy.orm import Session

from mundialito.analytics.standings import compute_standings
from mundialito.models import Match, MatchResult, MatchStatus, Team
from mundialito.schemas.standings import StandingRow

logger = logging.getLogger(__name__)


def load_played_matches(db: Session) -> list[tuple[Match, MatchResult]]:
    """Coppie (match, result) con match Played e risultato presente (INNER JOIN)."""
    rows = (
        db.query(Match, MatchResult)
        .join(MatchResult, MatchResult.match_id == Match.id)
        .filter(Match.status == MatchStatus.PLAYED.value)
        .all()
    )
    return [(m, r) for m, r in rows]


def get_standings(db: Session) -> list[StandingRow]:
    """Classifica completa, sempre ricalcolata. Ordine fisso, vedi compute_standings."""
    teams = db.query(Team).all()
    played = load_played_matches(db)
    rows = compute_standings(teams, played)
    logger.info("Classifica calcolata: %s squadre, %s partite giocate", len(rows), len(played))
    return rows
