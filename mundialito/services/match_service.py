"""
Servizio calendario: creazione partite e dettaglio con squadre e punteggio.
"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from mundialito.core.errors import ErrorCode, Failure, Outcome, Success
from mundialito.models import Match, MatchResult, Team
from mundialito.schemas.matches import MatchDetailResponse
from mundialito.services.directory import find_match, find_team

logger = logging.getLogger(__name__)


def schedule_match(db: Session, home_team_id: int, away_team_id: int, scheduled_at: datetime) -> Outcome:
    """
    Crea una partita in stato Scheduled.
    Ordine dei controlli: stessa squadra -> casa esiste -> trasferta esiste.
    """
    if home_team_id == away_team_id:
        return Failure(ErrorCode.VALIDATION_ERROR, "Una squadra non può giocare contro sé stessa")
    if find_team(db, home_team_id) is None:
        return Failure(ErrorCode.TEAM_NOT_FOUND, f"Squadra di casa {home_team_id} non trovata")
    if find_team(db, away_team_id) is None:
        return Failure(ErrorCode.TEAM_NOT_FOUND, f"Squadra in trasferta {away_team_id} non trovata")

    created = Match.create(home_team_id, away_team_id, scheduled_at)
    if not created.ok:
        return created

    match = created.value
    db.add(match)
    db.commit()
    db.refresh(match)
    logger.info(
        "Partita programmata match_id=%s home=%s away=%s at=%s",
        match.id, home_team_id, away_team_id, match.scheduled_at,
    )
    return Success(match)


def list_matches(db: Session) -> list[Match]:
    return db.query(Match).order_by(Match.scheduled_at, Match.id).all()


def get_match_detail(db: Session, match_id: int) -> MatchDetailResponse | None:
    """Partita con nomi squadre; home_goals/away_goals solo se giocata. None se non esiste."""
    match = find_match(db, match_id)
    if match is None:
        return None

    teams = {
        t.id: t.name
        for t in db.query(Team).filter(Team.id.in_([match.home_team_id, match.away_team_id])).all()
    }
    result = db.query(MatchResult).filter(MatchResult.match_id == match.id).first()

    return MatchDetailResponse(
        id=match.id,
        home_team_id=match.home_team_id,
        home_team_name=teams.get(match.home_team_id, ""),
        away_team_id=match.away_team_id,
        away_team_name=teams.get(match.away_team_id, ""),
        scheduled_at=match.scheduled_at,
        status=match.status,
        created_at=match.created_at,
        home_goals=result.home_goals if result else None,
        away_goals=result.away_goals if result else None,
    )
