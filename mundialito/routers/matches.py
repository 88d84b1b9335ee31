"""
API Matches: calendario e registrazione risultati.
La logica è nei service; qui solo traduzione esito -> HTTP e dispatch eventi.
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from mundialito.core.database import get_db
from mundialito.core.errors import ErrorCode
from mundialito.core.events import dispatch_events
from mundialito.routers.responses import envelope_response, error_response
from mundialito.schemas.matches import (
    GoalByPlayerResponse,
    MatchCreateRequest,
    MatchDetailResponse,
    MatchResponse,
    MatchResultResponse,
    RecordMatchResultRequest,
)
from mundialito.services.match_service import get_match_detail, list_matches, schedule_match
from mundialito.services.result_service import record_match_result

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matches", tags=["matches"])


@router.post("", response_model=MatchResponse, status_code=201)
def create_match(body: MatchCreateRequest, request: Request, db: Session = Depends(get_db)):
    outcome = schedule_match(db, body.home_team_id, body.away_team_id, body.scheduled_at)
    if not outcome.ok:
        return error_response(request, outcome)
    return MatchResponse.model_validate(outcome.value)


@router.get("", response_model=list[MatchResponse])
def get_matches(db: Session = Depends(get_db)):
    return [MatchResponse.model_validate(m) for m in list_matches(db)]


@router.get("/{match_id}", response_model=MatchDetailResponse)
def get_match(match_id: int, request: Request, db: Session = Depends(get_db)):
    detail = get_match_detail(db, match_id)
    if detail is None:
        return envelope_response(request, ErrorCode.MATCH_NOT_FOUND, f"Partita {match_id} non trovata")
    return detail


@router.post("/{match_id}/results", response_model=MatchResultResponse)
def record_result(
    match_id: int,
    body: RecordMatchResultRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Registra il risultato: 200 con il dettaglio marcatori,
    400 / 404 / 409 con envelope di errore.
    """
    outcome = record_match_result(
        db,
        match_id=match_id,
        home_goals=body.home_goals,
        away_goals=body.away_goals,
        goals_by_player=body.goals_by_player,
    )
    if not outcome.ok:
        return error_response(request, outcome)

    dispatch_events(outcome.events)
    recorded = outcome.value
    return MatchResultResponse(
        match_id=match_id,
        home_goals=recorded.result.home_goals,
        away_goals=recorded.result.away_goals,
        recorded_at=recorded.result.recorded_at,
        goals_by_player=[GoalByPlayerResponse.model_validate(g) for g in recorded.goals],
    )
