"""
API Teams e Players: anagrafica minima (creazione, lettura, modifica, eliminazione).
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from sqlalchemy.orm import Session

from mundialito.core.database import get_db
from mundialito.core.events import dispatch_events
from mundialito.routers.responses import error_response
from mundialito.schemas.teams import (
    PlayerCreateRequest,
    PlayerResponse,
    PlayerUpdateRequest,
    TeamCreateRequest,
    TeamResponse,
    TeamUpdateRequest,
)
from mundialito.services import directory

logger = logging.getLogger(__name__)

router = APIRouter(tags=["teams"])


@router.post("/teams", response_model=TeamResponse, status_code=201)
def create_team(body: TeamCreateRequest, request: Request, db: Session = Depends(get_db)):
    outcome = directory.create_team(db, body.name)
    if not outcome.ok:
        return error_response(request, outcome)
    dispatch_events(outcome.events)
    return TeamResponse.model_validate(outcome.value)


@router.get("/teams", response_model=list[TeamResponse])
def list_teams(db: Session = Depends(get_db)):
    return [TeamResponse.model_validate(t) for t in directory.list_teams(db)]


@router.get("/teams/{team_id}", response_model=TeamResponse)
def get_team(team_id: int, request: Request, db: Session = Depends(get_db)):
    outcome = directory.get_team(db, team_id)
    if not outcome.ok:
        return error_response(request, outcome)
    return TeamResponse.model_validate(outcome.value)


@router.put("/teams/{team_id}", response_model=TeamResponse)
def update_team(team_id: int, body: TeamUpdateRequest, request: Request, db: Session = Depends(get_db)):
    outcome = directory.update_team(db, team_id, body.name)
    if not outcome.ok:
        return error_response(request, outcome)
    return TeamResponse.model_validate(outcome.value)


@router.delete("/teams/{team_id}", status_code=204)
def delete_team(team_id: int, request: Request, db: Session = Depends(get_db)):
    outcome = directory.delete_team(db, team_id)
    if not outcome.ok:
        return error_response(request, outcome)
    return Response(status_code=204)


@router.post("/teams/{team_id}/players", response_model=PlayerResponse, status_code=201)
def create_player(team_id: int, body: PlayerCreateRequest, request: Request, db: Session = Depends(get_db)):
    outcome = directory.create_player(db, team_id, body.full_name, body.number)
    if not outcome.ok:
        return error_response(request, outcome)
    return PlayerResponse.model_validate(outcome.value)


@router.get("/teams/{team_id}/players", response_model=list[PlayerResponse])
def list_team_players(team_id: int, request: Request, db: Session = Depends(get_db)):
    """Rosa della squadra. 404 se la squadra non esiste, lista vuota se senza giocatori."""
    team = directory.get_team(db, team_id)
    if not team.ok:
        return error_response(request, team)
    return [PlayerResponse.model_validate(p) for p in directory.list_players(db, team_id=team_id)]


@router.get("/players", response_model=list[PlayerResponse])
def list_players(team_id: int | None = None, db: Session = Depends(get_db)):
    return [PlayerResponse.model_validate(p) for p in directory.list_players(db, team_id=team_id)]


@router.get("/players/{player_id}", response_model=PlayerResponse)
def get_player(player_id: int, request: Request, db: Session = Depends(get_db)):
    outcome = directory.get_player(db, player_id)
    if not outcome.ok:
        return error_response(request, outcome)
    return PlayerResponse.model_validate(outcome.value)


@router.put("/players/{player_id}", response_model=PlayerResponse)
def update_player(player_id: int, body: PlayerUpdateRequest, request: Request, db: Session = Depends(get_db)):
    outcome = directory.update_player(db, player_id, body.full_name, body.number)
    if not outcome.ok:
        return error_response(request, outcome)
    return PlayerResponse.model_validate(outcome.value)


@router.delete("/players/{player_id}", status_code=204)
def delete_player(player_id: int, request: Request, db: Session = Depends(get_db)):
    outcome = directory.delete_player(db, player_id)
    if not outcome.ok:
        return error_response(request, outcome)
    return Response(status_code=204)
