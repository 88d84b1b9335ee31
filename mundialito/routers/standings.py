"""
API classifica e marcatori. Ordine classifica fisso, nessun parametro di sort.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mundialito.core.database import get_db
from mundialito.schemas.standings import ScorerRow, StandingsResponse
from mundialito.services.scorers_service import list_scorers
from mundialito.services.standings_service import get_standings

router = APIRouter(tags=["standings"])


@router.get("/standings", response_model=StandingsResponse)
def standings(db: Session = Depends(get_db)):
    """points DESC, goal_difference DESC, goals_for DESC, nome squadra ASC."""
    rows = get_standings(db)
    return StandingsResponse(total=len(rows), rows=rows)


@router.get("/scorers", response_model=list[ScorerRow])
def scorers(team_id: int | None = None, db: Session = Depends(get_db)):
    return list_scorers(db, team_id=team_id)
