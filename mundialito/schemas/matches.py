"""Pydantic schemas per partite e registrazione risultati."""

from datetime import datetime

from pydantic import BaseModel, Field


# --- Scheduling ---


class MatchCreateRequest(BaseModel):
    home_team_id: int
    away_team_id: int
    scheduled_at: datetime


class MatchResponse(BaseModel):
    id: int
    home_team_id: int
    away_team_id: int
    scheduled_at: datetime
    status: str  # "Scheduled" | "Played"
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class MatchDetailResponse(BaseModel):
    id: int
    home_team_id: int
    home_team_name: str
    away_team_id: int
    away_team_name: str
    scheduled_at: datetime
    status: str
    created_at: datetime | None = None
    home_goals: int | None = None
    away_goals: int | None = None


# --- Result recording ---


class GoalByPlayerRequest(BaseModel):
    """Gol di un giocatore; il range (> 0) lo valida il dominio, non lo schema."""
    player_id: int
    goals: int


class RecordMatchResultRequest(BaseModel):
    home_goals: int
    away_goals: int
    goals_by_player: list[GoalByPlayerRequest] = Field(default_factory=list)


class GoalByPlayerResponse(BaseModel):
    player_id: int
    team_id: int
    goals: int

    class Config:
        from_attributes = True


class MatchResultResponse(BaseModel):
    match_id: int
    home_goals: int
    away_goals: int
    recorded_at: datetime
    goals_by_player: list[GoalByPlayerResponse]
