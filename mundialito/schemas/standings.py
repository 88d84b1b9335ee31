"""Pydantic schemas per classifica e marcatori."""

from pydantic import BaseModel


class StandingRow(BaseModel):
    """Riga di classifica. Derivata, mai salvata su DB."""
    team_id: int
    team_name: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0


class StandingsResponse(BaseModel):
    total: int
    rows: list[StandingRow]


class ScorerRow(BaseModel):
    player_id: int
    player_name: str
    team_id: int
    team_name: str
    goals: int
