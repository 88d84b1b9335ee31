"""Pydantic schemas per squadre e giocatori."""

from datetime import datetime

from pydantic import BaseModel


class TeamCreateRequest(BaseModel):
    name: str


class TeamUpdateRequest(BaseModel):
    name: str


class TeamResponse(BaseModel):
    id: int
    name: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class PlayerCreateRequest(BaseModel):
    full_name: str
    number: int | None = None


class PlayerUpdateRequest(BaseModel):
    full_name: str
    number: int | None = None


class PlayerResponse(BaseModel):
    id: int
    team_id: int
    full_name: str
    number: int | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
