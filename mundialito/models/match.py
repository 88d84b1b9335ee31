"""
Match ORM model con la macchina a stati Scheduled -> Played.

Invarianti:
  - home_team_id != away_team_id (anche come CHECK su DB)
  - scheduled_at fissato alla creazione
  - lo stato passa a Played una sola volta (mark_as_played), mai all'indietro
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from mundialito.core.database import Base
from mundialito.core.errors import ErrorCode, Failure, Outcome, Success


class MatchStatus(str, enum.Enum):
    SCHEDULED = "Scheduled"
    PLAYED = "Played"


class Match(Base):
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, index=True)
    home_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    away_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(String(16), nullable=False, default=MatchStatus.SCHEDULED.value, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    home_team = relationship("Team", foreign_keys=[home_team_id])
    away_team = relationship("Team", foreign_keys=[away_team_id])
    result = relationship("MatchResult", back_populates="match", uselist=False)

    __table_args__ = (
        CheckConstraint("home_team_id <> away_team_id", name="ck_matches_distinct_teams"),
    )

    @classmethod
    def create(cls, home_team_id: int, away_team_id: int, scheduled_at: datetime | None) -> Outcome:
        """Nuova partita in stato Scheduled. scheduled_at viene normalizzato a UTC."""
        if home_team_id == away_team_id:
            return Failure(ErrorCode.VALIDATION_ERROR, "Una squadra non può giocare contro sé stessa")
        if scheduled_at is None:
            return Failure(ErrorCode.VALIDATION_ERROR, "scheduled_at è obbligatorio")
        if scheduled_at.tzinfo is None:
            scheduled_at = scheduled_at.replace(tzinfo=timezone.utc)
        return Success(
            cls(
                home_team_id=home_team_id,
                away_team_id=away_team_id,
                scheduled_at=scheduled_at.astimezone(timezone.utc),
                status=MatchStatus.SCHEDULED.value,
            )
        )

    @property
    def is_played(self) -> bool:
        return self.status == MatchStatus.PLAYED.value

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def mark_as_played(self) -> Outcome:
        """
        Unica transizione: Scheduled -> Played.
        Se già giocata ritorna MATCH_ALREADY_PLAYED e non tocca lo stato.
        Non persiste nulla: il commit è del workflow di registrazione risultato.
        """
        if self.is_played:
            return Failure(ErrorCode.MATCH_ALREADY_PLAYED, f"La partita {self.id} è già stata giocata")
        self.status = MatchStatus.PLAYED.value
        return Success(self)
