"""
Risultato ufficiale di una partita. Solo creazione: mai modificato.
Un solo risultato per partita (UNIQUE su match_id, verificato al commit).
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from mundialito.core.database import Base
from mundialito.core.errors import ErrorCode, Failure, Outcome, Success


class MatchResult(Base):
    __tablename__ = "match_results"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(
        Integer, ForeignKey("matches.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    home_goals = Column(Integer, nullable=False)
    away_goals = Column(Integer, nullable=False)
    recorded_at = Column(DateTime(timezone=True), nullable=False)

    match = relationship("Match", back_populates="result")

    __table_args__ = (
        CheckConstraint("home_goals >= 0", name="ck_match_results_home_goals"),
        CheckConstraint("away_goals >= 0", name="ck_match_results_away_goals"),
    )

    @classmethod
    def create(cls, match_id: int, home_goals: int, away_goals: int, recorded_at: datetime | None = None) -> Outcome:
        if home_goals < 0:
            return Failure(ErrorCode.VALIDATION_ERROR, "home_goals non può essere negativo")
        if away_goals < 0:
            return Failure(ErrorCode.VALIDATION_ERROR, "away_goals non può essere negativo")
        return Success(
            cls(
                match_id=match_id,
                home_goals=home_goals,
                away_goals=away_goals,
                recorded_at=recorded_at or datetime.now(timezone.utc),
            )
        )
