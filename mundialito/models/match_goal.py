"""
Gol per giocatore in una partita: una riga per marcatore con goals > 0.
Che team_id sia casa/trasferta e che il giocatore appartenga al team
lo verifica il workflow di registrazione risultato.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from mundialito.core.database import Base
from mundialito.core.errors import ErrorCode, Failure, Outcome, Success


class MatchGoal(Base):
    __tablename__ = "match_goals"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(
        Integer, ForeignKey("matches.id", ondelete="CASCADE"),
        nullable=False,
    )
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    goals = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # --- Relazioni ---
    match = relationship("Match", backref="goals")
    player = relationship("Player")
    team = relationship("Team")

    # --- Vincoli e indici ---
    __table_args__ = (
        CheckConstraint("goals > 0", name="ck_match_goals_positive"),
        Index("ix_match_goals_match_id", "match_id"),
        Index("ix_match_goals_player_id", "player_id"),
    )

    @classmethod
    def create(cls, match_id: int, player_id: int, team_id: int, goals: int) -> Outcome:
        if goals <= 0:
            return Failure(
                ErrorCode.VALIDATION_ERROR,
                f"I gol del giocatore {player_id} devono essere maggiori di zero",
            )
        return Success(cls(match_id=match_id, player_id=player_id, team_id=team_id, goals=goals))
