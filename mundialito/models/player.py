"""Player ORM model. Ogni giocatore appartiene a una sola squadra."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from mundialito.core.database import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    number = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    team = relationship("Team", backref="players")

    __table_args__ = (
        CheckConstraint("number IS NULL OR number > 0", name="ck_players_number_positive"),
    )
