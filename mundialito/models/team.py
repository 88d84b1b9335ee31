"""Team ORM model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from mundialito.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
