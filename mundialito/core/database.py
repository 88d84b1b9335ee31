"""SQLAlchemy engine, session e dependency per FastAPI."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from mundialito.core.config import get_database_url

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    # SQLite: la sessione può essere usata dal threadpool di FastAPI
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


_database_url = get_database_url()

engine = create_engine(_database_url, echo=False, **_engine_kwargs(_database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency that yields a DB session. Caller must close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Crea tutte le tabelle.
    I modelli devono essere importati prima per registrare i metadata.
    """
    from mundialito.models import (  # noqa: F401
        match,
        match_goal,
        match_result,
        player,
        team,
    )

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato")
