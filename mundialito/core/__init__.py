from mundialito.core.config import get_database_url, get_log_level
from mundialito.core.database import Base, SessionLocal, engine, get_db, init_db

__all__ = [
    "get_database_url",
    "get_log_level",
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
]
