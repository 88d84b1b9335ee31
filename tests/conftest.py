import os
import tempfile
from datetime import datetime, timezone

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="mundialito-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

from fastapi.testclient import TestClient  # noqa: E402

from mundialito.core.database import Base, SessionLocal, engine, init_db  # noqa: E402
from mundialito.main import app  # noqa: E402
from mundialito.models import Match, Player, Team  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_schema():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_team(db):
    def _make(name: str) -> Team:
        team = Team(name=name)
        db.add(team)
        db.commit()
        db.refresh(team)
        return team

    return _make


@pytest.fixture
def make_player(db):
    def _make(team: Team, full_name: str, number: int | None = None) -> Player:
        player = Player(team_id=team.id, full_name=full_name, number=number)
        db.add(player)
        db.commit()
        db.refresh(player)
        return player

    return _make


@pytest.fixture
def make_match(db):
    def _make(home: Team, away: Team, scheduled_at: datetime | None = None) -> Match:
        match = Match.create(
            home.id, away.id, scheduled_at or datetime(2026, 6, 1, 18, 0, tzinfo=timezone.utc)
        ).value
        db.add(match)
        db.commit()
        db.refresh(match)
        return match

    return _make


@pytest.fixture
def fixture_ab(make_team, make_player, make_match):
    """Squadre A (casa) e B (trasferta), giocatori A1/A2 e B1, partita A-B in programma."""
    team_a = make_team("Alpha")
    team_b = make_team("Bravo")
    return {
        "A": team_a,
        "B": team_b,
        "A1": make_player(team_a, "Alan Uno", 9),
        "A2": make_player(team_a, "Aldo Due", 10),
        "B1": make_player(team_b, "Bruno Uno", 7),
        "match": make_match(team_a, team_b),
    }
