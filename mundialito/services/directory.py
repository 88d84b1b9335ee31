"""
Anagrafica squadre e giocatori: lookup usati dal workflow risultati
e CRUD minimo esposto dai router (nessuna paginazione).
"""

import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mundialito.core.errors import ErrorCode, Failure, Outcome, Success
from mundialito.core.events import TeamCreated
from mundialito.models import Match, MatchGoal, Player, Team

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def find_team(db: Session, team_id: int) -> Team | None:
    return db.query(Team).filter(Team.id == team_id).first()


def find_player(db: Session, player_id: int) -> Player | None:
    return db.query(Player).filter(Player.id == player_id).first()


def find_match(db: Session, match_id: int, for_update: bool = False) -> Match | None:
    """
    Match per id. Con for_update=True la riga viene bloccata fino al commit
    (SELECT ... FOR UPDATE; ignorato dai backend che non lo supportano, es. SQLite).
    """
    query = db.query(Match).filter(Match.id == match_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


# ---------------------------------------------------------------------------
# Squadre
# ---------------------------------------------------------------------------


def _name_taken(db: Session, name: str, exclude_id: int | None = None) -> bool:
    """Unicità del nome senza distinzione maiuscole/minuscole."""
    query = db.query(Team.id).filter(func.lower(Team.name) == name.lower())
    if exclude_id is not None:
        query = query.filter(Team.id != exclude_id)
    return query.first() is not None


def list_teams(db: Session) -> list[Team]:
    return db.query(Team).order_by(Team.name, Team.id).all()


def get_team(db: Session, team_id: int) -> Outcome:
    team = find_team(db, team_id)
    if team is None:
        return Failure(ErrorCode.TEAM_NOT_FOUND, f"Squadra {team_id} non trovata")
    return Success(team)


def create_team(db: Session, name: str) -> Outcome:
    """Nome obbligatorio (trim) e unico nel torneo."""
    name = (name or "").strip()
    if not name:
        return Failure(ErrorCode.VALIDATION_ERROR, "Il nome della squadra non può essere vuoto")
    if _name_taken(db, name):
        return Failure(ErrorCode.TEAM_NAME_CONFLICT, f"Esiste già una squadra chiamata '{name}'")

    team = Team(name=name)
    db.add(team)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("create_team: nome '%s' inserito in concorrenza", name)
        return Failure(ErrorCode.TEAM_NAME_CONFLICT, f"Esiste già una squadra chiamata '{name}'")
    db.refresh(team)
    logger.info("Creata squadra team_id=%s name=%s", team.id, team.name)
    return Success(team, events=[TeamCreated(team_id=team.id, team_name=team.name)])


def update_team(db: Session, team_id: int, name: str) -> Outcome:
    """Rinomina: nome obbligatorio, squadra esistente, nessun'altra squadra con lo stesso nome."""
    name = (name or "").strip()
    if not name:
        return Failure(ErrorCode.VALIDATION_ERROR, "Il nome della squadra non può essere vuoto")
    team = find_team(db, team_id)
    if team is None:
        return Failure(ErrorCode.TEAM_NOT_FOUND, f"Squadra {team_id} non trovata")
    if _name_taken(db, name, exclude_id=team_id):
        return Failure(ErrorCode.TEAM_NAME_CONFLICT, f"Esiste già una squadra chiamata '{name}'")

    team.name = name
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("update_team: nome '%s' inserito in concorrenza", name)
        return Failure(ErrorCode.TEAM_NAME_CONFLICT, f"Esiste già una squadra chiamata '{name}'")
    db.refresh(team)
    logger.info("Rinominata squadra team_id=%s name=%s", team.id, team.name)
    return Success(team)


def delete_team(db: Session, team_id: int) -> Outcome:
    """
    Idempotente: una squadra inesistente conta come già eliminata.
    Rifiutata se la squadra ha giocatori o partite collegate.
    """
    team = find_team(db, team_id)
    if team is None:
        logger.info("delete_team: squadra %s già assente", team_id)
        return Success(team_id)

    has_players = db.query(Player.id).filter(Player.team_id == team_id).first() is not None
    has_matches = (
        db.query(Match.id)
        .filter(or_(Match.home_team_id == team_id, Match.away_team_id == team_id))
        .first()
        is not None
    )
    if has_players or has_matches:
        return Failure(
            ErrorCode.TEAM_HAS_DEPENDENCIES,
            f"La squadra {team_id} ha giocatori o partite associate",
        )

    db.delete(team)
    db.commit()
    logger.info("Eliminata squadra team_id=%s", team_id)
    return Success(team_id)


# ---------------------------------------------------------------------------
# Giocatori
# ---------------------------------------------------------------------------


def list_players(db: Session, team_id: int | None = None) -> list[Player]:
    query = db.query(Player)
    if team_id is not None:
        query = query.filter(Player.team_id == team_id)
    return query.order_by(Player.full_name, Player.id).all()


def get_player(db: Session, player_id: int) -> Outcome:
    player = find_player(db, player_id)
    if player is None:
        return Failure(ErrorCode.PLAYER_NOT_FOUND, f"Giocatore {player_id} non trovato")
    return Success(player)


def create_player(db: Session, team_id: int, full_name: str, number: int | None = None) -> Outcome:
    if find_team(db, team_id) is None:
        return Failure(ErrorCode.TEAM_NOT_FOUND, f"Squadra {team_id} non trovata")
    full_name = (full_name or "").strip()
    if not full_name:
        return Failure(ErrorCode.VALIDATION_ERROR, "Il nome del giocatore non può essere vuoto")
    if number is not None and number <= 0:
        return Failure(ErrorCode.VALIDATION_ERROR, "Il numero di maglia deve essere maggiore di zero")

    player = Player(team_id=team_id, full_name=full_name, number=number)
    db.add(player)
    db.commit()
    db.refresh(player)
    logger.info("Creato giocatore player_id=%s team_id=%s", player.id, team_id)
    return Success(player)


def update_player(db: Session, player_id: int, full_name: str, number: int | None = None) -> Outcome:
    player = find_player(db, player_id)
    if player is None:
        return Failure(ErrorCode.PLAYER_NOT_FOUND, f"Giocatore {player_id} non trovato")
    full_name = (full_name or "").strip()
    if not full_name:
        return Failure(ErrorCode.VALIDATION_ERROR, "Il nome del giocatore non può essere vuoto")
    if number is not None and number <= 0:
        return Failure(ErrorCode.VALIDATION_ERROR, "Il numero di maglia deve essere maggiore di zero")

    player.full_name = full_name
    player.number = number
    db.commit()
    db.refresh(player)
    logger.info("Aggiornato giocatore player_id=%s", player.id)
    return Success(player)


def delete_player(db: Session, player_id: int) -> Outcome:
    """
    Idempotente come delete_team. Un giocatore con gol registrati non si
    elimina: i MatchGoal restano legati ai risultati già giocati.
    """
    player = find_player(db, player_id)
    if player is None:
        logger.info("delete_player: giocatore %s già assente", player_id)
        return Success(player_id)

    if db.query(MatchGoal.id).filter(MatchGoal.player_id == player_id).first() is not None:
        return Failure(
            ErrorCode.RESOURCE_CONFLICT,
            f"Il giocatore {player_id} ha gol registrati in partite giocate",
        )

    db.delete(player)
    db.commit()
    logger.info("Eliminato giocatore player_id=%s", player_id)
    return Success(player_id)
