"""
Workflow di registrazione risultato (POST /matches/{id}/results).

Controlli in ordine fisso, il primo che fallisce determina l'errore:
  1. la partita esiste                           -> MATCH_NOT_FOUND
  2. transizione Scheduled -> Played              -> MATCH_ALREADY_PLAYED
  3. per ogni voce, nell'ordine ricevuto:
     a. il giocatore esiste                      -> PLAYER_NOT_FOUND
     b. gioca per casa o trasferta               -> PLAYER_NOT_IN_MATCH
     c. riga MatchGoal valida (goals > 0)        -> VALIDATION_ERROR
  4. somma gol casa == home_goals                -> MATCH_RESULT_INCONSISTENT
  5. somma gol trasferta == away_goals           -> MATCH_RESULT_INCONSISTENT
  6. MatchResult valido (gol >= 0)               -> VALIDATION_ERROR
  7. commit unico di partita + risultato + gol

Su ogni fallimento la sessione viene riportata indietro: la partita resta
Scheduled e non viene scritto nulla. Il vincolo UNIQUE su match_results.match_id
decide tra due registrazioni concorrenti; chi perde riceve MATCH_ALREADY_PLAYED.
"""

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from mundialito.core.errors import ErrorCode, Failure, Outcome, Success
from mundialito.core.events import MatchResultRecorded
from mundialito.models import MatchGoal, MatchResult
from mundialito.services.directory import find_match, find_player

logger = logging.getLogger(__name__)


class GoalEntry(Protocol):
    player_id: int
    goals: int


@dataclass
class RecordedResult:
    result: MatchResult
    goals: list[MatchGoal]


def _abort(db: Session, failure: Failure, match_id: int) -> Failure:
    db.rollback()
    logger.warning("record_match_result match_id=%s rifiutato: %s %s", match_id, failure.code.value, failure.message)
    return failure


def _result_exists(db: Session, match_id: int) -> bool:
    return db.query(MatchResult.id).filter(MatchResult.match_id == match_id).first() is not None


def record_match_result(
    db: Session,
    match_id: int,
    home_goals: int,
    away_goals: int,
    goals_by_player: Sequence[GoalEntry] = (),
) -> Outcome:
    """
    Registra il risultato e marca la partita come giocata.
    Ritorna Success(RecordedResult, events=[MatchResultRecorded]) oppure Failure.
    Errori imprevisti del DB vengono propagati dopo il rollback.
    """
    # --- 1. Partita ---
    match = find_match(db, match_id, for_update=True)
    if match is None:
        return _abort(db, Failure(ErrorCode.MATCH_NOT_FOUND, f"Partita {match_id} non trovata"), match_id)

    # --- 2. Transizione ---
    transition = match.mark_as_played()
    if not transition.ok:
        return _abort(db, transition, match_id)

    # --- 3. Giocatori + accumulo gol per lato ---
    home_total = 0
    away_total = 0
    goal_rows: list[MatchGoal] = []
    for entry in goals_by_player:
        player = find_player(db, entry.player_id)
        if player is None:
            return _abort(
                db, Failure(ErrorCode.PLAYER_NOT_FOUND, f"Giocatore {entry.player_id} non trovato"), match_id,
            )
        if not match.involves(player.team_id):
            return _abort(
                db,
                Failure(
                    ErrorCode.PLAYER_NOT_IN_MATCH,
                    f"Il giocatore {entry.player_id} non appartiene a nessuna delle due squadre",
                ),
                match_id,
            )

        goal = MatchGoal.create(match.id, player.id, player.team_id, entry.goals)
        if not goal.ok:
            return _abort(db, goal, match_id)
        goal_rows.append(goal.value)

        if player.team_id == match.home_team_id:
            home_total += entry.goals
        else:
            away_total += entry.goals

    # --- 4/5. Coerenza con il punteggio dichiarato ---
    if home_total != home_goals:
        return _abort(
            db,
            Failure(
                ErrorCode.MATCH_RESULT_INCONSISTENT,
                f"Somma gol casa ({home_total}) diversa da home_goals ({home_goals})",
            ),
            match_id,
        )
    if away_total != away_goals:
        return _abort(
            db,
            Failure(
                ErrorCode.MATCH_RESULT_INCONSISTENT,
                f"Somma gol trasferta ({away_total}) diversa da away_goals ({away_goals})",
            ),
            match_id,
        )

    # --- 6. Risultato ---
    created = MatchResult.create(match.id, home_goals, away_goals)
    if not created.ok:
        return _abort(db, created, match_id)
    result = created.value

    # --- 7. Commit unico ---
    db.add(result)
    db.add_all(goal_rows)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if _result_exists(db, match_id):
            logger.warning("record_match_result match_id=%s: risultato già registrato in concorrenza", match_id)
            return Failure(ErrorCode.MATCH_ALREADY_PLAYED, f"La partita {match_id} è già stata giocata")
        logger.exception("record_match_result match_id=%s: violazione vincolo inattesa", match_id)
        raise
    except SQLAlchemyError:
        db.rollback()
        logger.exception("record_match_result match_id=%s: errore DB, rollback eseguito", match_id)
        raise
    except Exception:
        db.rollback()
        logger.exception("record_match_result match_id=%s: errore imprevisto al commit, rollback eseguito", match_id)
        raise

    logger.info(
        "Risultato registrato match_id=%s %s-%s (%s marcatori)",
        match_id, home_goals, away_goals, len(goal_rows),
    )
    event = MatchResultRecorded(match_id=match_id, home_goals=home_goals, away_goals=away_goals)
    return Success(RecordedResult(result=result, goals=goal_rows), events=[event])
