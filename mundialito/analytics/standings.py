"""
Standings Aggregator — classifica del girone all'italiana.

Funzione pura: nessun accesso al DB. Riceve tutte le squadre e tutte le coppie
(match, result) con match giocato e restituisce una riga per squadra.

Algoritmo:
  1. Ogni partita giocata produce due prospettive (casa e trasferta):
     played +1, W/D/L confrontando i gol dal punto di vista di quella squadra,
     goals_for / goals_against dal suo lato.
  2. Le prospettive si sommano per squadra. Le squadre senza partite
     restano in classifica con tutti zeri.
  3. goal_difference = goals_for - goals_against
     points = 3 * wins + draws

Ordinamento fisso (non configurabile):
  points DESC -> goal_difference DESC -> goals_for DESC -> nome squadra ASC -> team_id ASC
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from mundialito.schemas.standings import StandingRow

logger = logging.getLogger(__name__)

POINTS_WIN = 3
POINTS_DRAW = 1
POINTS_LOSS = 0

PLAYED_STATUS = "Played"


class TeamLike(Protocol):
    id: int
    name: str


class MatchLike(Protocol):
    home_team_id: int
    away_team_id: int
    status: str


class ResultLike(Protocol):
    home_goals: int
    away_goals: int


@dataclass
class _Tally:
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    def add(self, goals_for: int, goals_against: int) -> None:
        self.played += 1
        self.goals_for += goals_for
        self.goals_against += goals_against
        if goals_for > goals_against:
            self.wins += 1
        elif goals_for == goals_against:
            self.draws += 1
        else:
            self.losses += 1

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def points(self) -> int:
        return self.wins * POINTS_WIN + self.draws * POINTS_DRAW + self.losses * POINTS_LOSS


def _perspectives(match: MatchLike, result: ResultLike) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """(team_id, gf, ga) per casa e trasferta."""
    return (
        (match.home_team_id, result.home_goals, result.away_goals),
        (match.away_team_id, result.away_goals, result.home_goals),
    )


def standing_sort_key(row: StandingRow) -> tuple:
    return (-row.points, -row.goal_difference, -row.goals_for, row.team_name.casefold(), row.team_id)


def compute_standings(
    teams: Iterable[TeamLike],
    played: Iterable[tuple[MatchLike, ResultLike]],
) -> list[StandingRow]:
    """
    Ricalcola l'intera classifica.
    Le coppie con match non Played vengono ignorate; le squadre sono l'insieme universale.
    """
    names: dict[int, str] = {}
    tallies: dict[int, _Tally] = {}
    for team in teams:
        names[team.id] = team.name or ""
        tallies[team.id] = _Tally()

    skipped = 0
    for match, result in played:
        if match.status != PLAYED_STATUS or result is None:
            skipped += 1
            continue
        for team_id, goals_for, goals_against in _perspectives(match, result):
            tally = tallies.get(team_id)
            if tally is None:
                logger.warning("compute_standings: team_id=%s non presente tra le squadre, ignorato", team_id)
                continue
            tally.add(goals_for, goals_against)

    if skipped:
        logger.debug("compute_standings: %s coppie non giocate ignorate", skipped)

    rows = [
        StandingRow(
            team_id=team_id,
            team_name=names[team_id],
            played=t.played,
            wins=t.wins,
            draws=t.draws,
            losses=t.losses,
            goals_for=t.goals_for,
            goals_against=t.goals_against,
            goal_difference=t.goal_difference,
            points=t.points,
        )
        for team_id, t in tallies.items()
    ]
    rows.sort(key=standing_sort_key)
    return rows
