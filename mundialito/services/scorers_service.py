"""
Classifica marcatori: somma dei gol per giocatore da match_goals.
Solo giocatori con almeno un gol; filtro opzionale per squadra.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from mundialito.models import MatchGoal, Player, Team
from mundialito.schemas.standings import ScorerRow


def list_scorers(db: Session, team_id: int | None = None) -> list[ScorerRow]:
    """Ordinamento: gol DESC, nome giocatore ASC, player_id ASC."""
    total_goals = func.sum(MatchGoal.goals).label("goals")
    query = (
        db.query(
            Player.id.label("player_id"),
            Player.full_name.label("player_name"),
            Player.team_id.label("team_id"),
            Team.name.label("team_name"),
            total_goals,
        )
        .join(Team, Team.id == Player.team_id)
        .join(MatchGoal, MatchGoal.player_id == Player.id)
    )
    if team_id is not None:
        query = query.filter(Player.team_id == team_id)
    rows = (
        query.group_by(Player.id, Player.full_name, Player.team_id, Team.name)
        .order_by(total_goals.desc(), Player.full_name.asc(), Player.id.asc())
        .all()
    )
    return [
        ScorerRow(
            player_id=r.player_id,
            player_name=r.player_name or "",
            team_id=r.team_id,
            team_name=r.team_name or "",
            goals=int(r.goals or 0),
        )
        for r in rows
    ]
