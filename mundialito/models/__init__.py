from mundialito.models.match import Match, MatchStatus
from mundialito.models.match_goal import MatchGoal
from mundialito.models.match_result import MatchResult
from mundialito.models.player import Player
from mundialito.models.team import Team

__all__ = [
    "Team",
    "Player",
    "Match",
    "MatchStatus",
    "MatchResult",
    "MatchGoal",
]
