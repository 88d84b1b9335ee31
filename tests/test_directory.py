from datetime import datetime, timezone

from mundialito.core.errors import ErrorCode
from mundialito.core.events import TeamCreated
from mundialito.models import MatchStatus
from mundialito.schemas.matches import GoalByPlayerRequest
from mundialito.services import directory
from mundialito.services.match_service import get_match_detail, list_matches, schedule_match
from mundialito.services.result_service import record_match_result
from mundialito.services.scorers_service import list_scorers

KICK_OFF = datetime(2026, 6, 1, 18, 0, tzinfo=timezone.utc)


def test_create_team_trims_name_and_emits_event(db):
    outcome = directory.create_team(db, "  Alpha  ")
    assert outcome.ok
    assert outcome.value.name == "Alpha"
    assert isinstance(outcome.events[0], TeamCreated)


def test_create_team_validation_and_conflict(db):
    assert directory.create_team(db, "   ").code == ErrorCode.VALIDATION_ERROR
    assert directory.create_team(db, "Alpha").ok
    assert directory.create_team(db, "Alpha ").code == ErrorCode.TEAM_NAME_CONFLICT


def test_team_name_uniqueness_ignores_case(db):
    assert directory.create_team(db, "Alpha").ok
    assert directory.create_team(db, "alpha").code == ErrorCode.TEAM_NAME_CONFLICT
    assert directory.create_team(db, " ALPHA ").code == ErrorCode.TEAM_NAME_CONFLICT
    assert [t.name for t in directory.list_teams(db)] == ["Alpha"]


def test_create_player_rules(db, make_team):
    team = make_team("Alpha")
    assert directory.create_player(db, 999, "Nessuno").code == ErrorCode.TEAM_NOT_FOUND
    assert directory.create_player(db, team.id, "").code == ErrorCode.VALIDATION_ERROR
    assert directory.create_player(db, team.id, "Alan", 0).code == ErrorCode.VALIDATION_ERROR
    player = directory.create_player(db, team.id, " Alan ", 9).value
    assert (player.full_name, player.number, player.team_id) == ("Alan", 9, team.id)
    assert [p.id for p in directory.list_players(db, team_id=team.id)] == [player.id]


def test_lookups_return_none_when_absent(db):
    assert directory.find_team(db, 1) is None
    assert directory.find_player(db, 1) is None
    assert directory.find_match(db, 1) is None
    assert directory.get_player(db, 1).code == ErrorCode.PLAYER_NOT_FOUND


def test_delete_team_with_dependencies_is_refused(db, fixture_ab, make_team):
    assert directory.delete_team(db, fixture_ab["A"].id).code == ErrorCode.TEAM_HAS_DEPENDENCIES
    lonely_id = make_team("Solitaria").id
    assert directory.delete_team(db, lonely_id).ok
    assert directory.find_team(db, lonely_id) is None
    assert directory.delete_team(db, lonely_id).ok
    assert directory.delete_team(db, 999).ok


def test_update_team_rules(db, make_team):
    alpha = make_team("Alpha")
    make_team("Bravo")
    assert directory.update_team(db, 999, "").code == ErrorCode.VALIDATION_ERROR
    assert directory.update_team(db, 999, "Charlie").code == ErrorCode.TEAM_NOT_FOUND
    assert directory.update_team(db, alpha.id, "bravo").code == ErrorCode.TEAM_NAME_CONFLICT

    renamed = directory.update_team(db, alpha.id, " ALPHA ")
    assert renamed.ok
    assert renamed.value.name == "ALPHA"
    assert directory.find_team(db, alpha.id).name == "ALPHA"


def test_update_player_rules(db, make_team, make_player):
    team = make_team("Alpha")
    player = make_player(team, "Alan", 9)
    assert directory.update_player(db, 999, "Nessuno").code == ErrorCode.PLAYER_NOT_FOUND
    assert directory.update_player(db, player.id, "  ").code == ErrorCode.VALIDATION_ERROR
    assert directory.update_player(db, player.id, "Alan", -3).code == ErrorCode.VALIDATION_ERROR

    updated = directory.update_player(db, player.id, " Alan Uno ", 11).value
    assert (updated.full_name, updated.number, updated.team_id) == ("Alan Uno", 11, team.id)
    assert directory.update_player(db, player.id, "Alan Uno").value.number is None


def test_delete_player_is_idempotent_and_keeps_scorers(db, fixture_ab):
    f = fixture_ab
    a1_id, a2_id = f["A1"].id, f["A2"].id
    assert record_match_result(db, f["match"].id, 1, 0, [GoalByPlayerRequest(player_id=a1_id, goals=1)]).ok

    assert directory.delete_player(db, a1_id).code == ErrorCode.RESOURCE_CONFLICT
    assert directory.find_player(db, a1_id) is not None

    assert directory.delete_player(db, a2_id).ok
    assert directory.find_player(db, a2_id) is None
    assert directory.delete_player(db, a2_id).ok
    assert [p.full_name for p in directory.list_players(db)] == ["Alan Uno", "Bruno Uno"]


def test_schedule_match_precedence(db, make_team):
    a = make_team("Alpha")
    assert schedule_match(db, a.id, a.id, KICK_OFF).code == ErrorCode.VALIDATION_ERROR
    assert schedule_match(db, 999, a.id, KICK_OFF).code == ErrorCode.TEAM_NOT_FOUND
    outcome = schedule_match(db, a.id, 998, KICK_OFF)
    assert outcome.code == ErrorCode.TEAM_NOT_FOUND
    assert "trasferta" in outcome.message


def test_schedule_match_creates_scheduled_match(db, make_team):
    a, b = make_team("Alpha"), make_team("Bravo")
    match = schedule_match(db, a.id, b.id, KICK_OFF).value
    assert match.status == MatchStatus.SCHEDULED.value
    assert [m.id for m in list_matches(db)] == [match.id]


def test_match_detail_shows_score_only_when_played(db, fixture_ab):
    f = fixture_ab
    detail = get_match_detail(db, f["match"].id)
    assert (detail.home_team_name, detail.away_team_name) == ("Alpha", "Bravo")
    assert detail.home_goals is None and detail.status == "Scheduled"

    record_match_result(db, f["match"].id, 1, 0, [GoalByPlayerRequest(player_id=f["A1"].id, goals=1)])
    detail = get_match_detail(db, f["match"].id)
    assert (detail.home_goals, detail.away_goals, detail.status) == (1, 0, "Played")
    assert get_match_detail(db, 12345) is None


def test_scorers_sum_goals_across_matches(db, fixture_ab, make_match):
    f = fixture_ab
    record_match_result(
        db, f["match"].id, 3, 1,
        [
            GoalByPlayerRequest(player_id=f["A1"].id, goals=2),
            GoalByPlayerRequest(player_id=f["A2"].id, goals=1),
            GoalByPlayerRequest(player_id=f["B1"].id, goals=1),
        ],
    )
    rematch = make_match(f["B"], f["A"])
    record_match_result(db, rematch.id, 0, 1, [GoalByPlayerRequest(player_id=f["A2"].id, goals=1)])

    rows = list_scorers(db)
    assert [(r.player_name, r.goals) for r in rows] == [("Alan Uno", 2), ("Aldo Due", 2), ("Bruno Uno", 1)]
    assert [r.player_name for r in list_scorers(db, team_id=f["B"].id)] == ["Bruno Uno"]
