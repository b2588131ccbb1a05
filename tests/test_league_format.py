from itertools import combinations

import pytest

from tourneyscheduler.exceptions import InvalidTeamCountException
from tourneyscheduler.formats import LeagueFormat
from tourneyscheduler.models import Team, Tournament


def test_every_pair_meets_once(league, teams):
    league.generate_schedule()

    assert len(league.matches) == 6
    pairs = {frozenset((m.team1.id, m.team2.id)) for m in league.matches}
    assert pairs == {frozenset((a.id, b.id)) for a, b in combinations(teams, 2)}


def test_each_team_plays_n_minus_one(league, teams):
    league.generate_schedule()
    for team in teams:
        assert len(league.get_team_matches(team)) == len(teams) - 1


def test_match_order_follows_registration(league, teams):
    league.generate_schedule()
    first = league.matches[0]
    last = league.matches[-1]
    assert (first.team1, first.team2) == (teams[0], teams[1])
    assert (last.team1, last.team2) == (teams[2], teams[3])


def test_generated_matches_are_unassigned(league):
    league.generate_schedule()
    for match in league.matches:
        assert match.venue is None
        assert match.scheduled_time is None
        assert match.round_number == 1


def test_regeneration_replaces_matches(league):
    league.generate_schedule()
    first_ids = {m.id for m in league.matches}
    league.generate_schedule()

    assert len(league.matches) == 6
    assert first_ids.isdisjoint(m.id for m in league.matches)


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_teams(count):
    tournament = Tournament("Tiny", LeagueFormat(), teams=[Team(f"T{i}") for i in range(count)])
    with pytest.raises(InvalidTeamCountException):
        tournament.generate_schedule()
    assert tournament.matches == []


def test_two_teams_single_match():
    tournament = Tournament("Final", LeagueFormat(), teams=[Team("A"), Team("B")])
    tournament.generate_schedule()
    assert len(tournament.matches) == 1


def test_table_before_any_result(league, teams):
    league.generate_schedule()
    table = league.format.get_table(league)

    assert [e.team for e in table] == teams
    assert [e.rank for e in table] == [1, 2, 3, 4]
    assert all(e.points == 0 and e.played == 0 for e in table)


def test_dict_round_trip():
    league_format = LeagueFormat(points_for_win=2, tiebreak_order=["goals_for"])
    restored = LeagueFormat.from_dict(league_format.to_dict())

    assert restored.points_for_win == 2
    assert restored.points_for_draw == 1
    assert restored.tiebreak_order == ["goals_for"]
