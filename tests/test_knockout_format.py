import pytest

from tourneyscheduler.exceptions import ValidationException
from tourneyscheduler.formats import KnockoutFormat
from tourneyscheduler.formats.knockout import is_power_of_two
from tourneyscheduler.models import Team, Tournament


def _pairings(tournament):
    return [(m.team1.name, m.team2.name) for m in tournament.matches]


def test_is_power_of_two():
    assert [n for n in range(0, 20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


def test_first_round_pairs_every_team_once(knockout, knockout_teams):
    knockout.generate_schedule()

    assert len(knockout.matches) == 4
    seen = [t for m in knockout.matches for t in (m.team1, m.team2)]
    assert sorted(t.name for t in seen) == sorted(t.name for t in knockout_teams)
    assert all(m.round_number == 1 for m in knockout.matches)
    assert knockout.format.bye_teams == []


def test_draw_is_reproducible_with_seed():
    teams = [Team(f"T{i}") for i in range(8)]
    first = Tournament("Cup", KnockoutFormat(seed=11), teams=teams)
    second = Tournament("Cup", KnockoutFormat(seed=11), teams=teams)

    first.generate_schedule()
    second.generate_schedule()
    assert _pairings(first) == _pairings(second)


def test_draw_does_not_reorder_tournament_teams(knockout, knockout_teams):
    registered = list(knockout.teams)
    knockout.generate_schedule()
    assert knockout.teams == registered


def test_advance_appends_next_round(knockout):
    knockout.generate_schedule()
    winners = [m.team1 for m in knockout.matches]

    new_matches = knockout.advance_to_next_round(winners)

    assert len(new_matches) == 2
    assert len(knockout.matches) == 6
    assert knockout.format.current_round == 2
    assert all(m.round_number == 2 for m in new_matches)
    assert (new_matches[0].team1, new_matches[0].team2) == (winners[0], winners[1])
    assert (new_matches[1].team1, new_matches[1].team2) == (winners[2], winners[3])


@pytest.mark.parametrize("repeat", [True, False])
def test_rejected_winners_leave_draw_untouched(knockout, repeat):
    knockout.generate_schedule()
    winners = [m.team1 for m in knockout.matches]
    if repeat:
        winners[3] = winners[2]
    else:
        winners[3] = Team("Stranger")

    with pytest.raises(ValidationException):
        knockout.advance_to_next_round(winners)

    assert knockout.format.current_round == 1
    assert len(knockout.matches) == 4
    assert knockout.format.bye_teams == []


def test_odd_team_count_leaves_a_bye():
    calls = []
    teams = [Team(f"T{i}") for i in range(5)]
    tournament = Tournament("Cup", KnockoutFormat(seed=3, bye_callback=calls.append), teams=teams)

    tournament.generate_schedule()

    assert len(tournament.matches) == 2
    assert len(calls) == 1
    assert len(calls[0]) == 5
    assert len(tournament.format.bye_teams) == 1
    paired = {t for m in tournament.matches for t in (m.team1, m.team2)}
    assert tournament.format.bye_teams[0] not in paired


def test_six_teams_are_paired_with_warning():
    calls = []
    teams = [Team(f"T{i}") for i in range(6)]
    tournament = Tournament("Cup", KnockoutFormat(seed=3, bye_callback=calls.append), teams=teams)

    tournament.generate_schedule()

    assert len(tournament.matches) == 3
    assert len(calls) == 1
    assert tournament.format.bye_teams == []


def test_no_teams_generates_nothing():
    tournament = Tournament("Empty Cup", KnockoutFormat())
    tournament.generate_schedule()
    assert tournament.matches == []


def test_odd_winners_leave_a_bye(knockout):
    knockout.generate_schedule()
    winners = [m.team1 for m in knockout.matches][:3]

    new_matches = knockout.advance_to_next_round(winners)

    assert len(new_matches) == 1
    assert knockout.format.bye_teams == [winners[2]]


def test_standings_map_every_team_to_current_round(knockout, knockout_teams):
    knockout.generate_schedule()
    assert set(knockout.get_standings().values()) == {1}

    knockout.advance_to_next_round([m.team2 for m in knockout.matches])
    standings = knockout.get_standings()

    assert list(standings) == knockout_teams
    assert set(standings.values()) == {2}


def test_regeneration_resets_round(knockout):
    knockout.generate_schedule()
    knockout.advance_to_next_round([m.team1 for m in knockout.matches])
    knockout.generate_schedule()

    assert knockout.format.current_round == 1
    assert len(knockout.matches) == 4


def test_dict_round_trip():
    knockout_format = KnockoutFormat(seed=5)
    knockout_format.current_round = 3
    restored = KnockoutFormat.from_dict(knockout_format.to_dict())

    assert restored.seed == 5
    assert restored.current_round == 3
