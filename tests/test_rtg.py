from tourneyscheduler.models import MatchStatus
from tourneyscheduler.testing.rtg import (
    RandomTournamentGenerator,
    RTGConfig,
    ResultSimulator,
    create_knockout_cup,
    create_small_league,
)


def test_league_is_fully_played():
    data = create_small_league(num_teams=6, seed=21).generate_complete_tournament()
    tournament = data["tournament"]

    assert len(tournament.matches) == 15
    assert all(m.status == MatchStatus.COMPLETED for m in tournament.matches)
    for entry in tournament.format.get_table(tournament):
        assert entry.played == 5
        assert entry.wins + entry.draws + entry.losses == 5


def test_league_points_are_consistent():
    data = create_small_league(num_teams=5, seed=8).generate_complete_tournament()
    tournament = data["tournament"]

    decided = sum(1 for m in tournament.matches if not m.is_draw)
    drawn = len(tournament.matches) - decided
    assert sum(data["standings"].values()) == 3 * decided + 2 * drawn
    points = list(data["standings"].values())
    assert points == sorted(points, reverse=True)


def test_same_seed_same_tournament():
    first = create_small_league(seed=99).generate_complete_tournament()
    second = create_small_league(seed=99).generate_complete_tournament()

    def summary(data):
        return [(team.name, points) for team, points in data["standings"].items()]

    assert summary(first) == summary(second)


def test_schedule_without_preferences_is_valid():
    config = RTGConfig(num_teams=6, num_venues=2, preference_rate=0.0, seed=5)
    data = RandomTournamentGenerator(config).generate_complete_tournament()
    assert data["report"].is_valid


def test_knockout_cup_produces_a_single_winner():
    data = create_knockout_cup(num_teams=8, seed=13).generate_complete_tournament()
    tournament = data["tournament"]

    assert len(tournament.matches) == 7
    assert tournament.format.current_round == 3
    assert all(m.get_winner() is not None for m in tournament.matches)
    final = tournament.get_matches_by_round(3)[0]
    finalists = {final.team1, final.team2}
    assert all(m.get_loser() not in finalists for m in tournament.get_matches_by_round(1))


def test_knockout_scores_are_never_drawn():
    simulator = ResultSimulator(RTGConfig(num_teams=2, draw_percentage=100, seed=1))
    for _ in range(50):
        team1_score, team2_score = simulator.simulate_score(allow_draw=False)
        assert team1_score != team2_score


def test_knockout_carries_byes_to_a_single_champion():
    data = create_knockout_cup(num_teams=6, seed=5).generate_complete_tournament()
    tournament = data["tournament"]

    losers = {m.get_loser() for m in tournament.matches}
    unbeaten = [t for t in tournament.teams if t not in losers]

    assert len(tournament.matches) == 5
    assert tournament.format.current_round == 3
    assert unbeaten == [data["champion"]]
    assert tournament.get_matches_by_round(3)[0].get_winner() == data["champion"]


def test_league_has_no_champion():
    data = create_small_league(num_teams=4, seed=2).generate_complete_tournament()
    assert data["champion"] is None
