import tourneyscheduler
from tourneyscheduler import api
from tourneyscheduler.models import MatchStatus


def test_package_exports_operations():
    assert tourneyscheduler.schedule_matches is api.schedule_matches
    assert tourneyscheduler.post_result is api.post_result
    assert tourneyscheduler.__version__


def test_end_to_end_league(league, venues):
    report = api.schedule_matches(league, venues)
    assert report.is_valid
    assert api.validate_schedule(league)

    a, b, c, d = league.teams
    api.post_result(league.matches[0], 3, 1)
    api.post_result(league.matches[-1], 1, 1)

    standings = api.get_standings(league)
    assert list(standings) == [a, c, d, b]
    assert list(standings.values()) == [3, 1, 1, 0]


def test_generate_schedule(knockout):
    api.generate_schedule(knockout)
    assert len(knockout.matches) == 4


def test_reschedule_match(league, venues):
    api.schedule_matches(league, venues)
    match = league.matches[0]
    match.postpone()

    assert api.reschedule_match(match, venues)
    assert match.status == MatchStatus.SCHEDULED
    assert api.validate_schedule(league)
