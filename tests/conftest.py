from datetime import date, datetime

import pytest

from tourneyscheduler.formats import KnockoutFormat, LeagueFormat
from tourneyscheduler.models import Team, TimeSlot, Tournament, Venue

START_DATE = date(2025, 6, 1)


def _slot(day, start_hour, end_hour):
    return TimeSlot(datetime(2025, 6, day, start_hour), datetime(2025, 6, day, end_hour))


@pytest.fixture
def teams():
    return [Team(name) for name in ("A", "B", "C", "D")]


@pytest.fixture
def league(teams):
    return Tournament("Summer League", LeagueFormat(), teams=teams, start_date=START_DATE)


@pytest.fixture
def knockout_teams():
    return [Team(f"K{i}") for i in range(1, 9)]


@pytest.fixture
def knockout(knockout_teams):
    return Tournament(
        "Summer Cup", KnockoutFormat(seed=7), teams=knockout_teams, start_date=START_DATE
    )


@pytest.fixture
def venues():
    return [Venue("North Ground"), Venue("South Ground")]


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2025, 6, 10, 8, 30)


@pytest.fixture
def make_slot():
    """Build a slot on day ``day`` of June 2025: make_slot(3, 14, 16)."""
    return _slot
