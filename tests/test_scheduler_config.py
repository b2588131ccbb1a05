import pytest
from dateutil.relativedelta import relativedelta

from tourneyscheduler.exceptions import InvalidConfigurationException
from tourneyscheduler.models import SchedulerConfig


def test_defaults():
    config = SchedulerConfig()
    assert config.match_duration == relativedelta(hours=2)
    assert config.timeline_step == relativedelta(hours=3)
    assert config.day_start_hour == 9
    assert (config.reschedule_start_hour, config.reschedule_end_hour) == (14, 16)


@pytest.mark.parametrize(
    "options",
    [
        {"match_duration_hours": 0},
        {"gap_between_matches_hours": -1},
        {"day_start_hour": 24},
        {"reschedule_start_hour": 16, "reschedule_end_hour": 14},
    ],
)
def test_invalid_settings(options):
    with pytest.raises(InvalidConfigurationException):
        SchedulerConfig(**options)


def test_dict_round_trip():
    config = SchedulerConfig(match_duration_hours=1, day_start_hour=10)
    assert SchedulerConfig.from_dict(config.to_dict()) == config
