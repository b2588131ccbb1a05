"""SchedulerConfig data class."""

# Tourney Scheduler
# Copyright (C) 2025  Tourney Scheduler developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict

from dateutil.relativedelta import relativedelta

from tourneyscheduler.constants import (
    DAY_START_HOUR,
    GAP_BETWEEN_MATCHES_HOURS,
    MATCH_DURATION_HOURS,
    RESCHEDULE_END_HOUR,
    RESCHEDULE_START_HOUR,
)
from tourneyscheduler.exceptions import InvalidConfigurationException


@dataclass
class SchedulerConfig:
    """Scheduler timing settings.

    Attributes
    ----------
    match_duration_hours : int
        Length of a fallback slot.
    gap_between_matches_hours : int
        Extra time added to the fallback timeline after every match.
    day_start_hour : int
        Hour of the tournament start date at which the fallback timeline begins.
    reschedule_start_hour : int
        Start hour of the next-day window used when rescheduling.
    reschedule_end_hour : int
        End hour of that window.
    """

    match_duration_hours: int = MATCH_DURATION_HOURS
    gap_between_matches_hours: int = GAP_BETWEEN_MATCHES_HOURS
    day_start_hour: int = DAY_START_HOUR
    reschedule_start_hour: int = RESCHEDULE_START_HOUR
    reschedule_end_hour: int = RESCHEDULE_END_HOUR

    def __post_init__(self) -> None:
        if self.match_duration_hours <= 0:
            raise InvalidConfigurationException(
                f"match_duration_hours must be positive, got {self.match_duration_hours}"
            )
        if self.gap_between_matches_hours < 0:
            raise InvalidConfigurationException(
                f"gap_between_matches_hours cannot be negative, got {self.gap_between_matches_hours}"
            )
        for hour in (self.day_start_hour, self.reschedule_start_hour, self.reschedule_end_hour):
            if not 0 <= hour <= 23:
                raise InvalidConfigurationException(f"Invalid hour of day: {hour}")
        if self.reschedule_start_hour >= self.reschedule_end_hour:
            raise InvalidConfigurationException(
                "reschedule_start_hour must be earlier than reschedule_end_hour"
            )

    @property
    def match_duration(self) -> relativedelta:
        return relativedelta(hours=self.match_duration_hours)

    @property
    def timeline_step(self) -> relativedelta:
        """How far the fallback timeline moves after each match."""
        return relativedelta(hours=self.match_duration_hours + self.gap_between_matches_hours)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "match_duration_hours": self.match_duration_hours,
            "gap_between_matches_hours": self.gap_between_matches_hours,
            "day_start_hour": self.day_start_hour,
            "reschedule_start_hour": self.reschedule_start_hour,
            "reschedule_end_hour": self.reschedule_end_hour,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchedulerConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            match_duration_hours=data.get("match_duration_hours", MATCH_DURATION_HOURS),
            gap_between_matches_hours=data.get(
                "gap_between_matches_hours", GAP_BETWEEN_MATCHES_HOURS
            ),
            day_start_hour=data.get("day_start_hour", DAY_START_HOUR),
            reschedule_start_hour=data.get("reschedule_start_hour", RESCHEDULE_START_HOUR),
            reschedule_end_hour=data.get("reschedule_end_hour", RESCHEDULE_END_HOUR),
        )
