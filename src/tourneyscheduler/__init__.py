"""Tourney Scheduler - match generation, venue scheduling and standings."""

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

__version__ = "0.1.0"

from tourneyscheduler.api import (
    generate_schedule,
    get_standings,
    post_result,
    reschedule_match,
    schedule_matches,
    validate_schedule,
)
from tourneyscheduler.controllers.scheduling import ScheduleReport, Scheduler
from tourneyscheduler.controllers.tournament import ResultRecorder, StandingsCalculator
from tourneyscheduler.formats import KnockoutFormat, LeagueFormat, create_format
from tourneyscheduler.models import (
    Match,
    MatchStatus,
    SchedulerConfig,
    StandingEntry,
    Team,
    TimeSlot,
    Tournament,
    TournamentStatus,
    Venue,
)

__all__ = [
    "__version__",
    "Team",
    "Venue",
    "TimeSlot",
    "Match",
    "MatchStatus",
    "Tournament",
    "TournamentStatus",
    "StandingEntry",
    "SchedulerConfig",
    "LeagueFormat",
    "KnockoutFormat",
    "create_format",
    "Scheduler",
    "ScheduleReport",
    "ResultRecorder",
    "StandingsCalculator",
    "generate_schedule",
    "schedule_matches",
    "reschedule_match",
    "validate_schedule",
    "get_standings",
    "post_result",
]
