"""Operation-level entry points.

Thin functions over a default :class:`Scheduler` and :class:`ResultRecorder`
for callers that do not need custom timing or clocks. Build your own
``Scheduler(config=..., clock=...)`` otherwise.
"""

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

from typing import List

from tourneyscheduler.controllers.scheduling import ScheduleReport, Scheduler
from tourneyscheduler.controllers.tournament import ResultRecorder
from tourneyscheduler.models.match import Match
from tourneyscheduler.models.tournament import Tournament
from tourneyscheduler.models.venue import Venue
from tourneyscheduler.type_hints import Standings

_scheduler = Scheduler()
_recorder = ResultRecorder()


def generate_schedule(tournament: Tournament) -> None:
    """Replace the tournament's matches with a fresh draw from its format."""
    tournament.generate_schedule()


def schedule_matches(tournament: Tournament, venues: List[Venue]) -> ScheduleReport:
    return _scheduler.schedule_matches(tournament, venues)


def reschedule_match(match: Match, venues: List[Venue]) -> bool:
    return _scheduler.reschedule_match(match, venues)


def validate_schedule(tournament: Tournament) -> bool:
    return _scheduler.validate_schedule(tournament)


def get_standings(tournament: Tournament) -> Standings:
    """Ordered team -> score mapping, best first (knockout: team -> round)."""
    return tournament.get_standings()


def post_result(match: Match, team1_score: int, team2_score: int) -> None:
    _recorder.post_result(match, team1_score, team2_score)
