"""Result of checking a tournament schedule."""

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

from dataclasses import dataclass, field
from typing import List

from tourneyscheduler.models.match import Match
from tourneyscheduler.type_hints import ConflictPair


@dataclass
class ScheduleReport:
    """Outcome of a schedule check.

    Attributes:
        scheduled: Matches with both a venue and a start time
        unscheduled: Matches missing either
        conflicts: Pairs of scheduled matches sharing a venue at overlapping times
    """

    scheduled: List[Match] = field(default_factory=list)
    unscheduled: List[Match] = field(default_factory=list)
    conflicts: List[ConflictPair] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.unscheduled and not self.conflicts

    def __bool__(self) -> bool:
        """Allow using the report in boolean context: if report: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        state = "VALID" if self.is_valid else "INVALID"
        return (
            f"ScheduleReport({state}, scheduled={len(self.scheduled)}, "
            f"unscheduled={len(self.unscheduled)}, conflicts={len(self.conflicts)})"
        )

    def get_summary(self) -> str:
        summary = f"Schedule Valid: {self.is_valid}\n"
        summary += f"Scheduled Matches: {len(self.scheduled)}\n"
        summary += f"Unscheduled Matches: {len(self.unscheduled)}\n"
        summary += f"Venue Conflicts: {len(self.conflicts)}\n"
        return summary
