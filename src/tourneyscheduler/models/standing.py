"""Standing entry data class."""

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

from tourneyscheduler.models.team import Team


@dataclass
class StandingEntry:
    """Aggregate record of one team, derived from completed matches.

    Never stored on its own: recompute it from match results whenever
    standings are needed.

    Attributes
    ----------
    team : Team
        The team this row describes.
    played : int
        Completed matches with a result.
    wins, losses, draws : int
        Outcome counts.
    goals_for, goals_against : int
        Goals scored and conceded.
    points : int
        League points under the tournament's points scheme.
    rank : int
        1-based position in the standings, 0 until ranked.
    """

    team: Team
    played: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0
    rank: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def goals(self) -> str:
        """Display form ``"GF:GA"``."""
        return f"{self.goals_for}:{self.goals_against}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing entry to dictionary."""
        return {
            "team_id": self.team.id,
            "team_name": self.team.name,
            "rank": self.rank,
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "points": self.points,
        }
