"""League (round-robin) tournament format."""

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

from typing import Any, Dict, List, Optional

from tourneyscheduler.constants import (
    DEFAULT_TIEBREAK_ORDER,
    FORMAT_LEAGUE,
    POINTS_FOR_DRAW,
    POINTS_FOR_LOSS,
    POINTS_FOR_WIN,
)
from tourneyscheduler.controllers.tournament.standings_calculator import (
    StandingsCalculator,
    entries_to_standings,
)
from tourneyscheduler.exceptions import InvalidTeamCountException
from tourneyscheduler.formats.base import TournamentFormat
from tourneyscheduler.models.match import Match
from tourneyscheduler.models.standing import StandingEntry
from tourneyscheduler.models.tournament import Tournament
from tourneyscheduler.type_hints import Standings
from tourneyscheduler.utils import setup_logger

logger = setup_logger(__name__)


class LeagueFormat(TournamentFormat):
    """Every team plays every other team exactly once.

    Matches are generated for team index pairs ``i < j`` in registration
    order, which makes the match list deterministic.
    """

    tag = FORMAT_LEAGUE

    def __init__(
        self,
        points_for_win: int = POINTS_FOR_WIN,
        points_for_draw: int = POINTS_FOR_DRAW,
        points_for_loss: int = POINTS_FOR_LOSS,
        tiebreak_order: Optional[List[str]] = None,
    ) -> None:
        self.points_for_win = points_for_win
        self.points_for_draw = points_for_draw
        self.points_for_loss = points_for_loss
        self.tiebreak_order = (
            list(tiebreak_order) if tiebreak_order is not None else list(DEFAULT_TIEBREAK_ORDER)
        )
        self.standings_calculator = StandingsCalculator(
            points_for_win=points_for_win,
            points_for_draw=points_for_draw,
            points_for_loss=points_for_loss,
            tiebreak_order=self.tiebreak_order,
        )

    def generate_schedule(self, tournament: Tournament) -> None:
        teams = list(tournament.teams)
        if len(teams) < 2:
            raise InvalidTeamCountException(
                f"A league needs at least 2 teams, {tournament.name} has {len(teams)}"
            )

        tournament.clear_matches()
        for i in range(len(teams)):
            for j in range(i + 1, len(teams)):
                tournament.add_match(Match(teams[i], teams[j]))

        logger.info(
            f"Generated league schedule for {tournament.name}: "
            f"{len(tournament.matches)} matches, {len(teams) - 1} per team"
        )

    def get_standings(self, tournament: Tournament) -> Standings:
        return entries_to_standings(self.get_table(tournament))

    def get_table(self, tournament: Tournament) -> List[StandingEntry]:
        """Full standings rows (played, W/D/L, goals, points, rank)."""
        return self.standings_calculator.calculate(tournament)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "points_for_win": self.points_for_win,
            "points_for_draw": self.points_for_draw,
            "points_for_loss": self.points_for_loss,
            "tiebreak_order": self.tiebreak_order,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeagueFormat":
        return cls(
            points_for_win=data.get("points_for_win", POINTS_FOR_WIN),
            points_for_draw=data.get("points_for_draw", POINTS_FOR_DRAW),
            points_for_loss=data.get("points_for_loss", POINTS_FOR_LOSS),
            tiebreak_order=data.get("tiebreak_order"),
        )
