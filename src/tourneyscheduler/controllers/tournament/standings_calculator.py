"""Standings calculation for tournaments.

This module aggregates completed match results into ranked per-team records.
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

import functools
from typing import List, Optional, Tuple

from tourneyscheduler.constants import (
    DEFAULT_TIEBREAK_ORDER,
    POINTS_FOR_DRAW,
    POINTS_FOR_LOSS,
    POINTS_FOR_WIN,
    TB_GOAL_DIFFERENCE,
    TB_GOALS_FOR,
    TB_HEAD_TO_HEAD,
    TB_POINTS,
    TIEBREAK_NAMES,
)
from tourneyscheduler.exceptions import InvalidConfigurationException
from tourneyscheduler.models.match import Match, MatchStatus
from tourneyscheduler.models.standing import StandingEntry
from tourneyscheduler.models.team import Team
from tourneyscheduler.models.tournament import Tournament
from tourneyscheduler.type_hints import Standings
from tourneyscheduler.utils import setup_logger

logger = setup_logger(__name__)


class StandingsCalculator:
    """Calculates standings from match results.

    Only COMPLETED matches carrying both scores count. Teams are ordered by
    points, then by the configured tiebreak order:

    - Goal difference: goals for minus goals against
    - Goals for: total goals scored
    - Head-to-head: more wins in decided meetings between the two teams

    Teams still level keep their registration order.
    """

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

        unknown = set(self.tiebreak_order) - (set(TIEBREAK_NAMES) - {TB_POINTS})
        if unknown:
            raise InvalidConfigurationException(f"Unknown tiebreak keys: {sorted(unknown)}")

    def calculate(self, tournament: Tournament) -> List[StandingEntry]:
        """Build ranked standing entries for every team in the tournament.

        Args:
            tournament: Tournament whose matches are scanned

        Returns:
            Entries sorted best first, with ``rank`` set (1-based)
        """
        matches = self._counted_matches(tournament.matches)
        entries = [self.calculate_team_record(team, matches) for team in tournament.teams]

        sorted_entries = sorted(
            entries,
            key=functools.cmp_to_key(
                lambda e1, e2: self._compare_entries(e1, e2, matches)
            ),
            reverse=True,
        )

        for position, entry in enumerate(sorted_entries, start=1):
            entry.rank = position

        logger.debug(
            f"Standings for {tournament.name}: "
            + ", ".join(f"{e.rank}. {e.team.name} ({e.points})" for e in sorted_entries)
        )
        return sorted_entries

    def calculate_team_record(self, team: Team, matches: List[Match]) -> StandingEntry:
        """Aggregate one team's record by scanning ``matches``."""
        entry = StandingEntry(team=team)

        for match in matches:
            if not match.involves_team(team):
                continue

            scored = match.score_for(team)
            conceded = match.score_for(match.get_opponent(team))

            entry.played += 1
            entry.goals_for += scored
            entry.goals_against += conceded

            if scored > conceded:
                entry.wins += 1
                entry.points += self.points_for_win
            elif scored < conceded:
                entry.losses += 1
                entry.points += self.points_for_loss
            else:
                entry.draws += 1
                entry.points += self.points_for_draw

        return entry

    def calculate_head_to_head(
        self, team_a: Team, team_b: Team, matches: List[Match]
    ) -> Tuple[bool, bool]:
        """Determine who has the better record in meetings between two teams.

        Returns:
            (team_a_ahead, team_b_ahead); both False when level or never met
        """
        a_wins = 0
        b_wins = 0
        for match in matches:
            if not (match.involves_team(team_a) and match.involves_team(team_b)):
                continue
            winner = match.get_winner()
            if winner == team_a:
                a_wins += 1
            elif winner == team_b:
                b_wins += 1
        return a_wins > b_wins, b_wins > a_wins

    def _compare_entries(
        self, e1: StandingEntry, e2: StandingEntry, matches: List[Match]
    ) -> int:
        """Compare two entries for standings order.

        Returns:
            1 if e1 ranks higher, -1 if e2 ranks higher, 0 if equal
        """
        if e1.points != e2.points:
            return 1 if e1.points > e2.points else -1

        for tb_key in self.tiebreak_order:
            if tb_key == TB_HEAD_TO_HEAD:
                e1_ahead, e2_ahead = self.calculate_head_to_head(e1.team, e2.team, matches)
                if e1_ahead:
                    return 1
                if e2_ahead:
                    return -1
                continue

            tb1 = e1.goal_difference if tb_key == TB_GOAL_DIFFERENCE else e1.goals_for
            tb2 = e2.goal_difference if tb_key == TB_GOAL_DIFFERENCE else e2.goals_for
            if tb1 != tb2:
                return 1 if tb1 > tb2 else -1

        return 0

    @staticmethod
    def _counted_matches(matches: List[Match]) -> List[Match]:
        return [m for m in matches if m.status == MatchStatus.COMPLETED and m.has_result]


def entries_to_standings(entries: List[StandingEntry]) -> Standings:
    """Collapse ranked entries into an ordered team -> points mapping."""
    return {entry.team: entry.points for entry in entries}
