"""Knockout (single-elimination) tournament format."""

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

import random
from typing import Any, Dict, List, Optional, Tuple

from tourneyscheduler.constants import FIRST_ROUND, FORMAT_KNOCKOUT
from tourneyscheduler.exceptions import ValidationException
from tourneyscheduler.formats.base import TournamentFormat
from tourneyscheduler.models.match import Match
from tourneyscheduler.models.team import Team
from tourneyscheduler.models.tournament import Tournament
from tourneyscheduler.type_hints import ByeCallback, Standings
from tourneyscheduler.utils import setup_logger

logger = setup_logger(__name__)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


class KnockoutFormat(TournamentFormat):
    """Single elimination, advanced round by round from supplied winners.

    The first-round draw is a shuffle of the team list. Pass ``rng`` (or
    ``seed``) to make the draw reproducible.

    Attributes:
        current_round: Round most recently generated (1-indexed)
        bye_teams: Teams left unpaired by the latest draw or advancement
    """

    tag = FORMAT_KNOCKOUT

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        bye_callback: Optional[ByeCallback] = None,
    ) -> None:
        """Initialize the knockout format.

        Args:
            rng: Random source for the first-round shuffle
            seed: Seed for a private random source, used when ``rng`` is None
            bye_callback: Called with the team list when the count is not a power of two
        """
        self.seed = seed
        self.random = rng if rng is not None else random.Random(seed)
        self.bye_callback = bye_callback
        self.current_round: int = FIRST_ROUND
        self.bye_teams: List[Team] = []

    def generate_schedule(self, tournament: Tournament) -> None:
        """Draw round one.

        A team count that is zero or not a power of two is not an error: a
        warning is logged, ``bye_callback`` is invoked, and an odd team out
        stays unpaired.
        """
        teams = list(tournament.teams)
        team_count = len(teams)

        if not is_power_of_two(team_count):
            logger.warning(
                f"{tournament.name}: team count {team_count} is not a power of 2, "
                "some teams will get byes"
            )
            if self.bye_callback is not None:
                self.bye_callback(teams)

        self.random.shuffle(teams)

        matches, self.bye_teams = self._pair(teams, FIRST_ROUND)

        tournament.clear_matches()
        self.current_round = FIRST_ROUND
        for match in matches:
            tournament.add_match(match)

        logger.info(
            f"Generated knockout schedule for {tournament.name}: "
            f"{len(tournament.matches)} matches in round {self.current_round}"
        )

    def advance_to_next_round(self, tournament: Tournament, winners: List[Team]) -> List[Match]:
        """Pair consecutive winners into the next round's matches.

        New matches are appended; earlier rounds stay in the match list.
        Nothing changes when ``winners`` is rejected.

        Returns:
            The newly created matches

        Raises:
            ValidationException: If a team is listed twice or is not registered
        """
        winners = list(winners)
        seen = set()
        for team in winners:
            if team in seen:
                raise ValidationException(f"{team.name} is listed twice among the winners")
            if team not in tournament.teams:
                raise ValidationException(f"{team.name} is not registered in {tournament.name}")
            seen.add(team)

        round_number = self.current_round + 1
        new_matches, unpaired = self._pair(winners, round_number)

        self.current_round = round_number
        self.bye_teams = unpaired
        for match in new_matches:
            tournament.add_match(match)

        logger.info(
            f"Advanced {tournament.name} to round {self.current_round}: "
            f"{len(new_matches)} matches"
        )
        return new_matches

    def get_standings(self, tournament: Tournament) -> Standings:
        """Map every team to the current round number.

        Eliminated teams are not distinguished from teams still in the draw.
        """
        return {team: self.current_round for team in tournament.teams}

    def _pair(self, teams: List[Team], round_number: int) -> Tuple[List[Match], List[Team]]:
        """Build matches for consecutive pairs; return them with the unpaired remainder."""
        matches = [
            Match(teams[i], teams[i + 1], round_number=round_number)
            for i in range(0, len(teams) - 1, 2)
        ]

        unpaired = teams[len(teams) - len(teams) % 2:]
        for team in unpaired:
            logger.info(f"Round {round_number}: {team.name} receives a bye")
        return matches, unpaired

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "seed": self.seed,
            "current_round": self.current_round,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnockoutFormat":
        knockout = cls(seed=data.get("seed"))
        knockout.current_round = data.get("current_round", FIRST_ROUND)
        return knockout
