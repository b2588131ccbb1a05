"""Result recording for tournaments.

This module posts match results through the match lifecycle with validation
and logging, and collects knockout winners for round advancement.
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

from tourneyscheduler.exceptions import MatchStateException, ValidationException
from tourneyscheduler.models.match import Match
from tourneyscheduler.models.team import Team
from tourneyscheduler.models.tournament import Tournament
from tourneyscheduler.type_hints import ResultEntry
from tourneyscheduler.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording match results.

    This class is responsible for:
    - Posting a single result through the match state machine
    - Recording a batch of results for a tournament
    - Collecting the winners of a knockout round
    """

    def post_result(self, match: Match, team1_score: int, team2_score: int) -> None:
        """Post the final score of a match and mark it COMPLETED.

        Args:
            match: The match to update
            team1_score: Goals scored by ``match.team1``
            team2_score: Goals scored by ``match.team2``

        Raises:
            InvalidScoreException: If a score is not a non-negative integer
            MatchStateException: If the match is cancelled or postponed
        """
        try:
            match.post_score(team1_score, team2_score)
        except (ValidationException, MatchStateException) as e:
            logger.error(f"Cannot record result for match {match.id}: {e}")
            raise

        logger.debug(
            f"Recorded: {match.team1.name} {team1_score} - {team2_score} {match.team2.name}"
        )

    def record_results(self, tournament: Tournament, results: List[ResultEntry]) -> bool:
        """Record several results for a tournament.

        Invalid entries are logged and skipped; valid ones are still applied.

        Args:
            tournament: Tournament owning the matches
            results: List of (match_id, team1_score, team2_score) tuples

        Returns:
            True if every result was recorded, False if any was rejected
        """
        success = True
        processed = set()

        for match_id, team1_score, team2_score in results:
            if match_id in processed:
                logger.warning(f"Result for match {match_id} already recorded in this batch")
                success = False
                continue

            match = tournament.get_match(match_id)
            if match is None:
                logger.error(f"Match {match_id} not found in {tournament.name}")
                success = False
                continue

            try:
                self.post_result(match, team1_score, team2_score)
            except (ValidationException, MatchStateException):
                success = False
                continue

            processed.add(match_id)

        return success

    def winners_of_round(self, tournament: Tournament, round_number: int) -> List[Team]:
        """Winners of a round's matches, in match order.

        Matches without a decisive result are skipped with a warning.
        """
        winners = []
        for match in tournament.get_matches_by_round(round_number):
            winner = match.get_winner()
            if winner is None:
                logger.warning(
                    f"Round {round_number}: {match.team1.name} vs {match.team2.name} "
                    "has no winner yet"
                )
                continue
            winners.append(winner)
        return winners
