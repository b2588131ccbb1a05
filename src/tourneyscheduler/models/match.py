"""Match data model and its result lifecycle."""

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

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from tourneyscheduler.exceptions import (
    InvalidScoreException,
    MatchStateException,
    ValidationException,
)
from tourneyscheduler.models.team import Team
from tourneyscheduler.models.time_slot import TimeSlot
from tourneyscheduler.models.venue import Venue
from tourneyscheduler.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class MatchStatus(Enum):
    """Lifecycle states of a match."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    POSTPONED = "postponed"


TERMINAL_STATUSES = frozenset({MatchStatus.COMPLETED, MatchStatus.CANCELLED})


class Match:
    """A contest between two distinct teams within one tournament.

    A match references its teams and venue but does not own them. Venue and
    time stay empty until the scheduler assigns them; scores stay empty until
    a result is posted.

    Lifecycle::

        SCHEDULED -> IN_PROGRESS -> COMPLETED
        SCHEDULED | IN_PROGRESS -> POSTPONED -> (assign) -> SCHEDULED
        any non-terminal -> CANCELLED

    Attributes:
        id: Unique identifier for the match
        team1: First team
        team2: Second team
        round_number: Round the match belongs to (1 for league matches)
        venue: Assigned venue, or None
        time_slot: Assigned time slot, or None
        scheduled_time: Start of the assigned slot, or None
        team1_score: Goals scored by team1, or None
        team2_score: Goals scored by team2, or None
        status: Current lifecycle state
    """

    def __init__(
        self,
        team1: Team,
        team2: Team,
        round_number: int = 1,
        status: MatchStatus = MatchStatus.SCHEDULED,
        id: Optional[str] = None,
    ) -> None:
        if team1 == team2:
            raise ValidationException(f"A match needs two distinct teams, got {team1.name} twice")

        self.id: str = id or generate_id(self.__class__.__name__)
        self.team1: Team = team1
        self.team2: Team = team2
        self.round_number: int = round_number
        self.venue: Optional[Venue] = None
        self.time_slot: Optional[TimeSlot] = None
        self.scheduled_time: Optional[datetime] = None
        self.team1_score: Optional[int] = None
        self.team2_score: Optional[int] = None
        self.status: MatchStatus = status

    def __repr__(self) -> str:
        return (
            f"Match(id={self.id!r}, {self.team1.name} vs {self.team2.name}, "
            f"venue={self.venue.name if self.venue else None}, "
            f"scheduled_time={self.scheduled_time}, status={self.status.name})"
        )

    # ========== Properties ==========

    @property
    def is_scheduled(self) -> bool:
        """True once both a venue and a start time are assigned."""
        return self.venue is not None and self.scheduled_time is not None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def has_result(self) -> bool:
        return self.team1_score is not None and self.team2_score is not None

    @property
    def is_draw(self) -> bool:
        return self.has_result and self.team1_score == self.team2_score

    # ========== Teams ==========

    def involves_team(self, team: Team) -> bool:
        return self.team1 == team or self.team2 == team

    def get_opponent(self, team: Team) -> Optional[Team]:
        if self.team1 == team:
            return self.team2
        if self.team2 == team:
            return self.team1
        return None

    def score_for(self, team: Team) -> Optional[int]:
        """Goals scored by ``team`` in this match, or None without a result."""
        if self.team1 == team:
            return self.team1_score
        if self.team2 == team:
            return self.team2_score
        return None

    def get_winner(self) -> Optional[Team]:
        """Return the higher-scoring team, or None for a draw or missing result."""
        if not self.has_result:
            return None
        if self.team1_score > self.team2_score:
            return self.team1
        if self.team2_score > self.team1_score:
            return self.team2
        return None

    def get_loser(self) -> Optional[Team]:
        winner = self.get_winner()
        if winner is None:
            return None
        return self.get_opponent(winner)

    # ========== Assignment ==========

    def assign(self, venue: Venue, time_slot: TimeSlot) -> None:
        """Assign a venue and time slot.

        The venue booking itself is the caller's responsibility. A postponed
        match re-enters SCHEDULED.

        Raises:
            MatchStateException: If the match is completed or cancelled
        """
        if self.is_terminal:
            raise MatchStateException(
                f"Cannot assign a venue to {self.status.name} match {self.id}"
            )
        self.venue = venue
        self.time_slot = time_slot
        self.scheduled_time = time_slot.start
        if self.status == MatchStatus.POSTPONED:
            self.status = MatchStatus.SCHEDULED

    def clear_assignment(self) -> None:
        self.venue = None
        self.time_slot = None
        self.scheduled_time = None

    # ========== Lifecycle ==========

    def start(self) -> None:
        """Move a scheduled match to IN_PROGRESS."""
        if self.status != MatchStatus.SCHEDULED:
            raise MatchStateException(
                f"Only a SCHEDULED match can start, match {self.id} is {self.status.name}"
            )
        self.status = MatchStatus.IN_PROGRESS

    def post_score(self, team1_score: int, team2_score: int) -> None:
        """Record the final score and mark the match COMPLETED.

        Posting onto an already completed match overwrites the previous
        result; a warning is logged.

        Raises:
            InvalidScoreException: If a score is not a non-negative integer
            MatchStateException: If the match is cancelled or postponed
        """
        for score in (team1_score, team2_score):
            if isinstance(score, bool) or not isinstance(score, int) or score < 0:
                raise InvalidScoreException(
                    f"Invalid score: {score!r} (must be a non-negative integer)"
                )

        if self.status in (MatchStatus.CANCELLED, MatchStatus.POSTPONED):
            raise MatchStateException(
                f"Cannot post a result for {self.status.name} match {self.id}"
            )
        if self.status == MatchStatus.COMPLETED:
            logger.warning(
                f"Match {self.team1.name} vs {self.team2.name} is already completed "
                f"({self.team1_score}-{self.team2_score}), result will be overwritten"
            )

        self.team1_score = team1_score
        self.team2_score = team2_score
        self.status = MatchStatus.COMPLETED

    def cancel(self) -> None:
        if self.is_terminal:
            raise MatchStateException(
                f"Cannot cancel match {self.id}: already {self.status.name}"
            )
        self.status = MatchStatus.CANCELLED

    def postpone(self) -> None:
        if self.status not in (MatchStatus.SCHEDULED, MatchStatus.IN_PROGRESS):
            raise MatchStateException(
                f"Cannot postpone match {self.id} from {self.status.name}"
            )
        self.status = MatchStatus.POSTPONED

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary, referencing teams and venue by id."""
        return {
            "id": self.id,
            "team1_id": self.team1.id,
            "team2_id": self.team2.id,
            "round_number": self.round_number,
            "venue_id": self.venue.id if self.venue else None,
            "time_slot": self.time_slot.to_dict() if self.time_slot else None,
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        teams: Dict[str, Team],
        venues: Optional[Dict[str, Venue]] = None,
    ) -> "Match":
        """Deserialize match from dictionary.

        Args:
            data: Serialized match
            teams: Teams by id
            venues: Venues by id, needed when the match has a venue

        Raises:
            ValidationException: If the scores do not agree with the status
        """
        status = MatchStatus(data.get("status", MatchStatus.SCHEDULED.value))
        team1_score = data.get("team1_score")
        team2_score = data.get("team2_score")
        if (team1_score is None) != (team2_score is None):
            raise ValidationException(
                f"Match {data.get('id')} has only one score: {team1_score!r}, {team2_score!r}"
            )
        if (team1_score is not None) != (status == MatchStatus.COMPLETED):
            raise ValidationException(
                f"Match {data.get('id')} is {status.name} but scores are "
                f"{team1_score!r}, {team2_score!r}"
            )

        match = cls(
            team1=teams[data["team1_id"]],
            team2=teams[data["team2_id"]],
            round_number=data.get("round_number", 1),
            status=status,
            id=data["id"],
        )
        venue_id = data.get("venue_id")
        if venue_id is not None and data.get("time_slot"):
            match.venue = (venues or {})[venue_id]
            match.time_slot = TimeSlot.from_dict(data["time_slot"])
            match.scheduled_time = match.time_slot.start
        match.team1_score = team1_score
        match.team2_score = team2_score
        return match
