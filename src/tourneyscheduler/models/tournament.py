"""Tournament model - owns the team list and match list.

Schedule generation and standings are delegated to the tournament's format
strategy, so new formats are added without touching this class.
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

from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from tourneyscheduler.exceptions import (
    DuplicateTeamException,
    TournamentStateException,
    ValidationException,
)
from tourneyscheduler.models.match import Match, MatchStatus
from tourneyscheduler.models.team import Team
from tourneyscheduler.models.venue import Venue
from tourneyscheduler.type_hints import Standings
from tourneyscheduler.utils import generate_id, setup_logger

if TYPE_CHECKING:
    from tourneyscheduler.formats.base import TournamentFormat

logger = setup_logger(__name__)


class TournamentStatus(Enum):
    """Lifecycle states of a tournament."""

    SCHEDULED = "scheduled"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Tournament:
    """A tournament: teams, matches and the format that relates them.

    The tournament owns its team membership list and its match list. Matches
    are created by the format (or when a knockout round advances) and are
    mutated in place by the scheduler and by result posting.
    """

    def __init__(
        self,
        name: str,
        format: "TournamentFormat",
        teams: Optional[List[Team]] = None,
        sport: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: TournamentStatus = TournamentStatus.SCHEDULED,
        id: Optional[str] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        name: Tournament name
        format: Format strategy generating matches and standings
        teams: Participating teams, in registration order
        sport: Sport tag (e.g. "football")
        start_date: First day of play, also the start of the fallback timeline
        end_date: Last day of play
        status: Initial lifecycle state
        id: Identifier, generated when omitted
        """
        if start_date and end_date and start_date > end_date:
            raise ValidationException(
                f"Tournament cannot end ({end_date}) before it starts ({start_date})"
            )

        self.id: str = id or generate_id(self.__class__.__name__)
        self.name: str = name
        self.format: "TournamentFormat" = format
        self.sport: Optional[str] = sport
        self.start_date: Optional[date] = start_date
        self.end_date: Optional[date] = end_date
        self.status: TournamentStatus = status
        self.teams: List[Team] = []
        self.matches: List[Match] = []

        for team in teams or []:
            self.add_team(team)

    def __repr__(self) -> str:
        return (
            f"Tournament(name={self.name!r}, format={self.format.tag}, "
            f"teams={len(self.teams)}, matches={len(self.matches)}, "
            f"status={self.status.name})"
        )

    # ========== Team Management ==========

    def add_team(self, team: Team) -> None:
        """Register a team.

        Raises:
            DuplicateTeamException: If the team is already registered
        """
        if team in self.teams:
            raise DuplicateTeamException(
                f"Team {team.name} ({team.id}) is already in {self.name}"
            )
        self.teams.append(team)
        logger.debug(f"Added team: {team.name} ({team.id})")

    def remove_team(self, team: Team) -> bool:
        """Remove a team from the tournament.

        Returns:
            True if removed, False if not found
        """
        if team in self.teams:
            self.teams.remove(team)
            logger.debug(f"Removed team: {team.name} ({team.id})")
            return True
        return False

    def get_team(self, team_id: str) -> Optional[Team]:
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    # ========== Match Management ==========

    def add_match(self, match: Match) -> bool:
        """Append a match unless that very match object is already listed."""
        if any(existing is match for existing in self.matches):
            return False
        self.matches.append(match)
        return True

    def clear_matches(self) -> None:
        self.matches = []

    def get_match(self, match_id: str) -> Optional[Match]:
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def get_team_matches(self, team: Team) -> List[Match]:
        return [m for m in self.matches if m.involves_team(team)]

    def get_matches_by_round(self, round_number: int) -> List[Match]:
        return [m for m in self.matches if m.round_number == round_number]

    def get_matches_by_venue(self, venue: Venue) -> List[Match]:
        return [m for m in self.matches if m.venue == venue]

    @property
    def completed_matches(self) -> List[Match]:
        return [
            m for m in self.matches if m.status == MatchStatus.COMPLETED and m.has_result
        ]

    @property
    def unscheduled_matches(self) -> List[Match]:
        return [m for m in self.matches if not m.is_scheduled]

    # ========== Format Delegation ==========

    def generate_schedule(self) -> None:
        """Populate ``matches`` using the format strategy.

        Raises:
            InvalidTeamCountException: If the format cannot work with the teams
        """
        self.format.generate_schedule(self)

    def get_standings(self) -> Standings:
        """Ordered team -> score mapping, best first."""
        return self.format.get_standings(self)

    def advance_to_next_round(self, winners: List[Team]) -> List[Match]:
        """Create the next knockout round from ``winners``.

        Raises:
            TournamentStateException: If the format has no rounds to advance
        """
        advance = getattr(self.format, "advance_to_next_round", None)
        if advance is None:
            raise TournamentStateException(
                f"{self.format.tag} tournaments do not advance by rounds"
            )
        return advance(self, winners)

    # ========== Status ==========

    def start(self) -> None:
        if self.status != TournamentStatus.SCHEDULED:
            raise TournamentStateException(
                f"Cannot start {self.name}: status is {self.status.name}"
            )
        self.status = TournamentStatus.ONGOING
        logger.info(f"Tournament {self.name} started")

    def complete(self) -> None:
        if self.status != TournamentStatus.ONGOING:
            raise TournamentStateException(
                f"Cannot complete {self.name}: status is {self.status.name}"
            )
        self.status = TournamentStatus.COMPLETED
        logger.info(f"Tournament {self.name} completed")

    def cancel(self) -> None:
        if self.status in (TournamentStatus.COMPLETED, TournamentStatus.CANCELLED):
            raise TournamentStateException(
                f"Cannot cancel {self.name}: status is {self.status.name}"
            )
        self.status = TournamentStatus.CANCELLED
        logger.info(f"Tournament {self.name} cancelled")

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Venues are referenced by id; persist them separately.
        """
        return {
            "id": self.id,
            "name": self.name,
            "sport": self.sport,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "status": self.status.value,
            "format": self.format.to_dict(),
            "teams": [t.to_dict() for t in self.teams],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], venues: Optional[List[Venue]] = None
    ) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data
            venues: Venues referenced by the serialized matches

        Returns:
            Reconstructed Tournament object
        """
        # Import here to avoid circular imports
        from tourneyscheduler.formats.factory import format_from_dict

        teams = [Team.from_dict(t) for t in data.get("teams", [])]
        tournament = cls(
            id=data["id"],
            name=data["name"],
            format=format_from_dict(data["format"]),
            teams=teams,
            sport=data.get("sport"),
            start_date=date.fromisoformat(data["start_date"]) if data.get("start_date") else None,
            end_date=date.fromisoformat(data["end_date"]) if data.get("end_date") else None,
            status=TournamentStatus(data.get("status", TournamentStatus.SCHEDULED.value)),
        )

        teams_by_id = {t.id: t for t in teams}
        venues_by_id = {v.id: v for v in venues or []}
        for match_data in data.get("matches", []):
            tournament.add_match(Match.from_dict(match_data, teams_by_id, venues_by_id))

        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament
