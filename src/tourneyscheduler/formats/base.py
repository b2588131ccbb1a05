"""Abstract tournament format strategy."""

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

from abc import ABC, abstractmethod
from typing import Any, Dict

from tourneyscheduler.models.tournament import Tournament
from tourneyscheduler.type_hints import Standings


class TournamentFormat(ABC):
    """Strategy producing a tournament's matches and its standings.

    A tournament holds one format value. Add a format by implementing this
    interface and registering its tag in :mod:`tourneyscheduler.formats.factory`.
    """

    tag: str = ""

    @abstractmethod
    def generate_schedule(self, tournament: Tournament) -> None:
        """Replace ``tournament.matches`` with freshly generated, unassigned matches.

        Raises:
            InvalidTeamCountException: If the teams cannot form a schedule
        """
        raise NotImplementedError

    @abstractmethod
    def get_standings(self, tournament: Tournament) -> Standings:
        """Return an ordered team -> score mapping, best first."""
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Serialize format settings to dictionary."""
        return {"tag": self.tag}
