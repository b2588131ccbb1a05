"""A team taking part in a tournament."""

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

from tourneyscheduler.models.time_slot import TimeSlot
from tourneyscheduler.utils import generate_id


class Team:
    """Represents a team in the tournament.

    Teams are compared and hashed by ``id`` only, so two objects loaded for
    the same team are interchangeable as dictionary keys in standings.

    Attributes:
        id: Unique identifier for the team
        name: Team display name
        preferred_time_slots: Ordered list of windows the team would like to play in
        contact_info: Free-form contact details
    """

    def __init__(
        self,
        name: str,
        preferred_time_slots: Optional[List[TimeSlot]] = None,
        contact_info: Optional[str] = None,
        id: Optional[str] = None,
    ) -> None:
        self.id: str = id or generate_id(self.__class__.__name__)
        self.name: str = name
        self.preferred_time_slots: List[TimeSlot] = list(preferred_time_slots or [])
        self.contact_info: Optional[str] = contact_info

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r})"

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Team):
            return self.id == other.id
        return NotImplemented

    def add_preferred_time_slot(self, time_slot: TimeSlot) -> bool:
        """Add a preferred slot unless it is already listed.

        Returns:
            True if added, False if it was already present
        """
        if time_slot in self.preferred_time_slots:
            return False
        self.preferred_time_slots.append(time_slot)
        return True

    def remove_preferred_time_slot(self, time_slot: TimeSlot) -> bool:
        if time_slot in self.preferred_time_slots:
            self.preferred_time_slots.remove(time_slot)
            return True
        return False

    def validate_info(self) -> bool:
        """A team is valid when it has a non-blank name."""
        return bool(self.name and self.name.strip())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "preferred_time_slots": [s.to_dict() for s in self.preferred_time_slots],
            "contact_info": self.contact_info,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            preferred_time_slots=[
                TimeSlot.from_dict(s) for s in data.get("preferred_time_slots", [])
            ],
            contact_info=data.get("contact_info"),
        )
