"""A bookable venue and its ledger of booked time slots."""

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

from tourneyscheduler.exceptions import VenueConflictException
from tourneyscheduler.models.time_slot import TimeSlot
from tourneyscheduler.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class Venue:
    """A location where matches can be held.

    The venue owns its booking ledger. No two slots in ``bookings`` overlap;
    every mutation goes through :meth:`book_time_slot` to keep it that way.

    Attributes:
        id: Unique identifier for the venue
        name: Venue name
        location: Address or free-form location
        capacity: Spectator capacity, if known
        bookings: Booked time slots, in booking order
    """

    def __init__(
        self,
        name: str,
        location: Optional[str] = None,
        capacity: Optional[int] = None,
        bookings: Optional[List[TimeSlot]] = None,
        id: Optional[str] = None,
    ) -> None:
        self.id: str = id or generate_id(self.__class__.__name__)
        self.name: str = name
        self.location: Optional[str] = location
        self.capacity: Optional[int] = capacity
        self.bookings: List[TimeSlot] = []
        for slot in bookings or []:
            self.book_time_slot_or_raise(slot)

    def __repr__(self) -> str:
        return f"Venue(id={self.id!r}, name={self.name!r}, bookings={len(self.bookings)})"

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Venue):
            return self.id == other.id
        return NotImplemented

    def is_available(self, time_slot: TimeSlot) -> bool:
        """Check that no existing booking overlaps ``time_slot``."""
        for booking in self.bookings:
            if booking.overlaps_with(time_slot):
                return False
        return True

    def book_time_slot(self, time_slot: TimeSlot) -> bool:
        """Book ``time_slot`` if the venue is free for it.

        Finding another venue on conflict is the caller's job.

        Returns:
            True if booked, False on conflict
        """
        if not self.is_available(time_slot):
            logger.debug(f"Venue {self.name} already booked during {time_slot}")
            return False
        self.bookings.append(time_slot)
        return True

    def book_time_slot_or_raise(self, time_slot: TimeSlot) -> None:
        """Book ``time_slot`` or raise VenueConflictException."""
        if not self.book_time_slot(time_slot):
            raise VenueConflictException(
                f"Venue {self.name} is not available during {time_slot}"
            )

    def release_time_slot(self, time_slot: TimeSlot) -> bool:
        """Remove a booking equal to ``time_slot``.

        Returns:
            True if a booking was removed, False if none matched
        """
        if time_slot in self.bookings:
            self.bookings.remove(time_slot)
            return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize venue to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "capacity": self.capacity,
            "bookings": [s.to_dict() for s in self.bookings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Venue":
        """Deserialize venue from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            location=data.get("location"),
            capacity=data.get("capacity"),
            bookings=[TimeSlot.from_dict(s) for s in data.get("bookings", [])],
        )
