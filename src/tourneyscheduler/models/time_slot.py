"""Time slot data class."""

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
from datetime import datetime, timedelta
from typing import Any, Dict

from tourneyscheduler.exceptions import InvalidTimeSlotException


@dataclass(frozen=True)
class TimeSlot:
    """A half-open time interval ``[start, end)``.

    Attributes
    ----------
    start : datetime
        First instant covered by the slot.
    end : datetime
        First instant after the slot. Must be later than ``start``.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise InvalidTimeSlotException(
                f"Time slot must start before it ends: {self.start} >= {self.end}"
            )

    def __str__(self) -> str:
        return f"{self.start:%Y-%m-%d %H:%M}-{self.end:%H:%M}"

    @classmethod
    def from_start(cls, start: datetime, duration: timedelta) -> "TimeSlot":
        """Build a slot of ``duration`` beginning at ``start``."""
        return cls(start=start, end=start + duration)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps_with(self, other: "TimeSlot") -> bool:
        """Check whether two slots share any instant.

        Slots that merely touch (one ends exactly when the other starts) do
        not overlap.
        """
        return self.start < other.end and self.end > other.start

    def to_dict(self) -> Dict[str, Any]:
        """Serialize time slot to dictionary."""
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeSlot":
        """Deserialize time slot from dictionary."""
        return cls(
            start=datetime.fromisoformat(data["start"]),
            end=datetime.fromisoformat(data["end"]),
        )
