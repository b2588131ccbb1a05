"""Factory for creating tournament format strategies from tags."""

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

from typing import Any, Dict

from tourneyscheduler.constants import FORMAT_KNOCKOUT, FORMAT_LEAGUE, FORMAT_ROUND_ROBIN
from tourneyscheduler.exceptions import UnknownFormatException
from tourneyscheduler.formats.base import TournamentFormat
from tourneyscheduler.formats.knockout import KnockoutFormat
from tourneyscheduler.formats.league import LeagueFormat

FORMATS = {
    FORMAT_LEAGUE: LeagueFormat,
    FORMAT_ROUND_ROBIN: LeagueFormat,
    FORMAT_KNOCKOUT: KnockoutFormat,
}


def create_format(tag: str, **options: Any) -> TournamentFormat:
    """Create the format strategy registered under ``tag``.

    Example:
        >>> league = create_format("league", points_for_win=2)
        >>> knockout = create_format("knockout", seed=7)

    Raises:
        UnknownFormatException: If no format is registered for the tag
    """
    key = tag.strip().lower() if isinstance(tag, str) else tag
    format_cls = FORMATS.get(key)
    if format_cls is None:
        raise UnknownFormatException(
            f"Unknown tournament format {tag!r}; expected one of {sorted(FORMATS)}"
        )
    return format_cls(**options)


def format_from_dict(data: Dict[str, Any]) -> TournamentFormat:
    """Rebuild a format strategy from its ``to_dict`` output."""
    tag = data.get("tag")
    format_cls = FORMATS.get(tag)
    if format_cls is None:
        raise UnknownFormatException(f"Unknown tournament format {tag!r}")
    return format_cls.from_dict(data)
