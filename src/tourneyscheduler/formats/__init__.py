"""Tournament format strategies: schedule generation and standings."""

from tourneyscheduler.formats.base import TournamentFormat
from tourneyscheduler.formats.factory import create_format, format_from_dict
from tourneyscheduler.formats.knockout import KnockoutFormat
from tourneyscheduler.formats.league import LeagueFormat

__all__ = [
    "TournamentFormat",
    "LeagueFormat",
    "KnockoutFormat",
    "create_format",
    "format_from_dict",
]
