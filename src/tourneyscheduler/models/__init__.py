"""Data models for the scheduling and standings engine."""

from tourneyscheduler.models.match import Match, MatchStatus
from tourneyscheduler.models.scheduler_config import SchedulerConfig
from tourneyscheduler.models.standing import StandingEntry
from tourneyscheduler.models.team import Team
from tourneyscheduler.models.time_slot import TimeSlot
from tourneyscheduler.models.tournament import Tournament, TournamentStatus
from tourneyscheduler.models.venue import Venue

__all__ = [
    "Match",
    "MatchStatus",
    "SchedulerConfig",
    "StandingEntry",
    "Team",
    "TimeSlot",
    "Tournament",
    "TournamentStatus",
    "Venue",
]
