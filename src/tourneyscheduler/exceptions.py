"""Exceptions for use in Tourney Scheduler"""

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


# ========== Base Application Exception ==========


class TourneySchedulerException(Exception):
    """Base exception for all Tourney Scheduler errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(TourneySchedulerException):
    """Raised when input to generation or a model is malformed."""

    pass


class InvalidTeamCountException(ValidationException):
    """Raised when a format cannot generate matches for the number of teams."""

    pass


class InvalidTimeSlotException(ValidationException):
    """Raised when a time slot does not start before it ends."""

    pass


class InvalidScoreException(ValidationException):
    """Raised when a posted score is not a non-negative integer."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TourneySchedulerException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class DuplicateTeamException(TournamentException):
    """Raised when attempting to add a team that is already registered."""

    pass


# ========== Match Exceptions ==========


class MatchException(TourneySchedulerException):
    """Base exception for match-related errors."""

    pass


class MatchStateException(MatchException):
    """Raised when a match lifecycle transition is not allowed."""

    pass


# ========== Scheduling Exceptions ==========


class SchedulingException(TourneySchedulerException):
    """Base exception for venue and time assignment errors."""

    pass


class VenueConflictException(SchedulingException):
    """Raised when a strict booking overlaps an existing venue booking."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TourneySchedulerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class UnknownFormatException(ConfigurationException):
    """Raised when a tournament format tag is not recognised."""

    pass
