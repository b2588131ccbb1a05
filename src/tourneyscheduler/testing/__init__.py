"""Testing helpers for Tourney Scheduler.

This module provides the Random Tournament Generator (RTG), which builds
seeded tournaments with teams, venues and simulated results.

Run it directly: python -m tourneyscheduler.testing.rtg --teams 8 --format knockout
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

from tourneyscheduler.testing.rtg import (
    RandomTournamentGenerator,
    ResultSimulator,
    RTGConfig,
    TeamFactory,
    VenueFactory,
    create_knockout_cup,
    create_small_league,
)

__all__ = [
    "RandomTournamentGenerator",
    "RTGConfig",
    "TeamFactory",
    "VenueFactory",
    "ResultSimulator",
    "create_small_league",
    "create_knockout_cup",
]
