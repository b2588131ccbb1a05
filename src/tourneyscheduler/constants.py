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

# --- Constants ---

# League points
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0

# Scheduling timeline (hours)
MATCH_DURATION_HOURS = 2
GAP_BETWEEN_MATCHES_HOURS = 1
DAY_START_HOUR = 9

# Reschedule window, next calendar day
RESCHEDULE_START_HOUR = 14
RESCHEDULE_END_HOUR = 16

# Knockout
FIRST_ROUND = 1

# Format tags
FORMAT_LEAGUE = "league"
FORMAT_ROUND_ROBIN = "round_robin"  # Alias of league
FORMAT_KNOCKOUT = "knockout"
DEFAULT_FORMAT = FORMAT_LEAGUE

# Tiebreaker Keys
TB_POINTS = "points"
TB_GOAL_DIFFERENCE = "goal_difference"
TB_GOALS_FOR = "goals_for"
TB_HEAD_TO_HEAD = "h2h"

TIEBREAK_NAMES = {
    TB_POINTS: "Points",
    TB_GOAL_DIFFERENCE: "Goal Difference",
    TB_GOALS_FOR: "Goals For",
    TB_HEAD_TO_HEAD: "Head-to-Head",
}

# Applied after points; remaining ties keep team registration order
DEFAULT_TIEBREAK_ORDER = [
    TB_GOAL_DIFFERENCE,
    TB_GOALS_FOR,
    TB_HEAD_TO_HEAD,
]
