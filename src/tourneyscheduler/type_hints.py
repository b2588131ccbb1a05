"""Type hints used in Tourney Scheduler."""

from typing import Callable, Dict, List, Tuple

# Ordered team -> points (or round reached); insertion order is rank order
Standings = Dict["Team", int]
# Two scheduled matches sharing a venue at overlapping times
ConflictPair = Tuple["Match", "Match"]
# (match id, team1 score, team2 score)
ResultEntry = Tuple[str, int, int]
# Called with the teams of a knockout draw that cannot fill a full bracket
ByeCallback = Callable[[List["Team"]], None]

#  LocalWords:  ByeCallback ConflictPair
