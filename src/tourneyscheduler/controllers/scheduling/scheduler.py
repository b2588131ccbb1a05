"""Venue and time assignment for tournament matches.

This module turns a format-generated match list into a timetable: each match
gets a time slot (a common team preference or a point on a fallback
timeline) and a venue whose ledger is free for that slot.
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

from datetime import datetime, time
from typing import Callable, List, Optional

from dateutil.relativedelta import relativedelta

from tourneyscheduler.controllers.scheduling.schedule_report import ScheduleReport
from tourneyscheduler.models.match import Match
from tourneyscheduler.models.scheduler_config import SchedulerConfig
from tourneyscheduler.models.time_slot import TimeSlot
from tourneyscheduler.models.tournament import Tournament
from tourneyscheduler.models.venue import Venue
from tourneyscheduler.utils import setup_logger

logger = setup_logger(__name__)


class Scheduler:
    """Assigns venues and time slots to a tournament's matches.

    This class is responsible for:
    - Generating the match list through the tournament's format
    - Choosing a slot per match from team preferences or the fallback timeline
    - Booking venues, falling back to any free venue on conflict
    - Rescheduling single matches
    - Validating the resulting timetable

    Assignment failures are not errors: a match that finds no venue stays
    unassigned and shows up in :meth:`check_schedule`.

    The scheduler mutates venue ledgers in place and takes no locks; callers
    must not run two scheduling sessions on the same venues concurrently.
    """

    def __init__(
        self,
        config: Optional[SchedulerConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the scheduler.

        Args:
            config: Timing settings, defaults to SchedulerConfig()
            clock: Returns "now"; reschedules land on the day after it
        """
        self.config = config or SchedulerConfig()
        self.clock = clock

    # ========== Scheduling ==========

    def schedule_matches(self, tournament: Tournament, venues: List[Venue]) -> ScheduleReport:
        """Generate the tournament's matches and assign each a venue and slot.

        Matches already on the tournament are replaced. Their venue bookings
        are released once the new draw has been generated, so re-running on
        the same venues does not leave stale ledger entries.

        Args:
            tournament: Tournament to schedule; its matches are regenerated
            venues: Candidate venues, in preference order; ledgers are updated

        Returns:
            Report of the resulting schedule

        Raises:
            InvalidTeamCountException: If the format cannot generate matches
        """
        if not venues:
            logger.error(f"No venues available for scheduling {tournament.name}")
            return self.check_schedule(tournament)

        replaced = list(tournament.matches)
        tournament.generate_schedule()
        self._release_bookings(replaced)

        current_time = self._timeline_start(tournament)
        logger.info(
            f"Scheduling {len(tournament.matches)} matches for {tournament.name} "
            f"across {len(venues)} venues"
        )

        for match in tournament.matches:
            time_slot = self.find_common_time_slot(
                match.team1.preferred_time_slots, match.team2.preferred_time_slots
            )
            if time_slot is None:
                time_slot = TimeSlot(current_time, current_time + self.config.match_duration)
                logger.debug(
                    f"No common preference for {match.team1.name} vs {match.team2.name}, "
                    f"using {time_slot}"
                )

            self._assign_venue(match, time_slot, venues)

            current_time = current_time + self.config.timeline_step

        return self.check_schedule(tournament)

    def find_optimal_venue(self, match: Match, venues: List[Venue]) -> Optional[Venue]:
        """Pick the preferred venue for a match.

        Currently the first venue in the list. Distance, capacity or
        facility scoring would plug in here.
        """
        if not venues:
            return None
        return venues[0]

    def find_alternative_venue(self, time_slot: TimeSlot, venues: List[Venue]) -> Optional[Venue]:
        """Return the first venue free for ``time_slot``, or None."""
        for venue in venues:
            if venue.is_available(time_slot):
                return venue
        return None

    @staticmethod
    def find_common_time_slot(
        team1_preferences: List[TimeSlot], team2_preferences: List[TimeSlot]
    ) -> Optional[TimeSlot]:
        """Find the first of team1's preferred slots overlapping one of team2's.

        The first overlapping pair in a nested scan wins; team1's slot is
        returned as-is.
        """
        for slot1 in team1_preferences:
            for slot2 in team2_preferences:
                if slot1.overlaps_with(slot2):
                    return slot1
        return None

    def _assign_venue(self, match: Match, time_slot: TimeSlot, venues: List[Venue]) -> bool:
        venue = self.find_optimal_venue(match, venues)

        if venue is None or not venue.book_time_slot(time_slot):
            if venue is not None:
                logger.debug(f"Venue {venue.name} is not available at {time_slot}, finding alternative")
            venue = self.find_alternative_venue(time_slot, venues)
            if venue is None or not venue.book_time_slot(time_slot):
                logger.warning(
                    f"No venue available for {match.team1.name} vs {match.team2.name} "
                    f"at {time_slot}, match remains unscheduled"
                )
                return False

        match.assign(venue, time_slot)
        logger.debug(f"Scheduled {match.team1.name} vs {match.team2.name} at {venue.name} {time_slot}")
        return True

    def _release_bookings(self, matches: List[Match]) -> None:
        released = 0
        for match in matches:
            if match.venue is not None and match.time_slot is not None:
                if match.venue.release_time_slot(match.time_slot):
                    released += 1
        if released:
            logger.debug(f"Released {released} bookings held by replaced matches")

    def _timeline_start(self, tournament: Tournament) -> datetime:
        start_date = tournament.start_date
        if start_date is None:
            start_date = self.clock().date()
            logger.warning(
                f"{tournament.name} has no start date, fallback timeline starts on {start_date}"
            )
        return datetime.combine(start_date, time(hour=self.config.day_start_hour))

    # ========== Rescheduling ==========

    def reschedule_match(self, match: Match, venues: List[Venue]) -> bool:
        """Move a match to the next day's reschedule window.

        The previous booking is released from its venue first and restored
        if the new booking fails, so a failed reschedule changes nothing.

        Args:
            match: Match to move
            venues: Candidate venues

        Returns:
            True if the match was moved, False otherwise
        """
        if match.is_terminal:
            logger.warning(f"Cannot reschedule {match.status.name} match {match.id}")
            return False

        new_venue = self.find_optimal_venue(match, venues)
        if new_venue is None:
            logger.error(f"No venues available to reschedule match {match.id}")
            return False

        now = self.clock()
        new_slot = TimeSlot(
            now + relativedelta(days=+1, hour=self.config.reschedule_start_hour,
                                minute=0, second=0, microsecond=0),
            now + relativedelta(days=+1, hour=self.config.reschedule_end_hour,
                                minute=0, second=0, microsecond=0),
        )

        old_venue, old_slot = match.venue, match.time_slot
        released = False
        if old_venue is not None and old_slot is not None:
            released = old_venue.release_time_slot(old_slot)

        if new_venue.book_time_slot(new_slot):
            match.assign(new_venue, new_slot)
            logger.info(
                f"Rescheduled {match.team1.name} vs {match.team2.name} to "
                f"{new_venue.name} {new_slot}"
            )
            return True

        if released:
            old_venue.book_time_slot(old_slot)
        logger.warning(f"Failed to reschedule match {match.id}: {new_venue.name} busy at {new_slot}")
        return False

    # ========== Validation ==========

    def check_schedule(self, tournament: Tournament) -> ScheduleReport:
        """Count scheduled matches and find venue double-bookings."""
        report = ScheduleReport()
        for match in tournament.matches:
            if match.is_scheduled:
                report.scheduled.append(match)
            else:
                report.unscheduled.append(match)

        timed = [m for m in report.scheduled if m.time_slot is not None]
        for i in range(len(timed)):
            for j in range(i + 1, len(timed)):
                match1, match2 = timed[i], timed[j]
                if match1.venue == match2.venue and match1.time_slot.overlaps_with(match2.time_slot):
                    logger.error(
                        f"Conflict detected: {match1.venue.name} booked for overlapping "
                        f"matches {match1.id} and {match2.id}"
                    )
                    report.conflicts.append((match1, match2))

        if report.is_valid:
            logger.info(
                f"Schedule for {tournament.name} is valid: {len(report.scheduled)} matches"
            )
        else:
            logger.warning(
                f"Schedule for {tournament.name} has issues: "
                f"{len(report.unscheduled)} unscheduled, {len(report.conflicts)} conflicts"
            )
        return report

    def validate_schedule(self, tournament: Tournament) -> bool:
        """True only if every match is scheduled and no venue is double-booked."""
        return self.check_schedule(tournament).is_valid
