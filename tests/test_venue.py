from datetime import datetime

import pytest

from tourneyscheduler.exceptions import VenueConflictException
from tourneyscheduler.models import TimeSlot, Venue


def test_book_free_slot(make_slot):
    venue = Venue("Park")
    assert venue.book_time_slot(make_slot(1, 9, 11))
    assert venue.bookings == [make_slot(1, 9, 11)]


def test_overlapping_booking_is_refused(make_slot):
    venue = Venue("Park")
    venue.book_time_slot(make_slot(1, 9, 11))

    assert not venue.is_available(make_slot(1, 10, 12))
    assert not venue.book_time_slot(make_slot(1, 10, 12))
    assert venue.bookings == [make_slot(1, 9, 11)]


def test_adjacent_booking_is_accepted(make_slot):
    venue = Venue("Park")
    venue.book_time_slot(make_slot(1, 9, 11))
    assert venue.book_time_slot(make_slot(1, 11, 13))
    assert len(venue.bookings) == 2


def test_book_or_raise(make_slot):
    venue = Venue("Park")
    venue.book_time_slot_or_raise(make_slot(1, 9, 11))
    with pytest.raises(VenueConflictException):
        venue.book_time_slot_or_raise(make_slot(1, 9, 11))


def test_initial_bookings_must_not_overlap(make_slot):
    with pytest.raises(VenueConflictException):
        Venue("Park", bookings=[make_slot(1, 9, 11), make_slot(1, 10, 12)])


def test_release(make_slot):
    venue = Venue("Park", bookings=[make_slot(1, 9, 11)])
    assert venue.release_time_slot(make_slot(1, 9, 11))
    assert venue.bookings == []
    assert not venue.release_time_slot(make_slot(1, 9, 11))
    assert venue.is_available(make_slot(1, 9, 11))


def test_dict_round_trip(make_slot):
    venue = Venue("Park", location="Riverside", capacity=800, bookings=[make_slot(2, 14, 16)])
    restored = Venue.from_dict(venue.to_dict())

    assert restored == venue
    assert restored.name == "Park"
    assert restored.capacity == 800
    assert restored.bookings == [make_slot(2, 14, 16)]


def test_half_hour_overlap_and_adjacent_slot():
    venue = Venue("Park", bookings=[TimeSlot(datetime(2025, 6, 1, 10), datetime(2025, 6, 1, 11))])

    assert not venue.is_available(TimeSlot(datetime(2025, 6, 1, 10, 30), datetime(2025, 6, 1, 11, 30)))
    assert venue.is_available(TimeSlot(datetime(2025, 6, 1, 11), datetime(2025, 6, 1, 12)))


def test_booked_slot_is_no_longer_available(make_slot):
    venue = Venue("Park")
    venue.book_time_slot(make_slot(1, 14, 16))
    assert not venue.is_available(make_slot(1, 14, 16))
