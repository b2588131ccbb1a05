from datetime import datetime, timedelta

import pytest

from tourneyscheduler.exceptions import InvalidTimeSlotException, ValidationException
from tourneyscheduler.models import TimeSlot


def test_start_must_precede_end():
    start = datetime(2025, 6, 1, 10)
    with pytest.raises(InvalidTimeSlotException):
        TimeSlot(start, start)
    with pytest.raises(ValidationException):
        TimeSlot(start, start - timedelta(hours=1))


def test_overlap_is_symmetric(make_slot):
    morning = make_slot(1, 9, 11)
    late_morning = make_slot(1, 10, 12)
    assert morning.overlaps_with(late_morning)
    assert late_morning.overlaps_with(morning)


def test_touching_slots_do_not_overlap(make_slot):
    first = make_slot(1, 9, 11)
    second = make_slot(1, 11, 13)
    assert not first.overlaps_with(second)
    assert not second.overlaps_with(first)


def test_contained_slot_overlaps(make_slot):
    assert make_slot(1, 9, 17).overlaps_with(make_slot(1, 12, 13))


def test_different_days_do_not_overlap(make_slot):
    assert not make_slot(1, 9, 11).overlaps_with(make_slot(2, 9, 11))


def test_from_start_and_duration():
    start = datetime(2025, 6, 1, 9)
    time_slot = TimeSlot.from_start(start, timedelta(hours=2))
    assert time_slot.end == datetime(2025, 6, 1, 11)
    assert time_slot.duration == timedelta(hours=2)


def test_slots_are_values(make_slot):
    assert make_slot(3, 14, 16) == make_slot(3, 14, 16)
    assert len({make_slot(3, 14, 16), make_slot(3, 14, 16)}) == 1


def test_dict_round_trip(make_slot):
    time_slot = make_slot(5, 18, 20)
    assert TimeSlot.from_dict(time_slot.to_dict()) == time_slot
