from datetime import datetime

import pytest

from eventplanner.timeslot import TimeSlot


def test_from_number_splits_fields():
    slot = TimeSlot.from_number(2025062010)
    assert (slot.year, slot.month, slot.day, slot.hour) == (2025, 6, 20, 10)


def test_numeric_round_trip():
    for number in (2025062010, 1999123123, 2024022900):
        assert TimeSlot.from_number(number).numeric() == number


def test_default_slot_is_zero():
    slot = TimeSlot()
    assert slot.numeric() == 0
    assert slot == TimeSlot(0, 0, 0, 0)


def test_negative_values_reset_to_zero():
    with pytest.warns(UserWarning):
        slot = TimeSlot(hour=5, year=-1, day=3, month=2)
    assert (slot.hour, slot.year, slot.day, slot.month) == (0, 0, 0, 0)


def test_equality_compares_all_fields():
    assert TimeSlot(10, 2025, 20, 6) == TimeSlot(10, 2025, 20, 6)
    assert not TimeSlot(10, 2025, 20, 6) == TimeSlot(11, 2025, 20, 6)


def test_is_before_orders_slots():
    early = TimeSlot(10, 2025, 20, 6)
    late = TimeSlot(11, 2025, 20, 6)
    assert early.is_before(late)
    assert not late.is_before(early)
    assert not early.is_before(TimeSlot(10, 2025, 20, 6))


def test_is_before_across_years():
    assert TimeSlot(23, 2024, 31, 12).is_before(TimeSlot(0, 2025, 1, 1))


def test_to_datetime_plain():
    assert TimeSlot(10, 2025, 20, 6).to_datetime() == datetime(2025, 6, 20, 10)


def test_to_datetime_normalises_overflow():
    slot = TimeSlot(hour=25, year=2025, day=31, month=12)
    assert slot.to_datetime() == datetime(2026, 1, 1, 1)


def test_normalised_slot_compares_like_its_datetime():
    overflow = TimeSlot(hour=24, year=2025, day=20, month=6)
    next_day = TimeSlot(hour=0, year=2025, day=21, month=6)
    assert not overflow.is_before(next_day)
    assert not next_day.is_before(overflow)
    assert overflow.to_datetime() == next_day.to_datetime()


def test_to_datetime_out_of_range():
    with pytest.raises(ValueError):
        TimeSlot().to_datetime()


def test_setting_fields_changes_numeric():
    slot = TimeSlot.from_number(2025062010)
    slot.hour = 12
    assert slot.numeric() == 2025062012