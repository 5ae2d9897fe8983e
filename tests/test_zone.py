from dataclasses import dataclass

from eventplanner.timeslot import TimeSlot
from eventplanner.zone import Zone


@dataclass
class _Booking:
    time_slot: TimeSlot
    duration_hours: int


def _zone_with_booking():
    zone = Zone(100, "Hall A", 50)
    zone.schedule(_Booking(TimeSlot.from_number(2025062010), 3))
    return zone


def test_empty_zone_is_available():
    assert Zone().is_available(2025062010, 5) is True


def test_overlapping_slot_is_unavailable():
    zone = _zone_with_booking()
    assert zone.is_available(2025062011, 1) is False
    assert zone.is_available(2025062008, 3) is False


def test_adjacent_slots_are_available():
    zone = _zone_with_booking()
    assert zone.is_available(2025062013, 2) is True
    assert zone.is_available(2025062008, 2) is True


def test_overlap_across_midnight():
    zone = Zone()
    zone.schedule(_Booking(TimeSlot.from_number(2025062022), 4))
    assert zone.is_available(2025062101, 1) is False
    assert zone.is_available(2025062102, 1) is True


def test_events_are_kept_in_order():
    zone = Zone()
    first = _Booking(TimeSlot.from_number(2025010100), 1)
    second = _Booking(TimeSlot.from_number(2025010200), 1)
    zone.schedule(first)
    zone.schedule(second)
    assert zone.events == (first, second)


def test_location_truncated():
    zone = Zone(location="L" * 80)
    assert len(zone.location) == 49


def test_describe_with_location():
    zone = Zone(100, "Hall A", 50)
    assert zone.describe() == "Ubicación: Hall A, Aforo: 100, Tamaño: 50, Lleno: No"


def test_describe_without_location():
    zone = Zone()
    zone.full = True
    text = zone.describe()
    assert text.startswith("Ubicación: Ubicación no especificada")
    assert text.endswith("Lleno: Sí")