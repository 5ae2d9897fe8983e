"""Venue zones and their schedules."""

from __future__ import annotations

from typing import Any

from .timeslot import TimeSlot

_LOCATION_LEN = 49


class Zone:
    """A venue area with a capacity, a size and a list of scheduled events.

    Scheduled events are expected to expose ``time_slot`` (a TimeSlot)
    and ``duration_hours``.
    """

    def __init__(self, capacity: int = 0, location: str = "", size: int = 0) -> None:
        self.capacity = capacity
        self.location = location
        self.full = False
        self.size = size
        self._events: list[Any] = []

    @property
    def location(self) -> str:
        return self._location

    @location.setter
    def location(self, value: str) -> None:
        self._location = value[:_LOCATION_LEN]

    @property
    def events(self) -> tuple[Any, ...]:
        """Events scheduled in this zone, in the order they were added."""
        return tuple(self._events)

    def schedule(self, event: Any) -> None:
        """Add an event to the zone's schedule."""
        self._events.append(event)

    def is_available(self, date_id: int, duration_hours: int) -> bool:
        """Whether a slot starting at ``date_id`` (YYYYMMDDHH) is free.

        The slot is free when it overlaps no scheduled event.
        """
        start = TimeSlot.from_number(date_id)._hours_since_epoch()
        end = start + duration_hours
        for event in self._events:
            existing_start = event.time_slot._hours_since_epoch()
            existing_end = existing_start + event.duration_hours
            if start < existing_end and end > existing_start:
                return False
        return True

    def describe(self) -> str:
        """A one-line summary of the zone."""
        location = self.location or "Ubicación no especificada"
        return (
            f"Ubicación: {location}, Aforo: {self.capacity}, "
            f"Tamaño: {self.size}, Lleno: {'Sí' if self.full else 'No'}"
        )