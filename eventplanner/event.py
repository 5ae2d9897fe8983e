"""Events with a schedule, a zone and registered attendees."""

from __future__ import annotations

from .avl import AttendeeTree
from .people import Attendee
from .timeslot import TimeSlot
from .zone import Zone

_NAME_LEN = 59


class Event:
    """A named event held in a zone at a given time slot."""

    def __init__(
        self,
        name: str = "",
        time_slot: TimeSlot | None = None,
        zone: Zone | None = None,
        event_id: int = 0,
        duration_hours: int = 0,
    ) -> None:
        self.name = name
        self.time_slot = time_slot if time_slot is not None else TimeSlot()
        self.zone = zone
        self.published = False
        self.event_id = event_id
        self.duration_hours = duration_hours
        self.attendees = AttendeeTree()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value[:_NAME_LEN]

    def register_attendee(self, attendee: Attendee) -> None:
        """Add the attendee's id to this event."""
        self.attendees.insert(attendee.attendee_id)

    def register_attendance(self, attendee_id: int) -> bool:
        """Mark an attendee as present; False when not registered here."""
        return self.attendees.register_attendance(attendee_id)

    def describe(self) -> str:
        """A summary of the event followed by its zone."""
        header = (
            f"Evento: {self.name}, Publicado: {'Sí' if self.published else 'No'}, "
            f"ID: {self.event_id}, Duración: {self.duration_hours} horas"
        )
        zone = self.zone.describe() if self.zone is not None else "No hay zona asignada."
        return f"{header}\n{zone}"

    def render_attendees(self) -> str:
        return self.attendees.render()

    def render_vips(self) -> str:
        return self.attendees.render_vips()

    def __repr__(self) -> str:
        return f"Event(name={self.name!r}, event_id={self.event_id!r})"