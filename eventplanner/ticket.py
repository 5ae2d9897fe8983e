"""Tickets linking an attendee to an event."""

from __future__ import annotations

from dataclasses import dataclass

from .event import Event
from .people import Attendee


@dataclass
class Ticket:
    """An admission ticket, optionally tied to an event and an attendee."""

    ticket_id: int
    event: Event | None = None
    attendee: Attendee | None = None

    def describe(self) -> str:
        """A summary of the ticket, its event and whether it has an attendee."""
        lines = [f"ID Entrada: {self.ticket_id}"]
        lines.append(
            self.event.describe() if self.event is not None else "No hay evento asignado."
        )
        lines.append(
            "Hay un asistente asignado."
            if self.attendee is not None
            else "No hay asistente asignado."
        )
        return "\n".join(lines)