"""Demonstration of event registration and attendance."""

from __future__ import annotations

import argparse

from .event import Event
from .people import Attendee
from .timeslot import TimeSlot


def main(argv: list[str] | None = None) -> int:
    """Register attendees for a sample event and print the results."""
    parser = argparse.ArgumentParser(
        prog="eventplanner", description="Run a sample event registration."
    )
    parser.parse_args(argv)

    tech_conf = Event("TechConf", TimeSlot(10, 2025, 20, 6), None, 101, 3)
    attendees = [
        Attendee("0001", "Lucía", "Gómez", 5, "VIP"),
        Attendee("0002", "Carlos", "Rey", 6, "Normal"),
        Attendee("0003", "Ana", "Paz", 7, "VIP"),
    ]
    for attendee in attendees:
        tech_conf.register_attendee(attendee)

    attendee_id = 6
    if tech_conf.register_attendance(attendee_id):
        print(f"Asistencia registrada para el asistente ID: {attendee_id}")
    else:
        print(f"Asistente con ID {attendee_id} no encontrado en este evento.")

    print("\nLista completa de asistentes:")
    print(tech_conf.render_attendees())

    print("\nAsistentes VIP:")
    print(tech_conf.render_vips())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())