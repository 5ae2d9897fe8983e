from eventplanner.event import Event
from eventplanner.people import Attendee
from eventplanner.ticket import Ticket


def test_empty_ticket():
    assert Ticket(3).describe() == (
        "ID Entrada: 3\nNo hay evento asignado.\nNo hay asistente asignado."
    )


def test_full_ticket():
    event = Event("Expo", event_id=9)
    ticket = Ticket(4, event, Attendee("0002", "Carlos", "Rey", 6, "Normal"))
    lines = ticket.describe().splitlines()
    assert lines[0] == "ID Entrada: 4"
    assert "\n".join(lines[1:-1]) == event.describe()
    assert lines[-1] == "Hay un asistente asignado."


def test_fields_are_mutable():
    ticket = Ticket(1)
    ticket.ticket_id = 2
    ticket.attendee = Attendee()
    assert ticket.describe().splitlines()[0] == "ID Entrada: 2"
    assert ticket.describe().endswith("Hay un asistente asignado.")