# eventplanner

A small toolkit for planning events. It provides hour-resolution time slots, venue
zones that check bookings for overlaps, and a balanced tree of attendees for each
event. It also has tickets, and lookup tables that find events by id or by name.
It depends only on the standard library. The text it produces, such as the
descriptions and the tree drawings, is in Spanish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
eventplanner
```

This runs a fixed demonstration and takes no options apart from `--help`. It works
through these steps:

1. It creates the event "TechConf" (id 101, 3 hours, 2025-06-20 at 10:00).
2. It registers attendees with ids 5, 6 and 7.
3. It marks attendee 6 as present and prints a confirmation.
4. It prints the attendee tree drawn sideways, followed by the VIP list.

## Library overview

### `eventplanner.timeslot`

`TimeSlot(hour, year, day, month)` is a dataclass. Every field defaults to 0.

- **Negative values:** if any field is negative, a `UserWarning` is issued and all
  four fields are reset to 0.
- **`TimeSlot.from_number(2025062010)`** builds a slot from the `YYYYMMDDHH` form.
- **`numeric()`** gives that number back.
- **`is_before(other)`** compares two slots in calendar order. A month, day or hour
  that is out of range is carried over into the next unit. For example, month 13
  counts as January of the next year.
- **`to_datetime()`** returns the normalised slot as a naive `datetime`. It raises
  `ValueError` if the slot falls outside the range that `datetime` supports.

### `eventplanner.people`

**`Person(dni, name, surname, event_hash_id)`**

- It holds an identity document number, a name and surnames.
- Text fields are truncated to 8, 29 and 29 characters.
- Two persons compare equal when all four fields match.
- `full_name()` and `describe()` give text forms of the person.

**`Attendee(dni, name, surname, attendee_id, kind)`**

- It adds an id, a `kind` such as `"VIP"` (truncated to 19 characters) and a
  `priority`, which starts at 1.
- It also has an `attended` flag.
- `register_attendance()` sets `attended` to `True`.
- `describe()` lists all of these fields.

### `eventplanner.zone`

`Zone(capacity, location, size)` is a venue area.

- **`schedule(event)`** adds an event to the zone's list. The event can be any
  object that has a `time_slot` and a `duration_hours`.
- **`events`** is the list of scheduled events, as a tuple.
- **`is_available(date_id, duration_hours)`** returns `False` if a booking that
  starts at `date_id` (`YYYYMMDDHH`) would overlap any scheduled event.
- **`describe()`** gives a one-line summary of the zone.

### `eventplanner.avl`

`AttendeeTree` is an AVL tree of `AttendeeNode`s keyed by attendee id. Duplicate ids
go to the right.

- **`insert(attendee_id)`** adds a node. The node creates a new `Attendee` with that id.
- **`register_attendance(attendee_id)`** marks the attendee as present. It returns
  `False` if the id is not in the tree.
- **`height()`** returns the height of the tree.
- **`render()`** returns the tree drawn sideways.
- **`vips()`** returns the nodes whose attendee has priority 5, in id order.
- **`render_vips()`** returns the VIP list as text.
- Iterating over the tree yields nodes in id order, and `len()` gives the number of
  nodes.

### `eventplanner.event`

`Event(name, time_slot, zone, event_id, duration_hours)` describes one event.

- The name is truncated to 59 characters.
- `published` starts as `False`.
- **`register_attendee(attendee)`** inserts the attendee's id into the event's tree.
- **`register_attendance(attendee_id)`** marks an attendee as present and returns
  whether the id was found.
- **`describe()`**, **`render_attendees()`** and **`render_vips()`** give text views.

### `eventplanner.ticket`

`Ticket(ticket_id, event=None, attendee=None)` is a dataclass. Its `describe()`
method summarises the ticket and its event.

### `eventplanner.registry`

**`EventRegistry`** maps event ids to events, with these methods:

- `add(event_id, event)`
- `get(event_id)`, which returns `None` when the id is missing
- `remove(event_id)`

**`EventHashTable(size=1000)`** is a fixed-size open-addressing table of events keyed
by name. A name's starting slot comes from `name_hash()`, the sum of the name's UTF-8
bytes. Collisions are resolved by linear probing.

- `insert(event)` returns the slot used. It raises `ValueError` when the table is full.
- `find_id(name)` returns the event's id. It raises `KeyError` when the name is not
  in the table.
- `render()` lists the occupied slots.
- `len()` gives the number of stored events.

### Example

```python
from eventplanner.event import Event
from eventplanner.people import Attendee
from eventplanner.timeslot import TimeSlot

conf = Event("TechConf", TimeSlot.from_number(2025062010), None, 101, 3)
conf.register_attendee(Attendee("0001", "Lucía", "Gómez", 5, "VIP"))
conf.register_attendance(5)
print(conf.render_attendees())
```

## What it does not do

- **No storage.** Events, zones and attendees live only in memory. Nothing is saved
  or loaded.
- **No interactive use.** The command runs one fixed demonstration. There is no
  menu and no command for managing real events.
- **Only the attendee id is kept.** An event's attendee tree keeps the id, not the
  `Attendee` object you pass in. Each node holds a fresh `Attendee` with that id and
  default fields.
- **VIP depends on priority, not kind.** An attendee counts as VIP only when its
  `priority` is 5. Setting `kind` to `"VIP"` does not change the priority.
- **No automatic booking.** Giving an `Event` a zone does not book it there. Call
  `Zone.schedule(event)` yourself.
- **Capacity is not enforced.** A zone's `capacity` and `full` are stored but never
  checked.