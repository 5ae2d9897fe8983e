"""Lookup tables for events: by id, and by name with linear probing."""

from __future__ import annotations

from .event import Event


class EventRegistry:
    """Events indexed by id."""

    def __init__(self) -> None:
        self._events: dict[int, Event] = {}

    def add(self, event_id: int, event: Event) -> None:
        """Store the event under the id, replacing any previous one."""
        self._events[event_id] = event

    def get(self, event_id: int) -> Event | None:
        """The event with this id, or None."""
        return self._events.get(event_id)

    def remove(self, event_id: int) -> None:
        """Forget the event with this id, if present."""
        self._events.pop(event_id, None)


def name_hash(key: str) -> int:
    """Sum of the UTF-8 byte values of the key."""
    return sum(key.encode("utf-8"))


class EventHashTable:
    """A fixed-size open-addressing table of events keyed by name."""

    def __init__(self, size: int = 1000) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[Event | None] = [None] * size
        self._count = 0

    def _probe(self, key: str):
        base = name_hash(key)
        size = len(self._slots)
        return ((base + step) % size for step in range(size))

    def insert(self, event: Event) -> int:
        """Store the event at the first free slot; return that slot.

        Raises ValueError when every slot is taken.
        """
        for index in self._probe(event.name):
            if self._slots[index] is None:
                self._slots[index] = event
                self._count += 1
                return index
        raise ValueError("hash table is full")

    def find_id(self, name: str) -> int:
        """The id of the event stored under ``name``.

        Raises KeyError when no event has that name.
        """
        for index in self._probe(name):
            event = self._slots[index]
            if event is not None and event.name == name:
                return event.event_id
        raise KeyError(name)

    def render(self) -> str:
        """Every occupied slot with its event."""
        lines = ["", "Mostrar la tabla Hash con exploración lineal **"]
        for index, event in enumerate(self._slots):
            if event is None:
                continue
            zone = event.zone.location if event.zone is not None else ""
            lines.append(f"[{index}] [{event.name}] [{zone}] {event.describe()}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return self._count