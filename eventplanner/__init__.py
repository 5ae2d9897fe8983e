"""Event planning: time slots, zones, attendees, attendee trees, tickets and event tables."""

__version__ = "0.1.0"