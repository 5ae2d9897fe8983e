"""People and event attendees."""

from __future__ import annotations

from typing import Any

_DNI_LEN = 8
_NAME_LEN = 29
_KIND_LEN = 19


class Person:
    """A person identified by DNI, name and surnames.

    Text fields are truncated to their fixed maximum lengths.
    """

    def __init__(
        self,
        dni: str = "",
        name: str = "",
        surname: str = "",
        event_hash_id: int = 0,
    ) -> None:
        self.dni = dni
        self.name = name
        self.surname = surname
        self.event_hash_id = event_hash_id
        self.event: Any = None

    @property
    def dni(self) -> str:
        return self._dni

    @dni.setter
    def dni(self, value: str) -> None:
        self._dni = value[:_DNI_LEN]

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value[:_NAME_LEN]

    @property
    def surname(self) -> str:
        return self._surname

    @surname.setter
    def surname(self, value: str) -> None:
        self._surname = value[:_NAME_LEN]

    def full_name(self) -> str:
        """Name followed by surnames."""
        return " ".join(part for part in (self.name, self.surname) if part)

    def describe(self) -> str:
        """A human-readable summary of the person."""
        return "\n".join(
            (
                f"DNI: {self.dni}",
                f"Nombre: {self.name}",
                f"Apellidos: {self.surname}",
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (
            self.dni == other.dni
            and self.name == other.name
            and self.surname == other.surname
            and self.event_hash_id == other.event_hash_id
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dni={self.dni!r}, name={self.name!r}, "
            f"surname={self.surname!r})"
        )


class Attendee(Person):
    """A person registered to attend an event."""

    def __init__(
        self,
        dni: str = "",
        name: str = "",
        surname: str = "",
        attendee_id: int = 0,
        kind: str = "",
    ) -> None:
        super().__init__(dni, name, surname)
        self.attended = False
        self.priority = 1
        self.attendee_id = attendee_id
        self.kind = kind

    @property
    def kind(self) -> str:
        """Attendee category such as "VIP" or "Normal"."""
        return self._kind

    @kind.setter
    def kind(self, value: str) -> None:
        self._kind = value[:_KIND_LEN]

    def register_attendance(self) -> None:
        """Mark the attendee as present."""
        self.attended = True

    def describe(self) -> str:
        attended = "Sí" if self.attended else "No"
        return "\n".join(
            (
                f"ID: {self.attendee_id}",
                f"Tipo: {self.kind}",
                f"Nombre: {self.name}",
                f"DNI: {self.dni}",
                f"Prioridad: {self.priority}",
                f"Asistencia: {attended}",
            )
        )