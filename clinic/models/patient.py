"""Patient data models."""

from dataclasses import dataclass, field
from typing import TypeVar

from clinic.exceptions import EventNotFoundError
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent

EventT = TypeVar("EventT", AppointmentEvent, MedicalHistoryEvent)


def _position_of(events: list[EventT], event: EventT) -> int:
    for position, owned in enumerate(events):
        if owned.handle == event.handle:
            return position
    raise EventNotFoundError()


@dataclass
class Patient:
    """Patient business model.

    A patient is identified by NRIC. Appointments and medical history events
    belong to exactly one patient and are only changed through it.
    """

    name: str
    nric: str
    phone: str
    email: str
    address: str
    tags: frozenset[str] = field(default_factory=frozenset)
    appointments: list[AppointmentEvent] = field(default_factory=list)
    medical_history: list[MedicalHistoryEvent] = field(default_factory=list)

    def is_same_patient(self, other: "Patient | None") -> bool:
        """Return True if ``other`` has the same identity (NRIC) as this patient."""
        return other is not None and other.nric == self.nric

    def has_appointment(self, event: AppointmentEvent) -> bool:
        """Check whether ``event`` is one of this patient's appointments."""
        return any(owned.handle == event.handle for owned in self.appointments)

    def add_appointment(self, event: AppointmentEvent) -> None:
        self.appointments.append(event)

    def set_appointment(self, target: AppointmentEvent, edited: AppointmentEvent) -> None:
        """Replace ``target`` with ``edited`` at the same position."""
        self.appointments[_position_of(self.appointments, target)] = edited

    def remove_appointment(self, event: AppointmentEvent) -> None:
        del self.appointments[_position_of(self.appointments, event)]

    def has_medical_history_event(self, event: MedicalHistoryEvent) -> bool:
        """Check whether ``event`` is one of this patient's medical history events."""
        return any(owned.handle == event.handle for owned in self.medical_history)

    def add_medical_history_event(self, event: MedicalHistoryEvent) -> None:
        self.medical_history.append(event)

    def set_medical_history_event(self, target: MedicalHistoryEvent, edited: MedicalHistoryEvent) -> None:
        """Replace ``target`` with ``edited`` at the same position."""
        self.medical_history[_position_of(self.medical_history, target)] = edited

    def remove_medical_history_event(self, event: MedicalHistoryEvent) -> None:
        del self.medical_history[_position_of(self.medical_history, event)]

    def __str__(self) -> str:
        tags = "".join(f"[{tag}]" for tag in sorted(self.tags))
        return (
            f"{self.name}; NRIC: {self.nric}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Tags: {tags}"
        )
