"""Appointment and medical history events owned by a patient."""

from dataclasses import dataclass, field
from datetime import date as Date
from datetime import time as Time

from cuid2 import cuid_wrapper

from clinic.models.fields import DATE_FORMAT, TIME_FORMAT

cuid = cuid_wrapper()


@dataclass
class AppointmentEvent:
    """A scheduled appointment.

    ``handle`` identifies the event inside its owner's collection. It is
    regenerated on load and ignored by equality, so two appointments at the
    same date and time compare equal.
    """

    date: Date
    time: Time
    handle: str = field(default_factory=cuid, compare=False, repr=False)

    def __str__(self) -> str:
        return f"Date: {self.date.strftime(DATE_FORMAT)}; Time: {self.time.strftime(TIME_FORMAT)}"


@dataclass
class MedicalHistoryEvent:
    """A past diagnosis together with the treatment given."""

    date: Date
    medical_condition: str
    treatment: str
    handle: str = field(default_factory=cuid, compare=False, repr=False)

    def __str__(self) -> str:
        return (
            f"Date: {self.date.strftime(DATE_FORMAT)}; "
            f"Medical Condition: {self.medical_condition}; "
            f"Treatment: {self.treatment}"
        )
