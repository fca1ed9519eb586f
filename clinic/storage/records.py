"""JSON-friendly record models for the clinic book.

The records reuse the validated field types, so a hand-edited data file
with an invalid value fails to load instead of producing a bad patient.
"""

from pydantic import BaseModel, Field, model_validator

from clinic.models.clinic_book import ClinicBook
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent
from clinic.models.fields import (
    Address,
    Email,
    EventDate,
    EventTime,
    MedicalCondition,
    Name,
    Nric,
    Phone,
    Tag,
    Treatment,
)
from clinic.models.patient import Patient

MESSAGE_DUPLICATE_PATIENT = "Patients list contains duplicate patient(s)."


class AppointmentRecord(BaseModel):
    """Stored form of an appointment."""

    date: EventDate
    time: EventTime

    @classmethod
    def from_model(cls, event: AppointmentEvent) -> "AppointmentRecord":
        return cls(date=event.date, time=event.time)

    def to_model(self) -> AppointmentEvent:
        return AppointmentEvent(date=self.date, time=self.time)


class MedicalHistoryRecord(BaseModel):
    """Stored form of a medical history event."""

    date: EventDate
    medical_condition: MedicalCondition
    treatment: Treatment

    @classmethod
    def from_model(cls, event: MedicalHistoryEvent) -> "MedicalHistoryRecord":
        return cls(date=event.date, medical_condition=event.medical_condition, treatment=event.treatment)

    def to_model(self) -> MedicalHistoryEvent:
        return MedicalHistoryEvent(date=self.date, medical_condition=self.medical_condition, treatment=self.treatment)


class PatientRecord(BaseModel):
    """Stored form of a patient and the events it owns."""

    name: Name
    nric: Nric
    phone: Phone
    email: Email
    address: Address
    tags: list[Tag] = Field(default_factory=list)
    appointments: list[AppointmentRecord] = Field(default_factory=list)
    medical_history: list[MedicalHistoryRecord] = Field(default_factory=list)

    @classmethod
    def from_model(cls, patient: Patient) -> "PatientRecord":
        return cls(
            name=patient.name,
            nric=patient.nric,
            phone=patient.phone,
            email=patient.email,
            address=patient.address,
            tags=sorted(patient.tags),
            appointments=[AppointmentRecord.from_model(event) for event in patient.appointments],
            medical_history=[MedicalHistoryRecord.from_model(event) for event in patient.medical_history],
        )

    def to_model(self) -> Patient:
        return Patient(
            name=self.name,
            nric=self.nric,
            phone=self.phone,
            email=self.email,
            address=self.address,
            tags=frozenset(self.tags),
            appointments=[record.to_model() for record in self.appointments],
            medical_history=[record.to_model() for record in self.medical_history],
        )


class ClinicBookRecord(BaseModel):
    """Stored form of the whole clinic book."""

    patients: list[PatientRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_patients(self) -> "ClinicBookRecord":
        """Reject files holding two patients with the same NRIC."""
        nrics = [patient.nric for patient in self.patients]
        if len(set(nrics)) != len(nrics):
            raise ValueError(MESSAGE_DUPLICATE_PATIENT)
        return self

    @classmethod
    def from_model(cls, clinic_book: ClinicBook) -> "ClinicBookRecord":
        return cls(patients=[PatientRecord.from_model(patient) for patient in clinic_book.patients])

    def to_model(self) -> ClinicBook:
        return ClinicBook(record.to_model() for record in self.patients)
