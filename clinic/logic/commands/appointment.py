"""Commands operating on a patient's appointments."""

from dataclasses import dataclass, fields, replace
from datetime import date as Date
from datetime import time as Time
from typing import ClassVar

from clinic.exceptions import CommandError
from clinic.logic.commands.base import CommandResult, resolve_index, resolve_patient
from clinic.logic.index import Index
from clinic.logic.messages import MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX
from clinic.logic.parser.syntax import PREFIX_DATE, PREFIX_PATIENT_INDEX, PREFIX_TIME
from clinic.models.events import AppointmentEvent
from clinic.models.model import ModelManager, show_all

DEFAULT_APPOINTMENT_TIME = Time(0, 0)


@dataclass(frozen=True)
class AddAppointmentCommand:
    """Appends an appointment to the patient shown at ``patient_index``."""

    COMMAND_WORD: ClassVar[str] = "add-appt"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds an appointment to the patient identified by the index number used in the "
        "displayed patient list.\n"
        f"Parameters: {PREFIX_PATIENT_INDEX}PATIENT_INDEX {PREFIX_DATE}DATE (YYYY-MM-DD) [{PREFIX_TIME}TIME (HH:MM)]\n"
        f"Example: {COMMAND_WORD} {PREFIX_PATIENT_INDEX}1 {PREFIX_DATE}2024-01-01 {PREFIX_TIME}14:30"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New appointment added for {}: {}"

    patient_index: Index
    date: Date
    time: Time = DEFAULT_APPOINTMENT_TIME

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)
        event = AppointmentEvent(date=self.date, time=self.time)

        model.add_appointment_for_patient(patient, event)
        model.set_active_patient(patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(patient.name, event))


@dataclass(frozen=True)
class ListAppointmentsCommand:
    COMMAND_WORD: ClassVar[str] = "list-appt"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Lists the appointments of the patient identified by the index number used in the "
        "displayed patient list.\n"
        "Parameters: PATIENT_INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Listed {} appointments for {}"

    patient_index: Index

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)

        model.set_active_patient(patient)
        model.update_filtered_appointment_list(show_all)
        return CommandResult(self.MESSAGE_SUCCESS.format(len(model.filtered_appointment_list), patient.name))


@dataclass(frozen=True)
class EditAppointmentDescriptor:
    """Fields to change on an appointment. ``None`` leaves the field as it is."""

    date: Date | None = None
    time: Time | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def apply_to(self, event: AppointmentEvent) -> AppointmentEvent:
        changes = {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
        return replace(event, **changes)


@dataclass(frozen=True)
class EditAppointmentCommand:
    COMMAND_WORD: ClassVar[str] = "edit-appt"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the appointment identified by the index number used in the patient's displayed "
        "appointment list. Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_PATIENT_INDEX}PATIENT_INDEX "
        f"[{PREFIX_DATE}DATE] [{PREFIX_TIME}TIME]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PATIENT_INDEX}2 {PREFIX_TIME}10:00"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited appointment for {}: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    event_index: Index
    patient_index: Index
    descriptor: EditAppointmentDescriptor

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)
        target = resolve_index(
            model.appointments_of(patient), self.event_index, MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX
        )
        edited = self.descriptor.apply_to(target)

        model.set_appointment_for_patient(patient, target, edited)
        model.set_active_patient(patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(patient.name, edited))


@dataclass(frozen=True)
class DeleteAppointmentCommand:
    COMMAND_WORD: ClassVar[str] = "delete-appt"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the appointment identified by the index number used in the patient's displayed "
        "appointment list.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_PATIENT_INDEX}PATIENT_INDEX\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PATIENT_INDEX}2"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted appointment for {}: {}"
    MESSAGE_NOT_OWNED: ClassVar[str] = "This appointment does not exist for this patient"

    event_index: Index
    patient_index: Index

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)
        target = resolve_index(
            model.appointments_of(patient), self.event_index, MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX
        )

        if not patient.has_appointment(target):
            raise CommandError(self.MESSAGE_NOT_OWNED)

        model.delete_appointment_for_patient(patient, target)
        model.set_active_patient(patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(patient.name, target))
