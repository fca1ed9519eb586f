"""Commands operating on a patient's medical history."""

from dataclasses import dataclass, fields, replace
from datetime import date as Date
from typing import ClassVar

from clinic.exceptions import CommandError
from clinic.logic.commands.base import CommandResult, resolve_index, resolve_patient
from clinic.logic.index import Index
from clinic.logic.messages import MESSAGE_INVALID_MEDICAL_HISTORY_EVENT_DISPLAYED_INDEX
from clinic.logic.parser.syntax import PREFIX_DATE, PREFIX_MEDICAL_CONDITION, PREFIX_PATIENT_INDEX, PREFIX_TREATMENT
from clinic.models.events import MedicalHistoryEvent
from clinic.models.model import ModelManager, show_all


@dataclass(frozen=True)
class AddMedicalHistoryEventCommand:
    """Appends a medical history event to the patient shown at ``patient_index``."""

    COMMAND_WORD: ClassVar[str] = "add-medhist"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds a medical history event to the patient identified by the index number used in the "
        "displayed patient list.\n"
        f"Parameters: {PREFIX_PATIENT_INDEX}PATIENT_INDEX {PREFIX_DATE}DATE (YYYY-MM-DD) "
        f"{PREFIX_MEDICAL_CONDITION}MEDICAL_CONDITION {PREFIX_TREATMENT}TREATMENT\n"
        f"Example: {COMMAND_WORD} {PREFIX_PATIENT_INDEX}1 {PREFIX_DATE}2023-10-09 "
        f"{PREFIX_MEDICAL_CONDITION}Fever {PREFIX_TREATMENT}Paracetamol"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New medical history event added for {}: {}"

    patient_index: Index
    date: Date
    medical_condition: str
    treatment: str

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)
        event = MedicalHistoryEvent(
            date=self.date,
            medical_condition=self.medical_condition,
            treatment=self.treatment,
        )

        model.add_medical_history_event_for_patient(patient, event)
        model.set_active_patient(patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(patient.name, event))


@dataclass(frozen=True)
class ListMedicalHistoryEventsCommand:
    COMMAND_WORD: ClassVar[str] = "list-medhist"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Lists the medical history of the patient identified by the index number used in the "
        "displayed patient list.\n"
        "Parameters: PATIENT_INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Listed {} medical history events for {}"

    patient_index: Index

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)

        model.set_active_patient(patient)
        model.update_filtered_medical_history_list(show_all)
        return CommandResult(self.MESSAGE_SUCCESS.format(len(model.filtered_medical_history_list), patient.name))


@dataclass(frozen=True)
class EditMedicalHistoryEventDescriptor:
    """Fields to change on a medical history event. ``None`` leaves the field as it is."""

    date: Date | None = None
    medical_condition: str | None = None
    treatment: str | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def apply_to(self, event: MedicalHistoryEvent) -> MedicalHistoryEvent:
        changes = {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
        return replace(event, **changes)


@dataclass(frozen=True)
class EditMedicalHistoryEventCommand:
    COMMAND_WORD: ClassVar[str] = "edit-medhist"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the medical history event identified by the index number used in the patient's "
        "displayed medical history. Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_PATIENT_INDEX}PATIENT_INDEX "
        f"[{PREFIX_DATE}DATE] [{PREFIX_MEDICAL_CONDITION}MEDICAL_CONDITION] [{PREFIX_TREATMENT}TREATMENT]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PATIENT_INDEX}2 {PREFIX_TREATMENT}Ibuprofen"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited medical history event for {}: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    event_index: Index
    patient_index: Index
    descriptor: EditMedicalHistoryEventDescriptor

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)
        target = resolve_index(
            model.medical_history_of(patient), self.event_index, MESSAGE_INVALID_MEDICAL_HISTORY_EVENT_DISPLAYED_INDEX
        )
        edited = self.descriptor.apply_to(target)

        model.set_medical_history_event_for_patient(patient, target, edited)
        model.set_active_patient(patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(patient.name, edited))


@dataclass(frozen=True)
class DeleteMedicalHistoryEventCommand:
    COMMAND_WORD: ClassVar[str] = "delete-medhist"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the medical history event identified by the index number used in the patient's "
        "displayed medical history.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_PATIENT_INDEX}PATIENT_INDEX\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PATIENT_INDEX}2"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted medical history event for {}: {}"
    MESSAGE_NOT_OWNED: ClassVar[str] = "This medical history event does not exist for this patient"

    event_index: Index
    patient_index: Index

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.patient_index)
        target = resolve_index(
            model.medical_history_of(patient), self.event_index, MESSAGE_INVALID_MEDICAL_HISTORY_EVENT_DISPLAYED_INDEX
        )

        if not patient.has_medical_history_event(target):
            raise CommandError(self.MESSAGE_NOT_OWNED)

        model.delete_medical_history_event_for_patient(patient, target)
        model.set_active_patient(patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(patient.name, target))
