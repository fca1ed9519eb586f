"""Commands operating on patients."""

from dataclasses import dataclass, fields, replace
from typing import ClassVar

from clinic.exceptions import CommandError
from clinic.logic.commands.base import CommandResult, resolve_patient
from clinic.logic.index import Index
from clinic.logic.messages import MESSAGE_PATIENTS_LISTED_OVERVIEW
from clinic.logic.parser.syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NRIC,
    PREFIX_PHONE,
    PREFIX_TAG,
)
from clinic.models.clinic_book import ClinicBook
from clinic.models.model import ModelManager, show_all
from clinic.models.patient import Patient

MESSAGE_DUPLICATE_PATIENT = "This patient already exists in the clinic book"


@dataclass(frozen=True)
class AddCommand:
    """Adds a patient to the clinic book."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds a patient to the clinic book. "
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_NRIC}NRIC {PREFIX_PHONE}PHONE {PREFIX_EMAIL}EMAIL "
        f"{PREFIX_ADDRESS}ADDRESS [{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}John Doe {PREFIX_NRIC}S1234567A {PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com {PREFIX_ADDRESS}311, Clementi Ave 2, #02-25 {PREFIX_TAG}diabetic"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New patient added: {}"

    patient: Patient

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_patient(self.patient):
            raise CommandError(MESSAGE_DUPLICATE_PATIENT)

        model.add_patient(self.patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.patient))


@dataclass(frozen=True)
class EditPatientDescriptor:
    """Fields to change on a patient. ``None`` leaves the field as it is."""

    name: str | None = None
    nric: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    tags: frozenset[str] | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def apply_to(self, patient: Patient) -> Patient:
        """Build the edited patient. Events are carried over unchanged."""
        changes = {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
        return replace(
            patient,
            **changes,
            appointments=list(patient.appointments),
            medical_history=list(patient.medical_history),
        )


@dataclass(frozen=True)
class EditCommand:
    """Edits the details of the patient shown at ``index``."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the details of the patient identified by the index number used in the displayed "
        "patient list. Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) [{PREFIX_NAME}NAME] [{PREFIX_NRIC}NRIC] "
        f"[{PREFIX_PHONE}PHONE] [{PREFIX_EMAIL}EMAIL] [{PREFIX_ADDRESS}ADDRESS] [{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PHONE}91234567 {PREFIX_EMAIL}johndoe@example.com"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited Patient: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: Index
    descriptor: EditPatientDescriptor

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.index)
        edited = self.descriptor.apply_to(patient)

        if not patient.is_same_patient(edited) and model.has_patient(edited):
            raise CommandError(MESSAGE_DUPLICATE_PATIENT)

        model.set_patient(patient, edited)
        model.update_filtered_patient_list(show_all)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass(frozen=True)
class DeleteCommand:
    """Deletes the patient shown at ``index`` together with all of its events."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the patient identified by the index number used in the displayed patient list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted Patient: {}"

    index: Index

    def execute(self, model: ModelManager) -> CommandResult:
        patient = resolve_patient(model, self.index)
        model.delete_patient(patient)
        return CommandResult(self.MESSAGE_SUCCESS.format(patient))


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches patients whose name contains any of the keywords as a whole word, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, patient: Patient) -> bool:
        words = {word.casefold() for word in patient.name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


@dataclass(frozen=True)
class FindCommand:
    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Finds all patients whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_patient_list(self.predicate)
        return CommandResult(MESSAGE_PATIENTS_LISTED_OVERVIEW.format(len(model.filtered_patient_list)))


@dataclass(frozen=True)
class ListCommand:
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Lists all patients."
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all patients"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_patient_list(show_all)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ClearCommand:
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Removes every patient and event from the clinic book."
    MESSAGE_SUCCESS: ClassVar[str] = "Clinic book has been cleared!"

    def execute(self, model: ModelManager) -> CommandResult:
        model.set_clinic_book(ClinicBook())
        model.update_filtered_patient_list(show_all)
        return CommandResult(self.MESSAGE_SUCCESS)
