"""In-memory model: the clinic book, user preferences and the filtered views over them."""

from collections.abc import Callable
from pathlib import Path

from clinic.exceptions import PatientNotFoundError
from clinic.models.clinic_book import ClinicBook
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent
from clinic.models.patient import Patient
from clinic.models.user_prefs import GuiSettings, UserPreferences

PatientPredicate = Callable[[Patient], bool]
AppointmentPredicate = Callable[[AppointmentEvent], bool]
MedicalHistoryPredicate = Callable[[MedicalHistoryEvent], bool]


def show_all(_record: object) -> bool:
    """Predicate matching every record."""
    return True


class ModelManager:
    """Holds the clinic book and exposes the filtered lists the display layer renders.

    Filtered lists are projections computed on every read from the current
    records and the active predicate, so they always reflect the state after
    the last mutation. The appointment and medical history lists belong to
    the *active* patient, the last one addressed by an event command.
    """

    def __init__(self, clinic_book: ClinicBook | None = None, user_prefs: UserPreferences | None = None):
        """Initialize the model with existing data, or an empty clinic book and default preferences."""
        self.clinic_book = clinic_book if clinic_book is not None else ClinicBook()
        self.user_prefs = user_prefs if user_prefs is not None else UserPreferences()
        self._patient_predicate: PatientPredicate = show_all
        self._appointment_predicate: AppointmentPredicate = show_all
        self._medical_history_predicate: MedicalHistoryPredicate = show_all
        self._active_nric: str | None = None

    # User preferences

    @property
    def gui_settings(self) -> GuiSettings:
        return self.user_prefs.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self.user_prefs.set_gui_settings(gui_settings)

    @property
    def clinic_book_file_path(self) -> Path:
        return self.user_prefs.clinic_book_file_path

    @clinic_book_file_path.setter
    def clinic_book_file_path(self, path: Path) -> None:
        self.user_prefs.set_clinic_book_file_path(path)

    # Patients

    def set_clinic_book(self, clinic_book: ClinicBook) -> None:
        """Replace all records, forgetting the active patient."""
        self.clinic_book = clinic_book
        self._active_nric = None

    def has_patient(self, patient: Patient) -> bool:
        return self.clinic_book.has_patient(patient)

    def add_patient(self, patient: Patient) -> None:
        """Add a patient and show the full patient list."""
        self.clinic_book.add_patient(patient)
        self.update_filtered_patient_list(show_all)

    def set_patient(self, target: Patient, edited: Patient) -> None:
        self.clinic_book.set_patient(target, edited)
        if self._active_nric == target.nric:
            self._active_nric = edited.nric

    def delete_patient(self, target: Patient) -> None:
        """Remove a patient together with all of its events."""
        self.clinic_book.remove_patient(target)
        if self._active_nric == target.nric:
            self._active_nric = None

    @property
    def filtered_patient_list(self) -> tuple[Patient, ...]:
        """Patients matching the current predicate, in insertion order."""
        return tuple(patient for patient in self.clinic_book.patients if self._patient_predicate(patient))

    def update_filtered_patient_list(self, predicate: PatientPredicate) -> None:
        self._patient_predicate = predicate

    # Active patient and event views

    @property
    def active_patient(self) -> Patient | None:
        """The patient whose events are currently displayed, if any."""
        if self._active_nric is None:
            return None
        for patient in self.clinic_book.patients:
            if patient.nric == self._active_nric:
                return patient
        return None

    def set_active_patient(self, patient: Patient) -> None:
        """Make ``patient`` the active patient.

        Switching to a different patient clears the event predicates so the
        new patient's events are shown in full.
        """
        self._require_patient(patient)
        if self._active_nric != patient.nric:
            self._appointment_predicate = show_all
            self._medical_history_predicate = show_all
        self._active_nric = patient.nric

    def appointments_of(self, patient: Patient) -> tuple[AppointmentEvent, ...]:
        """The appointments of ``patient`` as they would be displayed.

        The appointment predicate only applies to the active patient; any other
        patient is shown in full once it becomes active.
        """
        predicate = self._appointment_predicate if patient.nric == self._active_nric else show_all
        return tuple(event for event in patient.appointments if predicate(event))

    def medical_history_of(self, patient: Patient) -> tuple[MedicalHistoryEvent, ...]:
        """The medical history of ``patient`` as it would be displayed."""
        predicate = self._medical_history_predicate if patient.nric == self._active_nric else show_all
        return tuple(event for event in patient.medical_history if predicate(event))

    @property
    def filtered_appointment_list(self) -> tuple[AppointmentEvent, ...]:
        patient = self.active_patient
        return self.appointments_of(patient) if patient else ()

    @property
    def filtered_medical_history_list(self) -> tuple[MedicalHistoryEvent, ...]:
        patient = self.active_patient
        return self.medical_history_of(patient) if patient else ()

    def update_filtered_appointment_list(self, predicate: AppointmentPredicate) -> None:
        """Narrow the active patient's displayed appointments; switching patient resets it."""
        self._appointment_predicate = predicate

    def update_filtered_medical_history_list(self, predicate: MedicalHistoryPredicate) -> None:
        """Narrow the active patient's displayed medical history; switching patient resets it."""
        self._medical_history_predicate = predicate

    # Event mutations, always through the owning patient

    def add_appointment_for_patient(self, patient: Patient, event: AppointmentEvent) -> None:
        self._require_patient(patient)
        patient.add_appointment(event)

    def set_appointment_for_patient(self, patient: Patient, target: AppointmentEvent, edited: AppointmentEvent) -> None:
        self._require_patient(patient)
        patient.set_appointment(target, edited)

    def delete_appointment_for_patient(self, patient: Patient, event: AppointmentEvent) -> None:
        self._require_patient(patient)
        patient.remove_appointment(event)

    def add_medical_history_event_for_patient(self, patient: Patient, event: MedicalHistoryEvent) -> None:
        self._require_patient(patient)
        patient.add_medical_history_event(event)

    def set_medical_history_event_for_patient(
        self, patient: Patient, target: MedicalHistoryEvent, edited: MedicalHistoryEvent
    ) -> None:
        self._require_patient(patient)
        patient.set_medical_history_event(target, edited)

    def delete_medical_history_event_for_patient(self, patient: Patient, event: MedicalHistoryEvent) -> None:
        self._require_patient(patient)
        patient.remove_medical_history_event(event)

    def _require_patient(self, patient: Patient) -> None:
        if not any(existing is patient for existing in self.clinic_book.patients):
            raise PatientNotFoundError()
