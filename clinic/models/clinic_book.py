"""The clinic book: the aggregate root holding every patient."""

from collections.abc import Iterable

from clinic.exceptions import DuplicatePatientError, PatientNotFoundError
from clinic.models.patient import Patient


class ClinicBook:
    """Ordered collection of patients with unique NRICs.

    Events are reachable only through their owning patient, so removing a
    patient removes its appointments and medical history with it.
    """

    def __init__(self, patients: Iterable[Patient] = ()):
        """Initialize the clinic book, rejecting duplicate patients."""
        self._patients: list[Patient] = []
        self.set_patients(patients)

    @property
    def patients(self) -> tuple[Patient, ...]:
        """Read-only view of all patients in insertion order."""
        return tuple(self._patients)

    def set_patients(self, patients: Iterable[Patient]) -> None:
        """Replace the whole patient list."""
        patients = list(patients)
        nrics = [patient.nric for patient in patients]
        if len(set(nrics)) != len(nrics):
            raise DuplicatePatientError()
        self._patients = patients

    def has_patient(self, patient: Patient) -> bool:
        """Check whether a patient with the same identity is already stored."""
        return any(existing.is_same_patient(patient) for existing in self._patients)

    def add_patient(self, patient: Patient) -> None:
        if self.has_patient(patient):
            raise DuplicatePatientError()
        self._patients.append(patient)

    def set_patient(self, target: Patient, edited: Patient) -> None:
        """Replace ``target`` with ``edited``, keeping its position.

        Raises:
            PatientNotFoundError: If ``target`` is not in the clinic book
            DuplicatePatientError: If ``edited`` clashes with another patient
        """
        position = self._position_of(target)
        if not target.is_same_patient(edited) and self.has_patient(edited):
            raise DuplicatePatientError()
        self._patients[position] = edited

    def remove_patient(self, patient: Patient) -> None:
        del self._patients[self._position_of(patient)]

    def _position_of(self, patient: Patient) -> int:
        for position, existing in enumerate(self._patients):
            if existing is patient:
                return position
        raise PatientNotFoundError()

    def __len__(self) -> int:
        return len(self._patients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClinicBook):
            return NotImplemented
        return self._patients == other._patients

    def __repr__(self) -> str:
        return f"ClinicBook(patients={self._patients!r})"
