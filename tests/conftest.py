"""Shared fixtures for clinic book tests."""

from collections.abc import Callable
from datetime import date, time
from typing import Any

import pytest

from clinic.logic.logic import ClinicLogic
from clinic.models.clinic_book import ClinicBook
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent
from clinic.models.model import ModelManager
from clinic.models.patient import Patient

PatientFactory = Callable[..., Patient]


@pytest.fixture
def make_patient() -> PatientFactory:
    """Factory building a valid patient, with any field overridable."""

    def factory(**overrides: Any) -> Patient:
        fields: dict[str, Any] = {
            "name": "Alice Pauline",
            "nric": "S1234567A",
            "phone": "94351253",
            "email": "alice@example.com",
            "address": "123, Jurong West Ave 6, #08-111",
            "tags": frozenset({"friends"}),
        }
        fields.update(overrides)
        return Patient(**fields)

    return factory


@pytest.fixture
def alice(make_patient: PatientFactory) -> Patient:
    return make_patient(
        appointments=[AppointmentEvent(date=date(2024, 1, 1), time=time(9, 0))],
        medical_history=[MedicalHistoryEvent(date=date(2023, 5, 1), medical_condition="Flu", treatment="Rest")],
    )


@pytest.fixture
def benson(make_patient: PatientFactory) -> Patient:
    return make_patient(
        name="Benson Meier",
        nric="T0123456B",
        phone="98765432",
        email="johnd@example.com",
        address="311, Clementi Ave 2, #02-25",
        tags=frozenset({"owesMoney", "friends"}),
        appointments=[
            AppointmentEvent(date=date(2024, 2, 1), time=time(10, 0)),
            AppointmentEvent(date=date(2024, 2, 8), time=time(10, 30)),
        ],
    )


@pytest.fixture
def carl(make_patient: PatientFactory) -> Patient:
    return make_patient(
        name="Carl Kurz",
        nric="S7654321C",
        phone="95352563",
        email="heinz@example.com",
        address="wall street",
        tags=frozenset(),
    )


@pytest.fixture
def model(alice: Patient, benson: Patient, carl: Patient) -> ModelManager:
    """Model holding three typical patients."""
    return ModelManager(ClinicBook([alice, benson, carl]))


@pytest.fixture
def empty_model() -> ModelManager:
    return ModelManager()


@pytest.fixture
def logic(model: ModelManager) -> ClinicLogic:
    return ClinicLogic(model)


@pytest.fixture
def empty_logic(empty_model: ModelManager) -> ClinicLogic:
    return ClinicLogic(empty_model)
