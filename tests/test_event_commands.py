"""Tests for appointment and medical history commands."""

from datetime import date, time

import pytest

from clinic.exceptions import CommandError
from clinic.logic.commands import (
    AddAppointmentCommand,
    AddMedicalHistoryEventCommand,
    DeleteAppointmentCommand,
    DeleteMedicalHistoryEventCommand,
    EditAppointmentCommand,
    EditAppointmentDescriptor,
    EditMedicalHistoryEventCommand,
    EditMedicalHistoryEventDescriptor,
    FindCommand,
    ListAppointmentsCommand,
    ListMedicalHistoryEventsCommand,
    NameContainsKeywordsPredicate,
)
from clinic.logic.index import Index
from clinic.logic.messages import (
    MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX,
    MESSAGE_INVALID_MEDICAL_HISTORY_EVENT_DISPLAYED_INDEX,
    MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX,
)
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent

FIRST = Index.from_one_based(1)
SECOND = Index.from_one_based(2)
THIRD = Index.from_one_based(3)


class TestAddAppointmentCommand:
    """Tests for adding appointments."""

    def test_add_appointment(self, model, carl):
        result = AddAppointmentCommand(THIRD, date(2024, 3, 1), time(15, 0)).execute(model)

        assert carl.appointments == [AppointmentEvent(date=date(2024, 3, 1), time=time(15, 0))]
        assert result.feedback_to_user == "New appointment added for Carl Kurz: Date: 2024-03-01; Time: 15:00"

    def test_add_appointment_makes_patient_active(self, model, carl):
        """Test that the addressed patient's events become the displayed ones."""
        AddAppointmentCommand(THIRD, date(2024, 3, 1)).execute(model)

        assert model.active_patient is carl
        assert model.filtered_appointment_list == (AppointmentEvent(date=date(2024, 3, 1), time=time(0, 0)),)

    def test_add_appointment_appends(self, model, benson):
        AddAppointmentCommand(SECOND, date(2024, 1, 1), time(8, 0)).execute(model)
        assert benson.appointments[-1].date == date(2024, 1, 1)
        assert len(benson.appointments) == 3

    def test_add_appointment_invalid_patient(self, model):
        """Test that a bad patient index leaves every patient untouched."""
        before = [list(patient.appointments) for patient in model.clinic_book.patients]

        with pytest.raises(CommandError, match=MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX):
            AddAppointmentCommand(Index.from_one_based(4), date(2024, 1, 1)).execute(model)

        assert [patient.appointments for patient in model.clinic_book.patients] == before
        assert model.active_patient is None

    def test_add_appointment_addresses_filtered_list(self, model, carl):
        FindCommand(NameContainsKeywordsPredicate(("Kurz",))).execute(model)
        AddAppointmentCommand(FIRST, date(2024, 1, 1)).execute(model)
        assert len(carl.appointments) == 1


class TestListAppointmentsCommand:
    """Tests for listing appointments."""

    def test_list_appointments(self, model, benson):
        result = ListAppointmentsCommand(SECOND).execute(model)

        assert result.feedback_to_user == "Listed 2 appointments for Benson Meier"
        assert model.active_patient is benson
        assert model.filtered_appointment_list == tuple(benson.appointments)

    def test_list_appointments_of_patient_without_any(self, model):
        result = ListAppointmentsCommand(THIRD).execute(model)
        assert result.feedback_to_user == "Listed 0 appointments for Carl Kurz"
        assert model.filtered_appointment_list == ()

    def test_switching_patient_replaces_displayed_events(self, model, alice):
        ListAppointmentsCommand(SECOND).execute(model)
        ListAppointmentsCommand(FIRST).execute(model)

        assert model.active_patient is alice
        assert model.filtered_appointment_list == tuple(alice.appointments)
        assert model.filtered_medical_history_list == tuple(alice.medical_history)


class TestEditAppointmentCommand:
    """Tests for editing appointments."""

    def test_edit_appointment_time(self, model, benson):
        result = EditAppointmentCommand(SECOND, SECOND, EditAppointmentDescriptor(time=time(11, 0))).execute(model)

        assert benson.appointments[1] == AppointmentEvent(date=date(2024, 2, 8), time=time(11, 0))
        assert benson.appointments[0].time == time(10, 0)
        assert result.feedback_to_user == "Edited appointment for Benson Meier: Date: 2024-02-08; Time: 11:00"

    def test_edit_appointment_keeps_handle(self, model, benson):
        """Test that the edited event is still owned by the patient."""
        original = benson.appointments[0]
        EditAppointmentCommand(FIRST, SECOND, EditAppointmentDescriptor(date=date(2025, 1, 1))).execute(model)
        assert benson.appointments[0].handle == original.handle

    def test_edit_appointment_invalid_event_index(self, model, carl):
        with pytest.raises(CommandError, match=MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX):
            EditAppointmentCommand(FIRST, THIRD, EditAppointmentDescriptor(time=time(9, 0))).execute(model)
        assert model.active_patient is None

    def test_edit_appointment_invalid_patient_index(self, model):
        with pytest.raises(CommandError, match=MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX):
            EditAppointmentCommand(FIRST, Index.from_one_based(9), EditAppointmentDescriptor(time=time(9, 0))).execute(
                model
            )


class TestDeleteAppointmentCommand:
    """Tests for deleting appointments."""

    def test_delete_appointment(self, model, benson):
        result = DeleteAppointmentCommand(FIRST, SECOND).execute(model)

        assert benson.appointments == [AppointmentEvent(date=date(2024, 2, 8), time=time(10, 30))]
        assert result.feedback_to_user == "Deleted appointment for Benson Meier: Date: 2024-02-01; Time: 10:00"
        assert model.active_patient is benson

    def test_delete_appointment_of_other_patient_index(self, model, alice, benson):
        """Test that an event index is resolved against the addressed patient only."""
        with pytest.raises(CommandError, match=MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX):
            DeleteAppointmentCommand(SECOND, FIRST).execute(model)

        assert len(alice.appointments) == 1
        assert len(benson.appointments) == 2

    def test_delete_uses_displayed_appointments(self, model, benson):
        """Test that the event index addresses the active patient's filtered appointments."""
        ListAppointmentsCommand(SECOND).execute(model)
        model.update_filtered_appointment_list(lambda event: event.time == time(10, 30))

        DeleteAppointmentCommand(FIRST, SECOND).execute(model)
        assert benson.appointments == [AppointmentEvent(date=date(2024, 2, 1), time=time(10, 0))]


class TestMedicalHistoryCommands:
    """Tests for the medical history commands."""

    def test_add_medical_history_event(self, model, carl):
        result = AddMedicalHistoryEventCommand(THIRD, date(2023, 10, 9), "Fever", "Paracetamol").execute(model)

        assert carl.medical_history == [
            MedicalHistoryEvent(date=date(2023, 10, 9), medical_condition="Fever", treatment="Paracetamol")
        ]
        assert result.feedback_to_user == (
            "New medical history event added for Carl Kurz: "
            "Date: 2023-10-09; Medical Condition: Fever; Treatment: Paracetamol"
        )
        assert model.active_patient is carl

    def test_add_medical_history_event_invalid_patient(self, empty_model):
        with pytest.raises(CommandError, match=MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX):
            AddMedicalHistoryEventCommand(FIRST, date(2023, 10, 9), "Fever", "Rest").execute(empty_model)

    def test_list_medical_history_events(self, model, alice):
        result = ListMedicalHistoryEventsCommand(FIRST).execute(model)
        assert result.feedback_to_user == "Listed 1 medical history events for Alice Pauline"
        assert model.filtered_medical_history_list == tuple(alice.medical_history)

    def test_edit_medical_history_event(self, model, alice):
        descriptor = EditMedicalHistoryEventDescriptor(treatment="Antivirals")
        result = EditMedicalHistoryEventCommand(FIRST, FIRST, descriptor).execute(model)

        assert alice.medical_history[0].treatment == "Antivirals"
        assert alice.medical_history[0].medical_condition == "Flu"
        assert result.feedback_to_user.startswith("Edited medical history event for Alice Pauline")

    def test_edit_medical_history_event_invalid_index(self, model):
        with pytest.raises(CommandError, match=MESSAGE_INVALID_MEDICAL_HISTORY_EVENT_DISPLAYED_INDEX):
            EditMedicalHistoryEventCommand(SECOND, FIRST, EditMedicalHistoryEventDescriptor(treatment="x")).execute(
                model
            )

    def test_delete_medical_history_event(self, model, alice):
        result = DeleteMedicalHistoryEventCommand(FIRST, FIRST).execute(model)

        assert alice.medical_history == []
        assert result.feedback_to_user == (
            "Deleted medical history event for Alice Pauline: Date: 2023-05-01; Medical Condition: Flu; Treatment: Rest"
        )

    def test_delete_medical_history_event_of_patient_without_any(self, model):
        with pytest.raises(CommandError, match=MESSAGE_INVALID_MEDICAL_HISTORY_EVENT_DISPLAYED_INDEX):
            DeleteMedicalHistoryEventCommand(FIRST, SECOND).execute(model)
