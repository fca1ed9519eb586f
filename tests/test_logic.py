"""Tests for the logic facade."""

import logging
from dataclasses import replace
from unittest.mock import Mock

import pytest

from clinic.exceptions import CommandError, ParseError
from clinic.logic.commands import CommandResult
from clinic.logic.logic import ClinicLogic
from clinic.logic.messages import MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX, MESSAGE_UNKNOWN_COMMAND
from clinic.models.model import ModelManager
from clinic.models.user_prefs import GuiSettings
from clinic.storage import JsonClinicStorage

ADD_AMY = "add n/Amy Bee ic/S7777777Z p/11111111 e/amy@example.com a/Block 312, Amy Street 1 t/friends"


class TestExecute:
    """Tests for running command lines through the facade."""

    def test_add_increases_count(self, logic):
        result = logic.execute(ADD_AMY)

        assert isinstance(result, CommandResult)
        assert len(logic.clinic_book) == 4
        assert logic.filtered_patient_list[-1].name == "Amy Bee"

    def test_duplicate_add_leaves_store_unchanged(self, logic):
        logic.execute(ADD_AMY)
        before = logic.clinic_book.patients

        with pytest.raises(CommandError):
            logic.execute(ADD_AMY)
        assert logic.clinic_book.patients == before

    def test_unknown_command(self, logic):
        with pytest.raises(ParseError, match=MESSAGE_UNKNOWN_COMMAND):
            logic.execute("uicfhmowqewca")

    def test_delete_in_range_removes_patient_and_events(self, logic, alice):
        logic.execute("list-appt 1")
        logic.execute("delete 1")

        assert alice not in logic.clinic_book.patients
        assert logic.active_patient is None
        assert logic.filtered_appointment_list == ()
        assert logic.filtered_medical_history_list == ()

    def test_delete_out_of_range_changes_nothing(self, logic):
        with pytest.raises(CommandError, match=MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX):
            logic.execute("delete 4")
        assert len(logic.clinic_book) == 3

    def test_partial_edit_preserves_other_fields(self, logic, benson):
        logic.execute("edit 2 p/91234567")

        edited = logic.clinic_book.patients[1]
        assert edited == replace(benson, phone="91234567")

    def test_edit_with_same_values_is_equal(self, logic, carl):
        logic.execute(f"edit 3 n/{carl.name} p/{carl.phone}")
        assert logic.clinic_book.patients[2] == carl

    def test_find_then_list_restores_order(self, logic, alice, benson, carl):
        logic.execute("find Carl")
        assert logic.filtered_patient_list == (carl,)

        logic.execute("list")
        assert logic.filtered_patient_list == (alice, benson, carl)

    def test_add_then_delete_round_trip(self, logic):
        before = logic.clinic_book.patients
        logic.execute(ADD_AMY)
        logic.execute("delete 4")
        assert logic.clinic_book.patients == before

    def test_duplicate_name_prefix(self, empty_logic):
        """Test that a repeated n/ is reported by its prefix."""
        with pytest.raises(ParseError) as exc_info:
            empty_logic.execute(ADD_AMY + " n/Bob Choo")
        assert str(exc_info.value) == "Multiple values specified for the following single-valued field(s): n/"
        assert len(empty_logic.clinic_book) == 0

    def test_appointment_needs_an_existing_patient(self, empty_logic):
        """Test adding an appointment before and after the first patient exists."""
        with pytest.raises(CommandError) as exc_info:
            empty_logic.execute("add-appt 1 pi/1 d/2024-01-01")
        assert str(exc_info.value) == MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX

        empty_logic.execute(ADD_AMY)
        result = empty_logic.execute("add-appt 1 pi/1 d/2024-01-01")

        assert result.feedback_to_user == "New appointment added for Amy Bee: Date: 2024-01-01; Time: 00:00"
        assert len(empty_logic.clinic_book.patients[0].appointments) == 1
        assert len(empty_logic.filtered_appointment_list) == 1

    def test_failed_command_keeps_active_patient(self, logic, benson):
        logic.execute("list-appt 2")
        with pytest.raises(CommandError):
            logic.execute("list-appt 7")
        assert logic.active_patient is benson

    def test_help_and_exit_flags(self, logic):
        assert logic.execute("help").show_help
        assert logic.execute("exit").exit

    def test_injected_logger_receives_commands(self, model, caplog):
        logger = logging.getLogger("tests.clinic.logic")
        logger.setLevel(logging.DEBUG)
        logic = ClinicLogic(model, logger=logger)

        with caplog.at_level(logging.DEBUG, logger="tests.clinic.logic"):
            logic.execute("list")
            with pytest.raises(ParseError):
                logic.execute("nope")

        messages = [record.getMessage() for record in caplog.records if record.name == "tests.clinic.logic"]
        assert "----------------[USER COMMAND][list]" in messages
        assert any(message.startswith("Command failed") for message in messages)


class TestPersistence:
    """Tests for saving the clinic book after each command."""

    def test_saves_after_successful_command(self, model, tmp_path):
        storage = JsonClinicStorage(tmp_path / "data" / "clinicbook.json", tmp_path / "prefs.json")
        logic = ClinicLogic(model, storage)

        logic.execute(ADD_AMY)

        stored = storage.read_clinic_book()
        assert stored is not None
        assert len(stored) == 4
        assert stored.patients[-1].nric == "S7777777Z"

    def test_failed_command_is_not_saved(self, model):
        storage = Mock()
        logic = ClinicLogic(model, storage)

        with pytest.raises(ParseError):
            logic.execute("add n/Amy")
        storage.save_clinic_book.assert_not_called()

    def test_save_failure_becomes_command_error(self, model, tmp_path):
        """Test that an IO failure while saving is reported as a command error."""
        storage = Mock()
        storage.clinic_book_file_path = tmp_path / "clinicbook.json"
        storage.save_clinic_book.side_effect = OSError("disk full")
        logic = ClinicLogic(model, storage)

        with pytest.raises(CommandError) as exc_info:
            logic.execute("list")
        assert str(exc_info.value) == f"Could not save data to file {tmp_path / 'clinicbook.json'}: disk full"


class TestAccessors:
    """Tests for the read-only views exposed to the display layer."""

    def test_views_mirror_model(self, logic, model):
        assert logic.filtered_patient_list == model.filtered_patient_list
        assert logic.clinic_book is model.clinic_book
        assert logic.clinic_book_file_path == model.clinic_book_file_path

    def test_gui_settings_round_trip(self, empty_logic):
        settings = GuiSettings(window_width=1024, window_height=768, window_x=10, window_y=20)
        empty_logic.gui_settings = settings
        assert empty_logic.gui_settings == settings

    def test_default_logger(self):
        logic = ClinicLogic(ModelManager())
        assert logic.logger.name == "clinic.logic.logic"
