"""Logic facade: runs command lines against the model."""

import logging
from pathlib import Path

from clinic.exceptions import CommandError, ParseError
from clinic.logic.commands import CommandResult
from clinic.logic.parser.clinic_parser import ClinicBookParser
from clinic.models.clinic_book import ClinicBook
from clinic.models.events import AppointmentEvent, MedicalHistoryEvent
from clinic.models.model import ModelManager
from clinic.models.patient import Patient
from clinic.models.user_prefs import GuiSettings
from clinic.storage import ClinicStorage
from clinic.utils.logging import get_logger

FILE_OPS_ERROR_FORMAT = "Could not save data to file {}: {}"


class ClinicLogic:
    """Entry point for the display layer.

    Parses and executes one command line at a time, then saves the clinic
    book if a storage is configured. Everything the display layer reads
    comes from here.
    """

    def __init__(
        self,
        model: ModelManager,
        storage: ClinicStorage | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the facade.

        Args:
            model: The model commands execute against
            storage: Where to save the clinic book after each command, if anywhere
            logger: Logger for diagnostics, defaults to this module's logger
        """
        self.model = model
        self.storage = storage
        self.logger = logger if logger is not None else get_logger(__name__)
        self.parser = ClinicBookParser(logger=self.logger)

    def execute(self, command_text: str) -> CommandResult:
        """Execute a command line.

        Args:
            command_text: The command as entered by the user

        Returns:
            The result of the command

        Raises:
            ParseError: If the command line is malformed
            CommandError: If the command cannot be executed or its result cannot be saved
        """
        self.logger.info(f"----------------[USER COMMAND][{command_text}]")

        try:
            command = self.parser.parse_command(command_text)
            result = command.execute(self.model)
        except (ParseError, CommandError) as e:
            self.logger.warning(f"Command failed: {e}")
            raise

        if self.storage is not None:
            try:
                self.storage.save_clinic_book(self.model.clinic_book)
            except OSError as e:
                self.logger.error(f"Failed to save clinic book: {e}")
                raise CommandError(FILE_OPS_ERROR_FORMAT.format(self.storage.clinic_book_file_path, e)) from e

        return result

    @property
    def clinic_book(self) -> ClinicBook:
        return self.model.clinic_book

    @property
    def filtered_patient_list(self) -> tuple[Patient, ...]:
        return self.model.filtered_patient_list

    @property
    def active_patient(self) -> Patient | None:
        return self.model.active_patient

    @property
    def filtered_appointment_list(self) -> tuple[AppointmentEvent, ...]:
        return self.model.filtered_appointment_list

    @property
    def filtered_medical_history_list(self) -> tuple[MedicalHistoryEvent, ...]:
        return self.model.filtered_medical_history_list

    @property
    def clinic_book_file_path(self) -> Path:
        return self.model.clinic_book_file_path

    @property
    def gui_settings(self) -> GuiSettings:
        return self.model.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self.model.gui_settings = gui_settings
