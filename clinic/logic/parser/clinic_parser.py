"""Dispatcher from command words to command parsers."""

import logging
import re
from collections.abc import Callable

from clinic.exceptions import ParseError
from clinic.logic.commands import (
    AddAppointmentCommand,
    AddCommand,
    AddMedicalHistoryEventCommand,
    ClearCommand,
    Command,
    DeleteAppointmentCommand,
    DeleteCommand,
    DeleteMedicalHistoryEventCommand,
    EditAppointmentCommand,
    EditCommand,
    EditMedicalHistoryEventCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListAppointmentsCommand,
    ListCommand,
    ListMedicalHistoryEventsCommand,
)
from clinic.logic.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from clinic.logic.parser import event_parsers, patient_parsers
from clinic.utils.logging import get_logger

CommandParser = Callable[[str], Command]

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class ClinicBookParser:
    """Registry mapping each command word to the parser for its arguments."""

    def __init__(self, logger: logging.Logger | None = None):
        """Initialize the parser with the default set of commands."""
        self.logger = logger if logger is not None else get_logger(__name__)
        self._parsers: dict[str, CommandParser] = {}
        self._register_default_parsers()

    def _register_default_parsers(self) -> None:
        parsers: dict[str, CommandParser] = {
            AddCommand.COMMAND_WORD: patient_parsers.parse_add_command,
            EditCommand.COMMAND_WORD: patient_parsers.parse_edit_command,
            DeleteCommand.COMMAND_WORD: patient_parsers.parse_delete_command,
            FindCommand.COMMAND_WORD: patient_parsers.parse_find_command,
            ListCommand.COMMAND_WORD: lambda _args: ListCommand(),
            ClearCommand.COMMAND_WORD: lambda _args: ClearCommand(),
            ExitCommand.COMMAND_WORD: lambda _args: ExitCommand(),
            HelpCommand.COMMAND_WORD: lambda _args: HelpCommand(),
            AddAppointmentCommand.COMMAND_WORD: event_parsers.parse_add_appointment_command,
            ListAppointmentsCommand.COMMAND_WORD: event_parsers.parse_list_appointments_command,
            EditAppointmentCommand.COMMAND_WORD: event_parsers.parse_edit_appointment_command,
            DeleteAppointmentCommand.COMMAND_WORD: event_parsers.parse_delete_appointment_command,
            AddMedicalHistoryEventCommand.COMMAND_WORD: event_parsers.parse_add_medical_history_event_command,
            ListMedicalHistoryEventsCommand.COMMAND_WORD: event_parsers.parse_list_medical_history_events_command,
            EditMedicalHistoryEventCommand.COMMAND_WORD: event_parsers.parse_edit_medical_history_event_command,
            DeleteMedicalHistoryEventCommand.COMMAND_WORD: event_parsers.parse_delete_medical_history_event_command,
        }

        for command_word, parser in parsers.items():
            self.register_parser(command_word, parser)

    def register_parser(self, command_word: str, parser: CommandParser) -> None:
        """Register a parser for a command word."""
        self._parsers[command_word] = parser

    def get_command_words(self) -> list[str]:
        return list(self._parsers.keys())

    def has_command(self, command_word: str) -> bool:
        return command_word in self._parsers

    def parse_command(self, user_input: str) -> Command:
        """Parse a full command line into a command.

        Args:
            user_input: The command line as typed by the user

        Returns:
            The command to execute

        Raises:
            ParseError: If the command word is unknown or its arguments are invalid
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if not match:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        self.logger.debug(f"Command word: {command_word}; Arguments: {arguments}")

        parser = self._parsers.get(command_word)
        if parser is None:
            self.logger.debug(f"Unknown command word in input: {user_input}")
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)

        return parser(arguments)
