"""Commands understood by the clinic book."""

from typing import get_args

from clinic.logic.commands.appointment import (
    AddAppointmentCommand,
    DeleteAppointmentCommand,
    EditAppointmentCommand,
    EditAppointmentDescriptor,
    ListAppointmentsCommand,
)
from clinic.logic.commands.base import CommandResult
from clinic.logic.commands.general import ExitCommand, HelpCommand
from clinic.logic.commands.medical_history import (
    AddMedicalHistoryEventCommand,
    DeleteMedicalHistoryEventCommand,
    EditMedicalHistoryEventCommand,
    EditMedicalHistoryEventDescriptor,
    ListMedicalHistoryEventsCommand,
)
from clinic.logic.commands.patient import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPatientDescriptor,
    FindCommand,
    ListCommand,
    NameContainsKeywordsPredicate,
)

Command = (
    AddCommand
    | EditCommand
    | DeleteCommand
    | FindCommand
    | ListCommand
    | ClearCommand
    | ExitCommand
    | HelpCommand
    | AddAppointmentCommand
    | ListAppointmentsCommand
    | EditAppointmentCommand
    | DeleteAppointmentCommand
    | AddMedicalHistoryEventCommand
    | ListMedicalHistoryEventsCommand
    | EditMedicalHistoryEventCommand
    | DeleteMedicalHistoryEventCommand
)

ALL_COMMANDS: tuple[type[Command], ...] = get_args(Command)

__all__ = [
    "ALL_COMMANDS",
    "AddAppointmentCommand",
    "AddCommand",
    "AddMedicalHistoryEventCommand",
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteAppointmentCommand",
    "DeleteCommand",
    "DeleteMedicalHistoryEventCommand",
    "EditAppointmentCommand",
    "EditAppointmentDescriptor",
    "EditCommand",
    "EditMedicalHistoryEventCommand",
    "EditMedicalHistoryEventDescriptor",
    "EditPatientDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListAppointmentsCommand",
    "ListCommand",
    "ListMedicalHistoryEventsCommand",
    "NameContainsKeywordsPredicate",
]
