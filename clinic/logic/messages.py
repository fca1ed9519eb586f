"""User-facing messages shared across commands and parsers."""

from clinic.logic.parser.syntax import Prefix

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX = "The patient index provided is invalid"
MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX = "The appointment index provided is invalid"
MESSAGE_INVALID_MEDICAL_HISTORY_EVENT_DISPLAYED_INDEX = "The medical history event index provided is invalid"
MESSAGE_PATIENTS_LISTED_OVERVIEW = "{} patients listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


def invalid_format(usage: str) -> str:
    """Wrap a command's usage string in the invalid format message."""
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def duplicate_prefixes_message(*prefixes: Prefix) -> str:
    """Return the error message naming every duplicated prefix."""
    assert prefixes, "at least one duplicated prefix expected"
    return MESSAGE_DUPLICATE_FIELDS + " ".join(str(prefix) for prefix in prefixes)
