"""Exception hierarchy for the clinic record manager."""


class ClinicError(Exception):
    """Base class for all errors raised by the clinic record manager."""


class ParseError(ClinicError):
    """Raised when a command line is malformed or incomplete."""


class CommandError(ClinicError):
    """Raised when a well-formed command cannot be executed against the current records."""


class DataLoadingError(ClinicError):
    """Raised when a data, preference or config file exists but cannot be loaded."""


class DuplicatePatientError(ClinicError):
    """Raised when an operation would result in two patients with the same NRIC."""

    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate patients")


class PatientNotFoundError(ClinicError):
    """Raised when a patient expected in the clinic book is not there."""

    def __init__(self) -> None:
        super().__init__("Patient does not exist in the clinic book")


class EventNotFoundError(ClinicError):
    """Raised when an event is not owned by the patient it was looked up on."""

    def __init__(self) -> None:
        super().__init__("Event does not exist for this patient")
