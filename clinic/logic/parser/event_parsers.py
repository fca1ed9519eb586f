"""Parsers for the appointment and medical history commands.

Commands that address an existing event take the event index as the
preamble and the owning patient's index from ``pi/``. Commands that only
address a patient accept the patient index either way.
"""

from clinic.exceptions import ParseError
from clinic.logic.commands.appointment import (
    DEFAULT_APPOINTMENT_TIME,
    AddAppointmentCommand,
    DeleteAppointmentCommand,
    EditAppointmentCommand,
    EditAppointmentDescriptor,
    ListAppointmentsCommand,
)
from clinic.logic.commands.medical_history import (
    AddMedicalHistoryEventCommand,
    DeleteMedicalHistoryEventCommand,
    EditMedicalHistoryEventCommand,
    EditMedicalHistoryEventDescriptor,
    ListMedicalHistoryEventsCommand,
)
from clinic.logic.index import Index
from clinic.logic.messages import invalid_format
from clinic.logic.parser.common import parse_field, parse_optional_field, require_prefixes, verify_single_valued
from clinic.logic.parser.fields import (
    parse_date,
    parse_index,
    parse_medical_condition,
    parse_time,
    parse_treatment,
)
from clinic.logic.parser.syntax import (
    PREFIX_DATE,
    PREFIX_MEDICAL_CONDITION,
    PREFIX_PATIENT_INDEX,
    PREFIX_TIME,
    PREFIX_TREATMENT,
)
from clinic.logic.parser.tokenizer import ArgumentMultimap, tokenize

APPOINTMENT_PREFIXES = (PREFIX_PATIENT_INDEX, PREFIX_DATE, PREFIX_TIME)
MEDICAL_HISTORY_PREFIXES = (PREFIX_PATIENT_INDEX, PREFIX_DATE, PREFIX_MEDICAL_CONDITION, PREFIX_TREATMENT)


def _patient_index(multimap: ArgumentMultimap, usage: str) -> Index:
    """Read the patient index from ``pi/`` or, failing that, from the preamble.

    When both are given they must name the same patient.
    """
    prefixed = multimap.get_value(PREFIX_PATIENT_INDEX)
    if prefixed is None:
        if not multimap.preamble:
            raise ParseError(invalid_format(usage))
        return parse_field(parse_index, multimap.preamble, usage)

    index = parse_field(parse_index, prefixed, usage)
    if multimap.preamble and parse_field(parse_index, multimap.preamble, usage) != index:
        raise ParseError(invalid_format(usage))
    return index


def _event_and_patient_index(multimap: ArgumentMultimap, usage: str) -> tuple[Index, Index]:
    if not multimap.preamble:
        raise ParseError(invalid_format(usage))
    event_index = parse_field(parse_index, multimap.preamble, usage)

    require_prefixes(multimap, usage, PREFIX_PATIENT_INDEX)
    patient_index = parse_field(parse_index, multimap.get_value(PREFIX_PATIENT_INDEX), usage)
    return event_index, patient_index


# Appointments


def parse_add_appointment_command(args: str) -> AddAppointmentCommand:
    usage = AddAppointmentCommand.MESSAGE_USAGE
    multimap = tokenize(args, *APPOINTMENT_PREFIXES)

    verify_single_valued(args, *APPOINTMENT_PREFIXES)
    require_prefixes(multimap, usage, PREFIX_DATE)
    patient_index = _patient_index(multimap, usage)

    appointment_time = parse_optional_field(parse_time, multimap.get_value(PREFIX_TIME), usage)
    return AddAppointmentCommand(
        patient_index=patient_index,
        date=parse_field(parse_date, multimap.get_value(PREFIX_DATE), usage),
        time=appointment_time if appointment_time is not None else DEFAULT_APPOINTMENT_TIME,
    )


def parse_list_appointments_command(args: str) -> ListAppointmentsCommand:
    usage = ListAppointmentsCommand.MESSAGE_USAGE
    multimap = tokenize(args, PREFIX_PATIENT_INDEX)

    verify_single_valued(args, PREFIX_PATIENT_INDEX)
    return ListAppointmentsCommand(_patient_index(multimap, usage))


def parse_edit_appointment_command(args: str) -> EditAppointmentCommand:
    usage = EditAppointmentCommand.MESSAGE_USAGE
    multimap = tokenize(args, *APPOINTMENT_PREFIXES)

    verify_single_valued(args, *APPOINTMENT_PREFIXES)
    event_index, patient_index = _event_and_patient_index(multimap, usage)

    descriptor = EditAppointmentDescriptor(
        date=parse_optional_field(parse_date, multimap.get_value(PREFIX_DATE), usage),
        time=parse_optional_field(parse_time, multimap.get_value(PREFIX_TIME), usage),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditAppointmentCommand.MESSAGE_NOT_EDITED)

    return EditAppointmentCommand(event_index, patient_index, descriptor)


def parse_delete_appointment_command(args: str) -> DeleteAppointmentCommand:
    usage = DeleteAppointmentCommand.MESSAGE_USAGE
    multimap = tokenize(args, PREFIX_PATIENT_INDEX)

    verify_single_valued(args, PREFIX_PATIENT_INDEX)
    event_index, patient_index = _event_and_patient_index(multimap, usage)
    return DeleteAppointmentCommand(event_index, patient_index)


# Medical history


def parse_add_medical_history_event_command(args: str) -> AddMedicalHistoryEventCommand:
    usage = AddMedicalHistoryEventCommand.MESSAGE_USAGE
    multimap = tokenize(args, *MEDICAL_HISTORY_PREFIXES)

    verify_single_valued(args, *MEDICAL_HISTORY_PREFIXES)
    require_prefixes(multimap, usage, PREFIX_DATE, PREFIX_MEDICAL_CONDITION, PREFIX_TREATMENT)
    patient_index = _patient_index(multimap, usage)

    return AddMedicalHistoryEventCommand(
        patient_index=patient_index,
        date=parse_field(parse_date, multimap.get_value(PREFIX_DATE), usage),
        medical_condition=parse_field(parse_medical_condition, multimap.get_value(PREFIX_MEDICAL_CONDITION), usage),
        treatment=parse_field(parse_treatment, multimap.get_value(PREFIX_TREATMENT), usage),
    )


def parse_list_medical_history_events_command(args: str) -> ListMedicalHistoryEventsCommand:
    usage = ListMedicalHistoryEventsCommand.MESSAGE_USAGE
    multimap = tokenize(args, PREFIX_PATIENT_INDEX)

    verify_single_valued(args, PREFIX_PATIENT_INDEX)
    return ListMedicalHistoryEventsCommand(_patient_index(multimap, usage))


def parse_edit_medical_history_event_command(args: str) -> EditMedicalHistoryEventCommand:
    usage = EditMedicalHistoryEventCommand.MESSAGE_USAGE
    multimap = tokenize(args, *MEDICAL_HISTORY_PREFIXES)

    verify_single_valued(args, *MEDICAL_HISTORY_PREFIXES)
    event_index, patient_index = _event_and_patient_index(multimap, usage)

    descriptor = EditMedicalHistoryEventDescriptor(
        date=parse_optional_field(parse_date, multimap.get_value(PREFIX_DATE), usage),
        medical_condition=parse_optional_field(
            parse_medical_condition, multimap.get_value(PREFIX_MEDICAL_CONDITION), usage
        ),
        treatment=parse_optional_field(parse_treatment, multimap.get_value(PREFIX_TREATMENT), usage),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditMedicalHistoryEventCommand.MESSAGE_NOT_EDITED)

    return EditMedicalHistoryEventCommand(event_index, patient_index, descriptor)


def parse_delete_medical_history_event_command(args: str) -> DeleteMedicalHistoryEventCommand:
    usage = DeleteMedicalHistoryEventCommand.MESSAGE_USAGE
    multimap = tokenize(args, PREFIX_PATIENT_INDEX)

    verify_single_valued(args, PREFIX_PATIENT_INDEX)
    event_index, patient_index = _event_and_patient_index(multimap, usage)
    return DeleteMedicalHistoryEventCommand(event_index, patient_index)
