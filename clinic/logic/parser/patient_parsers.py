"""Parsers for the patient commands."""

from clinic.exceptions import ParseError
from clinic.logic.commands.patient import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditPatientDescriptor,
    FindCommand,
    NameContainsKeywordsPredicate,
)
from clinic.logic.messages import invalid_format
from clinic.logic.parser.common import parse_field, parse_optional_field, require_empty_preamble, require_prefixes
from clinic.logic.parser.fields import (
    parse_address,
    parse_email,
    parse_index,
    parse_name,
    parse_nric,
    parse_phone,
    parse_tags,
)
from clinic.logic.parser.syntax import (
    PATIENT_SINGLE_VALUED_PREFIXES,
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NRIC,
    PREFIX_PHONE,
    PREFIX_TAG,
)
from clinic.logic.parser.tokenizer import tokenize
from clinic.models.patient import Patient

PATIENT_PREFIXES = (*PATIENT_SINGLE_VALUED_PREFIXES, PREFIX_TAG)


def parse_add_command(args: str) -> AddCommand:
    """Parse the arguments of ``add``.

    Raises:
        ParseError: If a field is missing, duplicated or invalid
    """
    usage = AddCommand.MESSAGE_USAGE
    multimap = tokenize(args, *PATIENT_PREFIXES)

    multimap.verify_no_duplicate_prefixes_for(*PATIENT_SINGLE_VALUED_PREFIXES)
    require_prefixes(multimap, usage, *PATIENT_SINGLE_VALUED_PREFIXES)
    require_empty_preamble(multimap, usage)

    patient = Patient(
        name=parse_field(parse_name, multimap.get_value(PREFIX_NAME), usage),
        nric=parse_field(parse_nric, multimap.get_value(PREFIX_NRIC), usage),
        phone=parse_field(parse_phone, multimap.get_value(PREFIX_PHONE), usage),
        email=parse_field(parse_email, multimap.get_value(PREFIX_EMAIL), usage),
        address=parse_field(parse_address, multimap.get_value(PREFIX_ADDRESS), usage),
        tags=parse_field(parse_tags, multimap.get_all_values(PREFIX_TAG), usage),
    )
    return AddCommand(patient)


def _parse_tags_for_edit(values: list[str], usage: str) -> frozenset[str] | None:
    # A lone empty ``t/`` clears every tag.
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parse_field(parse_tags, values, usage)


def parse_edit_command(args: str) -> EditCommand:
    """Parse the arguments of ``edit``; only the supplied fields are changed."""
    usage = EditCommand.MESSAGE_USAGE
    multimap = tokenize(args, *PATIENT_PREFIXES)

    multimap.verify_no_duplicate_prefixes_for(*PATIENT_SINGLE_VALUED_PREFIXES)
    if not multimap.preamble:
        raise ParseError(invalid_format(usage))
    index = parse_field(parse_index, multimap.preamble, usage)

    descriptor = EditPatientDescriptor(
        name=parse_optional_field(parse_name, multimap.get_value(PREFIX_NAME), usage),
        nric=parse_optional_field(parse_nric, multimap.get_value(PREFIX_NRIC), usage),
        phone=parse_optional_field(parse_phone, multimap.get_value(PREFIX_PHONE), usage),
        email=parse_optional_field(parse_email, multimap.get_value(PREFIX_EMAIL), usage),
        address=parse_optional_field(parse_address, multimap.get_value(PREFIX_ADDRESS), usage),
        tags=_parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG), usage),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

    return EditCommand(index, descriptor)


def parse_delete_command(args: str) -> DeleteCommand:
    return DeleteCommand(parse_field(parse_index, args, DeleteCommand.MESSAGE_USAGE))


def parse_find_command(args: str) -> FindCommand:
    keywords = args.split()
    if not keywords:
        raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))
    return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))
