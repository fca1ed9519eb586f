"""Converters from raw argument text to validated field values.

Each parser trims its input and raises ParseError carrying the field's
constraint message when the value is invalid.
"""

import re
from collections.abc import Iterable
from datetime import date, time
from typing import Any

from pydantic import TypeAdapter, ValidationError

from clinic.exceptions import ParseError
from clinic.logic.index import Index
from clinic.models.fields import (
    Address,
    Email,
    EventDate,
    EventTime,
    MedicalCondition,
    Name,
    Nric,
    Phone,
    Tag,
    Treatment,
    validation_message,
)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_INDEX_PATTERN = re.compile(r"^[0-9]+$")

_NAME = TypeAdapter(Name)
_NRIC = TypeAdapter(Nric)
_PHONE = TypeAdapter(Phone)
_EMAIL = TypeAdapter(Email)
_ADDRESS = TypeAdapter(Address)
_TAG = TypeAdapter(Tag)
_DATE = TypeAdapter(EventDate)
_TIME = TypeAdapter(EventTime)
_MEDICAL_CONDITION = TypeAdapter(MedicalCondition)
_TREATMENT = TypeAdapter(Treatment)


def _validate(adapter: TypeAdapter, raw: str) -> Any:
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        raise ParseError(validation_message(e)) from e


def parse_index(raw: str) -> Index:
    """Parse a one-based index as typed by the user.

    Raises:
        ParseError: If the text is not a non-zero unsigned integer
    """
    text = raw.strip()
    if not _INDEX_PATTERN.match(text) or int(text) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(text))


def parse_name(raw: str) -> str:
    return _validate(_NAME, raw)


def parse_nric(raw: str) -> str:
    return _validate(_NRIC, raw)


def parse_phone(raw: str) -> str:
    return _validate(_PHONE, raw)


def parse_email(raw: str) -> str:
    return _validate(_EMAIL, raw)


def parse_address(raw: str) -> str:
    return _validate(_ADDRESS, raw)


def parse_tag(raw: str) -> str:
    return _validate(_TAG, raw)


def parse_tags(raws: Iterable[str]) -> frozenset[str]:
    """Parse every tag value; repeated tags collapse into one."""
    return frozenset(parse_tag(raw) for raw in raws)


def parse_date(raw: str) -> date:
    return _validate(_DATE, raw)


def parse_time(raw: str) -> time:
    return _validate(_TIME, raw)


def parse_medical_condition(raw: str) -> str:
    return _validate(_MEDICAL_CONDITION, raw)


def parse_treatment(raw: str) -> str:
    return _validate(_TREATMENT, raw)
