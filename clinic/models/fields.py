"""Validated field types shared by the domain model, the command parsers and storage.

Each field is an ``Annotated`` type carrying its own validator, so the same
rules apply to text typed at the prompt and to records read back from disk.
"""

import re
from datetime import date, datetime, time
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer, ValidationError

NAME_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
NRIC_CONSTRAINTS = "NRIC should start with S, T, F, G or M, followed by 7 digits, and end with a letter"
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special characters, "
    "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
    "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
    "separated by periods.\n"
    "The domain name must:\n"
    "    - end with a domain label at least 2 characters long\n"
    "    - have each domain label start and end with alphanumeric characters\n"
    "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags can take any values, and it should not be blank"
MEDICAL_CONDITION_CONSTRAINTS = "Medical conditions can take any values, and it should not be blank"
TREATMENT_CONSTRAINTS = "Treatments can take any values, and it should not be blank"
DATE_CONSTRAINTS = "Dates should be valid calendar dates in the format YYYY-MM-DD"
TIME_CONSTRAINTS = "Times should be valid 24-hour times in the format HH:MM"

NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
NRIC_PATTERN = re.compile(r"^[STFGM][0-9]{7}[A-Z]$")
PHONE_PATTERN = re.compile(r"^[0-9]{3,}$")
_LOCAL_PART = r"[A-Za-z0-9]+([+_.\-][A-Za-z0-9]+)*"
_DOMAIN_LABEL = r"[A-Za-z0-9]+(-[A-Za-z0-9]+)*"
# The last domain label is at least 2 characters long.
EMAIL_PATTERN = re.compile(rf"^{_LOCAL_PART}@({_DOMAIN_LABEL}\.)*(?=[A-Za-z0-9-]{{2,}}$){_DOMAIN_LABEL}$")
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
TIME_PATTERN = re.compile(r"^[0-9]{2}:[0-9]{2}$")

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def _not_blank(message: str):
    def validate(value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(message)
        return value

    return validate


def validate_name(value: str) -> str:
    """Validate a patient name."""
    value = value.strip()
    if not NAME_PATTERN.match(value):
        raise ValueError(NAME_CONSTRAINTS)
    return value


def validate_nric(value: str) -> str:
    """Validate an NRIC and normalise it to upper case."""
    value = value.strip().upper()
    if not NRIC_PATTERN.match(value):
        raise ValueError(NRIC_CONSTRAINTS)
    return value


def validate_phone(value: str) -> str:
    value = value.strip()
    if not PHONE_PATTERN.match(value):
        raise ValueError(PHONE_CONSTRAINTS)
    return value


def validate_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError(EMAIL_CONSTRAINTS)
    return value


def to_date(value: Any) -> date:
    """Accept a ``date`` as-is or parse a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not DATE_PATTERN.match(text):
        raise ValueError(DATE_CONSTRAINTS)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(DATE_CONSTRAINTS) from e


def to_time(value: Any) -> time:
    """Accept a ``time`` as-is or parse an HH:MM string."""
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)

    text = str(value).strip()
    if not TIME_PATTERN.match(text):
        raise ValueError(TIME_CONSTRAINTS)
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except ValueError as e:
        raise ValueError(TIME_CONSTRAINTS) from e


Name = Annotated[str, AfterValidator(validate_name)]
Nric = Annotated[str, AfterValidator(validate_nric)]
Phone = Annotated[str, AfterValidator(validate_phone)]
Email = Annotated[str, AfterValidator(validate_email)]
Address = Annotated[str, AfterValidator(_not_blank(ADDRESS_CONSTRAINTS))]
Tag = Annotated[str, AfterValidator(_not_blank(TAG_CONSTRAINTS))]
MedicalCondition = Annotated[str, AfterValidator(_not_blank(MEDICAL_CONDITION_CONSTRAINTS))]
Treatment = Annotated[str, AfterValidator(_not_blank(TREATMENT_CONSTRAINTS))]
EventDate = Annotated[
    date,
    BeforeValidator(to_date),
    PlainSerializer(lambda d: d.strftime(DATE_FORMAT), return_type=str),
]
EventTime = Annotated[
    time,
    BeforeValidator(to_time),
    PlainSerializer(lambda t: t.strftime(TIME_FORMAT), return_type=str),
]


def validation_message(exc: ValidationError) -> str:
    """Return the user-facing message of the first error in ``exc``."""
    error = exc.errors()[0]
    cause = error.get("ctx", {}).get("error")
    return str(cause) if cause is not None else error["msg"]
