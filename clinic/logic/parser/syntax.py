"""Argument prefixes of the command line syntax."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """A token such as ``n/`` marking the start of a named argument."""

    token: str

    def __str__(self) -> str:
        return self.token


PREFIX_NAME = Prefix("n/")
PREFIX_NRIC = Prefix("ic/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_DATE = Prefix("d/")
PREFIX_TIME = Prefix("tm/")
PREFIX_MEDICAL_CONDITION = Prefix("mc/")
PREFIX_TREATMENT = Prefix("tr/")
PREFIX_PATIENT_INDEX = Prefix("pi/")

PATIENT_SINGLE_VALUED_PREFIXES = (PREFIX_NAME, PREFIX_NRIC, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
