"""Shared result type and index resolution for commands."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from clinic.exceptions import CommandError
from clinic.logic.index import Index
from clinic.logic.messages import MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX
from clinic.models.model import ModelManager
from clinic.models.patient import Patient

T = TypeVar("T")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of executing a command."""

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


def resolve_index(displayed: Sequence[T], index: Index, message: str) -> T:
    """Return the record shown at ``index``, or raise CommandError with ``message``."""
    if index.zero_based >= len(displayed):
        raise CommandError(message)
    return displayed[index.zero_based]


def resolve_patient(model: ModelManager, index: Index) -> Patient:
    """Return the patient shown at ``index`` in the filtered patient list."""
    return resolve_index(model.filtered_patient_list, index, MESSAGE_INVALID_PATIENT_DISPLAYED_INDEX)
