"""Helpers shared by the command parsers."""

from collections.abc import Callable
from typing import TypeVar

from clinic.exceptions import ParseError
from clinic.logic.messages import invalid_format
from clinic.logic.parser.syntax import PATIENT_SINGLE_VALUED_PREFIXES, Prefix
from clinic.logic.parser.tokenizer import ArgumentMultimap, tokenize

S = TypeVar("S")
T = TypeVar("T")


def require_prefixes(multimap: ArgumentMultimap, usage: str, *prefixes: Prefix) -> None:
    """Raise the invalid format error unless every prefix in ``prefixes`` is present."""
    if not all(multimap.has(prefix) for prefix in prefixes):
        raise ParseError(invalid_format(usage))


def require_empty_preamble(multimap: ArgumentMultimap, usage: str) -> None:
    if multimap.preamble:
        raise ParseError(invalid_format(usage))


def parse_field(parser: Callable[[S], T], raw: S, usage: str) -> T:
    """Run a field parser, wrapping its failure in the command's invalid format error."""
    try:
        return parser(raw)
    except ParseError as e:
        raise ParseError(invalid_format(f"{e}\n{usage}")) from e


def parse_optional_field(parser: Callable[[str], T], raw: str | None, usage: str) -> T | None:
    if raw is None:
        return None
    return parse_field(parser, raw, usage)


def verify_single_valued(args: str, *prefixes: Prefix) -> None:
    """Reject repeats of ``prefixes`` and of the single-valued patient fields.

    Patient fields are checked even for commands that do not take them, so a
    repeated ``n/`` is reported as such instead of as part of another value.
    """
    checked = tuple(dict.fromkeys((*PATIENT_SINGLE_VALUED_PREFIXES, *prefixes)))
    tokenize(args, *checked).verify_no_duplicate_prefixes_for(*checked)
