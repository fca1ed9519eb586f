"""Splits argument strings into a preamble and prefixed values."""

import re
from dataclasses import dataclass, field

from clinic.exceptions import ParseError
from clinic.logic.messages import duplicate_prefixes_message
from clinic.logic.parser.syntax import Prefix


@dataclass
class ArgumentMultimap:
    """Values of each prefix in order of occurrence, plus the preamble before the first prefix."""

    preamble: str = ""
    values: dict[Prefix, list[str]] = field(default_factory=dict)

    def put(self, prefix: Prefix, value: str) -> None:
        self.values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value of ``prefix``, or None if it never occurred."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self.values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return prefix in self.values

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Raise a ParseError naming every prefix in ``prefixes`` that occurred more than once."""
        duplicated = [prefix for prefix in prefixes if len(self.values.get(prefix, [])) > 1]
        if duplicated:
            raise ParseError(duplicate_prefixes_message(*duplicated))


def _prefix_pattern(prefix: Prefix) -> re.Pattern[str]:
    # A prefix counts at the start of the arguments or after whitespace.
    return re.compile(rf"(?:^|(?<=\s)){re.escape(prefix.token)}")


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args`` against the prefixes a command declares.

    Args:
        args: Argument text following the command word
        prefixes: Prefixes to recognise; anything else stays part of a value

    Returns:
        The preamble and the trimmed values of every prefix found
    """
    positions = sorted(
        ((match.start(), prefix) for prefix in prefixes for match in _prefix_pattern(prefix).finditer(args)),
        key=lambda position: position[0],
    )

    if not positions:
        return ArgumentMultimap(preamble=args.strip())

    multimap = ArgumentMultimap(preamble=args[: positions[0][0]].strip())
    ends = [start for start, _ in positions[1:]] + [len(args)]
    for (start, prefix), end in zip(positions, ends, strict=True):
        multimap.put(prefix, args[start + len(prefix.token) : end].strip())

    return multimap
