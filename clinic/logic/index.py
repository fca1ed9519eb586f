"""Positions in a displayed list."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """A position in a displayed list, stored zero-based and shown one-based."""

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError("Index must not be negative")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
