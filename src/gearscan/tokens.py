"""Cell kinds, number tokens, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import total_ordering


@total_ordering
class Kind(Enum):
    """Adjacency evidence for a grid cell, ordered from weakest to strongest."""

    EMPTY = 0  # . or whitespace
    DIGIT = 1  # part of a number, no symbol seen yet
    SYMBOL = 2  # any symbol other than *
    STAR = 3  # the gear symbol *

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Kind):
            return NotImplemented
        return self.value < other.value

    def lub(self, other: Kind) -> Kind:
        """Return the least upper bound (the stronger) of two kinds."""
        return self if self >= other else other

    @property
    def is_symbol(self) -> bool:
        return self >= Kind.SYMBOL


@dataclass(frozen=True, slots=True)
class Position:
    """Grid position, 1-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Token:
    """A closed number with its adjacency span.

    ``start`` and ``end`` are inclusive columns: one left of the first digit
    (clamped at 0) and one right of the last digit.
    """

    start: int
    end: int
    value: int
    kind: Kind

    def with_kind(self, kind: Kind) -> Token:
        return replace(self, kind=kind)

    def spans(self, column: int) -> bool:
        """Return True if *column* lies within the token's adjacency span."""
        return self.start <= column <= self.end


GEAR = "*"
DOT = "."
NEWLINE = "\n"


def is_digit(ch: str) -> bool:
    """Return True if ch starts or continues a number."""
    return ch.isdigit()


def is_blank(ch: str) -> bool:
    """Return True if ch is an empty cell (``.`` or whitespace other than newline)."""
    return ch == DOT or (ch.isspace() and ch != NEWLINE)


def symbol_kind(ch: str) -> Kind:
    """Return the kind of a symbol character."""
    return Kind.STAR if ch == GEAR else Kind.SYMBOL
