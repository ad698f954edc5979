"""Per-row side table of symbol columns and closed numbers."""

from __future__ import annotations

from collections.abc import Iterator

from gearscan.tokens import Kind, Token


class RowIndex:
    """Symbols and numbers of a single row, queried by the row below it.

    Every closed number is kept, whether or not it has been counted yet, so a
    gear on the next row can still see it. ``claim()`` hands out each number
    to the part sum exactly once.
    """

    def __init__(self) -> None:
        self.symbols: dict[int, Kind] = {}
        self.numbers: list[Token] = []
        self._counted: set[Token] = set()

    def add_symbol(self, column: int, kind: Kind) -> None:
        self.symbols[column] = kind

    def add_number(self, token: Token, counted: bool = False) -> None:
        self.numbers.append(token)
        if counted:
            self._counted.add(token)

    def claim(self, token: Token) -> bool:
        """Mark *token* counted; return False if it already was."""
        if token in self._counted:
            return False
        self._counted.add(token)
        return True

    def symbol_kind_in_range(self, start: int, end: int) -> Kind:
        """Return the strongest symbol kind in columns ``start..end``, or EMPTY."""
        kind = Kind.EMPTY
        for column in range(start, end + 1):
            found = self.symbols.get(column)
            if found is not None:
                kind = kind.lub(found)
        return kind

    def gears_in_range(self, start: int, end: int) -> Iterator[int]:
        """Yield the columns of ``*`` symbols in ``start..end``, left to right."""
        for column in range(start, end + 1):
            if self.symbols.get(column) is Kind.STAR:
                yield column

    def numbers_adjacent_to(self, column: int) -> list[Token]:
        """Return every number whose adjacency span contains *column*."""
        return [n for n in self.numbers if n.spans(column)]
