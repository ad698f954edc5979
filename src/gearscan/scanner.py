"""Single-pass scanner: part-number and gear-ratio sums over a character stream."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from gearscan.gears import GearLedger
from gearscan.rows import RowIndex
from gearscan.state import ScanState
from gearscan.tokens import NEWLINE, Kind, Token, is_blank, is_digit, symbol_kind


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Sum of part numbers and sum of gear ratios."""

    part_sum: int
    gear_ratio_sum: int

    def __str__(self) -> str:
        return f"({self.part_sum}, {self.gear_ratio_sum})"


class Scanner:
    """Consume a grid one character at a time.

    Only the current row and the one above it are kept. A number is added to
    the part sum as soon as a symbol is known to touch it: when it closes (symbol
    to its left, to its right, or on the row above) or later, when a symbol on
    the row below lands inside its span.
    """

    def __init__(self) -> None:
        self._state = ScanState()
        self._previous = RowIndex()
        self._current = RowIndex()
        self.gears = GearLedger()
        self.part_sum = 0

    def feed(self, chars: Iterable[str]) -> None:
        for ch in chars:
            self.feed_char(ch)

    def feed_char(self, ch: str) -> None:
        state = self._state
        state.step(ch)

        if ch == NEWLINE:
            self._resolve(state.empty())
            self._previous = self._current
            self._current = RowIndex()
            state.reset()
            return

        if is_blank(ch):
            self._resolve(state.empty())
            return

        if is_digit(ch):
            state.digit(ch)
            return

        self._symbol(state.column, symbol_kind(ch))

    def finish(self) -> ScanResult:
        # A number still open here had no trailing separator and is dropped
        return ScanResult(self.part_sum, self.gears.ratio_sum())

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _symbol(self, column: int, kind: Kind) -> None:
        self._current.add_symbol(column, kind)
        self._resolve(self._state.symbol(kind))

        row = self._state.row
        for token in self._previous.numbers_adjacent_to(column):
            if self._previous.claim(token):
                self.part_sum += token.value
            if kind is Kind.STAR:
                self.gears.register(column, row, token.value)

    def _resolve(self, token: Token | None) -> None:
        if token is None:
            return

        kind = token.kind.lub(self._previous.symbol_kind_in_range(token.start, token.end))
        counted = kind.is_symbol
        if counted:
            self.part_sum += token.value
        self._current.add_number(token, counted=counted)

        if kind is Kind.STAR:
            self._register_gears(token)

    def _register_gears(self, token: Token) -> None:
        row = self._state.row
        for column in self._previous.gears_in_range(token.start, token.end):
            self.gears.register(column, row - 1, token.value)
        for column in self._current.gears_in_range(token.start, token.end):
            self.gears.register(column, row, token.value)


def scan(chars: Iterable[str]) -> ScanResult:
    """Scan a newline-terminated grid and return both sums."""
    scanner = Scanner()
    scanner.feed(chars)
    return scanner.finish()
