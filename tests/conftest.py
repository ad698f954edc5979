"""Shared test fixtures and helpers."""

from __future__ import annotations

import textwrap

import pytest

from gearscan.scanner import ScanResult, Scanner, scan
from gearscan.state import ScanState
from gearscan.tokens import Kind, Token

CANONICAL = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def grid(source: str) -> str:
    """Dedent a triple-quoted grid and make sure it ends with a newline."""
    text = textwrap.dedent(source).lstrip("\n")
    return text if text.endswith("\n") else text + "\n"


@pytest.fixture
def scan_grid():
    """Return a helper that scans a dedented grid and returns the ScanResult."""

    def _scan(source: str) -> ScanResult:
        return scan(grid(source))

    return _scan


@pytest.fixture
def scan_ledger():
    """Return a helper that scans a dedented grid and returns the Scanner."""

    def _scan(source: str) -> Scanner:
        scanner = Scanner()
        scanner.feed(grid(source))
        scanner.finish()
        return scanner

    return _scan


def drive(state: ScanState, row: str) -> list[Token]:
    """Feed one row through a ScanState and collect the closed tokens."""
    tokens: list[Token] = []
    for ch in row:
        state.step(ch)
        if ch.isdigit():
            state.digit(ch)
            continue
        if ch in ".\n":
            token = state.empty()
        else:
            token = state.symbol(Kind.STAR if ch == "*" else Kind.SYMBOL)
        if token is not None:
            tokens.append(token)
    return tokens
