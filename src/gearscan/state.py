"""Column/row cursor and token boundary detection."""

from __future__ import annotations

from gearscan.errors import ScanError
from gearscan.tokens import Kind, Position, Token


class TokenBuilder:
    """Accumulate the digits of a number that is still being read."""

    def __init__(self, column: int, kind: Kind) -> None:
        self.first = column
        self.start = max(0, column - 1)
        self.kind = kind
        self._digits: list[str] = []

    def add(self, ch: str) -> None:
        self._digits.append(ch)

    @property
    def text(self) -> str:
        return "".join(self._digits)

    def build(self, end: int) -> Token:
        """Return the closed token; raises ValueError if the digits do not parse."""
        return Token(self.start, end, int(self.text), self.kind)


class ScanState:
    """Track the cursor within the current row and the number being read.

    ``column`` is the index of the character currently being processed; it is
    -1 before the first ``step()`` of a row.
    """

    def __init__(self) -> None:
        self.row = -1
        self.column = -1
        self.last_kind = Kind.EMPTY
        self._builder: TokenBuilder | None = None
        self._text: list[str] = []
        self.reset()

    @property
    def line(self) -> str:
        """Text of the current row read so far."""
        return "".join(self._text)

    def step(self, ch: str) -> None:
        self.column += 1
        self._text.append(ch)

    def digit(self, ch: str) -> None:
        if self._builder is None:
            left = self.last_kind if self.last_kind.is_symbol else Kind.DIGIT
            self._builder = TokenBuilder(self.column, left)
        self._builder.add(ch)
        self.last_kind = Kind.DIGIT

    def symbol(self, kind: Kind) -> Token | None:
        self.last_kind = kind
        if self._builder is None:
            return None
        token = self._close()
        # A symbol directly after the digits is adjacent on the right
        return token.with_kind(token.kind.lub(kind))

    def empty(self) -> Token | None:
        self.last_kind = Kind.EMPTY
        if self._builder is None:
            return None
        return self._close()

    def reset(self) -> None:
        self._builder = None
        self.last_kind = Kind.EMPTY
        self.column = -1
        self._text = []
        self.row += 1

    def _close(self) -> Token:
        builder = self._builder
        assert builder is not None
        self._builder = None
        try:
            return builder.build(self.column)
        except ValueError:
            raise ScanError(
                f"malformed number {builder.text!r}",
                Position(self.row + 1, builder.first + 1),
                self.line,
                len(builder.text),
            ) from None
