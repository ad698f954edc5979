"""Error types with formatted source context."""

from __future__ import annotations

from gearscan.tokens import Position


class ScanError(Exception):
    """Raised on the first unusable number, with position and row context.

    ``source_line`` is the row as read so far; the scanner never holds more
    than the current row of text.
    """

    def __init__(
        self,
        message: str,
        position: Position,
        source_line: str,
        length: int = 1,
    ) -> None:
        self.message = message
        self.position = position
        self.source_line = source_line
        self.length = length
        super().__init__(self.format())

    def format(self, filename: str = "input.txt") -> str:
        source_line = self.source_line.rstrip("\n").rstrip("\r")
        col = self.position.column

        # Underline the digit run, at least 1 char
        underline_len = max(1, self.length)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
