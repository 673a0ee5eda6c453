"""
Cursor over an immutable JSONC document with incremental row/column tracking.

Row and column are 0-indexed internally and converted to 1-indexed only when
an error is reported.
"""

from typing import NamedTuple

from ._errors import CursorBoundsError
from ._errors import Position


class Mark(NamedTuple):
    """Snapshot of a cursor location, used to anchor error reports."""

    idx: Position
    row: int
    col: int


class Cursor:
    """
    Tracks the character currently under the parser.

    Forward steps are O(1). Stepping backward over a newline rescans the
    previous line to recover the column, which is fine because builders
    retreat at most once per value.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self.idx: Position = 0
        self.row = 0
        self.col = 0

    @property
    def current(self) -> str | None:
        """Returns the character under the cursor, or None past the end."""
        if self.idx < self.length:
            return self.text[self.idx]
        return None

    def peek(self, offset: int = 1) -> str | None:
        """Returns the character offset steps ahead without moving."""
        target = self.idx + offset
        if 0 <= target < self.length:
            return self.text[target]
        return None

    def mark(self) -> Mark:
        return Mark(self.idx, self.row, self.col)

    def advance(self, n: int = 1) -> None:
        """
        Moves forward n characters, keeping row and column in step.

        Landing on or beyond the end of the text is an error: every value
        routine expects its terminator to still be ahead.
        """
        if self.idx + n >= self.length:
            raise CursorBoundsError(
                self.text, self.idx, self.row + 1, self.col + 1
            )
        for _ in range(n):
            if self.text[self.idx] == "\n":
                self.row += 1
                self.col = 0
            else:
                self.col += 1
            self.idx += 1

    def retreat(self) -> None:
        """Moves back exactly one character."""
        if self.idx == 0:
            raise CursorBoundsError(
                self.text, self.idx, self.row + 1, self.col + 1
            )
        self.idx -= 1
        if self.text[self.idx] == "\n":
            self.row -= 1
            line_start = self.text.rfind("\n", 0, self.idx) + 1
            self.col = self.idx - line_start
        else:
            self.col -= 1
