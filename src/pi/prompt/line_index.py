"""Line-start offset table for offset <-> (row, col) translation."""

from __future__ import annotations

import bisect
from dataclasses import dataclass


@dataclass(frozen=True)
class LineIndex:
    """Offsets of the first scalar value of every line.

    Strictly increasing, always starts with 0, and holds exactly one entry
    per line.
    """

    starts: tuple[int, ...]

    @classmethod
    def from_lines(cls, lines: list[str]) -> LineIndex:
        """Build the table from the result of ``text.split("\\n")``."""
        indexes = [0]
        pos = 0
        for line in lines:
            # +1 for the "\n" separator
            pos += len(line) + 1
            indexes.append(pos)

        # The last entry points one past the end of the text, not at a line.
        indexes.pop()
        return cls(starts=tuple(indexes))

    @classmethod
    def from_text(cls, text: str) -> LineIndex:
        return cls.from_lines(text.split("\n"))

    def __len__(self) -> int:
        return len(self.starts)

    def find(self, offset: int) -> tuple[int, int]:
        """Return ``(row, row_start)`` for the last row whose start is ``<= offset``.

        Offsets before the first line resolve to row 0.
        """
        row = max(bisect.bisect_right(self.starts, offset) - 1, 0)
        return row, self.starts[row]
