"""Immutable snapshot of the input buffer and every cursor/text query over it.

A new :class:`Document` is built for each edit; nothing here mutates.
Offsets are counted in Unicode scalar values. Word-boundary offsets are
indexes into :meth:`Document.text_before_cursor` (``find_start_*``) or
:meth:`Document.text_after_cursor` (``find_end_*``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from pi.prompt import word
from pi.prompt.line_index import LineIndex
from pi.prompt.utils import display_width


@dataclass(frozen=True, init=False)
class Document:
    """Buffer text plus cursor offset.

    ``cursor_offset`` defaults to the end of ``text``. ``last_key`` is the
    identifier of the key that produced this snapshot, as reported by the
    key-capture component (``None`` when unknown).
    """

    text: str
    cursor_offset: int
    last_key: str | None = field(compare=False)

    def __init__(
        self,
        text: str = "",
        cursor_offset: int | None = None,
        last_key: str | None = None,
    ) -> None:
        if cursor_offset is None:
            cursor_offset = len(text)
        elif not 0 <= cursor_offset <= len(text):
            raise ValueError(f"cursor_offset {cursor_offset} out of range [0, {len(text)}]")

        object.__setattr__(self, "text", text)
        object.__setattr__(self, "cursor_offset", cursor_offset)
        object.__setattr__(self, "last_key", last_key)

    @cached_property
    def _lines(self) -> tuple[str, ...]:
        return tuple(self.text.split("\n"))

    @cached_property
    def _line_index(self) -> LineIndex:
        return LineIndex.from_lines(list(self._lines))

    # -- Cursor --------------------------------------------------------------

    def cursor_position(self) -> int:
        return self.cursor_offset

    def last_key_stroke(self) -> str | None:
        return self.last_key

    def display_cursor_position(self) -> int:
        """Terminal columns occupied by the text before the cursor.

        For ``"日本|語"`` this is 4, since both glyphs are double width.
        """
        return display_width(self.text_before_cursor())

    def char_relative_to_cursor(self, offset: int) -> str:
        """Return the character at 1-based position ``cursor + offset``.

        Offset 1 is the character right after the cursor, offset 0 the one
        right before it. Returns ``""`` when the position is out of range.
        """
        index = self.cursor_position() + offset - 1
        if 0 <= index < len(self.text):
            return self.text[index]
        return ""

    def text_before_cursor(self) -> str:
        return self.text[: self.cursor_position()]

    def text_after_cursor(self) -> str:
        return self.text[self.cursor_position() :]

    # -- Words ---------------------------------------------------------------

    def get_word_before_cursor(self) -> str:
        before = self.text_before_cursor()
        return before[self.find_start_of_previous_word() :]

    def get_word_after_cursor(self) -> str:
        after = self.text_after_cursor()
        return after[: self.find_end_of_current_word()]

    def get_word_before_cursor_with_space(self) -> str:
        before = self.text_before_cursor()
        return before[self.find_start_of_previous_word_with_space() :]

    def get_word_after_cursor_with_space(self) -> str:
        after = self.text_after_cursor()
        return after[: self.find_end_of_current_word_with_space()]

    def get_word_before_cursor_until_separator(self, separators: str) -> str:
        before = self.text_before_cursor()
        return before[self.find_start_of_previous_word_until_separator(separators) :]

    def get_word_after_cursor_until_separator(self, separators: str) -> str:
        after = self.text_after_cursor()
        return after[: self.find_end_of_current_word_until_separator(separators)]

    def get_word_before_cursor_until_separator_ignore_next_to_cursor(
        self, separators: str
    ) -> str:
        before = self.text_before_cursor()
        start = self.find_start_of_previous_word_until_separator_ignore_next_to_cursor(
            separators
        )
        return before[start:]

    def get_word_after_cursor_until_separator_ignore_next_to_cursor(
        self, separators: str
    ) -> str:
        after = self.text_after_cursor()
        end = self.find_end_of_current_word_until_separator_ignore_next_to_cursor(separators)
        return after[:end]

    def find_start_of_previous_word(self) -> int:
        return word.find_start_of_previous_word(self.text_before_cursor())

    def find_start_of_previous_word_with_space(self) -> int:
        return word.find_start_of_previous_word_with_space(self.text_before_cursor())

    def find_start_of_previous_word_until_separator(self, separators: str) -> int:
        return word.find_start_of_previous_word_until_separator(
            self.text_before_cursor(), separators
        )

    def find_start_of_previous_word_until_separator_ignore_next_to_cursor(
        self, separators: str
    ) -> int:
        return word.find_start_of_previous_word_until_separator_ignore_next_to_cursor(
            self.text_before_cursor(), separators
        )

    def find_end_of_current_word(self) -> int:
        return word.find_end_of_current_word(self.text_after_cursor())

    def find_end_of_current_word_with_space(self) -> int:
        return word.find_end_of_current_word_with_space(self.text_after_cursor())

    def find_end_of_current_word_until_separator(self, separators: str) -> int:
        return word.find_end_of_current_word_until_separator(
            self.text_after_cursor(), separators
        )

    def find_end_of_current_word_until_separator_ignore_next_to_cursor(
        self, separators: str
    ) -> int:
        return word.find_end_of_current_word_until_separator_ignore_next_to_cursor(
            self.text_after_cursor(), separators
        )

    # -- Lines ---------------------------------------------------------------

    def current_line_before_cursor(self) -> str:
        return self.text_before_cursor().rsplit("\n", 1)[-1]

    def current_line_after_cursor(self) -> str:
        return self.text_after_cursor().split("\n", 1)[0]

    def current_line(self) -> str:
        return self.current_line_before_cursor() + self.current_line_after_cursor()

    def lines(self) -> list[str]:
        """Lines of the text; a trailing newline yields a final empty line."""
        return list(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def line_start_indexes(self) -> list[int]:
        return list(self._line_index.starts)

    def find_line_start_index(self, offset: int) -> tuple[int, int]:
        """Return ``(row, row_start)`` of the line containing *offset*."""
        return self._line_index.find(offset)

    def cursor_position_row(self) -> int:
        row, _ = self.find_line_start_index(self.cursor_position())
        return row

    def cursor_position_col(self) -> int:
        _, start = self.find_line_start_index(self.cursor_position())
        return self.cursor_position() - start

    def on_last_line(self) -> bool:
        return self.cursor_position_row() == self.line_count() - 1

    def get_end_of_line_position(self) -> int:
        return len(self.current_line_after_cursor())

    def leading_whitespace_in_current_line(self) -> str:
        line = self.current_line()
        return line[: len(line) - len(line.lstrip())]

    # -- Cursor movement -----------------------------------------------------

    def get_cursor_left_position(self, count: int) -> int:
        """Relative offset for moving left *count* characters within the line."""
        if count < 0:
            return self.get_cursor_right_position(-count)
        return -min(count, self.cursor_position_col())

    def get_cursor_right_position(self, count: int) -> int:
        """Relative offset for moving right *count* characters within the line."""
        if count < 0:
            return self.get_cursor_left_position(-count)
        return min(count, len(self.current_line_after_cursor()))

    def get_cursor_up_position(self, count: int, preferred_column: int | None = None) -> int:
        """Relative offset for moving up *count* rows.

        The column is the current one unless *preferred_column* is given,
        so a caller can keep a column across shorter lines.
        """
        col = self.cursor_position_col() if preferred_column is None else preferred_column
        row = self.cursor_position_row() - count
        return self.translate_row_col_to_index(row, col) - self.cursor_position()

    def get_cursor_down_position(
        self, count: int, preferred_column: int | None = None
    ) -> int:
        """Relative offset for moving down *count* rows; see :meth:`get_cursor_up_position`."""
        col = self.cursor_position_col() if preferred_column is None else preferred_column
        row = self.cursor_position_row() + count
        return self.translate_row_col_to_index(row, col) - self.cursor_position()

    # -- Row/col translation -------------------------------------------------

    def translate_index_to_position(self, offset: int) -> tuple[int, int]:
        """Map an offset to ``(row, col)``, both 0-based."""
        row, start = self.find_line_start_index(offset)
        return row, offset - start

    def translate_row_col_to_index(self, row: int, col: int) -> int:
        """Map ``(row, col)`` to an offset, clamping both to the text."""
        starts = self._line_index.starts
        row = max(0, min(row, len(starts) - 1))
        line = self._lines[row]
        index = starts[row] + max(0, min(col, len(line)))
        return max(0, min(index, len(self.text)))
