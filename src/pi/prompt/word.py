"""Word-boundary scanning over the text on either side of the cursor.

Every ``find_start_*`` function takes the text before the cursor and
returns an index into it where the word being typed begins (0 when no
boundary is found). Every ``find_end_*`` function takes the text after
the cursor and returns how far the current word extends forward (the
length of that text when no boundary is found).

A separator set is a plain string whose characters are all treated as
word boundaries. An empty set selects the plain-space policy.
"""

from __future__ import annotations

from pi.prompt.utils import index_any, index_not_any, last_index_any, last_index_not_any

SPACE = " "


# ---------------------------------------------------------------------------
# Backwards (text before cursor)
# ---------------------------------------------------------------------------


def find_start_of_previous_word(before: str) -> int:
    """Index just after the last space in *before*, or 0."""
    return before.rfind(SPACE) + 1


def find_start_of_previous_word_with_space(before: str) -> int:
    """Like :func:`find_start_of_previous_word`, skipping spaces next to the cursor."""
    return find_start_of_previous_word_until_separator_ignore_next_to_cursor(before, SPACE)


def find_start_of_previous_word_until_separator(before: str, separators: str) -> int:
    if not separators:
        return find_start_of_previous_word(before)
    return last_index_any(before, separators) + 1


def find_start_of_previous_word_until_separator_ignore_next_to_cursor(
    before: str, separators: str
) -> int:
    if not separators:
        separators = SPACE

    end = last_index_not_any(before, separators)
    if end == -1:
        return 0
    return last_index_any(before[:end], separators) + 1


# ---------------------------------------------------------------------------
# Forwards (text after cursor)
# ---------------------------------------------------------------------------


def find_end_of_current_word(after: str) -> int:
    """Index of the first space in *after*, or ``len(after)``."""
    i = after.find(SPACE)
    return i if i != -1 else len(after)


def find_end_of_current_word_with_space(after: str) -> int:
    """Like :func:`find_end_of_current_word`, skipping spaces next to the cursor."""
    return find_end_of_current_word_until_separator_ignore_next_to_cursor(after, SPACE)


def find_end_of_current_word_until_separator(after: str, separators: str) -> int:
    if not separators:
        return find_end_of_current_word(after)
    i = index_any(after, separators)
    return i if i != -1 else len(after)


def find_end_of_current_word_until_separator_ignore_next_to_cursor(
    after: str, separators: str
) -> int:
    if not separators:
        separators = SPACE

    start = index_not_any(after, separators)
    if start == -1:
        return len(after)
    end = index_any(after[start:], separators)
    if end == -1:
        return len(after)
    return start + end
