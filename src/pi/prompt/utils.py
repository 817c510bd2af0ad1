"""Text utilities: display width measurement and separator-set scanning.

All positions are counted in Unicode scalar values (Python ``str``
indices), never bytes.
"""

from __future__ import annotations

import re

import wcwidth as _wcwidth

_LINE_BREAK_RE = re.compile(r"[\r\n]")


# ---------------------------------------------------------------------------
# Display width
# ---------------------------------------------------------------------------


def char_width(ch: str) -> int:
    """Return the terminal display width of a single scalar value.

    Rules:
    1. Control characters -> 0
    2. Combining marks and other zero-width characters -> 0
    3. East Asian wide/fullwidth characters -> 2
    4. Characters wcwidth cannot classify -> 0
    """
    cp = ord(ch)
    if cp < 0x20 or (0x7F <= cp <= 0x9F):
        return 0
    return max(_wcwidth.wcwidth(ch), 0)


def display_width(text: str) -> int:
    """Sum of :func:`char_width` over every scalar value in *text*."""
    if not text:
        return 0

    # Fast ASCII path: all codepoints in 0x20..0x7E
    if text.isascii() and text.isprintable():
        return len(text)

    return sum(char_width(ch) for ch in text)


# ---------------------------------------------------------------------------
# Line breaks
# ---------------------------------------------------------------------------


def delete_line_breaks(text: str) -> str:
    """Remove every ``\\n`` and ``\\r`` so *text* renders on one row."""
    return _LINE_BREAK_RE.sub("", text)


# ---------------------------------------------------------------------------
# Separator-set scanning
# ---------------------------------------------------------------------------


def index_any(text: str, chars: str) -> int:
    """Index of the first character of *text* found in *chars*, or -1."""
    for i, ch in enumerate(text):
        if ch in chars:
            return i
    return -1


def last_index_any(text: str, chars: str) -> int:
    """Index of the last character of *text* found in *chars*, or -1."""
    for i in range(len(text) - 1, -1, -1):
        if text[i] in chars:
            return i
    return -1


def index_not_any(text: str, chars: str) -> int:
    """Index of the first character of *text* not in *chars*, or -1."""
    for i, ch in enumerate(text):
        if ch not in chars:
            return i
    return -1


def last_index_not_any(text: str, chars: str) -> int:
    """Index of the last character of *text* not in *chars*, or -1."""
    for i in range(len(text) - 1, -1, -1):
        if text[i] not in chars:
            return i
    return -1
