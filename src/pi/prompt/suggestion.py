"""Suggestion values and fixed-width two-column layout.

Widths are counted in characters (Unicode scalar values).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from pi.prompt.utils import delete_line_breaks

if TYPE_CHECKING:
    from pi.prompt.settings import PromptSettings

SHORTEN_SUFFIX = "..."
LEFT_PREFIX = " "
LEFT_SUFFIX = " "
RIGHT_PREFIX = " "
RIGHT_SUFFIX = " "


@dataclass(frozen=True)
class Suggestion:
    """A completion candidate: what to insert and what it means."""

    label: str
    description: str = ""

    @classmethod
    def with_title(cls, label: str) -> Suggestion:
        return cls(label=label)


@dataclass(frozen=True)
class FormattedRow:
    """A display-ready row; both cells are already padded or truncated."""

    label: str
    description: str


def format_texts(
    texts: Sequence[str],
    max_width: int,
    prefix: str,
    suffix: str,
    shorten_suffix: str = SHORTEN_SUFFIX,
) -> tuple[list[str], int]:
    """Lay out *texts* as one column no wider than *max_width*.

    Returns the padded cells and the column width (prefix + text + suffix).
    When nothing fits, or every text is empty, the cells are all ``""`` and
    the width is 0.
    """
    empty = [""] * len(texts)
    texts = [delete_line_breaks(t) for t in texts]

    width = max((len(t) for t in texts), default=0)
    if width == 0:
        return empty, 0

    if len(prefix) + len(suffix) + len(shorten_suffix) >= max_width:
        return empty, 0

    if len(prefix) + width + len(suffix) > max_width:
        width = max_width - len(prefix) - len(suffix)

    cells: list[str] = []
    for text in texts:
        if len(text) > width:
            text = text[: width - len(shorten_suffix)] + shorten_suffix
        cells.append(prefix + text.ljust(width) + suffix)

    return cells, len(prefix) + width + len(suffix)


@dataclass(frozen=True)
class SuggestionFormatter:
    """Formats suggestions into aligned label and description columns."""

    label_prefix: str = LEFT_PREFIX
    label_suffix: str = LEFT_SUFFIX
    description_prefix: str = RIGHT_PREFIX
    description_suffix: str = RIGHT_SUFFIX
    shorten_suffix: str = SHORTEN_SUFFIX

    @classmethod
    def from_settings(cls, settings: PromptSettings) -> SuggestionFormatter:
        return cls(
            label_prefix=settings.label_prefix,
            label_suffix=settings.label_suffix,
            description_prefix=settings.description_prefix,
            description_suffix=settings.description_suffix,
            shorten_suffix=settings.shorten_suffix,
        )

    def format(
        self, suggestions: Sequence[Suggestion], max_width: int
    ) -> tuple[list[FormattedRow], int]:
        """Return the formatted rows and their total width.

        The label column is laid out against *max_width* first; descriptions
        get whatever is left. If no label fits, the result is ``([], 0)``.
        """
        labels, label_width = format_texts(
            [s.label for s in suggestions],
            max_width,
            self.label_prefix,
            self.label_suffix,
            self.shorten_suffix,
        )
        if label_width == 0:
            return [], 0

        if max_width > label_width:
            descriptions, description_width = format_texts(
                [s.description for s in suggestions],
                max_width - label_width,
                self.description_prefix,
                self.description_suffix,
                self.shorten_suffix,
            )
        else:
            descriptions, description_width = [""] * len(suggestions), 0

        rows = [
            FormattedRow(label=label, description=description)
            for label, description in zip(labels, descriptions)
        ]
        return rows, label_width + description_width


def format_suggestions(
    suggestions: Sequence[Suggestion], max_width: int
) -> tuple[list[FormattedRow], int]:
    """Format with the default single-space padding and ``...`` marker."""
    return SuggestionFormatter().format(suggestions, max_width)
