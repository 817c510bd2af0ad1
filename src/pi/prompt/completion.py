"""Completion sources and the scrolling selection over their candidates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, Sequence

from pi.prompt.filter import Filter, filter_has_prefix
from pi.prompt.suggestion import FormattedRow, Suggestion, SuggestionFormatter

if TYPE_CHECKING:
    from pi.prompt.document import Document
    from pi.prompt.settings import PromptSettings

logger = logging.getLogger(__name__)

NOT_COMPLETING = -1


class Completer(Protocol):
    """Protocol for completion sources.

    Called synchronously on the input path, so implementations should
    return quickly. Slow sources should buffer their results elsewhere.
    """

    def complete(self, text: str) -> Sequence[Suggestion]:
        """Return ranked suggestions for *text*, best first."""
        ...


class StaticCompleter:
    """Completer over a fixed list of suggestions narrowed by a filter."""

    def __init__(
        self,
        suggestions: Sequence[Suggestion],
        filter_func: Filter = filter_has_prefix,
        ignore_case: bool = False,
    ) -> None:
        self._suggestions = list(suggestions)
        self._filter = filter_func
        self._ignore_case = ignore_case

    def complete(self, text: str) -> list[Suggestion]:
        return self._filter(self._suggestions, text, self._ignore_case)


class CompletionSession:
    """Tracks which candidate is selected and which page of them is visible.

    Idle while ``selected_index`` is -1. While completing,
    ``scroll_offset <= selected_index < scroll_offset + effective_window_size``.
    Moving past the last candidate returns to idle; moving above the first
    wraps to the last.
    """

    def __init__(
        self,
        completer: Completer,
        window_size: int,
        *,
        formatter: SuggestionFormatter | None = None,
        word_separator: str = "",
        show_at_start: bool = False,
    ) -> None:
        if window_size <= 0:
            raise ValueError(f"window_size must be positive, got {window_size}")

        self._completer = completer
        self._window_size = window_size
        self._formatter = formatter if formatter is not None else SuggestionFormatter()
        self.word_separator = word_separator
        self.show_at_start = show_at_start

        self._candidates: list[Suggestion] = []
        self._selected_index = NOT_COMPLETING
        self._scroll_offset = 0

    @classmethod
    def from_settings(
        cls, completer: Completer, settings: PromptSettings
    ) -> CompletionSession:
        return cls(
            completer,
            settings.max_suggestions,
            formatter=SuggestionFormatter.from_settings(settings),
            word_separator=settings.word_separator,
            show_at_start=settings.show_at_start,
        )

    # -- State -------------------------------------------------------------

    @property
    def candidates(self) -> list[Suggestion]:
        return list(self._candidates)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def effective_window_size(self) -> int:
        return min(self._window_size, len(self._candidates))

    def completing(self) -> bool:
        return self._selected_index != NOT_COMPLETING

    def selected_suggestion(self) -> Suggestion | None:
        """The selected candidate, or ``None`` when idle or no longer in range."""
        if 0 <= self._selected_index < len(self._candidates):
            return self._candidates[self._selected_index]
        return None

    def visible_candidates(self) -> list[Suggestion]:
        start = self._scroll_offset
        return self._candidates[start : start + self.effective_window_size]

    def formatted_candidates(self, max_width: int) -> tuple[list[FormattedRow], int]:
        """Visible candidates laid out for a menu at most *max_width* wide."""
        return self._formatter.format(self.visible_candidates(), max_width)

    # -- Transitions -------------------------------------------------------

    def update_candidates(self, text: str) -> None:
        """Replace the candidates with the completion source's answer for *text*."""
        self._candidates = list(self._completer.complete(text))
        logger.debug("Completion source returned %d candidates for %r", len(self._candidates), text)

    def update_from_document(self, document: Document) -> None:
        """Query the completion source with the word before the cursor."""
        if not document.text and not self.show_at_start:
            self._candidates = []
            logger.debug("Empty input, cleared completion candidates")
            return
        self.update_candidates(
            document.get_word_before_cursor_until_separator(self.word_separator)
        )

    def normalize(self) -> None:
        """Restore the selection invariant after candidates or selection changed."""
        count = len(self._candidates)
        if self._selected_index > NOT_COMPLETING and self._selected_index >= count:
            self.reset()
        elif self._selected_index < NOT_COMPLETING:
            # Wrapped above the first candidate: show the last page.
            self._selected_index = count - 1
            self._scroll_offset = count - self.effective_window_size

    def reset(self) -> None:
        logger.debug("Resetting completion session")
        self._selected_index = NOT_COMPLETING
        self._scroll_offset = 0
        self.update_candidates("")

    def previous(self) -> None:
        if self._scroll_offset == self._selected_index and self._selected_index > 0:
            self._scroll_offset -= 1
        self._selected_index -= 1
        self.normalize()

    def next(self) -> None:
        if self._scroll_offset + self.effective_window_size - 1 == self._selected_index:
            self._scroll_offset += 1
        self._selected_index += 1
        self.normalize()
