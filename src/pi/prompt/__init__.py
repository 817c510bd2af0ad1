"""pi-prompt: text buffer and completion core for an interactive input line."""

# Completion
from pi.prompt.completion import (
    NOT_COMPLETING,
    CompletionSession,
    Completer,
    StaticCompleter,
)

# Document model
from pi.prompt.document import Document

# Filters
from pi.prompt.filter import (
    filter_contains,
    filter_fuzzy,
    filter_has_prefix,
    filter_has_suffix,
    fuzzy_match,
)
from pi.prompt.line_index import LineIndex

# Settings
from pi.prompt.settings import PromptSettings, SettingsError, load_settings

# Suggestions
from pi.prompt.suggestion import (
    FormattedRow,
    Suggestion,
    SuggestionFormatter,
    format_suggestions,
    format_texts,
)

# Utilities
from pi.prompt.utils import char_width, display_width

__all__ = [
    # Completion
    "NOT_COMPLETING",
    "CompletionSession",
    "Completer",
    "StaticCompleter",
    # Document model
    "Document",
    "LineIndex",
    # Filters
    "filter_contains",
    "filter_fuzzy",
    "filter_has_prefix",
    "filter_has_suffix",
    "fuzzy_match",
    # Settings
    "PromptSettings",
    "SettingsError",
    "load_settings",
    # Suggestions
    "FormattedRow",
    "Suggestion",
    "SuggestionFormatter",
    "format_suggestions",
    "format_texts",
    # Utilities
    "char_width",
    "display_width",
]
