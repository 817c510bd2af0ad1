"""Tests for pi.prompt.suggestion -- fixed-width column layout."""

from __future__ import annotations

from pi.prompt.suggestion import (
    SHORTEN_SUFFIX,
    FormattedRow,
    Suggestion,
    SuggestionFormatter,
    format_suggestions,
    format_texts,
)

FRUITS = ["apple", "banana", "coconut"]


# ---------------------------------------------------------------------------
# format_texts
# ---------------------------------------------------------------------------


class TestFormatTexts:
    """A single column laid out under a width budget."""

    def test_pads_to_longest(self) -> None:
        cells, width = format_texts(FRUITS, 100, " ", " ")
        assert cells == [" apple   ", " banana  ", " coconut "]
        assert width == 9

    def test_shortens_with_marker(self) -> None:
        cells, width = format_texts(FRUITS, 6, " ", " ")
        assert cells == [" a... ", " b... ", " c... "]
        assert width == 6

    def test_budget_too_small(self) -> None:
        cells, width = format_texts(FRUITS, 3, " ", " ")
        assert cells == ["", "", ""]
        assert width == 0

    def test_budget_equal_to_minimum(self) -> None:
        cells, width = format_texts(FRUITS, len("  " + SHORTEN_SUFFIX), " ", " ")
        assert cells == ["", "", ""]
        assert width == 0

    def test_all_blank(self) -> None:
        cells, width = format_texts(["", ""], 10, " ", " ")
        assert cells == ["", ""]
        assert width == 0

    def test_empty_input(self) -> None:
        assert format_texts([], 10, " ", " ") == ([], 0)

    def test_line_breaks_are_removed(self) -> None:
        cells, width = format_texts(["foo\nbar", "a\r\nb"], 100, " ", " ")
        assert cells == [" foobar ", " ab     "]
        assert width == 8

    def test_japanese_counts_characters(self) -> None:
        cells, width = format_texts(["りんご", "バナナ", "桃"], 100, " ", " ")
        assert cells == [" りんご ", " バナナ ", " 桃   "]
        assert width == 5

    def test_cyrillic_is_shortened_by_character(self) -> None:
        cells, width = format_texts(["Добрый день"], 8, " ", " ")
        assert cells == [" Доб... "]
        assert width == 8

    def test_custom_marker(self) -> None:
        cells, width = format_texts(FRUITS, 6, " ", " ", shorten_suffix="…")
        assert cells == [" app… ", " ban… ", " coc… "]
        assert width == 6

    def test_no_padding_strings(self) -> None:
        cells, width = format_texts(["ab", "abcd"], 100, "", "")
        assert cells == ["ab  ", "abcd"]
        assert width == 4


# ---------------------------------------------------------------------------
# format_suggestions / SuggestionFormatter
# ---------------------------------------------------------------------------


class TestFormatSuggestions:
    """Label and description columns composed under one budget."""

    def test_titles_only(self) -> None:
        suggestions = [
            Suggestion.with_title("foo"),
            Suggestion.with_title("bar"),
            Suggestion.with_title("fuga"),
        ]
        rows, width = format_suggestions(suggestions, 100)
        assert rows == [
            FormattedRow(" foo  ", ""),
            FormattedRow(" bar  ", ""),
            FormattedRow(" fuga ", ""),
        ]
        assert width == 6

    def test_labels_and_descriptions(self) -> None:
        suggestions = [
            Suggestion("apple", "This is apple."),
            Suggestion("banana", "This is banana."),
            Suggestion("coconut", "This is coconut."),
        ]
        rows, width = format_suggestions(suggestions, 100)
        assert rows == [
            FormattedRow(" apple   ", " This is apple.   "),
            FormattedRow(" banana  ", " This is banana.  "),
            FormattedRow(" coconut ", " This is coconut. "),
        ]
        assert width == len(" apple   " + " This is apple.   ")

    def test_small_width_shortens_labels(self) -> None:
        suggestions = [
            Suggestion.with_title("This is apple."),
            Suggestion.with_title("This is banana."),
            Suggestion.with_title("This is coconut."),
        ]
        rows, width = format_suggestions(suggestions, 8)
        assert rows == [FormattedRow(" Thi... ", "")] * 3
        assert width == 8

    def test_too_small_max(self) -> None:
        suggestions = [Suggestion.with_title("This is apple.")]
        assert format_suggestions(suggestions, 3) == ([], 0)

    def test_big_description_is_shortened(self) -> None:
        labels = [
            "--all-namespaces",
            "--allow-missing-template-keys",
            "--export",
            "-f",
            "--filename",
            "--include-extended-apis",
        ]
        suggestions = [Suggestion(label, "-" * (80 + i * 10)) for i, label in enumerate(labels)]
        rows, width = format_suggestions(suggestions, 50)

        assert [row.label for row in rows] == [f" {label:<29} " for label in labels]
        assert all(row.description == " " + "-" * 14 + "... " for row in rows)
        assert width == 50

    def test_description_dropped_when_budget_spent(self) -> None:
        rows, width = format_suggestions([Suggestion("a", "long description")], 6)
        assert rows == [FormattedRow(" a ", "")]
        assert width == 3

    def test_multiline_description_is_flattened(self) -> None:
        rows, _ = format_suggestions([Suggestion("ls", "list\nfiles")], 100)
        assert rows == [FormattedRow(" ls ", " listfiles ")]

    def test_non_ascii_rows(self) -> None:
        suggestions = [Suggestion("привет", "приветствие"), Suggestion("こんにちは", "挨拶")]
        rows, width = format_suggestions(suggestions, 100)
        assert rows == [
            FormattedRow(" привет ", " приветствие "),
            FormattedRow(" こんにちは  ", " 挨拶          "),
        ]
        assert width == 8 + 13


class TestSuggestionFormatter:
    """Formatter configured with its own padding and marker."""

    def test_custom_padding(self) -> None:
        formatter = SuggestionFormatter(
            label_prefix="[",
            label_suffix="]",
            description_prefix="(",
            description_suffix=")",
        )
        rows, width = formatter.format([Suggestion("ab", "x"), Suggestion("a", "xyz")], 100)
        assert rows == [FormattedRow("[ab]", "(x  )"), FormattedRow("[a ]", "(xyz)")]
        assert width == 9

    def test_defaults_match_module_function(self) -> None:
        suggestions = [Suggestion(label, label.upper()) for label in FRUITS]
        assert SuggestionFormatter().format(suggestions, 20) == format_suggestions(suggestions, 20)

    def test_rows_do_not_reference_suggestions(self) -> None:
        rows, _ = SuggestionFormatter().format([Suggestion("a", "b")], 100)
        assert not isinstance(rows[0], Suggestion)
