"""Suggestion filters for building completion sources.

Each filter matches on the suggestion label and keeps the input order.
An empty query keeps every suggestion.
"""

from __future__ import annotations

from typing import Callable, Sequence

from pi.prompt.suggestion import Suggestion

Filter = Callable[[Sequence[Suggestion], str, bool], list[Suggestion]]


def _filter(
    suggestions: Sequence[Suggestion],
    sub: str,
    ignore_case: bool,
    matches: Callable[[str, str], bool],
) -> list[Suggestion]:
    if not sub:
        return list(suggestions)
    if ignore_case:
        sub = sub.casefold()

    results: list[Suggestion] = []
    for s in suggestions:
        label = s.label.casefold() if ignore_case else s.label
        if matches(label, sub):
            results.append(s)
    return results


def fuzzy_match(query: str, text: str) -> bool:
    """True if every character of *query* appears in *text*, in order."""
    query_index = 0
    for ch in text:
        if query_index >= len(query):
            break
        if ch == query[query_index]:
            query_index += 1
    return query_index == len(query)


def filter_has_prefix(
    suggestions: Sequence[Suggestion], sub: str, ignore_case: bool = False
) -> list[Suggestion]:
    return _filter(suggestions, sub, ignore_case, str.startswith)


def filter_has_suffix(
    suggestions: Sequence[Suggestion], sub: str, ignore_case: bool = False
) -> list[Suggestion]:
    return _filter(suggestions, sub, ignore_case, str.endswith)


def filter_contains(
    suggestions: Sequence[Suggestion], sub: str, ignore_case: bool = False
) -> list[Suggestion]:
    return _filter(suggestions, sub, ignore_case, lambda label, q: q in label)


def filter_fuzzy(
    suggestions: Sequence[Suggestion], sub: str, ignore_case: bool = False
) -> list[Suggestion]:
    return _filter(suggestions, sub, ignore_case, lambda label, q: fuzzy_match(q, label))
