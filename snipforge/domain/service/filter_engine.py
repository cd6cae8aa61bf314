"""Structured filtering of snippets by parsed search clauses.

Matching is case-insensitive substring matching throughout. A ``tag`` clause
may list several comma-separated values; each must be contained in at least
one of the snippet's tags, so ``tag:git`` also matches a tag named
``digital``.
"""

from collections.abc import Sequence

from snipforge.domain.model import Snippet
from snipforge.domain.value import FilterKind, ParsedSearch, SearchFilter

TAG_VALUE_SEPARATOR = ","


def matches_filter(snippet: Snippet, search_filter: SearchFilter) -> bool:
    """Check a single clause against a snippet."""
    value = search_filter.value.lower()

    if search_filter.kind is FilterKind.TAG:
        wanted = [part.strip().lower() for part in value.split(TAG_VALUE_SEPARATOR)]
        tags = [tag.lower() for tag in snippet.tags]
        return all(any(part in tag for tag in tags) for part in wanted)

    if search_filter.kind is FilterKind.TITLE:
        return value in snippet.title.lower()

    if search_filter.kind is FilterKind.BODY:
        return value in snippet.body.lower()

    return value in snippet.title.lower() or value in snippet.body.lower()


def apply_filters(snippets: Sequence[Snippet], parsed: ParsedSearch) -> Sequence[Snippet]:
    """Keep snippets satisfying every clause, in their original order.

    Args:
        snippets: Snippet collection
        parsed: Parsed search

    Returns:
        ``snippets`` itself when there are no clauses, otherwise the matching
        snippets as a new list
    """
    if not parsed.has_filters:
        return snippets

    return [
        snippet
        for snippet in snippets
        if all(matches_filter(snippet, f) for f in parsed.filters)
    ]
