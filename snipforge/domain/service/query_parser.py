"""Search query parsing.

A query is a ``|``-separated list of clauses. A clause starting with
``tag:``, ``title:`` or ``body:`` is a typed filter; anything else matches
title or body. Clauses are combined with AND.

Examples:
    parse_search_query("tag:git|title:ssh")
    # [tag="git", title="ssh"]

    parse_search_query("docker | tag: ")
    # [all="docker"]  (the empty tag clause is dropped)

Parsing never fails: any string, including an empty one, yields a valid
ParsedSearch.
"""

import re

from snipforge.domain.value import FilterKind, ParsedSearch, SearchFilter

SEGMENT_SEPARATOR = "|"

_PREFIX_PATTERN = re.compile(r"^(tag|title|body):(.*)$", re.DOTALL)


def parse_search_query(query: str) -> ParsedSearch:
    """Parse a raw query into ordered filter clauses.

    Args:
        query: Raw text from the search box

    Returns:
        Parsed clauses; no clauses means "no constraint"
    """
    if not query.strip():
        return ParsedSearch()

    filters: list[SearchFilter] = []
    for segment in query.split(SEGMENT_SEPARATOR):
        segment = segment.strip()
        if not segment:
            continue

        match = _PREFIX_PATTERN.match(segment)
        if match is None:
            filters.append(SearchFilter(kind=FilterKind.ALL, value=segment))
            continue

        value = match.group(2).strip()
        if value:
            filters.append(SearchFilter(kind=FilterKind(match.group(1)), value=value))

    return ParsedSearch(filters=tuple(filters))
