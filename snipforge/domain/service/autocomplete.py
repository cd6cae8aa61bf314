"""Tag autocomplete over a known tag vocabulary.

Completion only ever proposes the single best prefix match for the tag being
typed. Three entry points cover the input shapes a caller has:

- ``complete_tag_input``: a separator-joined tag list, completing the last tag.
- ``complete_at_cursor``: the same list with a caret, returning the remainder
  of the suggestion for inline ghost-text display.
- ``complete_search_query``: a structured search query, completing inside a
  ``tag:`` clause only.

Example:
    complete_tag_input("github,docker,sys", ["system", "docker", "github"])
    # completed="github, docker, system, ", suggestion="system"
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from snipforge.domain.value.tags import normalize_tag

DEFAULT_SEPARATOR = ","

TAG_PREFIX = "tag:"

# Navigation and deletion keys never trigger a completion
SKIP_KEYS = frozenset(
    {"Backspace", "Delete", "ArrowLeft", "ArrowRight", "ArrowUp", "ArrowDown"}
)

_TAG_CLAUSE_AT_END = re.compile(r"tag:([^|]*)$")


@dataclass(frozen=True)
class TagCompletion:
    """Result of completing the last tag of a tag list."""

    completed: str
    was_completed: bool
    suggestion: str | None
    original_last_tag: str


@dataclass(frozen=True)
class InlineSuggestion:
    """Inline completion for the tag under the caret."""

    suggestion: str | None
    completion_text: str | None  # Part of the suggestion not typed yet
    before_cursor: str
    after_cursor: str
    current_tag: str
    is_at_end_of_tag: bool


@dataclass(frozen=True)
class QueryCompletion:
    """Result of completing a ``tag:`` clause inside a search query."""

    completed: str | None
    was_completed: bool
    suggestion: str | None
    cursor_position: int | None = None  # Caret position after the completion


def suggest_tags(
    partial: str, vocabulary: Sequence[str], max_suggestions: int = 5
) -> list[str]:
    """Vocabulary tags starting with the normalized ``partial``.

    An empty partial returns the first ``max_suggestions`` vocabulary tags,
    in vocabulary order.
    """
    prefix = normalize_tag(partial)
    if not prefix:
        return list(vocabulary[:max_suggestions])

    suggestions = [tag for tag in vocabulary if normalize_tag(tag).startswith(prefix)]
    return suggestions[:max_suggestions]


def _best_completion(partial: str, vocabulary: Sequence[str]) -> str | None:
    """Best suggestion for ``partial``, or None when it is already complete."""
    suggestions = suggest_tags(partial, vocabulary, 1)
    if not suggestions or suggestions[0] == normalize_tag(partial):
        return None
    return suggestions[0]


def complete_tag_input(
    text: str,
    vocabulary: Sequence[str],
    separator: str = DEFAULT_SEPARATOR,
    max_suggestions: int = 1,
    add_separator_after_completion: bool = True,
) -> TagCompletion:
    """Complete the last tag of a separator-joined tag list.

    Args:
        text: Current input, e.g. ``"github,docker,sys"``
        vocabulary: Known tags
        separator: Tag separator
        max_suggestions: Number of candidates considered
        add_separator_after_completion: Append ``separator + " "`` so typing
            can continue with the next tag

    Returns:
        The completed text, or the input unchanged with ``was_completed=False``
    """
    if not text.strip():
        return TagCompletion(
            completed=text, was_completed=False, suggestion=None, original_last_tag=""
        )

    tags = [tag.strip() for tag in text.split(separator)]
    last_tag = tags[-1]

    suggestions = suggest_tags(last_tag, vocabulary, max_suggestions)
    if not suggestions or suggestions[0] == normalize_tag(last_tag):
        return TagCompletion(
            completed=text,
            was_completed=False,
            suggestion=None,
            original_last_tag=last_tag,
        )

    best = suggestions[0]
    joiner = f"{separator} "
    completed = joiner.join([*tags[:-1], best])
    if add_separator_after_completion:
        completed += joiner

    return TagCompletion(
        completed=completed,
        was_completed=True,
        suggestion=best,
        original_last_tag=last_tag,
    )


def current_tag_at(text: str, cursor_position: int, separator: str = DEFAULT_SEPARATOR) -> str:
    """The tag being typed: text between the previous separator and the caret."""
    before_cursor = text[: max(cursor_position, 0)]
    return before_cursor.rsplit(separator, 1)[-1].strip()


def complete_at_cursor(
    text: str,
    cursor_position: int,
    vocabulary: Sequence[str],
    separator: str = DEFAULT_SEPARATOR,
) -> InlineSuggestion:
    """Inline suggestion for the tag under the caret.

    A suggestion is offered only when the caret sits at the end of a
    non-empty tag, i.e. nothing but whitespace lies between the caret and the
    next separator.
    """
    cursor_position = min(max(cursor_position, 0), len(text))
    before_cursor = text[:cursor_position]
    after_cursor = text[cursor_position:]
    current_tag = current_tag_at(text, cursor_position, separator)

    is_at_end_of_tag = not after_cursor.split(separator, 1)[0].strip()

    suggestion = None
    if is_at_end_of_tag and current_tag:
        suggestion = _best_completion(current_tag, vocabulary)

    return InlineSuggestion(
        suggestion=suggestion,
        completion_text=suggestion[len(current_tag) :] if suggestion else None,
        before_cursor=before_cursor,
        after_cursor=after_cursor,
        current_tag=current_tag,
        is_at_end_of_tag=is_at_end_of_tag,
    )


def complete_search_query(
    query: str, cursor_position: int, vocabulary: Sequence[str]
) -> QueryCompletion:
    """Complete a tag inside the ``tag:`` clause under the caret.

    Only the last comma-separated value before the caret is replaced; the
    rest of the query, including everything after the caret, is kept.
    """
    cursor_position = min(max(cursor_position, 0), len(query))
    before_cursor = query[:cursor_position]

    if _TAG_CLAUSE_AT_END.search(before_cursor) is None:
        return QueryCompletion(completed=None, was_completed=False, suggestion=None)

    clause_start = before_cursor.rfind(TAG_PREFIX)
    value_start = clause_start + len(TAG_PREFIX)
    typed = before_cursor[value_start:]
    head, comma, current = typed.rpartition(DEFAULT_SEPARATOR)

    suggestion = _best_completion(current.strip(), vocabulary)
    if suggestion is None:
        return QueryCompletion(completed=None, was_completed=False, suggestion=None)

    completed_head = query[:value_start] + head + comma + suggestion
    return QueryCompletion(
        completed=completed_head + query[cursor_position:],
        was_completed=True,
        suggestion=suggestion,
        cursor_position=len(completed_head),
    )


def should_trigger(
    last_key: str, text: str | None = None, skip_keys: Iterable[str] = SKIP_KEYS
) -> bool:
    """Whether a key press should request a completion.

    Args:
        last_key: Name of the key just pressed
        text: Current input; blank input never triggers
        skip_keys: Keys that suppress completion

    Returns:
        True when autocomplete should run
    """
    if last_key in set(skip_keys):
        return False
    if text is not None and not text.strip():
        return False
    return True
