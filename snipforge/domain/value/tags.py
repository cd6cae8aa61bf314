"""Tag normalization and the tag encoding boundary.

A tag is stored and compared only in its canonical form: trimmed and
lowercased. Every function here is pure and accepts any input without
raising; values that normalize to an empty string are dropped.

Examples:
    normalize_tag("  GitHub  ")              # "github"
    normalize_tags(["Git", " github ", "GIT"])  # ["git", "github"]
    parse_tags_from_json('["Git", "Docker"]')   # ["git", "docker"]
    parse_tags_from_json("not json")             # []
"""

import json
from collections.abc import Iterable, Sequence
from typing import Any, Protocol, TypeVar


class Tagged(Protocol):
    """Anything carrying a collection of canonical tags."""

    @property
    def tags(self) -> Iterable[str]: ...


T = TypeVar("T", bound=Tagged)


def normalize_tag(tag: str) -> str:
    """Trim whitespace and lowercase a tag."""
    return tag.strip().lower()


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Normalize tags, dropping empty results and duplicates.

    First-seen order is kept so that encoding the same input twice gives the
    same text.
    """
    seen: dict[str, None] = {}
    for tag in tags:
        normalized = normalize_tag(tag)
        if normalized:
            seen.setdefault(normalized, None)
    return list(seen)


def tags_to_json(tags: Iterable[str]) -> str:
    """Encode tags as a JSON array in canonical form."""
    return json.dumps(normalize_tags(tags), separators=(",", ":"))


def parse_tags_from_json(text: Any) -> list[str]:
    """Decode a JSON array of tags.

    Malformed JSON, a non-array document or a non-string input decodes to an
    empty list. Non-string elements are skipped.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        return []
    try:
        parsed = json.loads(text)
    except ValueError:
        return []
    if not isinstance(parsed, list):
        return []
    return normalize_tags(item for item in parsed if isinstance(item, str))


def collect_vocabulary(items: Iterable[Tagged]) -> list[str]:
    """Return every distinct tag across ``items``, sorted alphabetically."""
    vocabulary: set[str] = set()
    for item in items:
        vocabulary.update(item.tags)
    return sorted(vocabulary)


def filter_by_tags(items: Sequence[T], filter_tags: Iterable[str]) -> list[T]:
    """Keep items carrying every one of ``filter_tags`` (exact match).

    An empty filter keeps everything.
    """
    wanted = normalize_tags(filter_tags)
    if not wanted:
        return list(items)
    return [item for item in items if set(wanted).issubset(item.tags)]
