"""Domain value objects for SnipForge.

Value objects are immutable and defined by their values, not identity.
"""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum

from pydantic import field_validator

from snipforge.domain.value.common import RootValueObject, ValueObject
from snipforge.domain.value.tags import (
    normalize_tag,
    normalize_tags,
    parse_tags_from_json,
    tags_to_json,
)


class TagName(RootValueObject[str]):
    """A single tag in canonical form.

    Input is trimmed and lowercased on construction, so
    ``TagName("  Docker ") == TagName("docker")``.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Canonicalize before the type check."""
        return normalize_tag(v) if isinstance(v, str) else v

    @field_validator("root")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Reject tags that are empty after trimming."""
        if not v:
            raise ValueError("Tag name must not be empty")
        return v


class TagSet(RootValueObject[tuple[str, ...]]):
    """Normalized, deduplicated collection of tags.

    Membership is what matters; first-seen order is kept only so that the
    encoded form is stable. Encoding goes through ``to_json``/``from_json``,
    and malformed encoded data decodes to an empty set.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Accept any iterable of strings and canonicalize it."""
        if isinstance(v, str):
            v = [v]
        if isinstance(v, Iterable) and not isinstance(v, (bytes, Mapping)):
            return tuple(normalize_tags(str(tag) for tag in v))
        return v

    @classmethod
    def of(cls, *tags: str) -> "TagSet":
        """Build a tag set from positional tags."""
        return cls(tags)

    @classmethod
    def from_json(cls, text: object) -> "TagSet":
        """Decode a JSON array, falling back to an empty set."""
        return cls(parse_tags_from_json(text))

    def to_json(self) -> str:
        """Encode as a JSON array."""
        return tags_to_json(self.root)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and normalize_tag(tag) in self.root


class FilterKind(str, Enum):
    """Kind of search filter clause."""

    TAG = "tag"
    TITLE = "title"
    BODY = "body"
    ALL = "all"  # title or body


class SearchFilter(ValueObject):
    """One typed constraint derived from a query segment."""

    kind: FilterKind
    value: str


class ParsedSearch(ValueObject):
    """Ordered filter clauses, combined with AND."""

    filters: tuple[SearchFilter, ...] = ()

    @property
    def has_filters(self) -> bool:
        """Whether any clause constrains the result."""
        return bool(self.filters)

    @property
    def has_prefixed_filters(self) -> bool:
        """Whether any clause carries an explicit ``tag:``/``title:``/``body:`` prefix."""
        return any(f.kind is not FilterKind.ALL for f in self.filters)
