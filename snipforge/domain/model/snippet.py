"""Snippet aggregate root.

Snippets are reusable command or text fragments. Bodies may contain
``{{variable}}`` placeholders that are filled in when the snippet is used.
"""

from datetime import datetime, timezone

from pydantic import Field, model_validator

from snipforge.domain.model.common import DomainModel
from snipforge.domain.value import SnippetId, TagSet

DEFAULT_LANGUAGE = "plaintext"


def utcnow() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class SnippetFields(DomainModel):
    """Writable snippet fields, as accepted by the repository on create/update."""

    title: str
    body: str
    description: str = ""
    language: str = DEFAULT_LANGUAGE
    tags: TagSet = Field(default_factory=lambda: TagSet(()))


class Snippet(DomainModel):
    """Snippet aggregate root.

    Owned by the repository; the search and tagging code only reads it.
    ``updated_at`` never precedes ``created_at``.
    """

    id: SnippetId
    title: str
    body: str
    description: str = ""
    language: str = DEFAULT_LANGUAGE
    tags: TagSet = Field(default_factory=lambda: TagSet(()))
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_timestamps(self) -> "Snippet":
        """Ensure timestamps never run backwards."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not precede created_at")
        return self

    def with_fields(self, fields: SnippetFields, now: datetime | None = None) -> "Snippet":
        """Return a copy carrying ``fields`` and a refreshed ``updated_at``.

        Args:
            fields: New field values (full replacement)
            now: Mutation time, defaults to the current UTC time

        Returns:
            Updated snippet (domain models are immutable)
        """
        now = now or utcnow()
        return self.model_copy(
            update={
                **fields.model_dump(exclude={"tags"}),
                "tags": fields.tags,
                "updated_at": max(now, self.updated_at),
            }
        )
