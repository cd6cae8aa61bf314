"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID

from snipforge.domain.model import DEFAULT_LANGUAGE, Snippet, SnippetFields
from snipforge.domain.value import SnippetId, TagSet


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_snippet(row: Dict[str, Any]) -> Snippet:
    """Convert database row to Snippet domain model.

    A corrupt ``tags`` column decodes to an empty tag set instead of failing
    the whole read.

    Args:
        row: Database row as dict

    Returns:
        Snippet domain model
    """
    return Snippet(
        id=SnippetId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        title=row["title"],
        body=row["body"],
        description=row.get("description") or "",
        language=row.get("language") or DEFAULT_LANGUAGE,
        tags=TagSet.from_json(row.get("tags")),
        created_at=_as_utc(row["created_at"]),
        updated_at=_as_utc(row["updated_at"]),
    )


def fields_to_row(fields: SnippetFields) -> Dict[str, Any]:
    """Convert writable snippet fields to column values.

    Args:
        fields: Snippet fields

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "title": fields.title,
        "body": fields.body,
        "description": fields.description,
        "language": fields.language,
        "tags": fields.tags.to_json(),
    }
