"""Export document for moving snippets between installations.

Serialized form::

    {
      "version": "2.0",
      "exported_at": "2026-01-01T12:00:00Z",
      "total_commands": 1,
      "commands": [
        {"title": ..., "body": ..., "description": ..., "tags": ["git"],
         "language": "bash", "created_at": ..., "updated_at": ...}
      ],
      "filter_tags": ["git"]   # only present when the export was filtered
    }
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from snipforge.domain.model.common import DomainModel
from snipforge.domain.model.snippet import DEFAULT_LANGUAGE


class ExportedSnippet(DomainModel):
    """One snippet in an export document."""

    title: str
    body: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    language: str = DEFAULT_LANGUAGE
    created_at: datetime
    updated_at: datetime


class ExportDocument(DomainModel):
    """Versioned export document."""

    version: str
    exported_at: datetime
    total_commands: int = Field(ge=0)
    commands: list[ExportedSnippet]
    filter_tags: list[str] | None = None

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-ready dict; ``filter_tags`` is omitted when unset."""
        return self.model_dump(mode="json", exclude_none=True)
