"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from snipforge.domain.model import Snippet
from snipforge.domain.value import SnippetId, TagSet

# Spans run without exporting anywhere
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_snippet(
    title: str,
    body: str = "echo hello",
    tags: tuple[str, ...] | list[str] = (),
    description: str = "",
    language: str = "bash",
    age_minutes: int = 0,
) -> Snippet:
    """Build a snippet for tests.

    ``age_minutes`` moves both timestamps into the past, so older snippets
    sort after newer ones.
    """
    when = BASE_TIME - timedelta(minutes=age_minutes)
    return Snippet(
        id=SnippetId(uuid4()),
        title=title,
        body=body,
        description=description,
        language=language,
        tags=TagSet(tags),
        created_at=when,
        updated_at=when,
    )
