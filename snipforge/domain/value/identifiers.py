"""Strongly typed identifiers for SnipForge domain entities."""

from typing import NewType
from uuid import UUID

SnippetId = NewType("SnippetId", UUID)
