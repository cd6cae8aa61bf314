"""Repository interfaces for the SnipForge domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from snipforge.domain.repository.snippet import SnippetRepository

__all__ = [
    "SnippetRepository",
]
