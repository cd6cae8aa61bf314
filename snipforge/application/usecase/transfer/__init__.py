"""Export/import use cases."""

from .export_snippets import (
    ExportSnippetsRequest,
    ExportSnippetsResponse,
    ExportSnippetsUseCase,
)
from .import_snippets import (
    ImportSnippetsRequest,
    ImportSnippetsResponse,
    ImportSnippetsUseCase,
)

__all__ = [
    "ExportSnippetsRequest",
    "ExportSnippetsResponse",
    "ExportSnippetsUseCase",
    "ImportSnippetsRequest",
    "ImportSnippetsResponse",
    "ImportSnippetsUseCase",
]
