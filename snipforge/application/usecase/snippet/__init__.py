"""Snippet use cases."""

from .common import SnippetItem
from .create_snippet import (
    CreateSnippetRequest,
    CreateSnippetResponse,
    CreateSnippetUseCase,
)
from .delete_snippet import (
    DeleteSnippetRequest,
    DeleteSnippetResponse,
    DeleteSnippetUseCase,
)
from .get_snippet import GetSnippetRequest, GetSnippetResponse, GetSnippetUseCase
from .update_snippet import (
    UpdateSnippetRequest,
    UpdateSnippetResponse,
    UpdateSnippetUseCase,
)
from .variables import (
    GetVariablesRequest,
    GetVariablesResponse,
    GetVariablesUseCase,
    RenderSnippetRequest,
    RenderSnippetResponse,
    RenderSnippetUseCase,
)

__all__ = [
    "CreateSnippetRequest",
    "CreateSnippetResponse",
    "CreateSnippetUseCase",
    "DeleteSnippetRequest",
    "DeleteSnippetResponse",
    "DeleteSnippetUseCase",
    "GetSnippetRequest",
    "GetSnippetResponse",
    "GetSnippetUseCase",
    "GetVariablesRequest",
    "GetVariablesResponse",
    "GetVariablesUseCase",
    "RenderSnippetRequest",
    "RenderSnippetResponse",
    "RenderSnippetUseCase",
    "SnippetItem",
    "UpdateSnippetRequest",
    "UpdateSnippetResponse",
    "UpdateSnippetUseCase",
]
