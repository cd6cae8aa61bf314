"""Complete tags use case."""

from enum import Enum

import logfire
from pydantic import BaseModel

from snipforge.application.usecase.base import BaseUseCase
from snipforge.domain.service import TagService


class CompletionMode(str, Enum):
    """Input shape being completed."""

    TAGS = "tags"  # Separator-joined tag list, complete the last tag
    CURSOR = "cursor"  # Tag list with a caret, inline suggestion
    QUERY = "query"  # Search query, complete inside a tag: clause


class CompleteTagsRequest(BaseModel):
    """Complete tags request."""

    text: str
    mode: CompletionMode = CompletionMode.TAGS
    cursor_position: int | None = None  # Defaults to the end of the text
    last_key: str | None = None  # Key that prompted the request, if any


class CompleteTagsResponse(BaseModel):
    """Complete tags response.

    ``completed`` is the full replacement text, or None when there is
    nothing to apply. ``completion_text`` is the untyped remainder of the
    suggestion, for inline display.
    """

    mode: CompletionMode
    triggered: bool
    was_completed: bool = False
    suggestion: str | None = None
    completed: str | None = None
    completion_text: str | None = None
    current_tag: str | None = None
    cursor_position: int | None = None


class CompleteTagsUseCase(BaseUseCase):
    """Use case for tag autocomplete in tag inputs and search queries."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize complete tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CompleteTagsRequest) -> CompleteTagsResponse:
        """Execute tag completion flow.

        Args:
            request: Text being typed, completion mode and caret

        Returns:
            Completion for the requested mode
        """
        with logfire.span(
            "complete_tags.execute", mode=request.mode.value, last_key=request.last_key
        ):
            if request.last_key is not None and not self.tag_service.should_trigger(
                request.last_key, request.text
            ):
                return CompleteTagsResponse(mode=request.mode, triggered=False)

            cursor = (
                len(request.text)
                if request.cursor_position is None
                else request.cursor_position
            )

            if request.mode is CompletionMode.CURSOR:
                inline = await self.tag_service.complete_at_cursor(request.text, cursor)
                completed = None
                if inline.suggestion is not None:
                    completed = (
                        inline.before_cursor + inline.completion_text + inline.after_cursor
                    )
                return CompleteTagsResponse(
                    mode=request.mode,
                    triggered=True,
                    was_completed=inline.suggestion is not None,
                    suggestion=inline.suggestion,
                    completed=completed,
                    completion_text=inline.completion_text,
                    current_tag=inline.current_tag,
                    cursor_position=(
                        len(inline.before_cursor) + len(inline.completion_text)
                        if inline.completion_text is not None
                        else None
                    ),
                )

            if request.mode is CompletionMode.QUERY:
                result = await self.tag_service.complete_search_query(
                    request.text, cursor
                )
                return CompleteTagsResponse(
                    mode=request.mode,
                    triggered=True,
                    was_completed=result.was_completed,
                    suggestion=result.suggestion,
                    completed=result.completed,
                    cursor_position=result.cursor_position,
                )

            completion = await self.tag_service.complete_tag_input(request.text)
            if not completion.was_completed:
                return CompleteTagsResponse(
                    mode=request.mode,
                    triggered=True,
                    current_tag=completion.original_last_tag,
                )
            return CompleteTagsResponse(
                mode=request.mode,
                triggered=True,
                was_completed=True,
                suggestion=completion.suggestion,
                completed=completion.completed,
                current_tag=completion.original_last_tag,
                cursor_position=len(completion.completed),
            )
