"""Tag domain service."""

import logfire

from snipforge.config import AutocompleteSettings
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.value.tags import collect_vocabulary

from . import autocomplete
from .base import Service


class TagService(Service):
    """Domain service for the tag vocabulary and tag autocomplete.

    The vocabulary is never stored; it is derived from the snippet collection
    on every call.
    """

    def __init__(
        self,
        snippet_repository: SnippetRepository,
        settings: AutocompleteSettings,
    ) -> None:
        """Initialize tag service.

        Args:
            snippet_repository: Snippet repository
            settings: Autocomplete configuration
        """
        self.snippet_repository = snippet_repository
        self.settings = settings

    async def get_vocabulary(self) -> list[str]:
        """Get every distinct tag in use, sorted alphabetically.

        Returns:
            Tag vocabulary
        """
        with logfire.span("tag_service.get_vocabulary"):
            snippets = await self.snippet_repository.list_all()
            vocabulary = collect_vocabulary(snippets)
            logfire.info("Tag vocabulary derived", count=len(vocabulary))
            return vocabulary

    async def suggest(self, partial: str, limit: int | None = None) -> list[str]:
        """Suggest tags starting with ``partial``.

        Args:
            partial: Partial tag
            limit: Maximum suggestions, defaults to the configured maximum

        Returns:
            Suggested tags in vocabulary order
        """
        with logfire.span("tag_service.suggest", partial=partial, limit=limit):
            vocabulary = await self.get_vocabulary()
            return autocomplete.suggest_tags(
                partial, vocabulary, limit or self.settings.max_suggestions
            )

    async def complete_tag_input(self, text: str) -> autocomplete.TagCompletion:
        """Complete the last tag of a tag list.

        Args:
            text: Separator-joined tags being typed

        Returns:
            Completion result
        """
        with logfire.span("tag_service.complete_tag_input", text=text):
            vocabulary = await self.get_vocabulary()
            result = autocomplete.complete_tag_input(
                text, vocabulary, separator=self.settings.separator
            )
            if result.was_completed:
                logfire.debug(
                    "Tag completed",
                    typed=result.original_last_tag,
                    suggestion=result.suggestion,
                )
            return result

    async def complete_at_cursor(
        self, text: str, cursor_position: int
    ) -> autocomplete.InlineSuggestion:
        """Inline suggestion for the tag under the caret.

        Args:
            text: Separator-joined tags being typed
            cursor_position: Caret offset

        Returns:
            Inline suggestion
        """
        with logfire.span(
            "tag_service.complete_at_cursor", text=text, cursor_position=cursor_position
        ):
            vocabulary = await self.get_vocabulary()
            return autocomplete.complete_at_cursor(
                text, cursor_position, vocabulary, separator=self.settings.separator
            )

    async def complete_search_query(
        self, query: str, cursor_position: int
    ) -> autocomplete.QueryCompletion:
        """Complete a tag inside a ``tag:`` clause of a search query.

        Args:
            query: Search query being typed
            cursor_position: Caret offset

        Returns:
            Query completion
        """
        with logfire.span(
            "tag_service.complete_search_query",
            query=query,
            cursor_position=cursor_position,
        ):
            vocabulary = await self.get_vocabulary()
            return autocomplete.complete_search_query(query, cursor_position, vocabulary)

    def should_trigger(self, last_key: str, text: str | None = None) -> bool:
        """Whether a key press should request a completion."""
        return autocomplete.should_trigger(
            last_key, text, skip_keys=self.settings.skip_keys
        )
