"""Unit tests for search and tag use cases."""

import pytest

from snipforge.application.usecase.search import (
    SearchSnippetsRequest,
    SearchSnippetsUseCase,
)
from snipforge.application.usecase.snippet import (
    CreateSnippetRequest,
    CreateSnippetUseCase,
)
from snipforge.application.usecase.tag import (
    CompleteTagsRequest,
    CompleteTagsUseCase,
    CompletionMode,
    ListTagsRequest,
    ListTagsUseCase,
    SuggestTagsRequest,
    SuggestTagsUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env) -> None:
    create = await unit_env.get(CreateSnippetUseCase)
    for title, body, tags in [
        ("Git status", "git status -sb", ["git"]),
        ("GitHub CLI login", "gh auth login", ["github", "git"]),
        ("System info", "uname -a", ["system"]),
    ]:
        await create.execute(CreateSnippetRequest(title=title, body=body, tags=tags))


class TestSearchSnippets:
    """Tests for SearchSnippetsUseCase."""

    @pytest.mark.asyncio
    async def test_empty_query_lists_most_recent_first(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(SearchSnippetsUseCase)

        response = await use_case.execute(SearchSnippetsRequest())

        assert response.total == 3
        assert [s.title for s in response.snippets] == [
            "System info",
            "GitHub CLI login",
            "Git status",
        ]

    @pytest.mark.asyncio
    async def test_tag_filter(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(SearchSnippetsUseCase)

        response = await use_case.execute(SearchSnippetsRequest(query="tag:github"))

        assert [s.title for s in response.snippets] == ["GitHub CLI login"]


class TestTagUseCases:
    """Tests for tag listing, suggestion and completion."""

    @pytest.mark.asyncio
    async def test_list_tags(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(ListTagsUseCase)

        response = await use_case.execute(ListTagsRequest())

        assert response.tags == ["git", "github", "system"]

    @pytest.mark.asyncio
    async def test_suggest_tags(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(SuggestTagsUseCase)

        response = await use_case.execute(SuggestTagsRequest(partial="Gi"))

        assert response.suggestions == ["git", "github"]

    @pytest.mark.asyncio
    async def test_complete_tag_list(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(CompleteTagsUseCase)

        response = await use_case.execute(CompleteTagsRequest(text="git,sys"))

        assert response.triggered
        assert response.was_completed
        assert response.completed == "git, system, "
        assert response.cursor_position == len("git, system, ")

    @pytest.mark.asyncio
    async def test_complete_at_cursor(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(CompleteTagsUseCase)

        response = await use_case.execute(
            CompleteTagsRequest(text="sy, git", mode=CompletionMode.CURSOR, cursor_position=2)
        )

        assert response.completion_text == "stem"
        assert response.completed == "system, git"
        assert response.cursor_position == len("system")

    @pytest.mark.asyncio
    async def test_complete_search_query(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(CompleteTagsUseCase)

        response = await use_case.execute(
            CompleteTagsRequest(text="title:login|tag:gith", mode=CompletionMode.QUERY)
        )

        assert response.completed == "title:login|tag:github"

    @pytest.mark.asyncio
    async def test_skip_key_does_not_trigger(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(CompleteTagsUseCase)

        response = await use_case.execute(
            CompleteTagsRequest(text="sys", last_key="Backspace")
        )

        assert not response.triggered
        assert response.completed is None

    @pytest.mark.asyncio
    async def test_nothing_to_complete(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(CompleteTagsUseCase)

        response = await use_case.execute(CompleteTagsRequest(text="git"))

        assert response.triggered
        assert not response.was_completed
        assert response.completed is None
        assert response.current_tag == "git"
