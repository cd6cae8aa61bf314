"""Unit tests for SnippetService."""

from uuid import uuid4

import pytest

from snipforge.domain.error import NotFoundError
from snipforge.domain.model import SnippetFields
from snipforge.domain.repository import SnippetRepository
from snipforge.domain.service import SnippetService
from snipforge.domain.value import SnippetId, TagSet
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _fields(**overrides) -> SnippetFields:
    values = {
        "title": "SSH connect",
        "body": "ssh {{user}}@{{host}}",
        "tags": TagSet(["SSH", "remote"]),
    }
    values.update(overrides)
    return SnippetFields(**values)


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, unit_env):
        service = await unit_env.get(SnippetService)

        snippet = await service.create(_fields())

        assert snippet.id is not None
        assert snippet.created_at == snippet.updated_at
        assert list(snippet.tags) == ["ssh", "remote"]
        assert snippet.language == "plaintext"


class TestUpdate:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, unit_env):
        service = await unit_env.get(SnippetService)
        created = await service.create(_fields())

        updated = await service.update(
            created.id, _fields(title="SSH jump", tags=TagSet(["ssh"]))
        )

        assert updated.title == "SSH jump"
        assert list(updated.tags) == ["ssh"]
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_update_moves_snippet_to_front(self, unit_env):
        service = await unit_env.get(SnippetService)
        repo = await unit_env.get(SnippetRepository)
        first = await service.create(_fields(title="first"))
        await service.create(_fields(title="second"))

        await service.update(first.id, _fields(title="first edited"))

        snippets = await repo.list_all()
        assert snippets[0].title == "first edited"

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, unit_env):
        service = await unit_env.get(SnippetService)
        with pytest.raises(NotFoundError, match="Snippet not found"):
            await service.update(SnippetId(uuid4()), _fields())


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_removes_snippet(self, unit_env):
        service = await unit_env.get(SnippetService)
        created = await service.create(_fields())

        await service.delete(created.id)

        with pytest.raises(NotFoundError):
            await service.get_by_id(created.id)

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, unit_env):
        service = await unit_env.get(SnippetService)
        with pytest.raises(NotFoundError):
            await service.delete(SnippetId(uuid4()))


class TestRender:
    """Tests for render."""

    @pytest.mark.asyncio
    async def test_render_keeps_unresolved_placeholders(self, unit_env):
        service = await unit_env.get(SnippetService)
        created = await service.create(_fields())

        snippet, rendered = await service.render(created.id, {"user": "al"})

        assert snippet.id == created.id
        assert rendered == "ssh al@{{host}}"
