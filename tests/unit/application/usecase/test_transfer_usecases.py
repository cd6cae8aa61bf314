"""Unit tests for export and import use cases."""

import pytest

from snipforge.application.usecase.search import (
    SearchSnippetsRequest,
    SearchSnippetsUseCase,
)
from snipforge.application.usecase.transfer import (
    ExportSnippetsRequest,
    ExportSnippetsUseCase,
    ImportSnippetsRequest,
    ImportSnippetsUseCase,
)
from snipforge.domain.error import ImportValidationError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

DOCUMENT = {
    "version": "2.0",
    "commands": [
        {"title": "Git log", "body": "git log --oneline", "tags": ["git"]},
        {"title": "Compose up", "body": "docker compose up -d", "tags": ["Docker"]},
    ],
}


class TestImportSnippets:
    """Tests for ImportSnippetsUseCase."""

    @pytest.mark.asyncio
    async def test_import_creates_snippets(self, unit_env):
        use_case = await unit_env.get(ImportSnippetsUseCase)

        response = await use_case.execute(ImportSnippetsRequest(document=DOCUMENT))

        assert response.imported == 2
        assert len(set(response.snippet_ids)) == 2

    @pytest.mark.asyncio
    async def test_invalid_document_writes_nothing(self, unit_env):
        use_case = await unit_env.get(ImportSnippetsUseCase)
        search = await unit_env.get(SearchSnippetsUseCase)
        document = {
            "version": "2.0",
            "commands": [*DOCUMENT["commands"], {"title": "no body"}],
        }

        with pytest.raises(ImportValidationError, match="index 2"):
            await use_case.execute(ImportSnippetsRequest(document=document))

        listing = await search.execute(SearchSnippetsRequest())
        assert listing.total == 0


class TestExportSnippets:
    """Tests for ExportSnippetsUseCase."""

    @pytest.mark.asyncio
    async def test_filtered_export(self, unit_env):
        importer = await unit_env.get(ImportSnippetsUseCase)
        await importer.execute(ImportSnippetsRequest(document=DOCUMENT))
        use_case = await unit_env.get(ExportSnippetsUseCase)

        response = await use_case.execute(ExportSnippetsRequest(tags=["docker"]))

        assert response.document["total_commands"] == 1
        assert response.document["filter_tags"] == ["docker"]
        assert response.document["commands"][0]["language"] == "plaintext"
        assert response.filename.startswith("snipforge-commands_docker_")
        assert response.filename.endswith(".json")
