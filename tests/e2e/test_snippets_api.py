"""End-to-end tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from snipforge.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


def _create(client, **overrides) -> dict:
    payload = {
        "title": "SSH connect",
        "body": "ssh {{username}}@{{server address}}",
        "tags": ["SSH", "Remote"],
        "language": "bash",
    }
    payload.update(overrides)
    response = client.post("/snippets", json=payload)
    assert response.status_code == 201
    return response.json()["snippet"]


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSnippetEndpoints:
    """Tests for snippet CRUD, search and rendering."""

    def test_create_and_get(self, client):
        created = _create(client)

        response = client.get(f"/snippets/{created['snippet_id']}")

        assert response.status_code == 200
        assert response.json()["snippet"]["tags"] == ["ssh", "remote"]

    def test_get_missing_returns_404(self, client):
        response = client.get("/snippets/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404

    def test_create_requires_title(self, client):
        response = client.post("/snippets", json={"title": "", "body": "x"})
        assert response.status_code == 422

    def test_update_and_delete(self, client):
        created = _create(client)
        url = f"/snippets/{created['snippet_id']}"

        response = client.put(url, json={"title": "SSH jump", "body": "ssh -J a b"})
        assert response.status_code == 200
        assert response.json()["snippet"]["title"] == "SSH jump"

        assert client.delete(url).status_code == 200
        assert client.delete(url).status_code == 404
        assert client.put(url, json={"title": "x", "body": "y"}).status_code == 404

    def test_search(self, client):
        _create(client)
        _create(client, title="Git status", body="git status", tags=["git"])

        response = client.get("/snippets", params={"q": "tag:git|title:ssh"})
        assert response.status_code == 200
        assert response.json()["total"] == 0

        response = client.get("/snippets", params={"q": "tag:remote"})
        assert [s["title"] for s in response.json()["snippets"]] == ["SSH connect"]

        response = client.get("/snippets")
        assert response.json()["total"] == 2

    def test_variables_and_render(self, client):
        created = _create(client)
        url = f"/snippets/{created['snippet_id']}"

        response = client.get(f"{url}/variables")
        assert response.json()["variables"] == ["username", "server address"]

        response = client.post(f"{url}/render", json={"values": {"username": "al"}})
        assert response.status_code == 200
        assert response.json()["rendered"] == "ssh al@{{server address}}"
        assert response.json()["missing"] == ["server address"]


class TestTagEndpoints:
    """Tests for tag vocabulary and autocomplete."""

    def test_list_and_suggest(self, client):
        _create(client, tags=["github", "docker", "system"])

        assert client.get("/tags").json()["tags"] == ["docker", "github", "system"]

        response = client.get("/tags/suggest", params={"partial": "Sy"})
        assert response.json()["suggestions"] == ["system"]

    def test_complete(self, client):
        _create(client, tags=["github", "docker", "system"])

        response = client.post("/tags/complete", json={"text": "github,docker,sys"})

        assert response.status_code == 200
        assert response.json()["completed"] == "github, docker, system, "
        assert response.json()["suggestion"] == "system"

    def test_complete_query_mode(self, client):
        _create(client, tags=["docker"])

        response = client.post(
            "/tags/complete", json={"text": "tag:do", "mode": "query"}
        )

        assert response.json()["completed"] == "tag:docker"


class TestTransferEndpoints:
    """Tests for export and import."""

    def test_export_import_round_trip(self, client):
        _create(client, tags=["git"])
        _create(client, title="Compose", body="docker compose up", tags=["docker"])

        response = client.get("/transfer/export", params={"tags": ["git"]})
        assert response.status_code == 200
        assert "snipforge-commands_git_" in response.headers["content-disposition"]
        document = response.json()
        assert document["total_commands"] == 1
        assert document["filter_tags"] == ["git"]

        response = client.post("/transfer/import", json=document)
        assert response.status_code == 201
        assert response.json()["imported"] == 1
        assert client.get("/snippets").json()["total"] == 3

    def test_invalid_import_returns_422(self, client):
        response = client.post(
            "/transfer/import",
            json={"version": "2.0", "commands": [{"title": "x", "body": "y", "tags": "git"}]},
        )

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["index"] == 0
        assert detail["field"] == "tags"
