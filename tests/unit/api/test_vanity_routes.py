"""Tests for the HTTP API."""

import httpx
import pytest
from fastapi.testclient import TestClient
from jinja2 import TemplateError

from vanity_imports.api.main import create_app
from vanity_imports.config.loader import build_config
from vanity_imports.config.settings import Settings
from vanity_imports.core.models.config import ResolverConfig
from vanity_imports.services.config_store import ConfigStore

SOURCE = "https://config.example.com/vanity.yaml"


def _client(config: ResolverConfig, **settings) -> TestClient:
    store = ConfigStore(None)
    store.publish(config)
    return TestClient(create_app(settings=Settings(**settings), store=store))


@pytest.fixture
def config() -> ResolverConfig:
    return build_config(
        {
            "cache_max_age": 600,
            "paths": {
                "/lib": {"repo": "https://github.com/org/lib"},
                "/lib/sub": {"repo": "https://github.com/org/sub"},
            },
        }
    )


@pytest.mark.unit
class TestVanityRoutes:
    """Tests for the vanity catch-all route."""

    def test_match(self, config: ResolverConfig) -> None:
        with _client(config) as client:
            response = client.get("/lib/sub/pkg?go-get=1")
        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=600"
        assert response.headers["content-type"].startswith("text/html")
        assert (
            '<meta name="go-import" content="testserver/lib/sub git https://github.com/org/sub">'
            in response.text
        )

    def test_host_header_used(self, config: ResolverConfig) -> None:
        with _client(config) as client:
            response = client.get("/lib", headers={"host": "go.example.com"})
        assert 'content="go.example.com/lib git https://github.com/org/lib"' in response.text

    def test_host_override(self) -> None:
        config = build_config(
            {"host": "go.example.com", "paths": {"/lib": {"repo": "https://github.com/org/lib"}}}
        )
        with _client(config) as client:
            response = client.get("/lib", headers={"host": "other.example.org"})
        assert 'content="go.example.com/lib git https://github.com/org/lib"' in response.text

    def test_index(self, config: ResolverConfig) -> None:
        with _client(config) as client:
            response = client.get("/")
        assert response.status_code == 200
        assert "cache-control" not in response.headers
        assert "Welcome to testserver" in response.text
        assert "https://pkg.go.dev/testserver/lib" in response.text
        assert "https://pkg.go.dev/testserver/lib/sub" in response.text

    def test_index_empty(self) -> None:
        with _client(ResolverConfig()) as client:
            response = client.get("/")
        assert response.status_code == 200
        assert "<li>" not in response.text

    def test_not_found(self, config: ResolverConfig) -> None:
        with _client(config) as client:
            response = client.get("/library")
        assert response.status_code == 404
        assert response.text == "404 page not found"

    def test_head_request(self, config: ResolverConfig) -> None:
        with _client(config) as client:
            response = client.head("/lib/sub/pkg")
        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=600"

    def test_render_failure(self, config: ResolverConfig, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(match):
            raise TemplateError("broken template")

        monkeypatch.setattr("vanity_imports.api.routers.vanity.render_vanity_page", broken)
        with _client(config) as client:
            response = client.get("/lib")
        assert response.status_code == 500
        assert response.text == "cannot render the page"
        assert "cache-control" not in response.headers

    def test_admin_disabled_by_default(self, config: ResolverConfig) -> None:
        with _client(config) as client:
            response = client.post("/_admin/reload")
        assert response.status_code == 405


@pytest.mark.unit
class TestAdminReload:
    """Tests for the reload endpoint."""

    def _app(self, *responses: tuple[int, bytes]):
        queue = list(responses)

        def handler(request: httpx.Request) -> httpx.Response:
            status_code, content = queue.pop(0)
            return httpx.Response(status_code, content=content)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        store = ConfigStore(SOURCE, client=client)
        settings = Settings(config_url=SOURCE, admin_reload_enabled=True)
        return create_app(settings=settings, store=store)

    def test_reload(self) -> None:
        app = self._app(
            (200, b"paths:\n  /a:\n    repo: https://github.com/org/a\n"),
            (200, b"paths:\n  /b:\n    repo: https://github.com/org/b\n"),
        )
        with TestClient(app) as client:
            assert client.get("/a").status_code == 200

            response = client.post("/_admin/reload")
            assert response.status_code == 200
            assert response.json() == {"entries": 1}

            assert client.get("/a").status_code == 404
            assert client.get("/b").status_code == 200

    def test_failed_reload_keeps_serving(self) -> None:
        app = self._app(
            (200, b"paths:\n  /a:\n    repo: https://github.com/org/a\n"),
            (200, b"paths:\n  /a:\n    repo: https://example.com/a\n"),
        )
        with TestClient(app) as client:
            response = client.post("/_admin/reload")
            assert response.status_code == 502
            assert "cannot infer VCS" in response.json()["detail"]

            assert client.get("/a").status_code == 200

    def test_undecodable_reload_keeps_serving(self) -> None:
        app = self._app(
            (200, b"paths:\n  /a:\n    repo: https://github.com/org/a\n"),
            (200, b"paths:\n  /a:\n    repo: https://github.com/org/\xff\xfe\n"),
        )
        with TestClient(app) as client:
            response = client.post("/_admin/reload")
            assert response.status_code == 502
            assert "could not parse config" in response.json()["detail"]

            assert client.get("/a").status_code == 200
