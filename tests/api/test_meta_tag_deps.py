"""
Tests for the per-request FastAPI dependencies.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse
from fastapi.testclient import TestClient

from metatags.api import deps
from metatags.components.metatag import MetaTag
from metatags.core.ports.request import RequestContext
from metatags.rules.loader import load_rules
from metatags.rules.models import MetaTagsRules

# --- Test Setup ---


@pytest.fixture
def app(rules_path: Path) -> FastAPI:
    """Test app that renders meta tags for any article path."""
    app = FastAPI()

    @app.get("/articles/{slug}", response_class=HTMLResponse)
    def article(slug: str, meta: MetaTag = Depends(deps.get_meta_tag)) -> str:
        meta.set_title(slug.replace("-", " ").title()).set_type("article")
        return meta.render_all()

    rules = load_rules(rules_path)
    app.dependency_overrides[deps.get_rules] = lambda: rules
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


# --- Tests ---


class TestGetRequestContext:
    def test_context_from_request(self) -> None:
        app = FastAPI()

        @app.get("/ctx/{rest:path}")
        def ctx(
            rest: str, request_ctx: RequestContext = Depends(deps.get_request_context)
        ) -> dict[str, str]:
            return {
                "url": request_ctx.url,
                "scheme": request_ctx.scheme,
                "host": request_ctx.http_host,
                "path": request_ctx.path,
                "query": request_ctx.query,
            }

        response = TestClient(app).get("/ctx/a/b?x=1")
        assert response.json() == {
            "url": "http://testserver/ctx/a/b",
            "scheme": "http",
            "host": "testserver",
            "path": "/ctx/a/b",
            "query": "x=1",
        }


class TestGetMetaTag:
    def test_renders_for_request(self, client: TestClient) -> None:
        response = client.get("/articles/hello-world")
        assert response.status_code == 200

        html = response.text
        assert '<meta name="title" content="Hello World - My Site">' in html
        assert '<meta property="og:url" content="http://testserver/articles/hello-world">' in html
        assert '<meta property="og:type" content="article">' in html
        assert '<meta property="og:site_name" content="My Site">' in html
        assert '<meta property="twitter:card" content="summary_large_image">' in html
        assert '<meta property="twitter:domain" content="testserver">' in html

    def test_hreflang_for_configured_locales(self, client: TestClient) -> None:
        html = client.get("/articles/hello-world").text
        assert 'hreflang="x-default"' in html
        assert 'href="http://fr.testserver/articles/hello-world" hreflang="fr"' in html

    def test_new_engine_per_request(self, client: TestClient) -> None:
        first = client.get("/articles/one")
        second = client.get("/articles/two")
        assert "One - My Site" in first.text
        assert "One - My Site" not in second.text
        assert "Two - My Site" in second.text


class TestGetRules:
    def test_loads_from_settings_path(self, rules_path: Path) -> None:
        settings = deps.Settings()
        settings.rules_path = rules_path
        rules = deps.get_rules.__wrapped__(settings)

        assert isinstance(rules, MetaTagsRules)
        assert rules.title == "My Site"
