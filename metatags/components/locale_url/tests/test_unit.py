"""
Unit tests for the Locale URL component.

Tests:
- Host reduction heuristic
- Subdomain, path prefix and query parameter layouts
- Default locale handling
- Relative templates resolved against the current request
"""

from __future__ import annotations

import pytest

from metatags.components.locale_url import (
    LocaleUrlBuilder,
    UrlParts,
    create_locale_url_builder,
    locale_token,
    normalize_url,
    parts_from_request,
    parts_from_url,
    reduce_host,
)
from metatags.core.ports.request import RequestContext

SUBDOMAIN = "[scheme]://[locale][host][uri]"
PATH_PREFIX = "[scheme]://[host][locale][uri]"
QUERY_PARAM = "[scheme]://[host][uri]?[locale]"


# --- Fixtures ---


@pytest.fixture
def request_ctx() -> RequestContext:
    return RequestContext(
        url="https://www.example.com/blog/post",
        scheme="https",
        http_host="www.example.com",
        path="/blog/post",
    )


def builder(request_ctx: RequestContext, template: str) -> LocaleUrlBuilder:
    return create_locale_url_builder(request_ctx, default_locale="en", template=template)


# --- Pure Functions ---


class TestReduceHost:
    """Two-label host heuristic."""

    def test_strips_subdomains(self) -> None:
        assert reduce_host("www.shop.example.com") == "example.com"

    def test_two_labels_unchanged(self) -> None:
        assert reduce_host("example.com") == "example.com"

    def test_single_label_unchanged(self) -> None:
        assert reduce_host("localhost") == "localhost"

    def test_multi_label_suffix_not_handled(self) -> None:
        """Known limitation: public suffixes like co.uk are not recognized."""
        assert reduce_host("shop.example.co.uk") == "co.uk"


class TestParts:
    def test_parts_from_url(self) -> None:
        parts = parts_from_url("HTTPS://WWW.Example.com:8443/a/b/?q=1")
        assert parts == UrlParts(scheme="https", host="example.com", uri="/a/b/?q=1")

    def test_parts_from_url_root(self) -> None:
        assert parts_from_url("http://example.com").uri == "/"

    def test_parts_from_request_keeps_port(self) -> None:
        ctx = RequestContext(
            url="http://localhost:8000/page",
            scheme="http",
            http_host="dev.localhost:8000",
            path="/page/",
            query="a=1",
        )
        parts = parts_from_request(ctx)
        assert parts.host == "dev.localhost:8000"
        assert parts.uri == "/page/?a=1"


class TestLocaleToken:
    def test_default_locale_is_empty(self) -> None:
        parts = UrlParts(scheme="http", host="example.com", uri="/")
        assert locale_token("en", "en", SUBDOMAIN, parts) == (SUBDOMAIN, "")

    def test_uppercase_lowered(self) -> None:
        parts = UrlParts(scheme="http", host="example.com", uri="/")
        assert locale_token("FR", "en", SUBDOMAIN, parts) == (SUBDOMAIN, "fr.")

    def test_query_uri_rewritten(self) -> None:
        parts = UrlParts(scheme="http", host="example.com", uri="/")
        template, _ = locale_token("en", "en", "[scheme]://[host]?[uri]", parts)
        assert template == "[scheme]://[host][uri]?"


# --- Layouts ---


class TestSubdomainLayout:
    def test_locale_subdomain(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, "[scheme]://[locale]www.[host]/[uri]").localized_url(
            "fr", "http://example.com/page"
        )
        assert url == "http://fr.www.example.com/page"

    def test_default_locale_has_no_subdomain(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, SUBDOMAIN).localized_url("en", "https://www.example.com/page")
        assert url == "https://example.com/page"

    def test_uses_request_when_no_url(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, SUBDOMAIN).localized_url("de")
        assert url == "https://de.example.com/blog/post"

    def test_root_has_no_trailing_slash(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, SUBDOMAIN).localized_url("fr", "https://example.com/")
        assert url == "https://fr.example.com"


class TestPathLayout:
    def test_locale_prefix(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, PATH_PREFIX).localized_url("fr", "https://example.com/page")
        assert url == "https://example.com/fr/page"

    def test_default_locale_has_no_prefix(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, PATH_PREFIX).localized_url("en", "https://example.com/page")
        assert url == "https://example.com/page"

    def test_no_extra_slash_when_host_ends_with_slash(self) -> None:
        ctx = RequestContext(
            url="https://example.com/blog/post",
            scheme="https",
            http_host="example.com/",
            path="/blog/post",
        )
        assert builder(ctx, PATH_PREFIX).localized_url("fr") == "https://example.com/fr/blog/post"

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [
            ("fr", "https://example.com/fr/page?a=1"),
            ("en", "https://example.com/page?a=1"),
        ],
    )
    def test_query_before_uri_template(
        self, request_ctx: RequestContext, locale: str, expected: str
    ) -> None:
        """`?[uri]` in a template is read as `[uri]?`."""
        url = builder(request_ctx, "[scheme]://[host][locale]?[uri]").localized_url(
            locale, "https://example.com/page?a=1"
        )
        assert url == expected


class TestQueryLayout:
    def test_locale_param(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, QUERY_PARAM).localized_url("fr", "https://example.com/page")
        assert url == "https://example.com/page?locale=fr"

    def test_locale_param_appended_to_query(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, QUERY_PARAM).localized_url("fr", "https://example.com/page?a=1")
        assert url == "https://example.com/page?a=1&locale=fr"

    def test_default_locale_has_no_param(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, QUERY_PARAM).localized_url("en", "https://example.com/page")
        assert url == "https://example.com/page"


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("[host][locale][uri]", "https://example.com/fr/page"),
            ("//[host][uri]?[locale]", "https://example.com/page?locale=fr"),
        ],
    )
    def test_schemeless_template_uses_request_scheme(
        self, request_ctx: RequestContext, template: str, expected: str
    ) -> None:
        url = builder(request_ctx, template).localized_url("fr", "http://example.com/page")
        assert url == expected

    def test_relative_template_made_absolute(self, request_ctx: RequestContext) -> None:
        url = builder(request_ctx, "/[locale][uri]").localized_url("fr", "https://example.com/page")
        assert url == "https://www.example.com/fr/page"

    def test_repeated_slashes_collapsed(self, request_ctx: RequestContext) -> None:
        assert normalize_url("http://example.com//a///b", request_ctx) == "http://example.com/a/b"
