"""
Locale URL component - turn a page URL into its localized variant.

Templates use four tokens: [scheme], [locale], [host], [uri].
Three layouts are supported, picked by where [locale] sits:
- subdomain:   [scheme]://[locale][host][uri]     -> http://fr.example.com/page
- path prefix: [scheme]://[host][locale][uri]     -> http://example.com/fr/page
- query param: [scheme]://[host][uri]?[locale]    -> http://example.com/page?locale=fr

The default locale gets no subdomain, prefix or parameter.

Hosts are reduced to their last two labels. This is not a public suffix
lookup: `shop.example.co.uk` becomes `co.uk`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urljoin, urlsplit, urlunsplit

from metatags.core.ports.request import RequestPort
from metatags.rules.models import DEFAULT_LOCALE_URL

SUBDOMAIN_MARKER = "//[locale]"
PATH_MARKER = "[host][locale]"
QUERY_MARKER = "?[locale]"

_REPEATED_SLASHES = re.compile(r"/{2,}")


@dataclass(frozen=True)
class UrlParts:
    """Pieces substituted into a locale URL template."""

    scheme: str
    host: str
    uri: str


# --- Pure Functions ---


def reduce_host(host: str) -> str:
    """Keep the last two dot-separated labels of a host."""
    labels = host.split(".")
    if len(labels) < 2:
        return host
    return f"{labels[-2]}.{labels[-1]}"


def normalize_uri(uri: str) -> str:
    return "/" + uri.strip("/")


def parts_from_url(url: str) -> UrlParts:
    """Split an absolute URL into scheme, reduced host (no port) and uri."""
    parsed = urlsplit(url)

    uri = parsed.path
    if parsed.query:
        uri += "?" + parsed.query

    host = (parsed.hostname or "").strip().lower()

    return UrlParts(
        scheme=parsed.scheme or "http",
        host=reduce_host(host),
        uri=normalize_uri(uri),
    )


def parts_from_request(request: RequestPort) -> UrlParts:
    """Same as parts_from_url, for the current request (the port is kept)."""
    uri = request.path
    if request.query:
        uri += "?" + request.query

    return UrlParts(
        scheme=request.scheme,
        host=reduce_host(request.http_host),
        uri=normalize_uri(uri),
    )


def locale_token(locale: str, default_locale: str, template: str, parts: UrlParts) -> tuple[str, str]:
    """
    Shape the locale for the template layout.

    Returns the (possibly rewritten) template and the value for [locale].
    """
    token = "" if locale == default_locale else locale.lower()

    if "?[uri]" in template:
        template = template.replace("?[uri]", "[uri]?")

    if not token:
        return template, token

    if SUBDOMAIN_MARKER in template:
        token += "."
    elif PATH_MARKER in template:
        if not parts.host.endswith("/"):
            token = "/" + token
    elif QUERY_MARKER in template:
        separator = "&" if "?" in parts.uri else "?"
        token = f"{separator}locale={token}"
        template = template.replace("?", "")

    return template, token


def fill_template(template: str, parts: UrlParts, token: str) -> str:
    filled = (
        template.replace("[scheme]", parts.scheme)
        .replace("[locale]", token)
        .replace("[host]", parts.host)
        .replace("[uri]", parts.uri)
    )
    return filled.rstrip("?&/")


def normalize_url(url: str, request: RequestPort, host: str | None = None) -> str:
    """
    Make a filled template absolute and tidy its path.

    A result without a scheme gets the request scheme when its first segment
    ends with `host` (or it starts with `//`), and is otherwise resolved as a
    path on the request host.
    """
    if url.startswith("//"):
        url = f"{request.scheme}:{url}"
    elif "://" not in url:
        if host and url.split("/", 1)[0].endswith(host):
            url = f"{request.scheme}://{url}"
        else:
            base = f"{request.scheme}://{request.http_host}/"
            url = urljoin(base, url.lstrip("/"))

    parsed = urlsplit(url)
    path = _REPEATED_SLASHES.sub("/", parsed.path)

    return urlunsplit((parsed.scheme, parsed.netloc, path, parsed.query, parsed.fragment))


# --- Builder ---


class LocaleUrlBuilder:
    """Localized URLs for the current request."""

    def __init__(
        self,
        request: RequestPort,
        default_locale: str = "en",
        template: str = DEFAULT_LOCALE_URL,
    ) -> None:
        self._request = request
        self._default_locale = default_locale
        self._template = template

    def localized_url(self, locale: str, url: str | None = None) -> str:
        """
        Build the URL for `locale`.

        Args:
            locale: Locale code, e.g. "fr"
            url: Absolute URL to localize; defaults to the current request

        Returns:
            Absolute localized URL
        """
        parts = parts_from_url(url) if url else parts_from_request(self._request)

        template, token = locale_token(locale, self._default_locale, self._template, parts)

        return normalize_url(fill_template(template, parts, token), self._request, parts.host)


def create_locale_url_builder(
    request: RequestPort,
    default_locale: str = "en",
    template: str = DEFAULT_LOCALE_URL,
) -> LocaleUrlBuilder:
    """Create a LocaleUrlBuilder."""
    return LocaleUrlBuilder(request, default_locale=default_locale, template=template)
