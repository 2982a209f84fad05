"""
Locale URL component - localized alternate URLs for hreflang links.
"""

from .component import (
    PATH_MARKER,
    QUERY_MARKER,
    SUBDOMAIN_MARKER,
    LocaleUrlBuilder,
    UrlParts,
    create_locale_url_builder,
    fill_template,
    locale_token,
    normalize_uri,
    normalize_url,
    parts_from_request,
    parts_from_url,
    reduce_host,
)

__all__ = [
    # Builder
    "LocaleUrlBuilder",
    "create_locale_url_builder",
    # Pure functions
    "reduce_host",
    "normalize_uri",
    "normalize_url",
    "parts_from_url",
    "parts_from_request",
    "locale_token",
    "fill_template",
    # Models / constants
    "UrlParts",
    "SUBDOMAIN_MARKER",
    "PATH_MARKER",
    "QUERY_MARKER",
]
