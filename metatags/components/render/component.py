"""
Render component - canonical, hreflang, Open Graph and Twitter Card markup.

Key behaviors:
- Config overrides (open_graph / twitter) win over values set at runtime
- og:url is always first and always the current request URL
- twitter:domain is always present, falling back to the request host
- hreflang alternates are only emitted when more than one locale is known
"""

from __future__ import annotations

from collections.abc import Mapping

from metatags.components.locale_url import LocaleUrlBuilder
from metatags.components.store import (
    AttributeStore,
    FieldValue,
    Gallery,
    ImageEntry,
    Scalar,
    to_field_value,
)
from metatags.core.ports.request import RequestPort
from metatags.rules.models import OverrideValue

from ._impl import create_tag
from .models import (
    OPEN_GRAPH_FIELDS,
    RENDER_ALL_SKIP,
    TWITTER_FIELDS,
    X_DEFAULT,
)


def resolve_field(
    field: str,
    overrides: Mapping[str, OverrideValue],
    store: AttributeStore,
) -> FieldValue | None:
    """Config override for `field`, else the stored value."""
    if field in overrides:
        return to_field_value(overrides[field])
    return store.value(field)


class MetaTagRenderer:
    """Structured renderers over one request's AttributeStore."""

    def __init__(
        self,
        store: AttributeStore,
        request: RequestPort,
        url_builder: LocaleUrlBuilder,
        default_locale: str = "en",
        open_graph: Mapping[str, OverrideValue] | None = None,
        twitter: Mapping[str, OverrideValue] | None = None,
    ) -> None:
        self._store = store
        self._request = request
        self._url_builder = url_builder
        self._default_locale = default_locale
        self._open_graph = open_graph or {}
        self._twitter = twitter or {}

    def canonical(self, url: str | None = None) -> str:
        """
        Canonical link plus one hreflang alternate per locale.

        URL priority: argument, stored canonical override, request URL.
        """
        url = url or self._store.links.get("canonical") or self._request.url

        html = create_tag({"rel": "canonical", "href": url}, "link")

        self._store.ensure_locale(self._default_locale)
        locales = self._store.locales

        if len(locales) > 1:
            for locale in locales:
                html += create_tag(
                    {
                        "rel": "alternate",
                        "href": self._url_builder.localized_url(locale, url),
                        "hreflang": X_DEFAULT if locale == self._default_locale else locale,
                    },
                    "link",
                )

        return html

    def open_graph(self) -> str:
        html = [create_tag({"property": "og:url", "content": self._request.url})]

        for field in OPEN_GRAPH_FIELDS:
            # og:url is already taken by the request URL
            if field == "url":
                continue

            value = resolve_field(field, self._open_graph, self._store)
            if not value:
                continue

            if isinstance(value, Gallery):
                for entry in value.entries:
                    html.extend(self._og_entry(entry))
            elif isinstance(value, ImageEntry):
                html.extend(self._og_entry(value))
            else:
                html.append(create_tag({"property": f"og:{field}", "content": value.value}))

        return "".join(html)

    def twitter_card(self) -> str:
        html: dict[str, str] = {}

        for field in TWITTER_FIELDS:
            value = resolve_field(field, self._twitter, self._store)

            if isinstance(value, Scalar) and value and field not in html:
                html[field] = create_tag({"property": f"twitter:{field}", "content": value.value})

        image = self._scalar("image")
        image_src = self._scalar("image:src") or image

        if not html.get("image") and image:
            html["image"] = create_tag({"name": "twitter:image", "content": image})

        if not html.get("image:src") and image_src:
            html["image:src"] = create_tag({"property": "twitter:image:src", "content": image_src})

        if not html.get("domain"):
            html["domain"] = create_tag(
                {"property": "twitter:domain", "content": self._request.http_host}
            )

        return "".join(html.values())

    def render_all(self) -> str:
        """Plain fields, extra links, canonical, Twitter Card, then Open Graph."""
        html = ""

        for field, value in self._store.items():
            if field in RENDER_ALL_SKIP or ":" in field:
                continue
            if isinstance(value, Scalar) and value:
                html += create_tag({"name": field, "content": value.value})

        html += "\n\t"
        for key, href in self._store.links.items():
            if key not in ("images", "canonical"):
                html += create_tag({"rel": key, "href": href}, "link")

        html += self.canonical()
        html += "\n\t"
        html += self.twitter_card()
        html += "\n\t"
        html += self.open_graph()

        return html.strip("\n")

    def _og_entry(self, entry: ImageEntry) -> list[str]:
        return [
            create_tag({"property": f"og:{key}", "content": val})
            for key, val in entry.attributes.items()
            if val
        ]

    def _scalar(self, field: str) -> str:
        value = self._store.value(field)
        return value.value if isinstance(value, Scalar) else ""
