"""
MetaTag component - per-request meta tag engine.

One engine is built per inbound request from the request context and the
meta tags config. It starts with two fields set (title = site title,
url = current request URL), is mutated by the request handler, rendered,
and thrown away with the request.

Method resolution:
- Public methods are reachable by snake_case or camelCase name
- set_x / setX stores field `x` (through its dedicated setter if any)
- get_x / getX calls the renderer `x` when there is one, else reads field `x`
- Any other name stores a field of that name: meta.creator("@me")

Field names are snake-cased, not just lower-cased: setSiteName stores
`site_name` (the Open Graph field name), not `sitename`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from metatags.components.locale_url import LocaleUrlBuilder
from metatags.components.render import MetaTagRenderer, TagRenderer
from metatags.components.store import AttributeStore, Scalar, normalize_locale
from metatags.core.ports.request import RequestPort
from metatags.domain.sanitize import cut_text, fix_text
from metatags.rules.models import MetaTagsRules

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(name: str) -> str:
    """setSiteName -> set_site_name"""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class MetaTag:
    """Meta tag engine for a single request."""

    def __init__(
        self,
        request: RequestPort,
        rules: MetaTagsRules,
        default_locale: str | None = None,
    ) -> None:
        self._request = request
        self._rules = rules
        self.default_locale = normalize_locale(default_locale or rules.default_locale)

        self.store = AttributeStore(rules)
        self.store.set_locales(rules.resolve_locales())

        self._url_builder = LocaleUrlBuilder(
            request,
            default_locale=self.default_locale,
            template=rules.locale_url,
        )
        self._tags = TagRenderer(self.store)
        self._renderer = MetaTagRenderer(
            self.store,
            request,
            self._url_builder,
            default_locale=self.default_locale,
            open_graph=rules.open_graph,
            twitter=rules.twitter,
        )

        self._methods: dict[str, Callable[..., Any]] = {
            "set": self.set,
            "get": self.get,
            "has": self.has,
            "forget": self.forget,
            "clear": self.clear,
            "last_tag": self.last_tag,
            "set_title": self.set_title,
            "set_description": self.set_description,
            "set_canonical": self.set_canonical,
            "set_type": self.set_type,
            "set_image": self.set_image,
            "set_locale": self.set_locale,
            "set_locales": self.set_locales,
            "get_locales": self.get_locales,
            "tag": self.tag,
            "canonical": self.canonical,
            "open_graph": self.open_graph,
            "twitter_card": self.twitter_card,
            "fb_app_id": self.fb_app_id,
            "render_all": self.render_all,
            "localized_url": self.localized_url,
        }
        self._getters: dict[str, Callable[..., Any]] = {
            "canonical": self.canonical,
            "open_graph": self.open_graph,
            "twitter_card": self.twitter_card,
            "fb_app_id": self.fb_app_id,
            "locales": self.get_locales,
        }

        # Defaults: site title (without the " - site" suffix) and current URL
        self.store.put(
            "title",
            Scalar(cut_text(fix_text(rules.title), rules.limit_for("title"))),
        )
        self.store.set("url", request.url)

        logger.debug("Meta tag engine ready for %s (locales: %s)", request.url, self.store.locales)

    # --- Store ---

    def set(self, field: str, value: Any = None, attributes: Mapping[str, Any] | None = None) -> MetaTag:
        self.store.set(field, value, attributes)
        return self

    def get(self, field: str, default: Any = None) -> Any:
        return self.store.get(field, default)

    def has(self, field: str) -> bool:
        return self.store.has(field)

    def forget(self, field: str) -> MetaTag:
        self.store.forget(field)
        return self

    def clear(self) -> MetaTag:
        self.store.clear()
        return self

    def last_tag(self, field: str) -> Any:
        return self.store.last_tag(field)

    def set_title(self, value: str, attributes: Mapping[str, Any] | None = None) -> MetaTag:
        self.store.set_title(value, attributes)
        return self

    def set_description(self, value: str) -> MetaTag:
        self.store.set_description(value)
        return self

    def set_canonical(self, value: str) -> MetaTag:
        self.store.set_canonical(value)
        return self

    def set_type(self, value: str) -> MetaTag:
        self.store.set_type(value)
        return self

    def set_image(self, url: str, attributes: Mapping[str, Any] | None = None) -> MetaTag:
        self.store.set_image(url, attributes)
        return self

    def set_locale(self, code: str = "") -> MetaTag:
        self.store.set_locale(code)
        return self

    def set_locales(self, codes: list[str] | None = None) -> MetaTag:
        self.store.set_locales(codes)
        return self

    def get_locales(self) -> list[str]:
        return self.store.locales

    # --- Rendering ---

    def tag(self, key: str, value: str | None = None) -> str:
        return self._tags.tag(key, value)

    def fb_app_id(self) -> str:
        return self._tags.fb_app_id()

    def canonical(self, url: str | None = None) -> str:
        return self._renderer.canonical(url)

    def open_graph(self) -> str:
        return self._renderer.open_graph()

    def twitter_card(self) -> str:
        return self._renderer.twitter_card()

    def render_all(self) -> str:
        return self._renderer.render_all()

    def localized_url(self, locale: str, url: str | None = None) -> str:
        return self._url_builder.localized_url(locale, url)

    # --- Dispatch ---

    def call(self, method: str, *args: Any) -> Any:
        """
        Resolve `method` through the dispatch table.

        Unknown names never fail: they store (or read) a field of that name.
        """
        name = to_snake(method)

        handler = self._methods.get(name)
        if handler is not None:
            return handler(*args)

        if name.startswith("set_"):
            return self.set(name[len("set_") :], *args)

        if name.startswith("get_"):
            field = name[len("get_") :]
            getter = self._getters.get(field)
            if getter is not None:
                return getter(*args)
            return self.get(field, *args)

        return self.set(name, *args)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        def dispatch(*args: Any) -> Any:
            return self.call(name, *args)

        return dispatch


# --- Factory ---


def create_meta_tag(
    request: RequestPort,
    rules: MetaTagsRules,
    default_locale: str | None = None,
) -> MetaTag:
    """Create the meta tag engine for one request."""
    return MetaTag(request, rules, default_locale=default_locale)
