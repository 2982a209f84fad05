"""
AttributeStore - ordered page attributes for one request.

Key behaviors:
- Every value is sanitized before it is stored
- Fields with a dedicated setter (title, description, canonical, type,
  image, locale, locales) are routed through a dispatch table
- List values are sanitized item by item; a generic field joins them
- Any other field name is stored as-is after truncation
- Validation mode turns malformed image URLs and unknown attribute names
  into errors; an unknown Open Graph type is always an error
- A failed set leaves the store untouched
"""

from __future__ import annotations

import ipaddress
import logging
import re
from collections.abc import Callable, Iterator, Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import urljoin, urlparse

from metatags.domain.sanitize import cut_text, fix_text, fix_value
from metatags.rules.models import MetaTagsRules

from .models import (
    IMAGE_ATTRIBUTES,
    OG_TYPES,
    FieldValue,
    Gallery,
    ImageEntry,
    InvalidAttributeError,
    InvalidImageError,
    InvalidTypeError,
    Scalar,
)

logger = logging.getLogger(__name__)

Attributes = Mapping[str, Any] | None
Setter = Callable[[Any, Attributes], "AttributeStore"]

TITLE_SEPARATOR = " - "
LIST_SEPARATOR = ", "

# Host labels: letters, digits and inner hyphens
_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*$",
    re.IGNORECASE,
)
# Characters allowed anywhere in a URL
_URL_CHARS_RE = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+$")
_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*$", re.IGNORECASE)


def convert_date(value: Any) -> str:
    """Render dates as ISO-8601, everything else as a string."""
    if isinstance(value, datetime | date):
        return value.isoformat()
    if value is None:
        return ""
    return str(value)


def _valid_host(host: str | None) -> bool:
    if not host:
        return False
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return bool(_HOSTNAME_RE.match(host))
    return True


def normalize_locale(code: str) -> str:
    """Drop the region part of a locale code (en_US -> en)."""
    if "_" in code:
        code = code.split("_", 1)[0]
    return code


class AttributeStore:
    """
    Ordered field -> value mapping with per-field setters.

    Holds the Links map (canonical override), the locale set and the site
    title alongside the fields themselves.
    """

    def __init__(self, rules: MetaTagsRules) -> None:
        self._rules = rules
        self._validate = rules.validate_images
        self._metas: dict[str, FieldValue] = {}
        self._links: dict[str, str] = {}
        self._locales: list[str] = []
        self.site_title = rules.title

        self._setters: dict[str, Setter] = {
            "title": self.set_title,
            "description": lambda value, _attributes: self.set_description(value),
            "canonical": lambda value, _attributes: self.set_canonical(value),
            "type": lambda value, _attributes: self.set_type(value),
            "image": self.set_image,
            "locale": lambda value, _attributes: self.set_locale(value),
            "locales": lambda value, _attributes: self.set_locales(value),
        }

    # --- Generic access ---

    def set(self, field: str, value: Any = None, attributes: Attributes = None) -> AttributeStore:
        """Sanitize value, then dispatch to the field setter or store it."""
        value = fix_value(value)

        setter = self._setters.get(field)
        if setter is not None:
            return setter(value, attributes)

        if isinstance(value, list):
            value = LIST_SEPARATOR.join(item for item in value if item)

        pending = self._pending_attributes(field, attributes)
        self._metas[field] = Scalar(cut_text(value, self._rules.limit_for(field)))
        self._metas.update(pending)
        return self

    def get(self, field: str, default: Any = None) -> Any:
        value = self._metas.get(field)
        if value is None:
            return default
        return value.unwrap()

    def value(self, field: str) -> FieldValue | None:
        """Tagged value for renderers."""
        return self._metas.get(field)

    def has(self, field: str) -> bool:
        return field in self._metas

    def forget(self, field: str) -> AttributeStore:
        self._metas.pop(field, None)
        return self

    def clear(self) -> AttributeStore:
        self._metas = {}
        return self

    def last_tag(self, field: str) -> Any:
        return self.get(field)

    def put(self, field: str, value: FieldValue) -> AttributeStore:
        """Store a value without sanitizing or truncating it."""
        self._metas[field] = value
        return self

    def items(self) -> Iterator[tuple[str, FieldValue]]:
        return iter(list(self._metas.items()))

    @property
    def links(self) -> dict[str, str]:
        return dict(self._links)

    @property
    def locales(self) -> list[str]:
        return list(self._locales)

    # --- Field setters ---

    def set_title(self, value: str, attributes: Attributes = None) -> AttributeStore:
        value = fix_text(value)
        pending = self._pending_attributes("title", attributes)

        if not value:
            title = self.site_title
        elif self.site_title:
            suffix = f"{TITLE_SEPARATOR}{self.site_title}"
            limit = self._rules.limit_for("title")
            if limit is not None:
                limit -= len(suffix)
            title = cut_text(value, limit) + suffix
        else:
            title = cut_text(value, self._rules.limit_for("title"))

        self._metas["title"] = Scalar(title)
        self._metas.update(pending)
        return self

    def set_description(self, value: str) -> AttributeStore:
        value = fix_text(value)
        self._metas["description"] = Scalar(cut_text(value, self._rules.limit_for("description")))
        return self

    def set_canonical(self, value: str) -> AttributeStore:
        self._links["canonical"] = fix_text(value)
        return self

    def set_type(self, value: str) -> AttributeStore:
        if value not in OG_TYPES:
            raise InvalidTypeError(value)

        self._metas["type"] = Scalar(value)
        return self

    def set_image(self, url: str, attributes: Attributes = None) -> AttributeStore:
        """
        Set the primary image, or add a gallery entry when one exists.

        Under validation the URL must be absolute; a relative URL is
        resolved against base_url first when one is configured.
        """
        url = fix_text(url)

        if self._validate:
            url = self._validated_image_url(url)

        pending = self._pending_attributes("image", attributes, IMAGE_ATTRIBUTES)

        if self._metas.get("image"):
            entry = ImageEntry(attributes={"image": url, **{k: v.value for k, v in pending.items()}})
            gallery = self._metas.get("gallery")
            if not isinstance(gallery, Gallery):
                gallery = Gallery()
            self._metas["gallery"] = gallery.append(entry)
            logger.debug("Added gallery image %s (%d in gallery)", url, len(gallery.entries) + 1)
            return self

        self._metas["image"] = Scalar(url)
        self._metas.update(pending)
        return self

    def set_locale(self, code: str = "") -> AttributeStore:
        code = normalize_locale(fix_text(code))

        if code and code not in self._locales:
            self._locales.append(code)

        return self

    def set_locales(self, codes: list[str] | str | None = None) -> AttributeStore:
        if isinstance(codes, str):
            codes = [codes]

        self._locales = []

        for code in codes or []:
            self.set_locale(code)

        return self

    def ensure_locale(self, code: str) -> None:
        """Append a locale verbatim if it is missing."""
        if code not in self._locales:
            self._locales.append(code)

    # --- Helpers ---

    def _validated_image_url(self, url: str) -> str:
        if not url:
            raise InvalidImageError(url, "empty")

        if "://" not in url and self._rules.base_url:
            url = urljoin(self._rules.base_url.rstrip("/") + "/", url.lstrip("/"))

        if not _URL_CHARS_RE.match(url):
            raise InvalidImageError(url, "invalid characters")

        try:
            parsed = urlparse(url)
        except ValueError as e:
            raise InvalidImageError(url, str(e)) from e

        if not parsed.scheme or not parsed.netloc:
            raise InvalidImageError(url, "not an absolute URL")

        if not _SCHEME_RE.match(parsed.scheme) or not _valid_host(parsed.hostname):
            raise InvalidImageError(url, "invalid host")

        return url

    def _pending_attributes(
        self,
        base: str,
        attributes: Attributes,
        allowed: tuple[str, ...] = (),
    ) -> dict[str, Scalar]:
        """
        Build `<base>:<name>` values, checking every name before anything is stored.
        """
        pending: dict[str, Scalar] = {}

        for name, value in (attributes or {}).items():
            if self._validate and allowed and name not in allowed:
                raise InvalidAttributeError(name, base)

            pending[f"{base}:{name}"] = Scalar(convert_date(value))

        return pending
