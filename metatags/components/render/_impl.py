"""
TagRenderer - single <meta>/<link> element rendering.

Key behaviors:
- Attribute order follows the mapping passed in
- Every value goes through fix_text right before it is embedded
- Empty content renders nothing
"""

from __future__ import annotations

from collections.abc import Mapping

from metatags.components.store import AttributeStore, Scalar
from metatags.domain.sanitize import fix_text

from .models import LINK_FIELDS


def create_tag(attributes: Mapping[str, str], tag_name: str = "meta") -> str:
    """Render one element, preceded by a newline and a tab."""
    rendered = " ".join(f'{key}="{fix_text(value)}"' for key, value in attributes.items())
    return f"\n\t<{tag_name} {rendered}>"


class TagRenderer:
    """Renders single fields of an AttributeStore."""

    def __init__(self, store: AttributeStore) -> None:
        self._store = store

    def tag(self, key: str, value: str | None = None) -> str:
        """
        Render one field by name.

        `canonical` is read from the Links map and rendered as a <link>;
        anything else is read from the store and rendered as a <meta>.
        """
        if key in LINK_FIELDS:
            content = value or self._store.links.get(key, "")
            if not content:
                return ""
            return create_tag({"rel": key, "href": content}, "link").strip("\n")

        if not value:
            stored = self._store.value(key)
            value = stored.value if isinstance(stored, Scalar) else ""
        if not value:
            return ""

        return create_tag({"name": key, "property": key, "content": value}).strip("\n")

    def fb_app_id(self) -> str:
        """Facebook app id tag, read from the `fb:app_id` field."""
        return create_tag(
            {
                "property": "fb:app_id",
                "content": self._store.get("fb:app_id", ""),
            }
        )
