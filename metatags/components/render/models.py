"""
Render component field lists.

Only fields listed here are emitted by the structured renderers.
"""

from __future__ import annotations

# --- Open Graph ---

OPEN_GRAPH_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "site_name",
    "type",
    "image",
    "image:alt",
    "image:url",
    "image:secure_url",
    "image:type",
    "image:width",
    "image:height",
    "url",
    "determiner",
    "locale",
    "locale:alternate",
    "audio",
    "audio:secure_url",
    "audio:type",
    "video",
    "video:secure_url",
    "video:type",
    "video:width",
    "video:height",
    "gallery",
)

# --- Twitter Card ---

TWITTER_FIELDS: tuple[str, ...] = (
    "card",
    "title",
    "description",
    "url",
    "site",
    "creator",
    "image",
    "image:src",
    "domain",
)

# Fields never rendered as plain <meta name=...> tags by render_all
RENDER_ALL_SKIP: frozenset[str] = frozenset({"images", "gallery", "canonical", "type"})

LINK_FIELDS: frozenset[str] = frozenset({"canonical"})

X_DEFAULT = "x-default"
