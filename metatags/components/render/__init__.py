"""
Render component - meta/link markup builders.
"""

from ._impl import TagRenderer, create_tag
from .component import MetaTagRenderer, resolve_field
from .models import (
    LINK_FIELDS,
    OPEN_GRAPH_FIELDS,
    RENDER_ALL_SKIP,
    TWITTER_FIELDS,
    X_DEFAULT,
)

__all__ = [
    # Renderers
    "MetaTagRenderer",
    "TagRenderer",
    # Functions
    "create_tag",
    "resolve_field",
    # Field lists
    "OPEN_GRAPH_FIELDS",
    "TWITTER_FIELDS",
    "RENDER_ALL_SKIP",
    "LINK_FIELDS",
    "X_DEFAULT",
]
