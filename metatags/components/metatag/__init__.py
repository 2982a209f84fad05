"""
MetaTag component - per-request SEO and social meta tag engine.
"""

from .component import MetaTag, create_meta_tag, to_snake

__all__ = [
    "MetaTag",
    "create_meta_tag",
    "to_snake",
]
