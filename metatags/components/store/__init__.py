"""
Store component - per-request page attributes.
"""

from ._impl import (
    TITLE_SEPARATOR,
    AttributeStore,
    convert_date,
    normalize_locale,
)
from .models import (
    IMAGE_ATTRIBUTES,
    OG_TYPES,
    FieldValue,
    Gallery,
    ImageEntry,
    InvalidAttributeError,
    InvalidImageError,
    InvalidTypeError,
    MetaTagError,
    Scalar,
    to_field_value,
)

__all__ = [
    # Store
    "AttributeStore",
    "convert_date",
    "normalize_locale",
    "TITLE_SEPARATOR",
    # Values
    "FieldValue",
    "Scalar",
    "ImageEntry",
    "Gallery",
    "to_field_value",
    # Constants
    "IMAGE_ATTRIBUTES",
    "OG_TYPES",
    # Errors
    "MetaTagError",
    "InvalidAttributeError",
    "InvalidImageError",
    "InvalidTypeError",
]
