"""
Attribute store models.

Field values are an explicit tagged variant:
- Scalar: a plain string (title, description, image URL, ...)
- ImageEntry: a flat attribute map for one image
- Gallery: the images added after the primary one
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Open Graph types ---

OG_TYPES: frozenset[str] = frozenset(
    {
        "music.song",
        "music.album",
        "music.playlist",
        "music.radio_station",
        "video.movie",
        "video.episode",
        "video.tv_show",
        "video.other",
        "article",
        "book",
        "profile",
        "website",
    }
)

IMAGE_ATTRIBUTES: tuple[str, ...] = ("secure_url", "alt", "url", "src", "type", "width", "height")


# --- Field Values ---


@dataclass(frozen=True)
class Scalar:
    """Single string value."""

    value: str

    def __bool__(self) -> bool:
        return bool(self.value)

    def unwrap(self) -> str:
        return self.value


@dataclass(frozen=True)
class ImageEntry:
    """One image: `image` plus its `image:<name>` attributes, in insertion order."""

    attributes: dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.attributes)

    def unwrap(self) -> dict[str, str]:
        return dict(self.attributes)


@dataclass(frozen=True)
class Gallery:
    """Images set after the primary image."""

    entries: tuple[ImageEntry, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.entries)

    def append(self, entry: ImageEntry) -> Gallery:
        return Gallery(entries=(*self.entries, entry))

    def unwrap(self) -> list[dict[str, str]]:
        return [entry.unwrap() for entry in self.entries]


FieldValue = Scalar | ImageEntry | Gallery


def to_field_value(raw: Any) -> FieldValue:
    """Wrap a plain config value (str, mapping or list of mappings)."""
    if isinstance(raw, Scalar | ImageEntry | Gallery):
        return raw
    if isinstance(raw, dict):
        return _image_entry(raw)
    if isinstance(raw, list | tuple):
        return Gallery(entries=tuple(_image_entry(item) for item in raw if isinstance(item, dict)))
    return Scalar(value="" if raw is None else str(raw))


def _image_entry(raw: dict[Any, Any]) -> ImageEntry:
    return ImageEntry(attributes={str(k): str(v) for k, v in raw.items()})


# --- Error Types ---


class MetaTagError(Exception):
    """Base meta tag error."""

    pass


class InvalidImageError(MetaTagError):
    """Image URL is empty or not an absolute URL."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Open Graph: Invalid image URL '{url}' ({reason})")


class InvalidAttributeError(MetaTagError):
    """Attribute name is not allowed for the field."""

    def __init__(self, name: str, field_name: str) -> None:
        self.name = name
        self.field_name = field_name
        super().__init__(f"MetaTags: Invalid attribute '{name}' for '{field_name}' (unknown type)")


class InvalidTypeError(MetaTagError):
    """Open Graph type is not one of OG_TYPES."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Open Graph: Invalid type '{value}' (unknown type)")
