import re
from typing import Any

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"[\r\n\s]+")

ELLIPSIS = "..."


def fix_text(text: str | None) -> str:
    """
    Make text safe for an HTML attribute value.
    Tags are replaced by a space, whitespace runs collapse to one space and
    double quotes become &quot;. Running it twice gives the same result.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    text = _TAG_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text)

    return text.strip().replace('"', "&quot;")


def fix_value(value: Any) -> str | list[str]:
    """fix_text for a single value, or for each item of a list."""
    if isinstance(value, list | tuple):
        return [fix_text(item) for item in value]
    return fix_text(value)


def cut_text(text: str, limit: int | None) -> str:
    """
    Shorten text to at most `limit` characters on a word boundary.
    No limit means the text is returned unchanged.
    """
    if limit is None or len(text) <= limit:
        return text

    if limit < len(ELLIPSIS):
        return ELLIPSIS[: max(limit, 0)]

    # Reserve room for the ellipsis
    text = text[: max(limit - len(ELLIPSIS), 0)]

    space = text.rfind(" ")
    if space > 0:
        text = text[:space]

    return text + ELLIPSIS
