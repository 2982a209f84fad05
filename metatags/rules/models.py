from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

ScalarOverride = str | int | float
OverrideValue = ScalarOverride | dict[str, ScalarOverride] | list[dict[str, ScalarOverride]]

DEFAULT_LOCALE_URL = "[scheme]://[locale][host][uri]"


class MetaTagsRules(BaseModel):
    """
    Meta tag configuration, validated once when an engine is built.

    Every `<field>_limit` key of the raw mapping is collected into `limits`.
    """

    title: str = ""
    validate_images: bool = Field(default=False, alias="validate")
    locales: list[str] | Callable[[], list[str]] = Field(default_factory=list)
    default_locale: str = "en"
    locale_url: str = DEFAULT_LOCALE_URL
    base_url: str | None = None
    open_graph: dict[str, OverrideValue] = Field(default_factory=dict)
    twitter: dict[str, OverrideValue] = Field(default_factory=dict)
    limits: dict[str, int] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def collect_limits(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        limits = dict(data.pop("limits", None) or {})
        for key in [k for k in data if isinstance(k, str) and k.endswith("_limit")]:
            value = data.pop(key)
            if value is not None:
                limits[key[: -len("_limit")]] = value
        data["limits"] = limits

        for key in ("open_graph", "twitter"):
            if data.get(key) is None:
                data.pop(key, None)

        return data

    def limit_for(self, field: str) -> int | None:
        return self.limits.get(field)

    def resolve_locales(self) -> list[str]:
        """Locales from config, calling the producer when one was given."""
        if callable(self.locales):
            return list(self.locales())
        return list(self.locales)
