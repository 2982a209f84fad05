import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from metatags.components.metatag import MetaTag, create_meta_tag
from metatags.core.ports.request import RequestContext
from metatags.rules.loader import load_rules
from metatags.rules.models import MetaTagsRules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("METATAGS_CONFIG", str(self.base_dir / "metatags.yaml"))
        )
        self.app_locale = os.environ.get("METATAGS_LOCALE") or None


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> MetaTagsRules:
    logger.info("Loading meta tags config from %s", settings.rules_path)
    return load_rules(settings.rules_path)


# --- Request ---
def get_request_context(request: Request) -> RequestContext:
    ctx = RequestContext.from_url(str(request.url))
    host = request.headers.get("host")
    if host and host != ctx.http_host:
        ctx = RequestContext(
            url=ctx.url, scheme=ctx.scheme, http_host=host, path=ctx.path, query=ctx.query
        )
    return ctx


# --- Engine ---
def get_meta_tag(
    request_ctx: RequestContext = Depends(get_request_context),
    rules: MetaTagsRules = Depends(get_rules),
    settings: Settings = Depends(get_settings),
) -> MetaTag:
    """Fresh engine per request; never shared between requests."""
    return create_meta_tag(request_ctx, rules, default_locale=settings.app_locale)
