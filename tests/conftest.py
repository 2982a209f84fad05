from pathlib import Path

import pytest

from metatags.core.ports.request import RequestContext
from metatags.rules.loader import load_rules
from metatags.rules.models import MetaTagsRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The default config shipped with the project."""
    return PROJECT_ROOT / "metatags.yaml"


@pytest.fixture
def default_rules(rules_path: Path) -> MetaTagsRules:
    return load_rules(rules_path)


@pytest.fixture
def request_ctx() -> RequestContext:
    return RequestContext(
        url="http://example.com/page",
        scheme="http",
        http_host="example.com",
        path="/page",
    )
