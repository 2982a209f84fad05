import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from metatags.rules.models import MetaTagsRules

logger = logging.getLogger(__name__)


def _strip_markdown_fences(content: str) -> str:
    """Return the first ```yaml block, or the whole content when there is none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> MetaTagsRules:
    """
    Load and validate a meta tags config file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Meta tags config not found at: {path}")

    clean_content = _strip_markdown_fences(path.read_text())

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in meta tags config: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Meta tags config must be a mapping")

    try:
        rules = MetaTagsRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Meta tags config validation failed:\n{e}") from e

    logger.debug("Loaded meta tags config from %s (%d limits)", path, len(rules.limits))
    return rules
