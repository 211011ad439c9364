"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from naming_clt.captor import DEFAULT_LOCATOR
from naming_clt.deep_merge import deep_merge
from naming_clt.errors import InvalidConfigError
from naming_clt.style_tag import OUTPUT_TAGS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "filter": OUTPUT_TAGS.copy(),
    "output": OUTPUT_TAGS.copy(),
    "locators": [DEFAULT_LOCATOR],
    "eof": None,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                raise InvalidConfigError(str(p))
            config = deep_merge(config, user_config)
            logger.info("Loaded configuration from %s", p)
        else:
            logger.warning("Configuration file %s not found, using defaults", p)
    return config
