"""Logic for loading generator settings from YAML."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema_generation": {
        "property_name_resolver": "default",
    },
}


def load_settings(path: str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults."""
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if path:
        p = Path(path)
        if p.exists():
            user_settings = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            settings = deep_merge(settings, user_settings)
        else:
            logger.warning("Settings file %s not found; using defaults.", p)
    return settings
