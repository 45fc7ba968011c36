"""Logic for parsing serialized example fragments."""

import json
from typing import Any

import yaml


def parse_example_value(text: str) -> Any:
    """Parse a JSON fragment, falling back to YAML for non-JSON text.

    Raises yaml.YAMLError when the text is neither valid JSON nor valid YAML.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)
