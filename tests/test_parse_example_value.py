"""Tests for parsing example fragments."""

import pytest
import yaml

from src.parse_example_value import parse_example_value


def test_json_is_parsed_as_json() -> None:
    """Verify JSON-only syntax keeps its JSON meaning."""
    assert parse_example_value('{\n\t"id": 1\n}') == {"id": 1}
    assert parse_example_value('{"ratio": 1e3, "flag": "on"}') == {
        "ratio": 1000.0,
        "flag": "on",
    }


def test_yaml_fallback() -> None:
    """Verify non-JSON text is read as YAML."""
    assert parse_example_value("name: widget\ncount: 2\n") == {"name": "widget", "count": 2}


def test_invalid_fragment_raises_yaml_error() -> None:
    """Verify text that neither parser accepts raises."""
    with pytest.raises(yaml.YAMLError):
        parse_example_value("{ unterminated: [1, 2")
