"""Tests for settings loading and merging."""

from pathlib import Path

import pytest
import yaml

from src.deep_merge import deep_merge
from src.load_settings import DEFAULT_SETTINGS, load_settings
from src.property_name_resolver import (
    CamelCasePropertyNameResolver,
    DefaultPropertyNameResolver,
)
from src.schema_generation_settings import SchemaGenerationSettings


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_lists_replace() -> None:
    """Verify that lists are replaced."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_load_settings_defaults() -> None:
    """Verify that defaults are returned when no path is provided."""
    settings = load_settings(None)
    assert settings == DEFAULT_SETTINGS
    settings["schema_generation"]["property_name_resolver"] = "camel_case"
    assert DEFAULT_SETTINGS["schema_generation"]["property_name_resolver"] == "default"


def test_load_settings_missing_file(tmp_path: Path) -> None:
    """Verify that a missing settings file falls back to defaults."""
    assert load_settings(str(tmp_path / "nope.yml")) == DEFAULT_SETTINGS


def test_load_settings_with_file(tmp_path: Path) -> None:
    """Verify that user settings override defaults."""
    settings_file = tmp_path / "settings.yml"
    settings_file.write_text(
        yaml.dump({"schema_generation": {"property_name_resolver": "camel_case"}})
    )

    settings = SchemaGenerationSettings.from_config(load_settings(str(settings_file)))
    assert isinstance(settings.property_name_resolver, CamelCasePropertyNameResolver)


def test_schema_generation_settings_default() -> None:
    """Verify the default resolver keeps attribute names."""
    settings = SchemaGenerationSettings.from_config(load_settings())
    assert isinstance(settings.property_name_resolver, DefaultPropertyNameResolver)
    assert settings.property_name_resolver.resolve("sample_name") == "sample_name"


def test_schema_generation_settings_unknown_resolver() -> None:
    """Verify unknown resolver names are rejected."""
    config = {"schema_generation": {"property_name_resolver": "kebab"}}
    with pytest.raises(ValueError, match="kebab"):
        SchemaGenerationSettings.from_config(config)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("sample_property", "sampleProperty"),
        ("SampleProperty", "sampleProperty"),
        ("id", "id"),
        ("__dunder__", "dunder"),
    ],
)
def test_camel_case_resolver(name: str, expected: str) -> None:
    """Verify camelCase conversion of attribute names."""
    assert CamelCasePropertyNameResolver().resolve(name) == expected
