"""Settings that control how schemas are generated from types."""

from dataclasses import dataclass, field
from typing import Any

from src.property_name_resolver import (
    PROPERTY_NAME_RESOLVERS,
    CamelCasePropertyNameResolver,
    DefaultPropertyNameResolver,
)


@dataclass
class SchemaGenerationSettings:
    """Holds the property name resolver used by the schema registry."""

    property_name_resolver: DefaultPropertyNameResolver | CamelCasePropertyNameResolver = field(
        default_factory=DefaultPropertyNameResolver
    )

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "SchemaGenerationSettings":
        """Build settings from the ``schema_generation`` section of a config."""
        section = config.get("schema_generation", {}) or {}
        resolver_name = section.get("property_name_resolver", "default")
        resolver_cls = PROPERTY_NAME_RESOLVERS.get(resolver_name)
        if resolver_cls is None:
            known = ", ".join(sorted(PROPERTY_NAME_RESOLVERS))
            msg = f"Unknown property_name_resolver {resolver_name!r} (expected one of: {known})"
            raise ValueError(msg)
        return cls(property_name_resolver=resolver_cls())
