"""Strategies for naming schema properties after class attributes."""

import re


class DefaultPropertyNameResolver:
    """Uses attribute names unchanged."""

    def resolve(self, name: str) -> str:
        """Return the schema property name for an attribute."""
        return name


class CamelCasePropertyNameResolver:
    """Converts ``snake_case`` and ``PascalCase`` attribute names to camelCase."""

    def resolve(self, name: str) -> str:
        """Return the schema property name for an attribute."""
        parts = [p for p in re.split(r"_+", name) if p]
        if not parts:
            return name
        head = parts[0][0].lower() + parts[0][1:]
        return head + "".join(p[0].upper() + p[1:] for p in parts[1:])


PROPERTY_NAME_RESOLVERS = {
    "default": DefaultPropertyNameResolver,
    "camel_case": CamelCasePropertyNameResolver,
}
