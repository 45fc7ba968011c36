"""Registry mapping resolved types to OpenAPI schemas.

Primitive, collection and enum types are described inline. Classes are
registered once as component schemas and returned as ``$ref`` schemas.
"""

import datetime
import decimal
import enum
import inspect
import logging
import re
import types
import typing
import uuid

from src.documentation_errors import DocumentationError
from src.openapi_models import OpenApiReference, OpenApiSchema
from src.schema_generation_settings import SchemaGenerationSettings

logger = logging.getLogger(__name__)

PRIMITIVE_SCHEMAS: dict[object, tuple[str, str | None]] = {
    str: ("string", None),
    bool: ("boolean", None),
    int: ("integer", "int32"),
    float: ("number", "double"),
    decimal.Decimal: ("number", "double"),
    datetime.datetime: ("string", "date-time"),
    datetime.date: ("string", "date"),
    datetime.timedelta: ("string", None),
    uuid.UUID: ("string", "uuid"),
    bytes: ("string", "byte"),
    object: ("object", None),
}

SEQUENCE_TYPES = (list, tuple, set, frozenset)
UNION_TYPES = (typing.Union, types.UnionType)


class SchemaReferenceRegistry:
    """Builds schemas for types and keeps the component schemas it registers."""

    def __init__(self, settings: SchemaGenerationSettings | None = None) -> None:
        """Initialize an empty registry with the given generation settings."""
        self.settings = settings or SchemaGenerationSettings()
        self.references: dict[str, OpenApiSchema] = {}
        self._keys: dict[type, str] = {}

    def find_or_add_reference(self, input_type: object) -> OpenApiSchema:
        """Return the schema for a type, registering classes as components."""
        if input_type is None or input_type is type(None):
            msg = "Cannot build a schema without a type."
            raise DocumentationError(msg)

        origin = typing.get_origin(input_type)
        args = typing.get_args(input_type)

        if origin in UNION_TYPES:
            return self._union_schema(input_type, args)
        if input_type in SEQUENCE_TYPES or origin in SEQUENCE_TYPES:
            items = (
                self.find_or_add_reference(args[0]) if args else OpenApiSchema(type="object")
            )
            return OpenApiSchema(type="array", items=items)
        if input_type is dict or origin is dict:
            values = (
                self.find_or_add_reference(args[-1]) if args else OpenApiSchema(type="object")
            )
            return OpenApiSchema(type="object", additional_properties=values)
        if input_type in PRIMITIVE_SCHEMAS:
            schema_type, schema_format = PRIMITIVE_SCHEMAS[input_type]
            return OpenApiSchema(type=schema_type, format=schema_format)
        if inspect.isclass(input_type) and issubclass(input_type, enum.Enum):
            return OpenApiSchema(type="string", enum=[m.name for m in input_type])
        if inspect.isclass(input_type):
            return OpenApiSchema(reference=OpenApiReference(id=self._register(input_type)))
        return OpenApiSchema(type="object")

    def _union_schema(self, input_type: object, args: tuple[object, ...]) -> OpenApiSchema:
        members = [a for a in args if a is not type(None)]
        if len(members) != 1:
            msg = f"Cannot build a schema for union type {input_type!r}."
            raise DocumentationError(msg)
        schema = self.find_or_add_reference(members[0])
        if schema.reference is not None:
            # $ref siblings are ignored in OpenAPI 3.0
            return schema
        schema.nullable = True
        return schema

    def _register(self, cls: type) -> str:
        """Register a class as a component schema and return its key."""
        if cls in self._keys:
            return self._keys[cls]

        key = base_key = re.sub(r"[^A-Za-z0-9_]", "_", cls.__qualname__)
        suffix = 2
        while key in self.references:
            key = f"{base_key}{suffix}"
            suffix += 1

        keys_before = set(self._keys)
        references_before = set(self.references)
        schema = OpenApiSchema(type="object")
        # Registered before properties are built so self-references resolve.
        self._keys[cls] = key
        self.references[key] = schema

        try:
            self._build_properties(cls, schema)
        except DocumentationError:
            # Drop this class and every component registered while building it.
            for added_cls in set(self._keys) - keys_before:
                del self._keys[added_cls]
            for added_key in set(self.references) - references_before:
                del self.references[added_key]
            raise

        logger.debug("Registered schema %s for %s", key, cls.__qualname__)
        return key

    def _build_properties(self, cls: type, schema: OpenApiSchema) -> None:
        try:
            hints = typing.get_type_hints(cls)
        except (NameError, TypeError) as exc:
            msg = f"Cannot resolve annotations of type {cls.__qualname__!r}: {exc}"
            raise DocumentationError(msg) from exc

        resolver = self.settings.property_name_resolver
        for name, hint in hints.items():
            if name.startswith("_") or typing.get_origin(hint) is typing.ClassVar:
                continue
            schema.properties[resolver.resolve(name)] = self.find_or_add_reference(hint)
