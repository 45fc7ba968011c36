"""OpenAPI 3.0 model objects produced from documentation comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class OpenApiReference:
    """Points at a reusable component, e.g. ``#/components/schemas/Foo``."""

    id: str
    type: str = "schemas"

    @property
    def ref(self) -> str:
        """Return the JSON pointer used in ``$ref``."""
        return f"#/components/{self.type}/{self.id}"


@dataclass
class OpenApiSchema:
    """Represents a schema object (inline or a reference)."""

    type: str | None = None
    format: str | None = None
    items: OpenApiSchema | None = None
    properties: dict[str, OpenApiSchema] = field(default_factory=dict)
    additional_properties: OpenApiSchema | None = None
    enum: list[Any] = field(default_factory=list)
    nullable: bool = False
    reference: OpenApiReference | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to OpenAPI keys, omitting unset members."""
        if self.reference is not None:
            return {"$ref": self.reference.ref}
        out: dict[str, Any] = {}
        if self.type:
            out["type"] = self.type
        if self.format:
            out["format"] = self.format
        if self.items is not None:
            out["items"] = self.items.to_dict()
        if self.properties:
            out["properties"] = {k: v.to_dict() for k, v in self.properties.items()}
        if self.additional_properties is not None:
            out["additionalProperties"] = self.additional_properties.to_dict()
        if self.enum:
            out["enum"] = list(self.enum)
        if self.nullable:
            out["nullable"] = True
        return out


@dataclass
class OpenApiExample:
    """Represents an example object."""

    summary: str | None = None
    value: Any = None
    external_value: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to OpenAPI keys, omitting unset members."""
        out: dict[str, Any] = {}
        if self.summary is not None:
            out["summary"] = self.summary
        if self.value is not None:
            out["value"] = self.value
        if self.external_value is not None:
            out["externalValue"] = self.external_value
        return out


@dataclass
class OpenApiHeader:
    """Represents a response header object."""

    description: str | None = None
    schema: OpenApiSchema | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to OpenAPI keys, omitting unset members."""
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        if self.schema is not None:
            out["schema"] = self.schema.to_dict()
        return out
