"""Exceptions raised while converting documentation comments to OpenAPI."""

from src.generation_messages import FIELD_NOT_FOUND, TYPE_NOT_FOUND


class DocumentationError(Exception):
    """Base class for all documentation processing failures."""


class InvalidExampleError(DocumentationError):
    """An example tag is structurally invalid."""


class InvalidHeaderError(DocumentationError):
    """A header tag is structurally invalid."""


class TypeNotFoundError(DocumentationError):
    """A cref names a type absent from every searched assembly."""

    def __init__(self, type_name: str, assemblies: list[str]) -> None:
        """Record the missing type and the assemblies that were searched."""
        self.type_name = type_name
        self.assemblies = assemblies
        super().__init__(TYPE_NOT_FOUND.format(type_name, ", ".join(assemblies)))


class FieldNotFoundError(DocumentationError):
    """A field cref names a field the resolved type does not declare."""

    def __init__(self, field_name: str, type_name: str) -> None:
        """Record the missing field and its containing type."""
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(FIELD_NOT_FOUND.format(field_name, type_name))


class AssemblyLoadError(DocumentationError):
    """An assembly file could not be imported."""
