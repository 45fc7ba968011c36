"""Data model for a field resolved from a cref."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents a public class-level field found through a field cref."""

    name: str
    declaring_type: str  # full name as written in the cref
    value: Any
