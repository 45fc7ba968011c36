"""Resolve documentation crefs to Python types and fields.

An "assembly" is a Python source file. Every class defined in it (nested
classes included) is a type whose full name is ``<namespace>.<qualname>``.
The namespace is the module-level ``NAMESPACE`` string when the file defines
one, otherwise the file stem. Public class attributes are the type's fields.
"""

import hashlib
import importlib.util
import inspect
import logging
import re
import sys
from pathlib import Path
from types import ModuleType

from src.cref import split_cref, split_field_cref
from src.documentation_errors import (
    AssemblyLoadError,
    DocumentationError,
    FieldNotFoundError,
    TypeNotFoundError,
)
from src.field_descriptor import FieldDescriptor
from src.generation_messages import (
    ASSEMBLY_LOAD_FAILED,
    NOT_A_GENERIC_TYPE,
    UNDOCUMENTED_GENERIC_TYPE,
)
from src.system_types import SYSTEM_GENERIC_TYPES, SYSTEM_TYPES

logger = logging.getLogger(__name__)

GENERIC_ARITY_RE = re.compile(r"`(\d+)$")
ARRAY_SUFFIX = "[]"


class TypeFetcher:
    """Loads assemblies once and answers type and field lookups."""

    def __init__(self, assembly_paths: list[str]) -> None:
        """Load every assembly and index the types it defines."""
        self.assembly_paths = [Path(p) for p in assembly_paths]
        self._types: dict[str, type] = {}
        for path in self.assembly_paths:
            module = self._load_assembly(path)
            namespace = getattr(module, "NAMESPACE", None)
            if not isinstance(namespace, str) or not namespace:
                namespace = path.stem
            self._index_types(module, namespace)

    @property
    def assembly_names(self) -> list[str]:
        """File names of the searched assemblies, in load order."""
        return [p.name for p in self.assembly_paths]

    def load_type(self, cref: str) -> object:
        """Resolve a single type cref such as ``T:System.String``."""
        return self.load_type_from_cref_values([cref])

    def load_type_from_cref_values(self, crefs: list[str]) -> object | None:
        """Resolve a type from a cref list.

        The first cref names the type. An open generic (``List`1``) consumes
        the following crefs as its type arguments.
        """
        if not crefs:
            return None
        remaining = [c for c in crefs if c and c.strip()]
        if not remaining:
            return None
        return self._consume_type(remaining)

    def resolve_field(self, cref: str) -> FieldDescriptor:
        """Resolve a field cref such as ``F:Ns.Examples.Sample``."""
        type_name, field_name = split_field_cref(cref)
        declaring = self._find_type(type_name)
        if not inspect.isclass(declaring) or not _is_public_field(
            declaring, field_name
        ):
            raise FieldNotFoundError(field_name, type_name)
        return FieldDescriptor(
            name=field_name,
            declaring_type=type_name,
            value=vars(declaring)[field_name],
        )

    def _consume_type(self, remaining: list[str]) -> object:
        """Pop one type (with its generic arguments) off the cref list."""
        _, name = split_cref(remaining.pop(0))
        if name in SYSTEM_TYPES:
            return SYSTEM_TYPES[name]

        is_array = name.endswith(ARRAY_SUFFIX)
        if is_array:
            name = name[: -len(ARRAY_SUFFIX)]

        match = GENERIC_ARITY_RE.search(name)
        if match:
            arity = int(match.group(1))
            if len(remaining) < arity:
                raise DocumentationError(UNDOCUMENTED_GENERIC_TYPE.format(name, arity))
            origin = self._find_type(name)
            args = [self._consume_type(remaining) for _ in range(arity)]
            try:
                resolved = origin[args[0] if arity == 1 else tuple(args)]  # type: ignore[index]
            except TypeError as exc:
                raise DocumentationError(NOT_A_GENERIC_TYPE.format(name, exc)) from exc
        else:
            resolved = self._find_type(name)

        return list[resolved] if is_array else resolved  # type: ignore[valid-type]

    def _find_type(self, name: str) -> object:
        if name in SYSTEM_TYPES:
            return SYSTEM_TYPES[name]
        if name in SYSTEM_GENERIC_TYPES:
            return SYSTEM_GENERIC_TYPES[name]
        found = self._types.get(name) or self._types.get(GENERIC_ARITY_RE.sub("", name))
        if found is None:
            raise TypeNotFoundError(name, self.assembly_names)
        return found

    def _load_assembly(self, path: Path) -> ModuleType:
        """Import an assembly file under a private module name."""
        if not path.is_file():
            raise AssemblyLoadError(
                ASSEMBLY_LOAD_FAILED.format(path.name, "file does not exist")
            )
        # One module name per resolved path
        digest = hashlib.sha256(str(path.resolve()).encode("utf-8")).hexdigest()[:12]
        module_name = f"_assembly_{path.stem}_{digest}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise AssemblyLoadError(
                ASSEMBLY_LOAD_FAILED.format(path.name, "not a Python source file")
            )
        module = importlib.util.module_from_spec(spec)
        # dataclasses and typing resolve annotations through sys.modules
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            sys.modules.pop(module_name, None)
            raise AssemblyLoadError(ASSEMBLY_LOAD_FAILED.format(path.name, exc)) from exc
        logger.debug("Loaded assembly %s", path)
        return module

    def _index_types(self, module: ModuleType, namespace: str) -> None:
        pending = [
            obj
            for obj in vars(module).values()
            if inspect.isclass(obj) and obj.__module__ == module.__name__
        ]
        while pending:
            cls = pending.pop()
            self._types[f"{namespace}.{cls.__qualname__}"] = cls
            pending.extend(
                obj
                for obj in vars(cls).values()
                if inspect.isclass(obj)
                and obj.__qualname__.startswith(f"{cls.__qualname__}.")
            )
        logger.debug("%d types known after indexing %s", len(self._types), namespace)


def _is_public_field(cls: type, name: str) -> bool:
    """Return True if ``name`` is a public, non-callable attribute declared on ``cls``."""
    if name.startswith("_") or name not in vars(cls):
        return False
    member = vars(cls)[name]
    return not (
        inspect.isclass(member)
        or callable(member)
        or isinstance(member, (staticmethod, classmethod, property))
    )
