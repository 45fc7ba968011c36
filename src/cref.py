"""Helpers for parsing documentation cross-references (crefs)."""


def split_cref(cref: str) -> tuple[str, str]:
    """Split ``"F:Ns.Type.Field"`` into ``("F", "Ns.Type.Field")``.

    A cref without a kind prefix returns an empty kind.
    """
    cref = cref.strip()
    kind, sep, name = cref.partition(":")
    if sep and len(kind) == 1 and kind.isalpha():
        return kind, name.strip()
    return "", cref


def split_field_cref(cref: str) -> tuple[str, str]:
    """Return ``(type_name, field_name)`` for a field cref.

    Raises ValueError when the cref does not name a member of a type.
    """
    kind, name = split_cref(cref)
    if kind not in ("", "F"):
        msg = f"Expected a field cref, got kind {kind!r}"
        raise ValueError(msg)
    type_name, sep, field_name = name.rpartition(".")
    if not sep or not type_name or not field_name:
        msg = f"Field cref {cref!r} has no containing type"
        raise ValueError(msg)
    return type_name, field_name
