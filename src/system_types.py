"""Python stand-ins for well-known ``System`` types named in crefs."""

import datetime
import decimal
import typing
import uuid

SYSTEM_TYPES: dict[str, object] = {
    "System.String": str,
    "System.Char": str,
    "System.Uri": str,
    "System.Boolean": bool,
    "System.Byte": int,
    "System.SByte": int,
    "System.Int16": int,
    "System.UInt16": int,
    "System.Int32": int,
    "System.UInt32": int,
    "System.Int64": int,
    "System.UInt64": int,
    "System.Single": float,
    "System.Double": float,
    "System.Decimal": decimal.Decimal,
    "System.DateTime": datetime.datetime,
    "System.DateTimeOffset": datetime.datetime,
    "System.TimeSpan": datetime.timedelta,
    "System.Guid": uuid.UUID,
    "System.Byte[]": bytes,
    "System.Object": object,
}

# Open generic types; the arity suffix is part of the cref name.
SYSTEM_GENERIC_TYPES: dict[str, object] = {
    "System.Nullable`1": typing.Optional,
    "System.Collections.Generic.List`1": list,
    "System.Collections.Generic.IList`1": list,
    "System.Collections.Generic.ICollection`1": list,
    "System.Collections.Generic.IEnumerable`1": list,
    "System.Collections.Generic.IReadOnlyList`1": list,
    "System.Collections.Generic.Dictionary`2": dict,
    "System.Collections.Generic.IDictionary`2": dict,
    "System.Collections.Generic.IReadOnlyDictionary`2": dict,
}
