"""Copying of field values between record-like objects."""

from __future__ import annotations

import base64
import dataclasses
import datetime
import json
from decimal import Decimal
from typing import Any, Dict, Iterator, Tuple

from typeconv.empty import is_empty


def _public_fields(obj: Any) -> Iterator[Tuple[str, Any]]:
    """Yield the public field names and values of ``obj``, in declaration order."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        names = [field.name for field in dataclasses.fields(obj)]
    elif isinstance(obj, tuple) and hasattr(type(obj), "_fields"):
        names = list(type(obj)._fields)
    else:
        try:
            names = list(vars(obj))
        except TypeError:
            raise TypeError(f"{type(obj).__name__} has no fields") from None
    for name in names:
        if not name.startswith("_"):
            yield name, getattr(obj, name)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dict(_public_fields(obj))
    if hasattr(obj, "__dict__"):
        return dict(_public_fields(obj))
    raise TypeError(f"cannot serialise {type(obj).__name__}")


def _check_compatible(name: str, current: Any, new: Any) -> Any:
    """Return ``new`` fitted to the type held by ``current``, or raise TypeError."""
    if current is None:
        return new
    if isinstance(current, bool):
        if isinstance(new, bool):
            return new
    elif isinstance(current, int):
        if isinstance(new, int) and not isinstance(new, bool):
            return new
        if isinstance(new, float) and new.is_integer():
            return int(new)
    elif isinstance(current, float):
        if isinstance(new, (int, float)) and not isinstance(new, bool):
            return float(new)
    elif isinstance(current, str):
        if isinstance(new, str):
            return new
    elif isinstance(current, dict):
        if isinstance(new, dict):
            return new
    elif isinstance(current, (list, tuple)):
        if isinstance(new, list):
            return type(current)(new) if isinstance(current, tuple) else new
    else:
        return new
    raise TypeError(
        f"cannot assign {type(new).__name__} to field {name!r} "
        f"of type {type(current).__name__}"
    )


def _find_field(fields: Dict[str, Any], key: str) -> str | None:
    if key in fields:
        return key
    folded = key.casefold()
    for name in fields:
        if name.casefold() == folded:
            return name
    return None


def copy_exported(dst: Any, src: Any) -> None:
    """Copy the public data of ``src`` into ``dst`` through a JSON round trip.

    A dict ``dst`` is updated with the keys of ``src``; an object ``dst`` has
    its matching public fields set (names match exactly, or else ignoring
    case), and unknown keys are ignored.  JSON null leaves a field unchanged.
    Raises ``TypeError`` when ``src`` cannot be serialised or a value does
    not fit the field it is copied into.
    """
    data = json.loads(json.dumps(src, default=_json_default))
    if isinstance(dst, dict):
        if not isinstance(data, dict):
            raise TypeError(f"cannot copy {type(data).__name__} into a dict")
        dst.update(data)
        return
    if isinstance(dst, list):
        if not isinstance(data, list):
            raise TypeError(f"cannot copy {type(data).__name__} into a list")
        dst[:] = data
        return
    if data is None:
        return
    if not isinstance(data, dict):
        raise TypeError(
            f"cannot copy {type(data).__name__} into {type(dst).__name__}"
        )
    fields = dict(_public_fields(dst))
    for key, value in data.items():
        name = _find_field(fields, key)
        if name is None or value is None:
            continue
        setattr(dst, name, _check_compatible(name, fields[name], value))


def simple_copy_struct(dest: Any, src: Any, ignore_empty: bool = False) -> None:
    """Copy the public fields of ``src`` into the same-named fields of ``dest``.

    Only one level is copied.  With ``ignore_empty`` fields of ``src`` that
    are empty are skipped.  Raises ``TypeError`` when a value's type does not
    match the type held by the field it would replace.
    """
    values = {
        name: value
        for name, value in _public_fields(src)
        if not (ignore_empty and is_empty(value))
    }
    for name, current in list(_public_fields(dest)):
        if name not in values:
            continue
        value = values[name]
        if current is not None and value is not None and not isinstance(
            value, type(current)
        ):
            raise TypeError(
                f"cannot assign {type(value).__name__} to field {name!r} "
                f"of type {type(current).__name__}"
            )
        setattr(dest, name, value)