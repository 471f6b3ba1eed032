"""Conversion of mappings, sequences and record-like objects to dictionaries."""

from __future__ import annotations

import dataclasses
import enum
import types
from typing import Any, Iterator, Mapping, NamedTuple, Optional, Sequence

from typeconv.convert import to_string
from typeconv.empty import is_empty

STRUCT_TAG_PRIORITY = ("gconv", "param", "params", "c", "p", "json")
"""Field metadata keys consulted, in order, for the name of a field."""

_NOT_RECORDS = (
    str, bytes, bytearray, memoryview, dict, list, set, frozenset,
    type, types.ModuleType, enum.Enum,
)


class _Field(NamedTuple):
    name: str
    value: Any
    tags: Mapping[str, Any]
    embedded: bool


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and not _is_namedtuple(value)


def _is_record(value: Any) -> bool:
    if value is None:
        return False
    if callable(getattr(value, "map_str_any", None)):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if _is_namedtuple(value):
        return True
    if isinstance(value, (tuple, *_NOT_RECORDS)) or callable(value):
        return False
    return hasattr(value, "__dict__")


def _record_fields(value: Any) -> Iterator[_Field]:
    if dataclasses.is_dataclass(value):
        for field in dataclasses.fields(value):
            yield _Field(
                field.name,
                getattr(value, field.name),
                field.metadata,
                bool(field.metadata.get("embedded")),
            )
    elif _is_namedtuple(value):
        for name in type(value)._fields:
            yield _Field(name, getattr(value, name), {}, False)
    else:
        for name, attr in vars(value).items():
            yield _Field(name, attr, {}, False)


def _field_key(field: _Field, tags: Sequence[str]) -> Optional[str]:
    """Return the key a field is stored under, or None if it is left out."""
    key = ""
    for tag in tags:
        key = str(field.tags.get(tag) or "")
        if key:
            break
    if not key:
        return field.name
    key = key.strip()
    if key == "-":
        return None
    parts = key.split(",")
    if len(parts) > 1:
        if parts[1].strip() == "omitempty" and is_empty(field.value):
            return None
        return parts[0].strip()
    return key


def _convert_record(value: Any, recursive: bool, tags: Sequence[str]) -> Any:
    map_str_any = getattr(value, "map_str_any", None)
    if callable(map_str_any):
        result = map_str_any()
        if recursive:
            result = {
                key: _convert_value(False, item, recursive, tags)
                for key, item in result.items()
            }
        return result

    data: dict[str, Any] = {}
    for field in _record_fields(value):
        if field.name.startswith("_"):
            continue
        key = _field_key(field, tags)
        if key is None:
            continue
        attr = field.value
        if not (recursive or field.embedded):
            data[key] = attr
        elif _is_record(attr):
            has_no_tag = key == field.name
            if field.embedded and has_no_tag:
                nested = _convert_value(False, attr, True, tags)
                if isinstance(nested, dict):
                    data.update(nested)
                else:
                    data[key] = attr
            elif field.embedded:
                data[key] = _convert_value(False, attr, True, tags)
            else:
                data[key] = _convert_value(False, attr, recursive, tags)
        elif _is_sequence(attr):
            data[key] = (
                [_convert_value(False, item, recursive, tags) for item in attr]
                if attr
                else attr
            )
        else:
            data[key] = attr
    return data if data else value


def _convert_value(is_root: bool, value: Any, recursive: bool, tags: Sequence[str]) -> Any:
    if not is_root and not recursive:
        return value
    if isinstance(value, dict):
        data = {
            to_string(key): _convert_value(False, item, recursive, tags)
            for key, item in value.items()
        }
        return data if data else value
    if _is_record(value):
        return _convert_record(value, recursive, tags)
    if _is_sequence(value):
        if not value:
            return value
        return [_convert_value(False, item, recursive, tags) for item in value]
    return value


def _do_map_convert(value: Any, recursive: bool) -> Optional[dict]:
    if value is None:
        return None
    tags = STRUCT_TAG_PRIORITY
    if isinstance(value, dict):
        if not recursive and all(isinstance(key, str) for key in value):
            return value
        return {
            to_string(key): _convert_value(False, item, recursive, tags)
            for key, item in value.items()
        }
    if _is_record(value):
        converted = _convert_value(True, value, recursive, tags)
        return converted if isinstance(converted, dict) else None
    if _is_sequence(value):
        data: dict[str, Any] = {}
        items = iter(value)
        for key in items:
            data[to_string(key)] = next(items, None)
        return data
    return None


def _select(data: Optional[dict], fields: Sequence[str]) -> Optional[dict]:
    if not fields:
        return data
    source = data or {}
    return {name: source[name] for name in fields if name in source}


def to_map(value: Any, *args: str) -> Optional[dict]:
    """Convert ``value`` to a dict with string keys.

    Dicts get string keys, lists are read as alternating keys and values,
    and dataclasses, named tuples and plain objects give their public
    fields.  If field names are given, only those keys are kept.  Values
    that cannot be converted give None.
    """
    return _select(_do_map_convert(value, False), args)


def map_deep(value: Any, *args: str) -> Optional[dict]:
    """Like ``to_map``, but nested records and containers are converted too."""
    return _select(_do_map_convert(value, True), args)


def map_exclude(value: Any, *args: str) -> Optional[dict]:
    """Like ``to_map``, but the given field names are left out."""
    data = _do_map_convert(value, False)
    if not args:
        return data
    excluded = set(args)
    return {key: item for key, item in (data or {}).items() if key not in excluded}


def _stringify(data: Optional[dict]) -> Optional[dict]:
    if not data:
        return None
    return {key: to_string(item) for key, item in data.items()}


def _is_str_str(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(key, str) and isinstance(item, str) for key, item in value.items()
    )


def map_str_str(value: Any, *args: str) -> Optional[dict]:
    """Convert ``value`` to a dict of strings to strings, or None if it is empty."""
    if _is_str_str(value):
        return value
    return _stringify(to_map(value, *args))


def map_str_str_deep(value: Any, *args: str) -> Optional[dict]:
    """Like ``map_str_str``, converting nested values before turning them to text."""
    if _is_str_str(value):
        return value
    return _stringify(map_deep(value, *args))