"""Conversion of arbitrary values to common scalar types."""

from __future__ import annotations

import base64
import dataclasses
import datetime
import json
import math
import numbers
import re
import struct
from decimal import Decimal
from typing import Any, Callable

from typeconv.binary import default as _binary

_FALSY_STRINGS = frozenset({"", "0", "no", "off", "false"})

_INT64_MIN = -(1 << 63)
_UINT64_MASK = (1 << 64) - 1

_DIGITS = {
    16: "[0-9a-fA-F]+",
    10: "[0-9]+",
    8: "[0-7]+",
}
_SIGNED_INT_RE = {base: re.compile(f"[+-]?{digits}") for base, digits in _DIGITS.items()}
_UNSIGNED_INT_RE = {base: re.compile(digits) for base, digits in _DIGITS.items()}

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def unmarshal_use_number(data: str | bytes | bytearray) -> Any:
    """Decode JSON, keeping fractional numbers exact as ``Decimal``.

    Raises ``json.JSONDecodeError`` (a ``ValueError``) on malformed input.
    """
    return json.loads(data, parse_float=Decimal)


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _float_to_int64(f: float) -> int:
    if not math.isfinite(f) or f >= 2**63 or f < -(2**63):
        return _INT64_MIN
    return int(f)


def _float_to_uint64(f: float) -> int:
    if not math.isfinite(f):
        return 1 << 63
    if 0 <= f < 2**64:
        return int(f)
    if -(2**63) <= f < 0:
        return int(f) & _UINT64_MASK
    return 1 << 63


def _round_float32(f: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", f))[0]
    except OverflowError:
        return math.copysign(math.inf, f)


def _parse_int(s: str, base: int, signed: bool) -> int | None:
    pattern = (_SIGNED_INT_RE if signed else _UNSIGNED_INT_RE)[base]
    if not pattern.fullmatch(s):
        return None
    value = int(s, base)
    if signed:
        if not _INT64_MIN <= value <= (1 << 63) - 1:
            return None
    elif value > _UINT64_MASK:
        return None
    return value


def _parse_float(s: str) -> float:
    if _FLOAT_RE.fullmatch(s):
        return float(s)
    if _HEX_FLOAT_RE.fullmatch(s):
        try:
            return float.fromhex(s)
        except OverflowError:
            return -math.inf if s.startswith("-") else math.inf
    return 0.0


def _parse_decimal(s: str) -> Decimal:
    if not _DECIMAL_RE.fullmatch(s):
        raise ValueError(f"can't convert {s} to decimal")
    return Decimal(s)


def _shift(d: Decimal, places: int) -> Decimal:
    sign, digits, exponent = d.as_tuple()
    return Decimal((sign, digits, exponent + places))


def _int_part(d: Decimal) -> int:
    return _wrap(int(d), 64, True)


def _format_decimal(d: Decimal) -> str:
    text = format(d, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_float(f: float) -> str:
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    return _format_decimal(Decimal(repr(f)))


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return "0" if obj.is_zero() else _format_decimal(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: getattr(obj, field.name)
            for field in dataclasses.fields(obj)
            if not field.name.startswith("_")
        }
    raise TypeError(f"cannot serialise {type(obj).__name__}")


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def to_string(value: Any) -> str:
    """Convert ``value`` to text.

    Numbers are written without exponent, booleans as ``true``/``false``,
    objects with their own ``__str__`` through it, and everything else as
    compact JSON where possible.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", "surrogateescape")
    if isinstance(value, Decimal):
        return "0" if value.is_zero() else _format_decimal(value)
    if isinstance(value, BaseException) or _has_own_str(value):
        return str(value)
    try:
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=_json_default
        )
    except (TypeError, ValueError):
        return str(value)


def to_bytes(value: Any) -> bytes | None:
    """Return the bytes of a string or bytes-like value, or None for anything else."""
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return None


def to_bool(value: Any) -> bool:
    """Convert ``value`` to a boolean.

    False for None, False, zero, empty containers and the strings
    ``""``, ``"0"``, ``"no"``, ``"off"`` and ``"false"`` in any case.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return to_string(value).lower() not in _FALSY_STRINGS
    if isinstance(value, str):
        return value.lower() not in _FALSY_STRINGS
    if isinstance(value, numbers.Number):
        return to_string(value).lower() not in _FALSY_STRINGS
    try:
        return len(value) != 0
    except TypeError:
        return True


def to_int64(value: Any) -> int:
    """Convert ``value`` to a signed 64-bit integer.

    Strings may be decimal, ``0x`` hexadecimal, ``0``-prefixed octal or a
    float; bytes are read as a little-endian integer.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, numbers.Integral):
        return _wrap(int(value), 64, True)
    if isinstance(value, float):
        return _float_to_int64(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _binary.decode_to_int64(bytes(value))

    text = to_string(value)
    negative = False
    if text[:1] == "-":
        negative, text = True, text[1:]
    elif text[:1] == "+":
        text = text[1:]

    candidates = []
    if len(text) > 2 and text[0] == "0" and text[1] in "xX":
        candidates.append((text[2:], 16))
    if len(text) > 1 and text[0] == "0":
        candidates.append((text[1:], 8))
    candidates.append((text, 10))
    for digits, base in candidates:
        parsed = _parse_int(digits, base, signed=True)
        if parsed is not None:
            return _wrap(-parsed if negative else parsed, 64, True)
    return _float_to_int64(to_float64(value))


def to_int(value: Any) -> int:
    """Convert ``value`` to a 64-bit signed integer."""
    return to_int64(value)


def to_int8(value: Any) -> int:
    return _wrap(to_int64(value), 8, True)


def to_int16(value: Any) -> int:
    return _wrap(to_int64(value), 16, True)


def to_int32(value: Any) -> int:
    return _wrap(to_int64(value), 32, True)


def to_uint64(value: Any) -> int:
    """Convert ``value`` to an unsigned 64-bit integer, wrapping negatives."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, numbers.Integral):
        return int(value) & _UINT64_MASK
    if isinstance(value, float):
        return _float_to_uint64(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _binary.decode_to_uint64(bytes(value))

    text = to_string(value)
    candidates = []
    if len(text) > 2 and text[0] == "0" and text[1] in "xX":
        candidates.append((text[2:], 16))
    if len(text) > 1 and text[0] == "0":
        candidates.append((text[1:], 8))
    candidates.append((text, 10))
    for digits, base in candidates:
        parsed = _parse_int(digits, base, signed=False)
        if parsed is not None:
            return parsed
    return _float_to_uint64(to_float64(value))


def to_uint(value: Any) -> int:
    """Convert ``value`` to a 64-bit unsigned integer."""
    return to_uint64(value)


def to_uint8(value: Any) -> int:
    return to_uint64(value) & 0xFF


def to_uint16(value: Any) -> int:
    return to_uint64(value) & 0xFFFF


def to_uint32(value: Any) -> int:
    return to_uint64(value) & 0xFFFFFFFF


def to_byte(value: Any) -> int:
    """Convert ``value`` to an unsigned 8-bit integer."""
    return to_uint8(value)


def to_rune(value: Any) -> int:
    """Convert ``value`` to a 32-bit signed code point."""
    return to_int32(value)


def to_runes(value: Any) -> list[int]:
    """Return the code points of the text form of ``value``."""
    return [ord(char) for char in to_string(value)]


def to_float64(value: Any) -> float:
    """Convert ``value`` to a float; unparseable text gives 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _binary.decode_to_float64(bytes(value))
    return _parse_float(to_string(value))


def to_float32(value: Any) -> float:
    """Convert ``value`` to a float rounded to single precision."""
    if value is None:
        return 0.0
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _binary.decode_to_float32(bytes(value))
    if isinstance(value, float):
        return _round_float32(value)
    return _round_float32(_parse_float(to_string(value)))


def to_decimal(value: Any) -> Decimal:
    """Convert ``value`` to ``Decimal``; anything unparseable gives zero."""
    if value is None:
        return Decimal(0)
    try:
        return _parse_decimal(to_string(value))
    except ValueError:
        return Decimal(0)


def to_decimal_strict(value: Any) -> Decimal:
    """Convert ``value`` to ``Decimal``, raising ``ValueError`` if it cannot be parsed."""
    if value is None:
        return Decimal(0)
    text = to_string(value)
    try:
        return _parse_decimal(text)
    except ValueError as err:
        raise ValueError(f"{text}: {err}") from None


def to_int64_e8(value: Any) -> int:
    """Return the integer part of ``value`` times 10**8."""
    return _int_part(_shift(to_decimal(value), 8))


def to_int64_e8_strict(value: Any) -> int:
    """Like ``to_int64_e8`` but raise ``ValueError`` on unparseable input."""
    return _int_part(_shift(to_decimal_strict(value), 8))


def to_int64_strict(value: Any) -> int:
    """Return the integer part of ``value`` read as a decimal, raising on bad input."""
    return _int_part(to_decimal_strict(value))


def _to_map(value: Any) -> Any:
    from typeconv import maps

    return maps.to_map(value)


def _to_map_str_str(value: Any) -> Any:
    from typeconv import maps

    return maps.map_str_str(value)


def _identity(value: Any) -> Any:
    return value


_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "int": to_int,
    "int8": to_int8,
    "int16": to_int16,
    "int32": to_int32,
    "int64": to_int64,
    "uint": to_uint,
    "uint8": to_uint8,
    "uint16": to_uint16,
    "uint32": to_uint32,
    "uint64": to_uint64,
    "float32": to_float32,
    "float64": to_float64,
    "bool": to_bool,
    "string": to_string,
    "[]byte": to_bytes,
    "[]uint8": to_bytes,
    "Time": _identity,
    "time.Time": _identity,
    "*time.Time": _identity,
    "map[string]string": _to_map_str_str,
    "map[string]interface{}": _to_map,
    "decimal.Decimal": to_decimal,
    "str": to_string,
    "float": to_float64,
    "bytes": to_bytes,
    "bytearray": to_bytes,
    "Decimal": to_decimal,
    "datetime": _identity,
    "date": _identity,
    "dict": _to_map,
}

_POINTER_TARGETS = frozenset(
    {
        "int", "int8", "int16", "int32", "int64",
        "uint", "uint8", "uint16", "uint32", "uint64",
        "float32", "float64", "bool", "string",
    }
)


def convert(value: Any, type_name: str, *args: Any) -> Any:
    """Convert ``value`` to the type named by ``type_name``.

    Unknown type names return ``value`` unchanged.  Extra arguments are
    accepted for future conversions and currently unused.
    """
    if type_name.startswith("*") and type_name[1:] in _POINTER_TARGETS:
        type_name = type_name[1:]
    converter = _CONVERTERS.get(type_name)
    if converter is None:
        return value
    return converter(value)