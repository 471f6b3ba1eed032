"""Little-endian encoding of scalar values to bytes and back."""

from __future__ import annotations

import itertools
import math
import struct
from typing import Any

_KIND_FORMATS = {
    "int8": "b",
    "uint8": "B",
    "int16": "h",
    "uint16": "H",
    "int32": "i",
    "uint32": "I",
    "int64": "q",
    "uint64": "Q",
    "float32": "f",
    "float64": "d",
    "bool": "?",
}

# (largest value, width in bytes) tried in order before falling back to 8 bytes.
_SIGNED_WIDTHS = ((0x7F, 1), (0x7FFF, 2), (0x7FFFFFFF, 4))
_UNSIGNED_WIDTHS = ((0xFF, 1), (0xFFFF, 2), (0xFFFFFFFF, 4))
_MASK_UINT64 = 0xFFFFFFFFFFFFFFFF


def _auto_width(size: int) -> int:
    """Width used to decode an integer from ``size`` bytes."""
    if size < 2:
        return 1
    if size < 3:
        return 2
    if size < 5:
        return 4
    return 8


class _Codec:
    """Encoders and decoders for one byte order."""

    def __init__(self, byteorder: str) -> None:
        self._byteorder = byteorder
        self._prefix = "<" if byteorder == "little" else ">"

    def _pack(self, value: int, size: int) -> bytes:
        mask = (1 << (8 * size)) - 1
        return (value & mask).to_bytes(size, self._byteorder)

    def _unpack(self, b: bytes, size: int, signed: bool) -> int:
        return int.from_bytes(self.fill_up_size(b, size), self._byteorder, signed=signed)

    def _first_byte(self, b: bytes) -> bytes:
        if len(b) == 0:
            raise ValueError("cannot decode from empty bytes")
        return bytes(b[:1])

    def _encode_one(self, value: Any) -> bytes:
        if isinstance(value, bool):
            return self.encode_bool(value)
        if isinstance(value, int):
            return self.encode_int(value)
        if isinstance(value, float):
            return self.encode_float64(value)
        if isinstance(value, str):
            return self.encode_string(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        return self.encode_string(str(value))

    def encode(self, *args: Any) -> bytes:
        present = itertools.takewhile(lambda value: value is not None, args)
        return b"".join(self._encode_one(value) for value in present)

    def encode_by_length(self, length: int, *args: Any) -> bytes:
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        return self.encode(*args)[:length].ljust(length, b"\x00")

    def decode(self, data: bytes, *args: Any) -> tuple:
        raw = bytes(data)
        offset = 0
        values = []
        for kind in args:
            if isinstance(kind, int) and not isinstance(kind, bool):
                if kind < 0:
                    raise ValueError(f"byte count must not be negative: {kind}")
                chunk = raw[offset:offset + kind]
                if len(chunk) < kind:
                    raise ValueError("unexpected end of data")
                values.append(chunk)
                offset += kind
                continue
            code = _KIND_FORMATS.get(kind)
            if code is None:
                raise ValueError(f"unsupported kind: {kind!r}")
            fmt = self._prefix + code
            size = struct.calcsize(fmt)
            if offset + size > len(raw):
                raise ValueError("unexpected end of data")
            values.append(struct.unpack_from(fmt, raw, offset)[0])
            offset += size
        return tuple(values)

    def encode_string(self, s: str) -> bytes:
        return s.encode("utf-8", "surrogateescape")

    def decode_to_string(self, b: bytes) -> str:
        return bytes(b).decode("utf-8", "surrogateescape")

    def encode_bool(self, b: bool) -> bytes:
        return self._pack(int(bool(b)), 1)

    def encode_int(self, i: int) -> bytes:
        for limit, size in _SIGNED_WIDTHS:
            if i <= limit:
                return self._pack(i, size)
        return self._pack(i, 8)

    def encode_uint(self, i: int) -> bytes:
        i &= _MASK_UINT64
        for limit, size in _UNSIGNED_WIDTHS:
            if i <= limit:
                return self._pack(i, size)
        return self._pack(i, 8)

    def encode_float32(self, f: float) -> bytes:
        try:
            return struct.pack(self._prefix + "f", f)
        except OverflowError:
            return struct.pack(self._prefix + "f", math.copysign(math.inf, f))

    def encode_float64(self, f: float) -> bytes:
        return struct.pack(self._prefix + "d", f)

    def decode_to_int(self, b: bytes) -> int:
        width = _auto_width(len(b))
        if width == 1:
            return self.decode_to_uint8(b)
        return self._unpack(b, width, signed=width == 8)

    def decode_to_uint(self, b: bytes) -> int:
        width = _auto_width(len(b))
        if width == 1:
            return self.decode_to_uint8(b)
        return self._unpack(b, width, signed=False)

    def decode_to_int8(self, b: bytes) -> int:
        return int.from_bytes(self._first_byte(b), self._byteorder, signed=True)

    def decode_to_uint8(self, b: bytes) -> int:
        return int.from_bytes(self._first_byte(b), self._byteorder)

    def decode_to_float32(self, b: bytes) -> float:
        return struct.unpack(self._prefix + "f", self.fill_up_size(b, 4))[0]

    def decode_to_float64(self, b: bytes) -> float:
        return struct.unpack(self._prefix + "d", self.fill_up_size(b, 8))[0]

    def fill_up_size(self, b: bytes, length: int) -> bytes:
        head = bytes(b[:length])
        if self._byteorder == "little":
            return head.ljust(length, b"\x00")
        return head.rjust(length, b"\x00")


_LITTLE = _Codec("little")


def encode(*args: Any) -> bytes:
    """Encode each value in turn and join the results; stops at the first None."""
    return _LITTLE.encode(*args)


def encode_by_length(length: int, *args: Any) -> bytes:
    """Encode the values, then zero-pad or truncate the result to ``length`` bytes."""
    return _LITTLE.encode_by_length(length, *args)


def decode(data: bytes, *args: Any) -> tuple:
    """Read values of the given kinds from ``data`` in order.

    Each kind is a type name such as ``"int16"`` or ``"float64"``, or an int
    giving a number of raw bytes to read.
    """
    return _LITTLE.decode(data, *args)


def encode_string(s: str) -> bytes:
    """Return the UTF-8 bytes of ``s``."""
    return _LITTLE.encode_string(s)


def decode_to_string(b: bytes) -> str:
    """Return ``b`` as text, keeping undecodable bytes recoverable."""
    return _LITTLE.decode_to_string(b)


def encode_bool(b: bool) -> bytes:
    """Encode a boolean as a single byte 1 or 0."""
    return _LITTLE.encode_bool(b)


def encode_int(i: int) -> bytes:
    """Encode a signed integer using the narrowest width its upper bound allows."""
    return _LITTLE.encode_int(i)


def encode_uint(i: int) -> bytes:
    """Encode an unsigned integer using the narrowest width that holds it."""
    return _LITTLE.encode_uint(i)


def encode_int8(i: int) -> bytes:
    """Encode ``i`` in one byte, two's complement."""
    return _LITTLE._pack(i, 1)


def encode_uint8(i: int) -> bytes:
    """Encode ``i`` in one byte."""
    return _LITTLE._pack(i, 1)


def encode_int16(i: int) -> bytes:
    """Encode ``i`` in two bytes, two's complement."""
    return _LITTLE._pack(i, 2)


def encode_uint16(i: int) -> bytes:
    """Encode ``i`` in two bytes."""
    return _LITTLE._pack(i, 2)


def encode_int32(i: int) -> bytes:
    """Encode ``i`` in four bytes, two's complement."""
    return _LITTLE._pack(i, 4)


def encode_uint32(i: int) -> bytes:
    """Encode ``i`` in four bytes."""
    return _LITTLE._pack(i, 4)


def encode_int64(i: int) -> bytes:
    """Encode ``i`` in eight bytes, two's complement."""
    return _LITTLE._pack(i, 8)


def encode_uint64(i: int) -> bytes:
    """Encode ``i`` in eight bytes."""
    return _LITTLE._pack(i, 8)


def encode_float32(f: float) -> bytes:
    """Encode ``f`` as an IEEE 754 single; out-of-range values become infinity."""
    return _LITTLE.encode_float32(f)


def encode_float64(f: float) -> bytes:
    """Encode ``f`` as an IEEE 754 double."""
    return _LITTLE.encode_float64(f)


def decode_to_int(b: bytes) -> int:
    """Decode an integer whose width is chosen by the length of ``b``."""
    return _LITTLE.decode_to_int(b)


def decode_to_uint(b: bytes) -> int:
    """Decode an unsigned integer whose width is chosen by the length of ``b``."""
    return _LITTLE.decode_to_uint(b)


def decode_to_bool(b: bytes) -> bool:
    """Return False for empty or all-zero bytes, True otherwise."""
    return any(bytes(b))


def decode_to_int8(b: bytes) -> int:
    """Decode the first byte as a signed integer."""
    return _LITTLE.decode_to_int8(b)


def decode_to_uint8(b: bytes) -> int:
    """Decode the first byte as an unsigned integer."""
    return _LITTLE.decode_to_uint8(b)


def decode_to_int16(b: bytes) -> int:
    """Decode a signed 16-bit integer."""
    return _LITTLE._unpack(b, 2, signed=True)


def decode_to_uint16(b: bytes) -> int:
    """Decode an unsigned 16-bit integer."""
    return _LITTLE._unpack(b, 2, signed=False)


def decode_to_int32(b: bytes) -> int:
    """Decode a signed 32-bit integer."""
    return _LITTLE._unpack(b, 4, signed=True)


def decode_to_uint32(b: bytes) -> int:
    """Decode an unsigned 32-bit integer."""
    return _LITTLE._unpack(b, 4, signed=False)


def decode_to_int64(b: bytes) -> int:
    """Decode a signed 64-bit integer."""
    return _LITTLE._unpack(b, 8, signed=True)


def decode_to_uint64(b: bytes) -> int:
    """Decode an unsigned 64-bit integer."""
    return _LITTLE._unpack(b, 8, signed=False)


def decode_to_float32(b: bytes) -> float:
    """Decode an IEEE 754 single."""
    return _LITTLE.decode_to_float32(b)


def decode_to_float64(b: bytes) -> float:
    """Decode an IEEE 754 double."""
    return _LITTLE.decode_to_float64(b)


def fill_up_size(b: bytes, length: int) -> bytes:
    """Truncate ``b`` to ``length`` bytes, or pad it with zeros at the high end."""
    return _LITTLE.fill_up_size(b, length)