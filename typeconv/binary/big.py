"""Big-endian encoding of scalar values to bytes and back."""

from __future__ import annotations

from typing import Any

from typeconv.binary.little import _Codec

_BIG = _Codec("big")


def encode(*args: Any) -> bytes:
    """Encode each value in turn and join the results; stops at the first None."""
    return _BIG.encode(*args)


def encode_by_length(length: int, *args: Any) -> bytes:
    """Encode the values, then zero-pad or truncate the result to ``length`` bytes."""
    return _BIG.encode_by_length(length, *args)


def decode(data: bytes, *args: Any) -> tuple:
    """Read values of the given kinds from ``data`` in order.

    Each kind is a type name such as ``"int16"`` or ``"float64"``, or an int
    giving a number of raw bytes to read.
    """
    return _BIG.decode(data, *args)


def encode_string(s: str) -> bytes:
    """Return the UTF-8 bytes of ``s``."""
    return _BIG.encode_string(s)


def decode_to_string(b: bytes) -> str:
    """Return ``b`` as text, keeping undecodable bytes recoverable."""
    return _BIG.decode_to_string(b)


def encode_bool(b: bool) -> bytes:
    """Encode a boolean as a single byte 1 or 0."""
    return _BIG.encode_bool(b)


def encode_int(i: int) -> bytes:
    """Encode a signed integer using the narrowest width its upper bound allows."""
    return _BIG.encode_int(i)


def encode_uint(i: int) -> bytes:
    """Encode an unsigned integer using the narrowest width that holds it."""
    return _BIG.encode_uint(i)


def encode_int8(i: int) -> bytes:
    """Encode ``i`` in one byte, two's complement."""
    return _BIG._pack(i, 1)


def encode_uint8(i: int) -> bytes:
    """Encode ``i`` in one byte."""
    return _BIG._pack(i, 1)


def encode_int16(i: int) -> bytes:
    """Encode ``i`` in two bytes, two's complement."""
    return _BIG._pack(i, 2)


def encode_uint16(i: int) -> bytes:
    """Encode ``i`` in two bytes."""
    return _BIG._pack(i, 2)


def encode_int32(i: int) -> bytes:
    """Encode ``i`` in four bytes, two's complement."""
    return _BIG._pack(i, 4)


def encode_uint32(i: int) -> bytes:
    """Encode ``i`` in four bytes."""
    return _BIG._pack(i, 4)


def encode_int64(i: int) -> bytes:
    """Encode ``i`` in eight bytes, two's complement."""
    return _BIG._pack(i, 8)


def encode_uint64(i: int) -> bytes:
    """Encode ``i`` in eight bytes."""
    return _BIG._pack(i, 8)


def encode_float32(f: float) -> bytes:
    """Encode ``f`` as an IEEE 754 single; out-of-range values become infinity."""
    return _BIG.encode_float32(f)


def encode_float64(f: float) -> bytes:
    """Encode ``f`` as an IEEE 754 double."""
    return _BIG.encode_float64(f)


def decode_to_int(b: bytes) -> int:
    """Decode an integer whose width is chosen by the length of ``b``."""
    return _BIG.decode_to_int(b)


def decode_to_uint(b: bytes) -> int:
    """Decode an unsigned integer whose width is chosen by the length of ``b``."""
    return _BIG.decode_to_uint(b)


def decode_to_bool(b: bytes) -> bool:
    """Return False for empty or all-zero bytes, True otherwise."""
    return any(bytes(b))


def decode_to_int8(b: bytes) -> int:
    """Decode the first byte as a signed integer."""
    return _BIG.decode_to_int8(b)


def decode_to_uint8(b: bytes) -> int:
    """Decode the first byte as an unsigned integer."""
    return _BIG.decode_to_uint8(b)


def decode_to_int16(b: bytes) -> int:
    """Decode a signed 16-bit integer."""
    return _BIG._unpack(b, 2, signed=True)


def decode_to_uint16(b: bytes) -> int:
    """Decode an unsigned 16-bit integer."""
    return _BIG._unpack(b, 2, signed=False)


def decode_to_int32(b: bytes) -> int:
    """Decode a signed 32-bit integer."""
    return _BIG._unpack(b, 4, signed=True)


def decode_to_uint32(b: bytes) -> int:
    """Decode an unsigned 32-bit integer."""
    return _BIG._unpack(b, 4, signed=False)


def decode_to_int64(b: bytes) -> int:
    """Decode a signed 64-bit integer."""
    return _BIG._unpack(b, 8, signed=True)


def decode_to_uint64(b: bytes) -> int:
    """Decode an unsigned 64-bit integer."""
    return _BIG._unpack(b, 8, signed=False)


def decode_to_float32(b: bytes) -> float:
    """Decode an IEEE 754 single."""
    return _BIG.decode_to_float32(b)


def decode_to_float64(b: bytes) -> float:
    """Decode an IEEE 754 double."""
    return _BIG.decode_to_float64(b)


def fill_up_size(b: bytes, length: int) -> bytes:
    """Truncate ``b`` to ``length`` bytes, or pad it with zeros at the high end."""
    return _BIG.fill_up_size(b, length)