"""Packing of integers into sequences of single bits (0 or 1) and back."""

from __future__ import annotations

from typing import Iterable, List, Optional

_UINT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63


def encode_bits(bits: Optional[List[int]], i: int, length: int) -> List[int]:
    """Append the lowest ``length`` bits of ``i`` to ``bits``, most significant first."""
    return encode_bits_with_uint(bits, i, length)


def encode_bits_with_uint(bits: Optional[List[int]], ui: int, length: int) -> List[int]:
    """Append the lowest ``length`` bits of the unsigned value ``ui`` to ``bits``.

    Negative values are taken in 64-bit two's complement.  A new list is
    returned; ``bits`` may be None to start from nothing.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    ui &= _UINT64_MASK
    encoded = [(ui >> shift) & 1 for shift in reversed(range(length))]
    if bits is None:
        return encoded
    return [*bits, *encoded]


def encode_bits_to_bytes(bits: Iterable[int]) -> bytes:
    """Pack bits into bytes from left to right, zero-padding the last byte."""
    bit_list = list(bits)
    remainder = len(bit_list) % 8
    if remainder:
        bit_list.extend([0] * (8 - remainder))
    return bytes(
        decode_bits_to_uint(bit_list[start:start + 8]) & 0xFF
        for start in range(0, len(bit_list), 8)
    )


def decode_bits(bits: Iterable[int]) -> int:
    """Read bits as a signed 64-bit integer, most significant first."""
    value = decode_bits_to_uint(bits)
    return value - (1 << 64) if value & _INT64_SIGN else value


def decode_bits_to_uint(bits: Iterable[int]) -> int:
    """Read bits as an unsigned 64-bit integer, most significant first."""
    value = 0
    for bit in bits:
        value = ((value << 1) | int(bit)) & _UINT64_MASK
    return value


def decode_bytes_to_bits(bs: bytes) -> List[int]:
    """Expand each byte of ``bs`` into eight bits, most significant first."""
    bits: List[int] = []
    for byte in bytes(bs):
        bits = encode_bits_with_uint(bits, byte, 8)
    return bits