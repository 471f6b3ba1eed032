"""Packing of numbers, booleans, strings and bits to and from bytes."""

__all__ = ["big", "bits", "default", "little"]