"""Loose value conversion, map flattening, binary packing and decimal helpers."""

__version__ = "0.1.0"
__all__ = [
    "aes",
    "binary",
    "bytype",
    "convert",
    "decutil",
    "deepcopy",
    "empty",
    "maps",
]