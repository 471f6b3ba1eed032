"""Conversion of a value to the type of another value."""

from __future__ import annotations

from typing import Any

from typeconv.convert import convert


def convert_to(value: Any, to_type_value: Any) -> Any:
    """Convert ``value`` to the type of ``to_type_value``.

    A None target returns ``value`` unchanged, as does a target type that
    has no known conversion.
    """
    if to_type_value is None:
        return value
    return convert(value, type(to_type_value).__name__)