"""Checks for empty and nil values."""

from __future__ import annotations

import asyncio
import dataclasses
import numbers
import queue
import weakref
from collections.abc import Sized
from typing import Any


def is_empty(value: Any) -> bool:
    """Tell whether ``value`` is empty.

    None, False, zero numbers, empty strings, bytes and containers, empty
    queues and dataclass instances without fields count as empty.  Objects
    offering ``is_zero()``, ``interfaces()`` or ``map_str_any()`` are judged
    by those.  Anything else is not empty.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return len(value) == 0

    is_zero = getattr(value, "is_zero", None)
    if callable(is_zero):
        return bool(is_zero())
    interfaces = getattr(value, "interfaces", None)
    if callable(interfaces):
        return len(interfaces()) == 0
    map_str_any = getattr(value, "map_str_any", None)
    if callable(map_str_any):
        return len(map_str_any()) == 0

    if isinstance(value, Sized):
        return len(value) == 0
    if isinstance(value, (queue.Queue, queue.SimpleQueue, asyncio.Queue)):
        return value.empty()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return len(dataclasses.fields(value)) == 0
    return False


def is_nil(value: Any, trace_source: bool = False) -> bool:
    """Tell whether ``value`` is None.

    With ``trace_source``, weak references are followed to their referent,
    and a dead reference counts as nil.
    """
    if value is None:
        return True
    if not trace_source:
        return False
    while isinstance(value, weakref.ref):
        value = value()
        if value is None:
            return True
    return False