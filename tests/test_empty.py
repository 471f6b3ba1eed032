import dataclasses
import gc
import queue
import weakref
from decimal import Decimal

import pytest

from typeconv.empty import is_empty, is_nil


class TestInt(int):
    pass


class TestString(str):
    pass


@dataclasses.dataclass
class TestWoman:
    def say(self):
        return "nice"


@dataclasses.dataclass
class Person:
    name: str = ""
    age: int = 0


class Plain:
    pass


class ZeroTime:
    def __init__(self, zero):
        self._zero = zero

    def is_zero(self):
        return self._zero


def _empty_queue():
    return queue.Queue()


def _full_queue():
    q = queue.Queue(maxsize=1)
    q.put(1)
    return q


@pytest.mark.parametrize(
    "value",
    [
        None,
        0,
        0.0,
        Decimal("0"),
        False,
        b"",
        "",
        {},
        [],
        (),
        TestInt(0),
        TestString(""),
        TestWoman(),
    ],
)
def test_is_empty_true(value):
    assert is_empty(value) is True


def test_is_empty_empty_queue():
    assert is_empty(_empty_queue()) is True


@pytest.mark.parametrize(
    "value",
    [
        1,
        1.0,
        Decimal("1"),
        True,
        "0",
        "1",
        b"1",
        {"a": 1},
        ["1"],
        TestInt(1),
        TestString("1"),
        Plain(),
        Person(),
    ],
)
def test_is_empty_false(value):
    assert is_empty(value) is False


def test_is_empty_callable_is_not_empty():
    assert is_empty(lambda a: "1") is False


def test_is_empty_full_queue():
    assert is_empty(_full_queue()) is False


def test_is_empty_uses_is_zero():
    assert is_empty(ZeroTime(True)) is True
    assert is_empty(ZeroTime(False)) is False


def test_is_nil_none():
    assert is_nil(None) is True


def test_is_nil_value():
    assert is_nil(0) is False


def test_is_nil_trace_source_through_dead_reference():
    target = Plain()
    ref = weakref.ref(target)
    del target
    gc.collect()
    assert is_nil(ref) is False
    assert is_nil(ref, True) is True


def test_is_nil_trace_source_live_reference():
    target = Plain()
    ref = weakref.ref(target)
    assert is_nil(ref, True) is False
    assert ref() is target