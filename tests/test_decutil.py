from decimal import Decimal

import pytest

from typeconv.decutil import (
    almost_equal,
    between,
    dec_to_e8_int,
    decimal_to_en_str,
    from_e8_int,
    from_string,
    pow_decimal,
)


def _from_float(x):
    return Decimal(repr(x))


@pytest.mark.parametrize(
    "value, expected",
    [
        (_from_float(1.11), 111000000),
        (from_string("578372667.847732751905580779"), 57837266784773275),
        (from_string("272667.8477327519"), 27266784773275),
    ],
)
def test_dec_to_e8_int(value, expected):
    assert dec_to_e8_int(value) == expected


@pytest.mark.parametrize(
    "v1, v2, expected",
    [
        (_from_float(0.1), _from_float(0.1000001), True),
        (_from_float(0.1), _from_float(0.1001), False),
        (_from_float(5972.4904126), _from_float(5972.490412590000000000), True),
    ],
)
def test_almost_equal(v1, v2, expected):
    assert almost_equal(v1, v2) is expected


def test_almost_equal_with_place():
    assert almost_equal(Decimal("0.1"), Decimal("0.1001"), 3) is True
    assert almost_equal(Decimal("0.1"), Decimal("0.1001"), 5) is False


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal(10000), "10,000.00"),
        (_from_float(10000.1), "10,000.10"),
        (_from_float(0.0000123), "0.0000123"),
        (_from_float(1.0000123), "1.00001"),
        (_from_float(1.0000), "1.00"),
        (from_string("1234610169845720.625378816191095892"), "1,234,610,169,845,720.62537"),
        (
            from_string("9223372036854775807.625378816191095892"),
            "9,223,372,036,854,775,807.62537",
        ),
        (
            from_string("9223372036854775808.625378816191095892"),
            "-9,223,372,036,854,775,808.62537",
        ),
    ],
)
def test_decimal_to_en_str(value, expected):
    assert decimal_to_en_str(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal(10000), "10,000.00"),
        (_from_float(10000.1), "10,000.10"),
        (_from_float(0.0000123), "0.0000123"),
        (_from_float(1.0000123), "1.00"),
        (_from_float(1.0000), "1.00"),
        (_from_float(92236247320.366446472747643836), "92,236,247,320.36"),
    ],
)
def test_decimal_to_en_str_usd(value, expected):
    assert decimal_to_en_str(value, True) == expected


def test_decimal_to_en_str_below_one():
    assert decimal_to_en_str(Decimal("0.5")) == "0.5"
    assert decimal_to_en_str(Decimal("0.123456789")) == "0.12345"
    assert decimal_to_en_str(Decimal(0)) == "0"


def test_from_e8_int():
    assert from_e8_int(123456789) == Decimal("1.23456789")
    assert dec_to_e8_int(from_e8_int(-987654321)) == -987654321


def test_from_string():
    assert from_string("1.25") == Decimal("1.25")
    assert from_string("bad") == Decimal(0)


def test_pow_decimal():
    assert pow_decimal(Decimal(2), Decimal(10)) == Decimal(1024)
    assert pow_decimal(Decimal("1.5"), Decimal(2)) == Decimal("2.25")


def test_pow_decimal_out_of_range():
    with pytest.raises(ValueError):
        pow_decimal(Decimal(10), Decimal(400))


def test_between():
    assert between(Decimal(1), Decimal(1), Decimal(2)) is True
    assert between(Decimal(2), Decimal(1), Decimal(2)) is True
    assert between(Decimal("2.01"), Decimal(1), Decimal(2)) is False