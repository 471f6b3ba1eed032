"""Helpers for fixed-point amounts held as ``Decimal``."""

from __future__ import annotations

import math
from decimal import ROUND_DOWN, ROUND_FLOOR, Decimal, localcontext
from typing import Optional

from typeconv.convert import to_decimal

ALMOST_EQUAL_PRECISION = 7
"""Default number of decimal places compared by ``almost_equal``."""

_WORKING_PRECISION = 1000
_INT64_MASK = (1 << 64) - 1


def _shift(d: Decimal, places: int) -> Decimal:
    sign, digits, exponent = d.as_tuple()
    if not isinstance(exponent, int):
        raise ValueError(f"cannot shift non-finite decimal {d}")
    return Decimal((sign, digits, exponent + places))


def _int_part(d: Decimal) -> int:
    value = int(d) & _INT64_MASK
    return value - (1 << 64) if value >> 63 else value


def _truncate(d: Decimal, places: int) -> Decimal:
    exponent = d.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -places:
        return d.quantize(Decimal((0, (1,), -places)), rounding=ROUND_DOWN)
    return d


def _plain(d: Decimal) -> str:
    text = format(d, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_amount(int_part: int, fraction: Decimal, places: int) -> str:
    whole = f"{int_part:,}".lstrip("0")
    frac = f"{float(fraction):.{places}f}".lstrip("0")
    return whole + frac


def dec_to_e8_int(v: Decimal) -> int:
    """Return the integer part of ``v`` times 10**8, as a signed 64-bit value."""
    return _int_part(_shift(v, 8))


def decimal_to_en_str(v: Decimal, usd: bool = False) -> str:
    """Format an amount with thousands separators.

    Amounts below 0.01 keep 8 places and others 5, truncated.  Amounts of
    at least 1 are grouped with commas; with ``usd`` they show 2 places,
    otherwise 5 places with a trailing ``"000"`` dropped.
    """
    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        v = _truncate(v, 8) if v < Decimal("0.01") else _truncate(v, 5)
        if v >= 1:
            places = 2 if usd else 5
            v = _truncate(v, places)
            fraction = v - v.to_integral_value(rounding=ROUND_FLOOR)
            text = _format_amount(_int_part(v), fraction, places)
            return text if usd else text.removesuffix("000")
        return _plain(v)


def from_e8_int(v: int) -> Decimal:
    """Return ``v`` divided by 10**8."""
    return _shift(Decimal(v), -8)


def from_string(v: str) -> Decimal:
    """Parse ``v`` as a decimal; unparseable text gives zero."""
    return to_decimal(v)


def almost_equal(v1: Decimal, v2: Decimal, place: Optional[int] = None) -> bool:
    """Tell whether ``v1`` and ``v2`` differ by at most 10**-place."""
    if place is None:
        place = ALMOST_EQUAL_PRECISION
    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        return abs(v1 - v2) <= Decimal((0, (1,), -place))


def pow_decimal(a: Decimal, b: Decimal) -> Decimal:
    """Raise ``a`` to the power ``b`` in floating point.

    Raises ``ValueError`` when the result is not a finite number.
    """
    try:
        result = math.pow(float(a), float(b))
    except OverflowError:
        raise ValueError(f"{a} ** {b} is out of range") from None
    if not math.isfinite(result):
        raise ValueError(f"{a} ** {b} is not finite")
    return Decimal(repr(result))


def between(i: Decimal, a: Decimal, b: Decimal) -> bool:
    """Tell whether ``a <= i <= b``."""
    return a <= i <= b