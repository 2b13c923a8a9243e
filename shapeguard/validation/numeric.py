"""Numeric helpers shared by the number schema."""
from __future__ import annotations

import math
from decimal import Decimal

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


def is_finite(value: int | float) -> bool:
    """math.isfinite that does not overflow on arbitrarily large ints."""
    return not isinstance(value, float) or math.isfinite(value)


def _as_scaled_int(value: int | float) -> tuple[int, int]:
    """Split a finite number into (digits, places) with value == digits / 10**places.

    Ints (and int subclasses such as IntEnum members) are taken as they are.
    Floats go through the shortest round-tripping decimal text of the plain
    float, so 0.1 becomes (1, 1) rather than its binary expansion.
    """
    if isinstance(value, int):
        return int(value), 0
    sign, digits, exponent = Decimal(float.__repr__(float(value))).as_tuple()
    scaled = int("".join(map(str, digits)))
    if sign:
        scaled = -scaled
    if exponent >= 0:
        return scaled * 10**exponent, 0
    return scaled, -exponent


def scaled_remainder(value: int | float, step: int | float) -> tuple[int, int]:
    """Remainder of value / step in exact integer arithmetic.

    Returns (remainder, places): the remainder is remainder / 10**places and
    takes the sign of the dividend. Binary floats make 49.9 % 0.1 come out
    as 0.0999...; scaling both operands to a common number of decimal places
    gives 499 % 1 == 0 instead. Both operands must be finite.
    """
    value_int, value_places = _as_scaled_int(value)
    step_int, step_places = _as_scaled_int(step)
    places = max(value_places, step_places)
    value_int *= 10**(places - value_places)
    step_int *= 10**(places - step_places)
    remainder = abs(value_int) % abs(step_int)
    return (-remainder if value_int < 0 else remainder), places


def is_multiple_of(value: int | float, step: int | float) -> bool:
    """Non-finite values are never multiples."""
    if not (is_finite(value) and is_finite(step)):
        return False
    remainder, _ = scaled_remainder(value, step)
    return remainder == 0
