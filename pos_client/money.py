"""Money and quantity helpers.

Amounts are carried as :class:`decimal.Decimal` so that prices coming from
JSON (ints or floats) sum without binary rounding drift. The currency has no
minor unit in practice, so "rounding" means rounding to a whole unit.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, str, Decimal]

ZERO = Decimal(0)
_WHOLE_UNIT = Decimal(1)


def to_decimal(value: Number) -> Decimal:
    """Convert a wire or user-supplied number to Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_up(value: Number) -> Decimal:
    """Round to the nearest whole currency unit, halves away from zero."""
    return to_decimal(value).quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP)


def clamp_non_negative(value: Number) -> Decimal:
    return max(ZERO, to_decimal(value))


def to_wire(value: Decimal) -> Union[int, float]:
    """Render a Decimal for JSON: ints stay ints, fractions become floats."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
