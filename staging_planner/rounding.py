from __future__ import annotations

from decimal import Decimal, ROUND_CEILING


GRAMS_PER_POUND = Decimal("453.6")
# Sheet values above 1e38 are treated as unreadable.
MAX_ADJUSTED_EXPONENT = 38


def ceil_whole(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


def pounds_to_grams(value: Decimal) -> int:
    return ceil_whole(value * GRAMS_PER_POUND)


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value).strip())


def to_finite_decimal(value) -> Decimal | None:
    try:
        result = to_decimal(value)
    except (ArithmeticError, ValueError):
        return None
    if not result.is_finite():
        return None
    if result and result.adjusted() > MAX_ADJUSTED_EXPONENT:
        return None
    return result
