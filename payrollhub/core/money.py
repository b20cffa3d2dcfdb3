from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENT = Decimal("0.01")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal without going through binary float repr."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_money(value: Number) -> Decimal:
    """Round a monetary amount half-up to currency-minor-unit precision."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
