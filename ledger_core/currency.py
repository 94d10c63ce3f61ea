"""
Money Conversion Module

Converts decimal currency amounts into integer minor units (cents).
Balances are integers end to end; binary floats never take part in the
arithmetic.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation, Overflow, ROUND_HALF_UP, localcontext
from typing import Union

from .errors import InvalidAmount

Numeric = Union[Decimal, int, float, str]

MINOR_UNITS_PER_UNIT = 100


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a numeric value to Decimal without binary float artifacts

    Raises:
        InvalidAmount: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidAmount(f"invalid amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            # str() keeps 0.1 as Decimal('0.1') instead of its binary expansion
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidAmount(f"invalid amount: {value!r}")
    if not result.is_finite():
        raise InvalidAmount(f"invalid amount: {value!r}")
    return result


class MoneyConverter(ABC):
    """Converts currency amounts to integer minor units"""

    @abstractmethod
    def to_minor_units(self, value: Numeric) -> int:
        """Convert an amount to minor units, rejecting amounts that become zero"""
        pass


class DecimalMoneyConverter(MoneyConverter):
    """Two-decimal currency: scale by 100 and round half away from zero"""

    def to_minor_units(self, value: Numeric) -> int:
        amount = to_decimal(value)
        with localcontext() as ctx:
            # Enough precision that scaling never rounds the caller's digits
            ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 2)
            try:
                scaled = amount.scaleb(2)
            except Overflow:
                raise InvalidAmount(f"invalid amount: {value!r} is out of range")
            minor_units = int(scaled.to_integral_value(rounding=ROUND_HALF_UP))
        if minor_units == 0:
            raise InvalidAmount(f"invalid amount: {value!r} is zero in minor units")
        # Negative results pass through; deposit/withdraw reject them
        return minor_units


def format_minor_units(minor_units: int) -> str:
    """Format minor units for display, e.g. 150000 -> '1500.00'"""
    sign = "-" if minor_units < 0 else ""
    units, cents = divmod(abs(minor_units), MINOR_UNITS_PER_UNIT)
    return f"{sign}{units}.{cents:02d}"
