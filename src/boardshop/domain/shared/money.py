"""Monetary helpers. All amounts are Decimals with two decimal places."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from boardshop.domain.shared.exceptions import ValidationError

CENT = Decimal("0.01")

# Largest amount a NUMERIC(10, 2) column holds.
MAX_AMOUNT = Decimal("99999999.99")


def to_money(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a value to a Decimal rounded half-up to cents."""
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as e:
        msg = f"Invalid monetary amount: {value!r}"
        raise ValidationError(msg) from e
