"""Decimal amounts carried as strings.

Prices and totals travel and persist as strings with at most two fractional
digits ("89.99", "4999") so that no float rounding creeps into order totals.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

AMOUNT_PATTERN = re.compile(r"^\d+(\.\d{1,2})?$")

_CENT = Decimal("0.01")


def is_amount(value) -> bool:
    return isinstance(value, str) and bool(AMOUNT_PATTERN.match(value))


def parse_amount(value, field: str = "amount") -> Decimal:
    """Parse a two-decimal amount string, raising ValidationError otherwise."""
    if isinstance(value, (int, Decimal)) and not isinstance(value, bool):
        value = str(value)
    if not is_amount(value):
        raise ValidationError({field: [f"Invalid amount format: {value!r}"]})
    try:
        return Decimal(value)
    except InvalidOperation:
        raise ValidationError({field: [f"Invalid amount format: {value!r}"]}) from None


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two fractional digits."""
    return str(amount.quantize(_CENT, rounding=ROUND_HALF_UP))


def normalize_amount(value, field: str = "amount") -> str:
    return format_amount(parse_amount(value, field))


def to_minor_units(amount: Decimal) -> int:
    """Convert an amount to the smallest currency unit (cents, paise)."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
