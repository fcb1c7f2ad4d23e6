"""Conversion between wire amounts (decimal major units) and stored cents."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import InvalidAmountError

_CENTS_PER_UNIT = Decimal(100)


def to_cents(amount: Any) -> int:
    """Convert a positive amount with at most two decimal places to cents."""
    if amount is None or isinstance(amount, bool):
        raise InvalidAmountError("Amount is required")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Invalid amount: {amount!r}") from exc

    if not value.is_finite() or value <= 0:
        raise InvalidAmountError("Amount must be greater than zero")

    cents = value * _CENTS_PER_UNIT
    if cents != cents.to_integral_value():
        raise InvalidAmountError("Amount supports at most two decimal places")
    return int(cents)


def from_cents(cents: int) -> Decimal:
    return Decimal(int(cents)).scaleb(-2)


__all__ = ["to_cents", "from_cents"]
