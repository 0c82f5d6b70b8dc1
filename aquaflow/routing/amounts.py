"""Conversion between human-readable amounts and smallest token units."""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal, InvalidOperation

# 90 digits of precision: far beyond any realistic amount * 10**77
_UNITS_CONTEXT = decimal.Context(prec=90)


def to_base_units(amount: str | Decimal, decimals: int) -> int:
    """Scale a decimal amount to the token's smallest unit.

    Fractional digits beyond the token's precision are truncated.

    Args:
        amount: Decimal string such as "100" or "0.25"
        decimals: Token decimals

    Returns:
        Integer amount in smallest units

    Raises:
        ValueError: If amount is not a finite non-negative decimal
    """
    try:
        value = Decimal(amount)
    except InvalidOperation as err:
        raise ValueError(f"Invalid amount: '{amount}'") from err
    if not value.is_finite() or value < 0:
        raise ValueError(f"Amount must be a finite non-negative decimal: '{amount}'")

    with decimal.localcontext(_UNITS_CONTEXT):
        scaled = value.scaleb(decimals).to_integral_value(rounding=ROUND_DOWN)
    return int(scaled)


def from_base_units(amount: int, decimals: int) -> Decimal:
    """Express a smallest-unit amount in whole tokens."""
    with decimal.localcontext(_UNITS_CONTEXT):
        return Decimal(amount).scaleb(-decimals)
