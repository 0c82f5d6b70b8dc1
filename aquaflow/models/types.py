"""Shared field types for AquaFlow models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field


def validate_amount(value: Any) -> int:
    """Coerce an on-chain amount to a non-negative int.

    Amounts arrive from providers either as ints or as decimal strings
    (JSON cannot carry arbitrary-precision integers portably).

    Raises:
        ValueError: If value is not a non-negative decimal integer
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be an integer, got bool")
    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Amount must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Amount must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Amount cannot be negative: {value}")
    return int_value


def normalize_symbol(symbol: str) -> str:
    """Canonical registry key for a token symbol."""
    return symbol.strip().upper()


# EVM address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Arbitrary-precision non-negative amount in the token's smallest unit
Amount = Annotated[
    int,
    BeforeValidator(validate_amount),
    Field(description="Non-negative integer amount in smallest units"),
]

# Upper-cased token symbol
Symbol = Annotated[str, BeforeValidator(normalize_symbol), Field(min_length=1)]
