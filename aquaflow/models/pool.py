"""Constant-product liquidity pool snapshot."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from aquaflow.models.token import Token
from aquaflow.models.types import Address, Amount, normalize_symbol


class Pool(BaseModel):
    """Read-only snapshot of a two-token pool.

    Reserves are never mutated by the engine; swaps are simulated against
    the snapshot and the simulated state is discarded.
    """

    id: str
    address: Address
    token_a: Token = Field(alias="tokenA")
    token_b: Token = Field(alias="tokenB")
    reserve_a: Amount = Field(alias="reserveA")
    reserve_b: Amount = Field(alias="reserveB")
    # Fee in basis points (30 = 0.3%)
    fee_bps: int = Field(default=30, ge=0, le=10000, alias="feeBps")
    chain_id: int = Field(alias="chainId")
    # Display-only aggregates (USD)
    tvl: float = 0.0
    volume_24h: float = Field(default=0.0, alias="volume24h")

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def _check_pair(self) -> Pool:
        if self.token_a.symbol == self.token_b.symbol:
            raise ValueError(f"Pool {self.id} pairs {self.token_a.symbol} with itself")
        return self

    @property
    def symbols(self) -> tuple[str, str]:
        return self.token_a.symbol, self.token_b.symbol

    @property
    def is_inert(self) -> bool:
        """True if either reserve is empty; inert pools are never routed."""
        return self.reserve_a == 0 or self.reserve_b == 0

    def has_token(self, symbol: str) -> bool:
        return normalize_symbol(symbol) in self.symbols

    def connects(self, symbol_a: str, symbol_b: str) -> bool:
        """Check whether this pool trades the pair (order independent)."""
        a = normalize_symbol(symbol_a)
        b = normalize_symbol(symbol_b)
        return a != b and {a, b} == set(self.symbols)

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        symbol = normalize_symbol(token_in)
        if symbol == self.token_a.symbol:
            return self.reserve_a, self.reserve_b
        elif symbol == self.token_b.symbol:
            return self.reserve_b, self.reserve_a
        else:
            raise ValueError(f"Token {token_in} not in pool {self.id}")

    def get_token(self, symbol: str) -> Token:
        normalized = normalize_symbol(symbol)
        if normalized == self.token_a.symbol:
            return self.token_a
        elif normalized == self.token_b.symbol:
            return self.token_b
        else:
            raise ValueError(f"Token {symbol} not in pool {self.id}")

    def get_token_out(self, token_in: str) -> Token:
        """Get the output token for a given input token."""
        symbol = normalize_symbol(token_in)
        if symbol == self.token_a.symbol:
            return self.token_b
        elif symbol == self.token_b.symbol:
            return self.token_a
        else:
            raise ValueError(f"Token {token_in} not in pool {self.id}")
