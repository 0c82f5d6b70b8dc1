"""Swap simulation result shared by AMM implementations."""

from dataclasses import dataclass
from decimal import Decimal

from aquaflow.constants import SWAP_GAS_COST
from aquaflow.models.token import Token


@dataclass(frozen=True)
class SwapResult:
    """Result of simulating a swap through one pool."""

    amount_in: int
    amount_out: int
    pool_id: str
    token_in: Token
    token_out: Token
    price_impact: Decimal
    # Flat per-hop estimate, not a simulated on-chain figure
    gas_estimate: int = SWAP_GAS_COST
