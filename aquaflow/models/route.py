"""Route types produced by the enumerator and ranked by the scorer."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from aquaflow.constants import SWAP_GAS_COST
from aquaflow.models.intent import AmountType
from aquaflow.models.token import Token


@dataclass(frozen=True)
class RouteStep:
    """One pool traversal within a route."""

    pool_id: str
    token_in: Token
    token_out: Token
    amount_in: int
    amount_out: int
    price_impact: Decimal  # percent
    gas_estimate: int = SWAP_GAS_COST


@dataclass(frozen=True)
class OptimalRoute:
    """A fully priced candidate path from the intent's input to its output."""

    steps: tuple[RouteStep, ...]
    total_amount_out: int
    total_price_impact: Decimal
    total_gas_estimate: int
    execution_time: int  # seconds
    confidence: float
    chain_path: tuple[int, ...]
    # exact_out routes all deliver the requested amount and differ only in cost
    amount_type: AmountType = AmountType.EXACT_IN

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("A route needs at least one step")
        for current, following in zip(self.steps, self.steps[1:]):
            if current.token_out.symbol != following.token_in.symbol:
                raise ValueError(
                    f"Broken route: {current.token_out.symbol} does not feed "
                    f"{following.token_in.symbol}"
                )

    @property
    def token_in(self) -> Token:
        return self.steps[0].token_in

    @property
    def token_out(self) -> Token:
        return self.steps[-1].token_out

    @property
    def amount_in(self) -> int:
        return self.steps[0].amount_in

    @property
    def hop_count(self) -> int:
        return len(self.steps)

    @property
    def is_multihop(self) -> bool:
        """Check if this is a multi-hop route."""
        return len(self.steps) > 1

    @property
    def path(self) -> list[str]:
        """Token symbols visited, endpoints included."""
        return [self.steps[0].token_in.symbol] + [s.token_out.symbol for s in self.steps]
