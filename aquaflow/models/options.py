"""Routing configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from aquaflow.constants import DEFAULT_MAX_GAS_PRICE


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the route scoring policy.

    The defaults are a heuristic, not a proven optimum; tune them per
    deployment.

    Attributes:
        output_priority: Output weight when prioritize_output is set
        output: Output weight otherwise
        price_impact: Weight of price-impact headroom
        gas_priority: Gas weight when prioritize_gas is set
        gas: Gas weight otherwise
        execution_time: Weight of execution-time headroom
    """

    output_priority: float = 0.4
    output: float = 0.2
    price_impact: float = 0.3
    gas_priority: float = 0.4
    gas: float = 0.2
    execution_time: float = 0.1


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class RouteOptions:
    """Knobs controlling enumeration and ranking.

    Attributes:
        max_hops: Upper bound on path length (1 and 2 are implemented)
        max_price_impact: Candidates above this aggregate impact (percent) are discarded
        max_gas_price: Gas price ceiling in wei, passed through to execution
        preferred_chains: Restrict pools to these chain ids (empty = derive from intent)
        prioritize_gas: Weight gas headroom more heavily
        prioritize_output: Weight output amount more heavily
        weights: The scoring policy
    """

    max_hops: int = 3
    max_price_impact: Decimal = Decimal("5.0")
    max_gas_price: int = DEFAULT_MAX_GAS_PRICE
    preferred_chains: tuple[int, ...] = ()
    prioritize_gas: bool = False
    prioritize_output: bool = True
    weights: ScoringWeights = field(default=DEFAULT_WEIGHTS)

    def __post_init__(self) -> None:
        if self.max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {self.max_hops}")
        if not isinstance(self.max_price_impact, Decimal):
            object.__setattr__(self, "max_price_impact", Decimal(str(self.max_price_impact)))
        if self.max_price_impact < 0:
            raise ValueError(f"max_price_impact cannot be negative: {self.max_price_impact}")
        if not isinstance(self.preferred_chains, tuple):
            object.__setattr__(self, "preferred_chains", tuple(self.preferred_chains))

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> RouteOptions:
        """Build options from a partial mapping of recognized keys.

        Raises:
            ValueError: If a key is not a RouteOptions field, or a value has the
                wrong type or is out of range
        """
        if not overrides:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown route options: {', '.join(unknown)}")
        values = dict(overrides)
        try:
            if isinstance(values.get("weights"), Mapping):
                values["weights"] = ScoringWeights(**values["weights"])
            return replace(cls(), **values)
        except (TypeError, InvalidOperation) as err:
            raise ValueError(f"Invalid route options: {err}") from err

    def with_chains(self, chain_ids: tuple[int, ...]) -> RouteOptions:
        return replace(self, preferred_chains=chain_ids)


DEFAULT_ROUTE_OPTIONS = RouteOptions()
