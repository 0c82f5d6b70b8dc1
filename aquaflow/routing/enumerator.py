"""Candidate route generation.

Builds fully priced candidate routes for an intent from a pool snapshot:
- Direct routes through every pool trading the pair
- Two-hop routes through a fixed set of high-liquidity intermediate tokens,
  using the deepest (highest TVL) pool for each leg

Candidates exceeding the price impact or gas ceilings are discarded here so
the scorer only ever sees viable routes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

import structlog

from aquaflow.amm import ConstantProductAMM, SwapResult, constant_product
from aquaflow.constants import (
    DIRECT_ROUTE_CONFIDENCE,
    MAX_ROUTE_GAS,
    MULTIHOP_ROUTE_CONFIDENCE,
    STEP_EXECUTION_SECONDS,
)
from aquaflow.models import (
    DEFAULT_ROUTE_OPTIONS,
    AmountType,
    OptimalRoute,
    ParsedIntent,
    Pool,
    RouteOptions,
    RouteStep,
    normalize_symbol,
)
from aquaflow.registry import PoolRegistry, TokenRegistry
from aquaflow.routing.amounts import to_base_units

logger = structlog.get_logger()

# Most-traded assets, tried in order as single waypoints
DEFAULT_INTERMEDIATES = ("USDC", "ETH", "USDT")


class RouteEnumerator:
    """Generates priced candidate routes for an intent.

    Args:
        tokens: Registry used to look up token decimals.
        amm: Swap simulator. Defaults to the constant-product singleton.
        intermediates: Waypoint tokens for two-hop routes, tried in order.
        max_route_gas: Routes with more aggregate gas are discarded.
    """

    def __init__(
        self,
        tokens: TokenRegistry,
        amm: ConstantProductAMM | None = None,
        intermediates: Sequence[str] = DEFAULT_INTERMEDIATES,
        max_route_gas: int = MAX_ROUTE_GAS,
    ) -> None:
        self.tokens = tokens
        self.amm = amm if amm is not None else constant_product
        self.intermediates = tuple(normalize_symbol(s) for s in intermediates)
        self.max_route_gas = max_route_gas

    def enumerate(
        self,
        intent: ParsedIntent,
        pools: Iterable[Pool],
        options: RouteOptions = DEFAULT_ROUTE_OPTIONS,
    ) -> list[OptimalRoute]:
        """Generate every viable candidate route for the intent.

        Direct routes come first, then two-hop routes in waypoint order.
        Pools are only read, never modified.

        Args:
            intent: A validated swap intent
            pools: Pool snapshot to route through
            options: Hop limit, chain restriction and rejection thresholds

        Returns:
            Viable routes in generation order (may be empty)
        """
        registry = pools if isinstance(pools, PoolRegistry) else PoolRegistry(pools)
        token_in = normalize_symbol(intent.token_in)
        token_out = normalize_symbol(intent.token_out)
        chains = options.preferred_chains

        amount = self._amount_in_units(intent, registry)
        if amount is None or amount <= 0:
            logger.debug("route_amount_unusable", amount=intent.amount, token_in=token_in)
            return []

        candidates: list[OptimalRoute] = []

        for pool in registry.pools_for_pair(token_in, token_out, chains):
            route = self._price_path(
                [pool], token_in, amount, intent.amount_type, DIRECT_ROUTE_CONFIDENCE
            )
            if route is not None:
                candidates.append(route)

        if options.max_hops > 1:
            for waypoint in self.intermediates:
                if waypoint in (token_in, token_out):
                    continue
                first = registry.best_pool(token_in, waypoint, chains)
                second = registry.best_pool(waypoint, token_out, chains)
                if first is None or second is None:
                    continue
                route = self._price_path(
                    [first, second],
                    token_in,
                    amount,
                    intent.amount_type,
                    MULTIHOP_ROUTE_CONFIDENCE,
                )
                if route is not None:
                    candidates.append(route)

        viable = [route for route in candidates if self._is_viable(route, options)]
        logger.debug(
            "routes_enumerated",
            token_in=token_in,
            token_out=token_out,
            candidates=len(candidates),
            viable=len(viable),
        )
        return viable

    def _amount_in_units(self, intent: ParsedIntent, registry: PoolRegistry) -> int | None:
        """Scale the intent amount by the decimals of the token it fixes."""
        if intent.amount_type is AmountType.EXACT_OUT:
            symbol = intent.token_out
        else:
            symbol = intent.token_in
        decimals = self.tokens.decimals(symbol)
        if decimals is None:
            # Token known only to the snapshot
            for pool in registry:
                if pool.has_token(symbol):
                    decimals = pool.get_token(symbol).decimals
                    break
        if decimals is None:
            return None
        try:
            return to_base_units(intent.amount, decimals)
        except ValueError:
            return None

    def _price_path(
        self,
        pools: Sequence[Pool],
        token_in: str,
        amount: int,
        amount_type: AmountType,
        confidence: float,
    ) -> OptimalRoute | None:
        """Price a fixed sequence of pools.

        For exact input the amount flows forward hop by hop. For exact
        output each hop is sized backwards from the requested amount.

        Returns:
            The priced route, or None if any hop cannot be filled
        """
        symbols = [token_in]
        for pool in pools:
            symbols.append(pool.get_token_out(symbols[-1]).symbol)

        swaps: list[SwapResult] = []
        if amount_type is AmountType.EXACT_OUT:
            target = amount
            for pool, symbol in zip(reversed(pools), reversed(symbols[:-1])):
                result = self.amm.simulate_swap_exact_output(pool, symbol, target)
                if result is None:
                    return None
                swaps.insert(0, result)
                target = result.amount_in
        else:
            current = amount
            for pool, symbol in zip(pools, symbols[:-1]):
                result = self.amm.simulate_swap(pool, symbol, current)
                if result is None:
                    return None
                swaps.append(result)
                current = result.amount_out

        steps = tuple(
            RouteStep(
                pool_id=swap.pool_id,
                token_in=swap.token_in,
                token_out=swap.token_out,
                amount_in=swap.amount_in,
                amount_out=swap.amount_out,
                price_impact=swap.price_impact,
                gas_estimate=swap.gas_estimate,
            )
            for swap in swaps
        )
        return OptimalRoute(
            steps=steps,
            total_amount_out=steps[-1].amount_out,
            total_price_impact=sum((s.price_impact for s in steps), Decimal(0)),
            total_gas_estimate=sum(s.gas_estimate for s in steps),
            execution_time=STEP_EXECUTION_SECONDS * len(steps),
            confidence=confidence,
            chain_path=tuple(pool.chain_id for pool in pools),
            amount_type=amount_type,
        )

    def _is_viable(self, route: OptimalRoute, options: RouteOptions) -> bool:
        if route.total_price_impact > options.max_price_impact:
            logger.debug(
                "route_discarded",
                path=route.path,
                reason="price_impact",
                price_impact=str(route.total_price_impact),
                max_price_impact=str(options.max_price_impact),
            )
            return False
        if route.total_gas_estimate > self.max_route_gas:
            logger.debug(
                "route_discarded",
                path=route.path,
                reason="gas",
                gas=route.total_gas_estimate,
                max_gas=self.max_route_gas,
            )
            return False
        return True
