"""Route scoring and selection.

Score is a weighted sum of four headroom-style sub-scores:

    output      total output in whole tokens (exact_out: minus the input
                spent, since every candidate delivers the same amount)
    impact      max(0, 10 - price impact %)
    gas         max(0, 10 - gas / 100,000)
    time        max(0, 10 - seconds / 10)

Weights come from RouteOptions.weights; the priority flags pick the
heavier output or gas weight.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from aquaflow.models import DEFAULT_ROUTE_OPTIONS, AmountType, OptimalRoute, RouteOptions
from aquaflow.routing.amounts import from_base_units

logger = structlog.get_logger()

HEADROOM = 10.0
GAS_SCALE = 100_000
TIME_SCALE = 10


class RouteScorer:
    """Ranks candidate routes under a weighted multi-objective policy."""

    def score(self, route: OptimalRoute, options: RouteOptions = DEFAULT_ROUTE_OPTIONS) -> float:
        """Score a route; higher is better."""
        weights = options.weights
        output_weight = weights.output_priority if options.prioritize_output else weights.output
        gas_weight = weights.gas_priority if options.prioritize_gas else weights.gas

        if route.amount_type is AmountType.EXACT_OUT:
            output_score = -float(from_base_units(route.amount_in, route.token_in.decimals))
        else:
            output_score = float(from_base_units(route.total_amount_out, route.token_out.decimals))
        impact_score = max(0.0, HEADROOM - float(route.total_price_impact))
        gas_score = max(0.0, HEADROOM - route.total_gas_estimate / GAS_SCALE)
        time_score = max(0.0, HEADROOM - route.execution_time / TIME_SCALE)

        return (
            output_score * output_weight
            + impact_score * weights.price_impact
            + gas_score * gas_weight
            + time_score * weights.execution_time
        )

    def rank(
        self,
        routes: Sequence[OptimalRoute],
        options: RouteOptions = DEFAULT_ROUTE_OPTIONS,
    ) -> list[tuple[OptimalRoute, float]]:
        """Score routes and sort best first.

        The sort is stable, so equal scores keep generation order (direct
        routes before multi-hop).
        """
        scored = [(route, self.score(route, options)) for route in routes]
        scored.sort(key=lambda item: item[1], reverse=True)
        return scored

    def select(
        self,
        routes: Sequence[OptimalRoute],
        options: RouteOptions = DEFAULT_ROUTE_OPTIONS,
    ) -> OptimalRoute | None:
        """Pick the best route.

        Returns:
            The top-ranked route, or None when there are no candidates
        """
        if not routes:
            return None
        best, best_score = self.rank(routes, options)[0]
        logger.debug(
            "route_selected",
            path=best.path,
            score=best_score,
            candidates=len(routes),
        )
        return best
