"""Tests for candidate route enumeration."""

from decimal import Decimal

import pytest

from aquaflow.constants import ARBITRUM_NOVA, SWAP_GAS_COST
from aquaflow.models import AmountType, IntentAction, ParsedIntent, RouteOptions
from aquaflow.routing import RouteEnumerator, to_base_units
from tests.helpers import make_pool


def make_intent(
    token_in: str,
    token_out: str,
    amount: str,
    amount_type: AmountType = AmountType.EXACT_IN,
) -> ParsedIntent:
    return ParsedIntent(
        action=IntentAction.SWAP,
        token_in=token_in,
        token_out=token_out,
        amount=amount,
        amount_type=amount_type,
        confidence=0.9,
    )


def assert_chained(route, amount_in: int | None = None) -> None:
    """Each step consumes exactly what the previous one produced."""
    for current, following in zip(route.steps, route.steps[1:]):
        assert current.token_out.symbol == following.token_in.symbol
        assert current.amount_out == following.amount_in
    if amount_in is not None:
        assert route.amount_in == amount_in
    assert route.total_amount_out == route.steps[-1].amount_out
    assert route.total_gas_estimate == sum(step.gas_estimate for step in route.steps)
    assert route.total_price_impact == sum(step.price_impact for step in route.steps)
    assert route.execution_time == 15 * len(route.steps)


class TestDirectAndMultihop:
    def test_direct_before_multihop(self, enumerator, pools):
        routes = enumerator.enumerate(make_intent("USDC", "USDT", "100"), pools)

        assert [route.path for route in routes] == [
            ["USDC", "USDT"],
            ["USDC", "ETH", "USDT"],
        ]
        assert routes[0].confidence == 0.95
        assert routes[1].confidence == 0.8
        for route in routes:
            assert_chained(route, amount_in=100 * 10**6)

    def test_multihop_only(self, enumerator, pools):
        """ARB has no USDT pool, so the only path runs through ETH."""
        routes = enumerator.enumerate(make_intent("ARB", "USDT", "5"), pools)

        assert len(routes) == 1
        route = routes[0]
        assert route.path == ["ARB", "ETH", "USDT"]
        assert [step.pool_id for step in route.steps] == ["arb-eth", "eth-usdt"]
        assert route.total_gas_estimate == 2 * SWAP_GAS_COST
        assert_chained(route, amount_in=5 * 10**18)
        # 5 ARB ~ 0.0025 ETH ~ 5 USDT before fees
        assert 4 * 10**6 < route.total_amount_out < 5 * 10**6

    def test_max_hops_one(self, enumerator, pools):
        routes = enumerator.enumerate(
            make_intent("USDC", "USDT", "100"), pools, RouteOptions(max_hops=1)
        )
        assert [route.path for route in routes] == [["USDC", "USDT"]]

    def test_waypoint_equal_to_endpoint_is_skipped(self, enumerator, pools):
        """USDC and ETH are both waypoints; neither is routed through itself."""
        routes = enumerator.enumerate(make_intent("ETH", "USDC", "1"), pools)
        assert all(len(set(route.path)) == len(route.path) for route in routes)
        assert ["ETH", "USDT", "USDC"] in [route.path for route in routes]

    def test_no_pools(self, enumerator):
        assert enumerator.enumerate(make_intent("USDC", "USDT", "100"), []) == []

    def test_deterministic(self, enumerator, pools):
        intent = make_intent("USDC", "USDT", "100")
        assert enumerator.enumerate(intent, pools) == enumerator.enumerate(intent, pools)

    def test_pools_are_not_modified(self, enumerator, pools):
        before = [pool.model_dump() for pool in pools]
        enumerator.enumerate(make_intent("ARB", "USDT", "1000"), pools)
        assert [pool.model_dump() for pool in pools] == before


class TestExactOutput:
    def test_direct_route_delivers_requested_amount(self, enumerator, pools):
        intent = make_intent("USDC", "USDT", "100", AmountType.EXACT_OUT)
        routes = enumerator.enumerate(intent, pools)

        assert routes
        for route in routes:
            assert route.total_amount_out == 100 * 10**6
            assert route.amount_in > 100 * 10**6
            assert_chained(route)

    def test_unfillable(self, enumerator):
        """Asking for more than the pool holds yields no route."""
        pool = make_pool("USDC", "USDT", 1_000 * 10**6, 1_000 * 10**6)
        intent = make_intent("USDC", "USDT", "1000", AmountType.EXACT_OUT)
        assert enumerator.enumerate(intent, [pool], RouteOptions(max_price_impact=100)) == []


class TestViability:
    @pytest.fixture
    def shallow_pool(self):
        return make_pool("USDC", "USDT", 1_000 * 10**6, 1_000 * 10**6)

    def test_price_impact_ceiling(self, enumerator, shallow_pool):
        """100 into a 1000/1000 pool moves the price ~17%."""
        intent = make_intent("USDC", "USDT", "100")
        assert enumerator.enumerate(intent, [shallow_pool]) == []

        routes = enumerator.enumerate(
            intent, [shallow_pool], RouteOptions(max_price_impact=Decimal("20"))
        )
        assert len(routes) == 1
        assert routes[0].total_price_impact <= Decimal("20")

    def test_gas_ceiling(self, tokens, pools):
        enumerator = RouteEnumerator(tokens, max_route_gas=SWAP_GAS_COST)
        routes = enumerator.enumerate(make_intent("USDC", "USDT", "100"), pools)
        assert [route.hop_count for route in routes] == [1]

    def test_chain_restriction(self, enumerator, pools):
        options = RouteOptions(preferred_chains=(ARBITRUM_NOVA,))
        assert enumerator.enumerate(make_intent("USDC", "USDT", "100"), pools, options) == []

    def test_inert_pool_skipped(self, enumerator):
        pool = make_pool("USDC", "USDT", 0, 1_000 * 10**6)
        assert enumerator.enumerate(make_intent("USDC", "USDT", "1"), [pool]) == []

    def test_unusable_amount(self, enumerator, pools):
        assert enumerator.enumerate(make_intent("USDC", "USDT", "abc"), pools) == []
        assert enumerator.enumerate(make_intent("USDC", "USDT", "0"), pools) == []


class TestAmountScaling:
    def test_uses_token_decimals(self):
        assert to_base_units("100", 6) == 100 * 10**6
        assert to_base_units("1.5", 18) == 15 * 10**17

    def test_truncates_excess_precision(self):
        assert to_base_units("0.0000001", 6) == 0
        assert to_base_units("1.1234567", 6) == 1_123_456

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            to_base_units("abc", 6)
        with pytest.raises(ValueError):
            to_base_units("-1", 6)

    def test_snapshot_only_token(self, enumerator):
        """Tokens missing from the registry take decimals from the pool."""
        pool = make_pool("DAI", "USDC", 1_000_000 * 10**18, 1_000_000 * 10**6)
        routes = enumerator.enumerate(make_intent("DAI", "USDC", "10"), [pool])
        assert routes[0].amount_in == 10 * 10**18
