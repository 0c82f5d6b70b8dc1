"""Tests for data model validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from aquaflow.models import (
    IntentAction,
    OptimalRoute,
    ParsedIntent,
    Pool,
    RouteOptions,
    RouteStep,
    ScoringWeights,
)
from tests.helpers import make_address, make_pool, make_token


class TestPool:
    def test_parses_wire_format(self):
        """Pools arrive from providers in camelCase with string reserves."""
        pool = Pool.model_validate(
            {
                "id": "p1",
                "address": make_address("p1"),
                "tokenA": {
                    "symbol": "eth",
                    "address": make_address("eth"),
                    "decimals": 18,
                    "chainId": 42161,
                },
                "tokenB": {
                    "symbol": "USDC",
                    "address": make_address("usdc"),
                    "decimals": 6,
                    "chainId": 42161,
                },
                "reserveA": "500000000000000000000",
                "reserveB": 1_000_000_000_000,
                "feeBps": 5,
                "chainId": 42161,
            }
        )
        assert pool.token_a.symbol == "ETH"
        assert pool.reserve_a == 500 * 10**18
        assert pool.fee_bps == 5
        assert pool.get_reserves("usdc") == (10**12, 500 * 10**18)

    def test_rejects_same_token_pair(self):
        with pytest.raises(ValidationError):
            make_pool("ETH", "eth", 1, 1)

    def test_rejects_negative_reserve(self):
        with pytest.raises(ValidationError):
            make_pool("ETH", "USDC", -1, 1)

    def test_rejects_bad_fee(self):
        with pytest.raises(ValidationError):
            make_pool("ETH", "USDC", 1, 1, fee_bps=10_001)

    def test_connects(self):
        pool = make_pool("ETH", "USDC", 1, 1)
        assert pool.connects("usdc", "ETH")
        assert not pool.connects("ETH", "ETH")
        assert pool.has_token("eth")
        assert not pool.has_token("ARB")

    def test_is_frozen(self):
        pool = make_pool("ETH", "USDC", 1, 1)
        with pytest.raises(ValidationError):
            pool.reserve_a = 2


class TestParsedIntent:
    def test_unknown(self):
        intent = ParsedIntent.unknown()
        assert intent.is_unknown
        assert intent.action is IntentAction.UNKNOWN
        assert intent.confidence == 0.0

    def test_confidence_bounds(self):
        with pytest.raises(ValidationError):
            ParsedIntent(action=IntentAction.SWAP, confidence=1.5)


class TestOptimalRoute:
    def _step(self, symbol_in: str, symbol_out: str) -> RouteStep:
        return RouteStep(
            pool_id=f"{symbol_in}-{symbol_out}",
            token_in=make_token(symbol_in),
            token_out=make_token(symbol_out),
            amount_in=100,
            amount_out=90,
            price_impact=Decimal("0.1"),
        )

    def _route(self, *steps: RouteStep) -> OptimalRoute:
        return OptimalRoute(
            steps=steps,
            total_amount_out=steps[-1].amount_out if steps else 0,
            total_price_impact=Decimal("0.2"),
            total_gas_estimate=360_000,
            execution_time=30,
            confidence=0.8,
            chain_path=(42161,) * len(steps),
        )

    def test_path(self):
        route = self._route(self._step("ARB", "ETH"), self._step("ETH", "USDT"))
        assert route.path == ["ARB", "ETH", "USDT"]
        assert route.is_multihop
        assert route.hop_count == 2
        assert route.token_in.symbol == "ARB"
        assert route.token_out.symbol == "USDT"

    def test_broken_chain(self):
        with pytest.raises(ValueError, match="Broken route"):
            self._route(self._step("ARB", "ETH"), self._step("USDC", "USDT"))

    def test_empty(self):
        with pytest.raises(ValueError):
            self._route()


class TestRouteOptions:
    def test_defaults(self):
        options = RouteOptions()
        assert options.max_hops == 3
        assert options.max_price_impact == Decimal("5.0")
        assert options.preferred_chains == ()
        assert options.prioritize_output

    def test_from_overrides(self):
        options = RouteOptions.from_overrides(
            {"max_hops": 1, "max_price_impact": 2.5, "weights": {"gas": 0.5}}
        )
        assert options.max_hops == 1
        assert options.max_price_impact == Decimal("2.5")
        assert options.weights == ScoringWeights(gas=0.5)

    def test_from_overrides_empty(self):
        assert RouteOptions.from_overrides(None) == RouteOptions()

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown route options: bogus"):
            RouteOptions.from_overrides({"bogus": 1})

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            RouteOptions(max_hops=0)
        with pytest.raises(ValueError):
            RouteOptions(max_price_impact=Decimal("-1"))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"max_price_impact": "abc"},
            {"max_hops": "2"},
            {"weights": {"speed": 1.0}},
        ],
    )
    def test_malformed_override_values_raise_value_error(self, overrides):
        with pytest.raises(ValueError, match="Invalid route options"):
            RouteOptions.from_overrides(overrides)

    def test_preferred_chains_coerced(self):
        assert RouteOptions(preferred_chains=[42161]).preferred_chains == (42161,)
        assert RouteOptions().with_chains((42170,)).preferred_chains == (42170,)
