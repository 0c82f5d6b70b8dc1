"""Pytest configuration and fixtures."""

import pytest

from aquaflow.parsing import IntentParser
from aquaflow.providers import StaticPoolProvider
from aquaflow.registry import TokenRegistry, default_token_registry
from aquaflow.routing import RouteEnumerator, RouteScorer
from aquaflow.solver import IntentSolver
from tests.helpers import FIXED_NOW, make_pool


@pytest.fixture
def tokens() -> TokenRegistry:
    """The bundled Arbitrum token registry."""
    return default_token_registry()


@pytest.fixture
def parser(tokens: TokenRegistry) -> IntentParser:
    """Parser with a frozen clock so deadlines are deterministic."""
    return IntentParser(tokens, clock=lambda: FIXED_NOW)


@pytest.fixture
def enumerator(tokens: TokenRegistry) -> RouteEnumerator:
    return RouteEnumerator(tokens)


@pytest.fixture
def scorer() -> RouteScorer:
    return RouteScorer()


# =============================================================================
# Pools
# =============================================================================


@pytest.fixture
def usdc_usdt_pool():
    """Deep 1M/1M stablecoin pool at 30 bps."""
    return make_pool("USDC", "USDT", 1_000_000 * 10**6, 1_000_000 * 10**6, pool_id="usdc-usdt")


@pytest.fixture
def arb_eth_pool():
    """1M ARB against 500 ETH."""
    return make_pool("ARB", "ETH", 1_000_000 * 10**18, 500 * 10**18, pool_id="arb-eth")


@pytest.fixture
def eth_usdt_pool():
    """500 ETH against 1M USDT."""
    return make_pool("ETH", "USDT", 500 * 10**18, 1_000_000 * 10**6, pool_id="eth-usdt")


@pytest.fixture
def eth_usdc_pool():
    """500 ETH against 1M USDC."""
    return make_pool("ETH", "USDC", 500 * 10**18, 1_000_000 * 10**6, pool_id="eth-usdc")


@pytest.fixture
def pools(usdc_usdt_pool, arb_eth_pool, eth_usdt_pool, eth_usdc_pool):
    return [usdc_usdt_pool, arb_eth_pool, eth_usdt_pool, eth_usdc_pool]


@pytest.fixture
def solver(pools, parser, tokens):
    """Solver over the test pools with a frozen clock."""
    instance = IntentSolver(
        provider=StaticPoolProvider(pools),
        tokens=tokens,
        parser=parser,
        provider_timeout=2.0,
    )
    yield instance
    instance.close()
