"""Illustrative Arbitrum token list and pool snapshot.

This is placeholder liquidity for demos and tests. Real deployments get
pools from a PoolDataProvider backed by chain data.
"""

from aquaflow.constants import ARBITRUM_NOVA, ARBITRUM_ONE
from aquaflow.models.pool import Pool
from aquaflow.models.token import Token
from aquaflow.registry.tokens import TokenRegistry

USDC = Token(
    symbol="USDC",
    address="0xA0b86a33E6441b8435b662f0E2d0B8A0E4B5B8B0",
    decimals=6,
    chain_id=ARBITRUM_ONE,
)
USDT = Token(
    symbol="USDT",
    address="0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9",
    decimals=6,
    chain_id=ARBITRUM_ONE,
)
ETH = Token(
    symbol="ETH",
    address="0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
    decimals=18,
    chain_id=ARBITRUM_ONE,
)
ARB = Token(
    symbol="ARB",
    address="0x912CE59144191C1204E64559FE8253a0e49E6548",
    decimals=18,
    chain_id=ARBITRUM_ONE,
)

NOVA_USDC = Token(
    symbol="USDC",
    address="0xA0b86a33E6441b8435b662f0E2d0B8A0E4B5B8B1",
    decimals=6,
    chain_id=ARBITRUM_NOVA,
)
NOVA_USDT = Token(
    symbol="USDT",
    address="0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb8",
    decimals=6,
    chain_id=ARBITRUM_NOVA,
)
NOVA_ETH = Token(
    symbol="ETH",
    address="0x82aF49447D8a07e3bd95BD0d56f35241523fBab2",
    decimals=18,
    chain_id=ARBITRUM_NOVA,
)
NOVA_ARB = Token(
    symbol="ARB",
    address="0x912CE59144191C1204E64559FE8253a0e49E6549",
    decimals=18,
    chain_id=ARBITRUM_NOVA,
)

DEFAULT_TOKENS = (USDC, USDT, ETH, ARB, NOVA_USDC, NOVA_USDT, NOVA_ETH, NOVA_ARB)


def default_token_registry() -> TokenRegistry:
    """Token registry holding the bundled Arbitrum One and Nova deployments."""
    return TokenRegistry(DEFAULT_TOKENS)


def default_pools() -> list[Pool]:
    """The bundled Arbitrum One pool snapshot."""
    return [
        Pool(
            id="pool-1",
            address="0x1234567890123456789012345678901234567890",
            token_a=USDC,
            token_b=USDT,
            reserve_a=1_000_000 * 10**6,
            reserve_b=1_000_000 * 10**6,
            fee_bps=30,
            chain_id=ARBITRUM_ONE,
            tvl=2_000_000,
            volume_24h=500_000,
        ),
        Pool(
            id="pool-2",
            address="0x2345678901234567890123456789012345678901",
            token_a=ETH,
            token_b=USDC,
            reserve_a=500 * 10**18,
            reserve_b=1_000_000 * 10**6,
            fee_bps=30,
            chain_id=ARBITRUM_ONE,
            tvl=2_000_000,
            volume_24h=1_000_000,
        ),
        Pool(
            id="pool-3",
            address="0x3456789012345678901234567890123456789012",
            token_a=ARB,
            token_b=ETH,
            reserve_a=1_000_000 * 10**18,
            reserve_b=500 * 10**18,
            fee_bps=30,
            chain_id=ARBITRUM_ONE,
            tvl=1_000_000,
            volume_24h=200_000,
        ),
    ]
