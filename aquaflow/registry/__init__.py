"""Token and pool registries.

Provides TokenRegistry for symbol lookups and PoolRegistry for indexing
one liquidity snapshot.
"""

from .pools import PoolRegistry
from .snapshot import DEFAULT_TOKENS, default_pools, default_token_registry
from .tokens import TokenRegistry

__all__ = [
    "DEFAULT_TOKENS",
    "PoolRegistry",
    "TokenRegistry",
    "default_pools",
    "default_token_registry",
]
