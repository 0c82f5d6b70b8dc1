"""Pool registry for a single liquidity snapshot.

A PoolRegistry is built from one provider snapshot and answers the
lookups routing needs: pools touching a token, pools for a pair, and the
deepest pool for a pair.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from aquaflow.models.pool import Pool
from aquaflow.models.types import normalize_symbol

logger = structlog.get_logger()


class PoolRegistry:
    """Registry of pools from one snapshot.

    Pools are indexed by unordered symbol pair. Several pools may serve the
    same pair (different chains or venues); insertion order is preserved so
    lookups are deterministic.
    """

    def __init__(self, pools: Iterable[Pool] | None = None) -> None:
        self._pools: dict[str, Pool] = {}
        self._by_pair: dict[frozenset[str], list[Pool]] = {}
        if pools:
            for pool in pools:
                self.add_pool(pool)

    def add_pool(self, pool: Pool) -> None:
        """Add a pool. A pool with the same id replaces the earlier one."""
        pair_key = frozenset(pool.symbols)
        previous = self._pools.get(pool.id)
        if previous is not None:
            logger.debug("pool_replaced", pool_id=pool.id)
            self._by_pair[frozenset(previous.symbols)].remove(previous)
        self._pools[pool.id] = pool
        self._by_pair.setdefault(pair_key, []).append(pool)

    def __len__(self) -> int:
        return len(self._pools)

    def __iter__(self) -> Iterator[Pool]:
        return iter(self._pools.values())

    def get(self, pool_id: str) -> Pool | None:
        return self._pools.get(pool_id)

    @staticmethod
    def _routable(pool: Pool, chain_ids: Iterable[int] | None) -> bool:
        if pool.is_inert:
            return False
        if chain_ids:
            return pool.chain_id in set(chain_ids)
        return True

    def pools_for_pair(
        self,
        token_a: str,
        token_b: str,
        chain_ids: Iterable[int] | None = None,
    ) -> list[Pool]:
        """Get routable pools for a token pair (order independent).

        Args:
            token_a: First token symbol (any case)
            token_b: Second token symbol (any case)
            chain_ids: Restrict to these chains (None or empty = all)

        Returns:
            Non-inert pools for this pair, in insertion order
        """
        pair_key = frozenset([normalize_symbol(token_a), normalize_symbol(token_b)])
        chains = tuple(chain_ids) if chain_ids else ()
        return [p for p in self._by_pair.get(pair_key, []) if self._routable(p, chains)]

    def best_pool(
        self,
        token_a: str,
        token_b: str,
        chain_ids: Iterable[int] | None = None,
    ) -> Pool | None:
        """Get the highest-TVL routable pool for a pair; the earliest wins ties."""
        best: Pool | None = None
        for pool in self.pools_for_pair(token_a, token_b, chain_ids):
            if best is None or pool.tvl > best.tvl:
                best = pool
        return best

    def pools_touching(
        self,
        symbols: Iterable[str],
        chain_ids: Iterable[int] | None = None,
    ) -> list[Pool]:
        """Get routable pools containing any of the given tokens.

        Args:
            symbols: Token symbols (any case)
            chain_ids: Restrict to these chains (None or empty = all)

        Returns:
            Non-inert pools touching at least one symbol, in insertion order
        """
        wanted = {normalize_symbol(s) for s in symbols}
        chains = tuple(chain_ids) if chain_ids else ()
        return [
            pool
            for pool in self._pools.values()
            if wanted.intersection(pool.symbols) and self._routable(pool, chains)
        ]

    def get_all_token_pairs(self) -> set[tuple[str, str]]:
        """Get all unique token pairs with at least one pool, canonically ordered."""
        pairs: set[tuple[str, str]] = set()
        for pair_key, pools in self._by_pair.items():
            if pools:
                a, b = sorted(pair_key)
                pairs.add((a, b))
        return pairs
