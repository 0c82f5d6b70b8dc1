"""Token registry keyed by canonical symbol."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from aquaflow.models.token import Token
from aquaflow.models.types import normalize_symbol

logger = structlog.get_logger()


class TokenRegistry:
    """Known tokens, keyed by upper-case symbol.

    A symbol may be deployed on several chains; each deployment is a
    separate Token. Lookups are case insensitive.
    """

    def __init__(self, tokens: Iterable[Token] | None = None) -> None:
        self._tokens: dict[str, dict[int, Token]] = {}
        if tokens:
            for token in tokens:
                self.register(token)

    def register(self, token: Token) -> None:
        """Add a token deployment. Re-registering a (symbol, chain) replaces it."""
        deployments = self._tokens.setdefault(token.symbol, {})
        if token.chain_id in deployments:
            logger.debug("token_replaced", symbol=token.symbol, chain_id=token.chain_id)
        deployments[token.chain_id] = token

    def __contains__(self, symbol: object) -> bool:
        if not isinstance(symbol, str) or not symbol.strip():
            return False
        return normalize_symbol(symbol) in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def symbols(self) -> list[str]:
        """Registered symbols in registration order."""
        return list(self._tokens)

    def get(self, symbol: str, chain_id: int | None = None) -> Token | None:
        """Get a token deployment.

        Args:
            symbol: Token symbol (any case)
            chain_id: Preferred chain. Falls back to the first registered
                      deployment when the symbol is not on that chain.

        Returns:
            Token if the symbol is known, None otherwise
        """
        deployments = self._tokens.get(normalize_symbol(symbol))
        if not deployments:
            return None
        if chain_id is not None and chain_id in deployments:
            return deployments[chain_id]
        return next(iter(deployments.values()))

    def decimals(self, symbol: str, chain_id: int | None = None) -> int | None:
        token = self.get(symbol, chain_id)
        return token.decimals if token is not None else None

    def chains(self) -> list[int]:
        """All chain ids with at least one registered token."""
        seen: dict[int, None] = {}
        for deployments in self._tokens.values():
            for chain_id in deployments:
                seen.setdefault(chain_id)
        return list(seen)
