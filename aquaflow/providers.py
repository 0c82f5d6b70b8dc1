"""Pool data providers.

A provider returns a read-only snapshot of the pools on the requested
chains. Providers do their own retrying and caching, if any; the solver
calls `load_pools` once per resolution and treats any failure as fatal.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from aquaflow.errors import ProviderUnavailableError
from aquaflow.models.pool import Pool
from aquaflow.registry.snapshot import default_pools

logger = structlog.get_logger()

_POOL_LIST = TypeAdapter(list[Pool])


@runtime_checkable
class PoolDataProvider(Protocol):
    """Source of current pool state."""

    def load_pools(self, chain_ids: Sequence[int]) -> list[Pool]:
        """Return pools on the given chains (all chains if empty).

        Raises:
            ProviderUnavailableError: If the snapshot cannot be produced
        """
        ...


class StaticPoolProvider:
    """Serves a fixed in-memory snapshot."""

    def __init__(self, pools: Iterable[Pool]) -> None:
        self._pools = tuple(pools)

    @classmethod
    def default_snapshot(cls) -> StaticPoolProvider:
        """Provider over the bundled illustrative Arbitrum snapshot."""
        return cls(default_pools())

    def load_pools(self, chain_ids: Sequence[int]) -> list[Pool]:
        if not chain_ids:
            return list(self._pools)
        wanted = set(chain_ids)
        return [pool for pool in self._pools if pool.chain_id in wanted]


class HttpPoolProvider:
    """Fetches pool snapshots from an HTTP pool service.

    Expects `GET {base_url}/pools?chainId=...` to return a JSON list of
    pools (or an object with a `pools` list) in the Pool wire format.

    Args:
        base_url: Service root, e.g. "https://pools.example.org"
        client: Preconfigured httpx client (tests inject a mock transport)
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = 5.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            self._client.close()

    def load_pools(self, chain_ids: Sequence[int]) -> list[Pool]:
        params = [("chainId", str(chain_id)) for chain_id in chain_ids]
        url = f"{self.base_url}/pools"
        try:
            response = self._client.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPError as err:
            logger.warning("pool_service_request_failed", url=url, error=str(err))
            raise ProviderUnavailableError(f"Pool service request failed: {err}") from err
        except ValueError as err:
            logger.warning("pool_service_bad_json", url=url, error=str(err))
            raise ProviderUnavailableError("Pool service returned invalid JSON") from err

        if isinstance(payload, dict):
            payload = payload.get("pools")

        try:
            pools = _POOL_LIST.validate_python(payload)
        except ValidationError as err:
            logger.warning(
                "pool_service_bad_payload",
                url=url,
                error_count=err.error_count(),
            )
            raise ProviderUnavailableError("Pool service returned malformed pools") from err

        logger.debug("pools_loaded", url=url, chain_ids=list(chain_ids), pool_count=len(pools))
        return pools
