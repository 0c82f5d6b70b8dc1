"""Intent resolution façade.

IntentSolver is the single entry point: free text in, a Resolution out.
It drives the pipeline parse → validate → load pools → enumerate → select
and converts every domain failure into a structured Resolution. Only a
failing pool data provider is raised to the caller.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

import structlog

from aquaflow.config import DEFAULT_PROVIDER_TIMEOUT, Settings
from aquaflow.constants import MIN_INTENT_CONFIDENCE
from aquaflow.errors import ExecutionError, ProviderUnavailableError, ResolutionError
from aquaflow.gateway import ExecutionGateway, ExecutionReceipt
from aquaflow.models import AmountType, OptimalRoute, ParsedIntent, Pool, RouteOptions
from aquaflow.parsing import IntentParser
from aquaflow.providers import HttpPoolProvider, PoolDataProvider, StaticPoolProvider
from aquaflow.registry import PoolRegistry, TokenRegistry, default_token_registry
from aquaflow.routing import RouteEnumerator, RouteScorer, to_base_units

logger = structlog.get_logger()


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one intent.

    Exactly one of `route` and `error` is set.

    Attributes:
        intent: The parsed intent (always present, even on failure)
        route: The selected route, on success
        error: Why no route was produced, on failure
        messages: Human-readable details (validation errors verbatim)
        confidence: Route confidence on success, parse confidence otherwise
    """

    intent: ParsedIntent
    route: OptimalRoute | None = None
    error: ResolutionError | None = None
    messages: list[str] = field(default_factory=list)
    confidence: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None and self.route is not None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class IntentSolver:
    """Resolves free-text intents into executable routes.

    The solver holds no per-request state; one instance can serve many
    threads. Collaborators are injected so tests can swap any of them.

    Args:
        provider: Pool data source. Defaults to the bundled static snapshot.
        tokens: Known tokens. Defaults to the bundled Arbitrum registry.
        parser: Intent parser. Built over `tokens` if omitted.
        enumerator: Route generator. Built over `tokens` if omitted.
        scorer: Route ranking policy.
        provider_timeout: Seconds to wait for a pool snapshot.
    """

    def __init__(
        self,
        provider: PoolDataProvider | None = None,
        tokens: TokenRegistry | None = None,
        parser: IntentParser | None = None,
        enumerator: RouteEnumerator | None = None,
        scorer: RouteScorer | None = None,
        provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT,
    ) -> None:
        self.tokens = tokens if tokens is not None else default_token_registry()
        self.provider = provider if provider is not None else StaticPoolProvider.default_snapshot()
        self.parser = parser if parser is not None else IntentParser(self.tokens)
        self.enumerator = enumerator if enumerator is not None else RouteEnumerator(self.tokens)
        self.scorer = scorer if scorer is not None else RouteScorer()
        self.provider_timeout = provider_timeout
        self._executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="pool-provider")

    def close(self) -> None:
        """Release the provider worker threads and the provider's own resources.

        Stragglers are not waited on.
        """
        self._executor.shutdown(wait=False, cancel_futures=True)
        close_provider = getattr(self.provider, "close", None)
        if callable(close_provider):
            close_provider()

    def __enter__(self) -> IntentSolver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def solve(
        self,
        raw_text: str,
        options: RouteOptions | Mapping[str, Any] | None = None,
    ) -> Resolution:
        """Resolve free text into the best route.

        Args:
            raw_text: User input such as "swap 100 USDC to USDT"
            options: RouteOptions, or a mapping of overrides

        Returns:
            Resolution carrying either the selected route or a ResolutionError

        Raises:
            ValueError: If an options mapping holds unknown keys
            ProviderUnavailableError: If the pool snapshot cannot be loaded
        """
        route_options = _coerce_options(options)

        intent = self.parser.parse(raw_text)
        if intent.is_unknown or intent.confidence < MIN_INTENT_CONFIDENCE:
            logger.info("intent_ambiguous", confidence=intent.confidence)
            return Resolution(
                intent=intent,
                error=ResolutionError.PARSE_AMBIGUOUS,
                messages=["Unable to understand intent clearly"],
                confidence=intent.confidence,
            )

        validation = self.parser.validate(intent)
        if not validation.valid:
            logger.info("intent_invalid", errors=validation.errors)
            return Resolution(
                intent=intent,
                error=ResolutionError.VALIDATION_FAILED,
                messages=list(validation.errors),
                confidence=intent.confidence,
            )

        dust = self._below_smallest_unit(intent)
        if dust is not None:
            logger.info("intent_amount_below_unit", amount=intent.amount, token=dust)
            return Resolution(
                intent=intent,
                error=ResolutionError.VALIDATION_FAILED,
                messages=[f"Amount is below the smallest unit of {dust}"],
                confidence=intent.confidence,
            )

        chains = route_options.preferred_chains or self.parser.resolve_chains(
            intent.chain_preference
        )
        route_options = route_options.with_chains(tuple(chains))

        registry = PoolRegistry(self.load_pools(chains))
        relevant = registry.pools_touching([intent.token_in, intent.token_out], chains)
        if not relevant:
            logger.info(
                "no_pools_found",
                token_in=intent.token_in,
                token_out=intent.token_out,
                chains=list(chains),
            )
            return Resolution(
                intent=intent,
                error=ResolutionError.NO_POOLS_FOUND,
                messages=[f"No pools found for {intent.token_in}/{intent.token_out}"],
                confidence=intent.confidence,
            )

        candidates = self.enumerator.enumerate(intent, relevant, route_options)
        route = self.scorer.select(candidates, route_options)
        if route is None:
            logger.info(
                "no_viable_route",
                token_in=intent.token_in,
                token_out=intent.token_out,
                max_price_impact=str(route_options.max_price_impact),
            )
            return Resolution(
                intent=intent,
                error=ResolutionError.NO_VIABLE_ROUTE,
                messages=[
                    f"No route for {intent.token_in}/{intent.token_out} within "
                    f"{route_options.max_price_impact}% price impact"
                ],
                confidence=intent.confidence,
            )

        logger.info(
            "intent_resolved",
            path=route.path,
            amount_in=route.amount_in,
            amount_out=route.total_amount_out,
            price_impact=str(route.total_price_impact),
            candidates=len(candidates),
        )
        return Resolution(intent=intent, route=route, confidence=route.confidence)

    def _below_smallest_unit(self, intent: ParsedIntent) -> str | None:
        """Symbol of the fixed-side token if the amount scales to zero units."""
        if intent.amount_type is AmountType.EXACT_OUT:
            symbol = intent.token_out
        else:
            symbol = intent.token_in
        decimals = self.tokens.decimals(symbol)
        if decimals is None or to_base_units(intent.amount, decimals) > 0:
            return None
        return symbol

    def load_pools(self, chain_ids: Sequence[int]) -> list[Pool]:
        """Fetch a pool snapshot, bounded by `provider_timeout`.

        Raises:
            ProviderUnavailableError: On provider failure or timeout
        """
        future = self._executor.submit(self.provider.load_pools, list(chain_ids))
        try:
            return list(future.result(timeout=self.provider_timeout))
        except TimeoutError as err:
            future.cancel()
            logger.warning(
                "provider_unavailable",
                reason="timeout",
                timeout_seconds=self.provider_timeout,
            )
            raise ProviderUnavailableError(
                f"Pool data provider timed out after {self.provider_timeout}s"
            ) from err
        except ProviderUnavailableError:
            logger.warning("provider_unavailable", reason="provider_error")
            raise
        except Exception as err:
            logger.warning("provider_unavailable", reason="unexpected_error", error=str(err))
            raise ProviderUnavailableError(f"Pool data provider failed: {err}") from err

    def execute(self, resolution: Resolution, gateway: ExecutionGateway) -> ExecutionReceipt:
        """Hand a successful resolution to an execution gateway.

        Raises:
            ExecutionError: If the resolution has no route, or the gateway fails
        """
        if not resolution.success or resolution.route is None:
            error = resolution.error.value if resolution.error else "no_route"
            raise ExecutionError(f"Cannot execute a failed resolution: {error}")

        receipt = gateway.execute(resolution.intent, resolution.route)
        logger.info("route_submitted", tx_id=receipt.tx_id, path=resolution.route.path)
        return receipt


def _coerce_options(options: RouteOptions | Mapping[str, Any] | None) -> RouteOptions:
    if options is None:
        return RouteOptions()
    if isinstance(options, RouteOptions):
        return options
    return RouteOptions.from_overrides(options)


def create_solver(settings: Settings) -> IntentSolver:
    """Build a solver wired to the configured pool source.

    An HTTP pool service is used when `pools_url` is set; otherwise the
    bundled static snapshot.
    """
    provider: PoolDataProvider
    if settings.pools_url:
        logger.info("pool_service_enabled", pools_url=settings.pools_url)
        provider = HttpPoolProvider(settings.pools_url, timeout=settings.provider_timeout)
    else:
        logger.info("pool_service_disabled", reason="AQUAFLOW_POOLS_URL not set")
        provider = StaticPoolProvider.default_snapshot()
    return IntentSolver(provider=provider, provider_timeout=settings.provider_timeout)


@functools.lru_cache(maxsize=1)
def get_default_solver() -> IntentSolver:
    """Process-wide solver configured from the environment."""
    return create_solver(Settings.from_env())
