"""Request and response bodies for the HTTP API.

Token amounts are serialized as decimal strings so 256-bit values survive
JSON clients that parse numbers as doubles.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from aquaflow.errors import ResolutionError
from aquaflow.models import OptimalRoute, ParsedIntent, RouteStep, Token

if TYPE_CHECKING:
    from aquaflow.solver import Resolution


class SolveRequest(BaseModel):
    """Body of POST /solve."""

    text: str = Field(min_length=1, max_length=1000)
    options: dict[str, Any] | None = None


class RouteStepBody(BaseModel):
    model_config = {"populate_by_name": True}

    pool_id: str = Field(alias="poolId")
    token_in: Token = Field(alias="tokenIn")
    token_out: Token = Field(alias="tokenOut")
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    price_impact: Decimal = Field(alias="priceImpact")
    gas_estimate: int = Field(alias="gasEstimate")

    @classmethod
    def from_step(cls, step: RouteStep) -> RouteStepBody:
        return cls(
            pool_id=step.pool_id,
            token_in=step.token_in,
            token_out=step.token_out,
            amount_in=str(step.amount_in),
            amount_out=str(step.amount_out),
            price_impact=step.price_impact,
            gas_estimate=step.gas_estimate,
        )


class RouteBody(BaseModel):
    model_config = {"populate_by_name": True}

    path: list[str]
    steps: list[RouteStepBody]
    amount_in: str = Field(alias="amountIn")
    total_amount_out: str = Field(alias="totalAmountOut")
    total_price_impact: Decimal = Field(alias="totalPriceImpact")
    total_gas_estimate: int = Field(alias="totalGasEstimate")
    execution_time: int = Field(alias="executionTime")
    confidence: float
    chain_path: list[int] = Field(alias="chainPath")

    @classmethod
    def from_route(cls, route: OptimalRoute) -> RouteBody:
        return cls(
            path=route.path,
            steps=[RouteStepBody.from_step(step) for step in route.steps],
            amount_in=str(route.amount_in),
            total_amount_out=str(route.total_amount_out),
            total_price_impact=route.total_price_impact,
            total_gas_estimate=route.total_gas_estimate,
            execution_time=route.execution_time,
            confidence=route.confidence,
            chain_path=list(route.chain_path),
        )


class SolveResponse(BaseModel):
    """Body returned by POST /solve.

    Domain failures are reported here with `success: false`, not as HTTP
    errors.
    """

    success: bool
    intent: ParsedIntent
    route: RouteBody | None = None
    error: ResolutionError | None = None
    messages: list[str] = Field(default_factory=list)
    confidence: float

    @classmethod
    def from_resolution(cls, resolution: Resolution) -> SolveResponse:
        return cls(
            success=resolution.success,
            intent=resolution.intent,
            route=RouteBody.from_route(resolution.route) if resolution.route else None,
            error=resolution.error,
            messages=list(resolution.messages),
            confidence=resolution.confidence,
        )
