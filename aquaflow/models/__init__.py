"""AquaFlow data model."""

from aquaflow.models.intent import AmountType, IntentAction, ParsedIntent, ValidationResult
from aquaflow.models.options import (
    DEFAULT_ROUTE_OPTIONS,
    DEFAULT_WEIGHTS,
    RouteOptions,
    ScoringWeights,
)
from aquaflow.models.pool import Pool
from aquaflow.models.route import OptimalRoute, RouteStep
from aquaflow.models.token import Token
from aquaflow.models.types import normalize_symbol

__all__ = [
    "AmountType",
    "DEFAULT_ROUTE_OPTIONS",
    "DEFAULT_WEIGHTS",
    "IntentAction",
    "OptimalRoute",
    "ParsedIntent",
    "Pool",
    "RouteOptions",
    "RouteStep",
    "ScoringWeights",
    "Token",
    "ValidationResult",
    "normalize_symbol",
]
