"""Error taxonomy for intent resolution.

Domain outcomes (ambiguous text, failed validation, missing liquidity) are
returned as ``ResolutionError`` values inside a ``Resolution``. Only
collaborator failures are raised.
"""

from enum import Enum


class ResolutionError(str, Enum):
    """Why a resolution did not produce a route."""

    PARSE_AMBIGUOUS = "parse_ambiguous"
    VALIDATION_FAILED = "validation_failed"
    NO_POOLS_FOUND = "no_pools_found"
    NO_VIABLE_ROUTE = "no_viable_route"


class AquaflowError(Exception):
    """Base error for the AquaFlow engine."""

    pass


class ProviderUnavailableError(AquaflowError):
    """The pool data provider failed or timed out.

    Fatal for the resolution: no route is ever built from partial data.
    """

    pass


class ExecutionError(AquaflowError):
    """An execution gateway rejected or failed to submit a route."""

    pass
