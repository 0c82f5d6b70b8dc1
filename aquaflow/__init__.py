"""AquaFlow: free-text swap intents resolved into optimal routes."""

from aquaflow.errors import (
    AquaflowError,
    ExecutionError,
    ProviderUnavailableError,
    ResolutionError,
)
from aquaflow.solver import IntentSolver, Resolution, get_default_solver

__version__ = "0.1.0"

__all__ = [
    "AquaflowError",
    "ExecutionError",
    "IntentSolver",
    "ProviderUnavailableError",
    "Resolution",
    "ResolutionError",
    "__version__",
    "get_default_solver",
]
