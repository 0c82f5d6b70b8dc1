"""Execution gateway interface.

Signing, submission and receipt polling live outside this package. The
solver only hands a selected route to a caller-supplied gateway.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from aquaflow.models import OptimalRoute, ParsedIntent


@dataclass(frozen=True)
class ExecutionReceipt:
    """Outcome of submitting a route."""

    tx_id: str


@runtime_checkable
class ExecutionGateway(Protocol):
    """Submits a route on-chain."""

    def execute(self, intent: ParsedIntent, route: OptimalRoute) -> ExecutionReceipt:
        """Submit the route.

        Implementations should re-estimate gas against the live chain; the
        route's gas figures are flat estimates.

        Raises:
            ExecutionError: If submission fails
        """
        ...
