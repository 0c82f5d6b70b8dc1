"""Test helpers module for shared test utilities.

- factories: Token, pool and provider factory functions
"""

from tests.helpers.factories import (
    FIXED_NOW,
    FailingProvider,
    RecordingGateway,
    SlowProvider,
    make_address,
    make_pool,
    make_token,
)

__all__ = [
    "FIXED_NOW",
    "FailingProvider",
    "RecordingGateway",
    "SlowProvider",
    "make_address",
    "make_pool",
    "make_token",
]
