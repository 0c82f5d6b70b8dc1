"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_PROVIDER_TIMEOUT = 5.0


def _env_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    """Service configuration.

    Attributes:
        host: API bind host (AQUAFLOW_HOST)
        port: API bind port (AQUAFLOW_PORT)
        debug: Enable reload mode (AQUAFLOW_DEBUG)
        pools_url: Pool service root; unset uses the bundled snapshot (AQUAFLOW_POOLS_URL)
        provider_timeout: Seconds to wait for a pool snapshot (AQUAFLOW_PROVIDER_TIMEOUT)
        log_level: Minimum log level name (AQUAFLOW_LOG_LEVEL)
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    pools_url: str | None = None
    provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables, with defaults.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("AQUAFLOW_HOST", "0.0.0.0"),
            port=int(env.get("AQUAFLOW_PORT", "8000")),
            debug=_env_bool(env.get("AQUAFLOW_DEBUG", "false")),
            pools_url=env.get("AQUAFLOW_POOLS_URL") or None,
            provider_timeout=float(
                env.get("AQUAFLOW_PROVIDER_TIMEOUT", str(DEFAULT_PROVIDER_TIMEOUT))
            ),
            log_level=env.get("AQUAFLOW_LOG_LEVEL", "INFO").upper(),
        )
