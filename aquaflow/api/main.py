"""FastAPI application for the intent solver.

Rate limiting and authentication belong to the reverse proxy in front of
this service.
"""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from aquaflow import __version__
from aquaflow.api.endpoints import router
from aquaflow.config import Settings
from aquaflow.log import configure_logging

# Intents are short sentences
MAX_REQUEST_SIZE = 64 * 1024

app = FastAPI(
    title="AquaFlow",
    description="Free-text swap intents resolved into routes over Arbitrum liquidity",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the API server.

    Configuration via environment variables (see aquaflow.config.Settings):
    AQUAFLOW_HOST, AQUAFLOW_PORT, AQUAFLOW_DEBUG and AQUAFLOW_LOG_LEVEL.
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        "aquaflow.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
