"""structlog setup for services and scripts."""

import logging

import structlog


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install the console logging pipeline.

    Args:
        level: Minimum level, as a name ("DEBUG") or a logging constant
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
