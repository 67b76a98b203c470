"""Structured logging for trackrecords.

Usage:
    from trackrecords import configure_logging, get_logger

    configure_logging()  # once, from the API lifespan or the CLI callback

    logger = get_logger(__name__)
    logger.info("records_loaded", source="records.csv", count=42)

Level, format and environment come from Settings (LOG_LEVEL, LOG_FORMAT,
ENVIRONMENT). Without an explicit LOG_FORMAT, production logs JSON and every
other environment logs colored console lines.
"""

import logging
import sys
from typing import Any

import structlog

from trackrecords.config import LogFormat, Settings, get_settings


def _resolve_format(settings: Settings) -> LogFormat:
    if settings.log_format is not None:
        return settings.log_format
    return LogFormat.JSON if settings.is_production else LogFormat.CONSOLE


def _resolve_level(settings: Settings) -> int:
    return logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)


def _environment_adder(environment: str) -> structlog.typing.Processor:
    """Build a processor stamping every entry with the running environment."""

    def add_environment(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_environment


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Settings to configure from, defaults to get_settings()
    """
    settings = settings or get_settings()
    log_format = _resolve_format(settings)
    level = _resolve_level(settings)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _environment_adder(settings.environment.value),
    ]

    if log_format == LogFormat.JSON:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdout belongs to CLI output
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger().setLevel(level)

    for noisy in ("httpx", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically with __name__."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values included in every later log entry of this context.

    Example:
        bind_context(track_event="Marathon", gender="Men")
        logger.info("deriving")  # carries track_event and gender
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound context values."""
    structlog.contextvars.clear_contextvars()
