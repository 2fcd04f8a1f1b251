"""Structured logging configuration for the webhook archiver."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(
    level: str = "INFO",
    service_name: str | None = None,
    structured: bool = True,
) -> None:
    """Configure logging once at process start.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        service_name: Name of the service, bound into every structured record
        structured: Whether to render records as JSON
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if service_name:
        processors.insert(0, _bind_service(service_name))
    processors.append(
        structlog.processors.JSONRenderer() if structured else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)

    # Make uvicorn logs follow the same handler/level
    for n in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(n).setLevel(log_level)
        logging.getLogger(n).handlers[:] = [handler]
        logging.getLogger(n).propagate = False


def _bind_service(service_name: str):
    def processor(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict
    return processor


def get_logger(name: str, **context: Any) -> Any:
    """Get a structlog logger with optional bound context.

    Args:
        name: Logger name
        **context: Additional context to bind to the logger

    Returns:
        Bound logger instance
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
