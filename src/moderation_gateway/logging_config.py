"""Structured logging configuration using structlog.

JSON lines in production, colored console output otherwise. Submitted text
is never written: any event key that could carry it is replaced by its length.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

# Event keys that may hold user-submitted text
SUBMITTED_TEXT_KEYS = ("text", "inputs", "payload")


def redact_submitted_text(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace submitted text with its length."""
    for key in SUBMITTED_TEXT_KEYS:
        if key in event_dict:
            value = event_dict.pop(key)
            event_dict[f"{key}_length"] = len(value) if isinstance(value, (str, list, dict)) else None
    return event_dict


def build_processors(environment: str) -> list[structlog.types.Processor]:
    """Processor chain for the given environment, renderer last."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_submitted_text,
    ]
    if environment.lower() == "production":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Configure structlog for the gateway.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Environment name (development, production)
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(log_level_int),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured", log_level=log_level, environment=environment
    )
