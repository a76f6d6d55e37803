"""Structured logging configuration using structlog.

Events are rendered as JSON lines when ``LOG_FORMAT=json`` (the default,
for log aggregators) and as coloured console output otherwise. Standard
library loggers (uvicorn, fastapi) go through the same renderer.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

APP_NAME = "sentiment-api"

# Event keys whose values must never reach the log stream
SECRET_KEYS = frozenset({"api_key", "x-api-key", "llm_api_key", "authorization"})

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the service name."""
    event_dict["app"] = APP_NAME
    return event_dict


def mask_secrets(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    for key in list(event_dict):
        if key.lower() in SECRET_KEYS and event_dict[key]:
            event_dict[key] = "***"
    return event_dict


def _level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_level: str = "info", log_format: str = "json") -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Level name (debug, info, warning, error, critical);
            unknown names fall back to info
        log_format: "json" for JSON lines, anything else for console output
    """
    level = _level(log_level)
    as_json = log_format.lower() == "json"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        mask_secrets,
    ]

    if as_json:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # uvicorn installs its own handlers unless log_config=None; strip them anyway
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).debug(
        "Logging configured",
        log_level=logging.getLevelName(level),
        renderer="json" if as_json else "console",
    )
