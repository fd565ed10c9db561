"""
Logging configuration for rightsgate.

Library modules log through stdlib loggers under the "rightsgate" namespace,
which carries a NullHandler, so nothing is emitted until the host application
configures logging. configure_logging() sets up structlog JSON output
(production) or console output (development) for hosts that want it.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from rightsgate.config import get_settings

logging.getLogger("rightsgate").addHandler(logging.NullHandler())


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the library name."""
    event_dict["app"] = "rightsgate"
    return event_dict


def configure_logging(json_logs: bool | None = None, log_level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Arguments left as None are taken from the RIGHTSGATE_JSON_LOGS and
    RIGHTSGATE_LOG_LEVEL settings.
    """
    if json_logs is None or log_level is None:
        settings = get_settings()
        json_logs = settings.json_logs if json_logs is None else json_logs
        log_level = settings.log_level if log_level is None else log_level

    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if json_logs:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
