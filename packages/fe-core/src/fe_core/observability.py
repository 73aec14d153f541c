"""Structured logging setup for fe-core.

Library modules log through ``structlog.get_logger(__name__)`` with an
event name and key/value context. configure_logging() is called once by
the CLI; library code never configures logging itself.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Environment variable for the default log level of the CLI
LOG_LEVEL_ENV_VAR = "FE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    *,
    log_level: str = DEFAULT_LOG_LEVEL,
    json_format: bool = False,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the driver.

    Log records go to stderr so they never mix with artifact paths or
    status lines printed on stdout.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON format. If False, output human-readable.
        add_timestamp: If True, add ISO timestamp to log entries.

    Example:
        >>> configure_logging(log_level="DEBUG")
    """
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if add_timestamp:
        processors.insert(1, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    level = getattr(logging, log_level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )
