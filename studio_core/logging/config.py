"""
Centralized logging configuration for the studio aggregation core.

This module provides standardized logging configuration using structlog
for all components. Aggregation code never raises on bad records; it logs
them here and reports them on its result objects instead.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_aggregation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for the calendar and series aggregation paths.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy logger carrying the aggregation subsystem context; it resolves
        against the configuration in effect when it first logs
    """
    return structlog.get_logger(name, subsystem="aggregation")


def log_skipped_event(
    logger: FilteringBoundLogger,
    project_id: Optional[str],
    field: str,
    raw_value: Any,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a calendar event that was dropped because of a bad record field.

    Args:
        logger: Structlog logger instance
        project_id: ID of the record that produced the event, if known
        field: Name of the offending field (e.g. "shoot_start_date")
        raw_value: The value as received from the backend
        reason: Why the value was rejected
        context: Additional context data
    """
    bound_logger = logger.bind(
        project_id=project_id,
        field=field,
        raw_value=raw_value,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Calendar event skipped")
