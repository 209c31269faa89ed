"""
Logging configuration for the EdgeWorkers SDK.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs so that
every API call made within one unit of work can be traced together.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from context, or None if not set."""
    return correlation_id_var.get()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for the SDK.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler: logging.Handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    return structlog.get_logger(f"edgeworkers.{name}")


# Convenience functions for common logging patterns

def log_api_request(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    method: str,
    path: str,
    **kwargs: Any,
) -> None:
    """
    Log an outbound API request.

    Args:
        logger: Logger instance
        operation: Operation name (e.g. "list deactivations")
        method: HTTP method
        path: Request path without host
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_request",
        "operation": operation,
        "method": method,
        "path": path,
    }
    log_data.update(kwargs)

    logger.debug("api_request", **log_data)


def log_api_response(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    status_code: int,
    expected_status: int,
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log an inbound API response.

    Args:
        logger: Logger instance
        operation: Operation name
        status_code: Observed HTTP status code
        expected_status: Status code the operation treats as success
        duration_ms: Round-trip duration in milliseconds
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_response",
        "operation": operation,
        "status_code": status_code,
        "expected_status": expected_status,
        "duration_ms": duration_ms,
    }
    log_data.update(kwargs)

    if status_code == expected_status:
        logger.debug("api_response", **log_data)
    else:
        logger.warning("api_response_unexpected_status", **log_data)


def log_validation_failure(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    errors: Dict[str, str],
    **kwargs: Any,
) -> None:
    """
    Log a request that failed local validation.

    Args:
        logger: Logger instance
        operation: Operation name
        errors: Mapping of field name to validation message
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "validation_failure",
        "operation": operation,
        "fields": sorted(errors),
    }
    log_data.update(kwargs)

    logger.info("validation_failure", **log_data)


def log_api_error(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    status: int,
    title: str = "",
    error_code: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a normalized API error.

    Args:
        logger: Logger instance
        operation: Operation name
        status: HTTP status code observed on the wire
        title: Problem title
        error_code: Provider-specific error code, if any
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_error",
        "operation": operation,
        "status": status,
        "title": title,
    }

    if error_code:
        log_data["error_code"] = error_code

    log_data.update(kwargs)

    logger.error("api_error", **log_data)
