"""Centralized logging configuration with JSON structured logging support."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional


# Default format for text logs
TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs logs in JSON format suitable for log aggregation systems
    like ELK, Datadog, or CloudWatch.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        if hasattr(record, "request_id"):
            log_data["request_id"] = record.request_id

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, use JSON structured logging.
        stream: Where log lines go. Defaults to stdout; the CLI passes stderr
            so command output stays machine-readable.
    """
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    if json_format:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT, DATE_FORMAT))

    logging.basicConfig(
        level=level,
        handlers=[console_handler],
        force=True,  # Overwrite any existing configuration
    )

    # uvicorn's own access log duplicates the request middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Name of the logger (usually __name__).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def log_request(
    logger: logging.Logger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    request_id: Optional[str] = None,
    **extra: Any,
) -> None:
    """
    Log a completed API request with standard fields.

    Args:
        logger: Logger instance to use.
        method: HTTP method.
        path: Request path.
        status_code: Response status code.
        duration_ms: Time spent handling the request in milliseconds.
        request_id: Correlation id echoed to the client in X-Request-ID.
        **extra: Additional context to log.
    """
    log_data = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": round(duration_ms, 2),
        **extra,
    }

    record_extra: Dict[str, Any] = {"extra_data": log_data}
    if request_id:
        record_extra["request_id"] = request_id

    message = f"{method} {path} {status_code} in {duration_ms:.0f}ms"
    if status_code >= 500:
        logger.error(message, extra=record_extra)
    elif status_code >= 400:
        logger.warning(message, extra=record_extra)
    else:
        logger.info(message, extra=record_extra)


__all__ = [
    "setup_logging",
    "get_logger",
    "log_request",
    "JSONFormatter",
]
