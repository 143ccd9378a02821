"""
Structured logging configuration using structlog.

Standardized log format:
{
    "ts": "2025-11-18T04:30:00.123456Z",
    "level": "info",
    "service": "request-recorder",
    "request_id": "1731904200123",
    "event": "record.stored",
    "module": "request_recorder.services.recorder",
    "func_name": "record",
    "lineno": 42,
    ...additional context...
}
"""
import structlog
import logging
from typing import Any

SERVICE_NAME = "request-recorder"

_configured = False


def add_service_name(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Add service name to all log entries."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_logging(json_output: bool = True, level: str = "INFO", force: bool = False):
    """
    Configure structured logging with standardized fields.

    Safe to call on every cold start; only the first call (or a forced one)
    reconfigures structlog.

    Args:
        json_output: If True, output JSON logs. If False, use console format.
        level: Minimum log level name.
        force: Reconfigure even if logging was already set up.
    """
    global _configured
    if _configured and not force:
        return

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    shared_processors = [
        # Add contextvars (request_id / correlation_id)
        structlog.contextvars.merge_contextvars,
        add_service_name,
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # botocore and uvicorn go through the standard library
    logging.basicConfig(format="%(message)s", level=log_level)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").handlers = []
    logging.getLogger("uvicorn.access").handlers = []

    _configured = True


def get_logger():
    """Get a configured structlog logger."""
    return structlog.get_logger()
