"""
Lambda entry point.

Each invocation writes {id, event} to the "requests" table and returns
{"statusCode": 200, "body": <ack>} or {"statusCode": 400, "body": <failure>}.
"""
from typing import Any, Callable, Dict
import structlog

from .config import get_settings
from .logging import setup_logging
from .models import HandlerResponse
from .services.recorder import RequestRecorder, TABLE_NAME
from .stores import KeyValueStore

log = structlog.get_logger()

__all__ = ["RequestHandler", "TABLE_NAME", "handler", "hello", "get_default_handler", "reset_default_handler"]


class RequestHandler:
    """Callable handler bound to one long-lived recorder."""

    def __init__(
        self,
        recorder: RequestRecorder | None = None,
        store: KeyValueStore | None = None,
        clock: Callable[[], int] | None = None,
    ):
        if recorder is None:
            recorder = RequestRecorder(store=store, clock=clock)
        self.recorder = recorder

    def __call__(self, event: Any, context: Any = None) -> Dict[str, Any]:
        # Bind only this invocation's keys; callers may hold their own context
        bound = {}
        aws_request_id = getattr(context, "aws_request_id", None)
        if aws_request_id:
            bound["aws_request_id"] = aws_request_id

        with structlog.contextvars.bound_contextvars(**bound):
            result = self.recorder.record(event)
            response = HandlerResponse.from_result(result)
            log.info("request.handled", request_id=result.record_id, status_code=response.statusCode)
        return response.to_dict()


_default_handler: RequestHandler | None = None


def get_default_handler() -> RequestHandler:
    """Build the process-wide handler on first use and reuse it afterwards."""
    global _default_handler
    if _default_handler is None:
        settings = get_settings()
        setup_logging(json_output=settings.LOG_JSON, level=settings.LOG_LEVEL)
        _default_handler = RequestHandler()
        log.info(
            "handler.cold_start",
            env=settings.ENV,
            backend=_default_handler.recorder.store.name,
            table=TABLE_NAME,
        )
    return _default_handler


def reset_default_handler():
    """Drop the process-wide handler so the next invocation rebuilds it."""
    global _default_handler
    _default_handler = None


def handler(event: Any, context: Any = None) -> Dict[str, Any]:
    """Lambda handler: record the event and report the outcome."""
    return get_default_handler()(event, context)


# Function name used by the serverless deployment
hello = handler
