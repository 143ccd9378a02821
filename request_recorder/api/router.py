from typing import Any
from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse
from ..handler import get_default_handler

router = APIRouter()


@router.post("/invoke")
def invoke(request: Request, event: Any = Body(None)):
    """Run the handler with the JSON body as the event; HTTP status mirrors statusCode."""
    context = _LocalContext(getattr(request.state, "correlation_id", None))
    response = get_default_handler()(event, context)
    return JSONResponse(status_code=response["statusCode"], content=response)


class _LocalContext:
    """Stand-in for the platform context object."""

    def __init__(self, aws_request_id: str | None):
        self.aws_request_id = aws_request_id
