from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict

from botocore.exceptions import ClientError


class Record(BaseModel):
    """The unit persisted once per invocation."""

    id: str = Field(..., pattern=r"^\d+$", description="Epoch milliseconds at invocation time")
    event: Any = None


class WriteResult(BaseModel):
    """Outcome of a single store write: an acknowledgment or the raised failure."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    record_id: str
    ack: Dict[str, Any] | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, record_id: str, ack: Dict[str, Any]) -> "WriteResult":
        return cls(record_id=record_id, ack=ack)

    @classmethod
    def failure(cls, record_id: str, error: Exception) -> "WriteResult":
        return cls(record_id=record_id, error=error)


class HandlerResponse(BaseModel):
    statusCode: int
    body: Any = None

    @classmethod
    def from_result(cls, result: WriteResult) -> "HandlerResponse":
        if result.ok:
            return cls(statusCode=200, body=result.ack)
        return cls(statusCode=400, body=describe_failure(result.error))

    def to_dict(self) -> Dict[str, Any]:
        return {"statusCode": self.statusCode, "body": self.body}


def describe_failure(exc: Exception) -> Dict[str, Any]:
    """Render an exception as a JSON-serialisable failure body."""
    description: Dict[str, Any] = {
        "name": type(exc).__name__,
        "message": str(exc),
    }
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        metadata = exc.response.get("ResponseMetadata", {})
        if error.get("Code"):
            description["code"] = error["Code"]
        if metadata.get("HTTPStatusCode"):
            description["statusCode"] = metadata["HTTPStatusCode"]
    return description
