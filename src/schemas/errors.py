"""Error response schemas for API endpoints."""
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Human-readable error description."""

    message: str


class ErrorResponse(BaseModel):
    """Envelope returned for every handled error: `{"error": {"message": ...}}`."""

    error: ErrorDetail

    @classmethod
    def from_message(cls, message: str) -> "ErrorResponse":
        """Build an error envelope from a bare message."""
        return cls(error=ErrorDetail(message=message))
