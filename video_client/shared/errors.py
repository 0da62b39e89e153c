"""
Shared error handling for the video client.
"""

from typing import Dict, Any, Mapping, Optional
from pydantic import BaseModel


NOT_FOUND_STATUSES = (404, 410)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    status: Optional[int] = None
    details: Dict[str, Any] = {}


class VideoClientException(Exception):
    """Base exception for the video client."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            status=getattr(self, "status", None),
            details=self.details
        )


class ValidationError(VideoClientException):
    """Validation-related errors."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class ExternalServiceError(VideoClientException):
    """External service errors."""

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        self.service = service
        super().__init__("EXTERNAL_SERVICE_ERROR", f"{service}: {message}", details)


class TransportError(ExternalServiceError):
    """Failure raised by an HTTP transport, optionally carrying the upstream status."""

    def __init__(
        self,
        message: str = "Request failed",
        status: Optional[int] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.status = status
        self.url = url
        merged = dict(details or {})
        if status is not None:
            merged["status_code"] = status
        if url:
            merged["url"] = url
        super().__init__("transport", message, merged)


def status_of(err: BaseException) -> Optional[int]:
    """Return the status code carried by a transport failure, if any.

    The status is read from ``err.response`` when the error has a structured
    response attached, otherwise from the error itself. Both ``status`` and
    ``status_code`` are accepted, as attributes or as mapping keys.
    """
    response = getattr(err, "response", None)
    data = response if response is not None else err
    for attr in ("status", "status_code"):
        if isinstance(data, Mapping):
            value = data.get(attr)
        else:
            value = getattr(data, attr, None)
        if isinstance(value, int):
            return value
    return None


def is_not_found(err: BaseException) -> bool:
    """Whether a failure belongs to the not-found class (404 or 410)."""
    return status_of(err) in NOT_FOUND_STATUSES
