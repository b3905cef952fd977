from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .response import ApiResponse

if TYPE_CHECKING:
    from .error_list import ErrorList


class ApiRecordError(Exception):
    """Base error for record lifecycle failures."""


class UnknownAttributeError(ApiRecordError):
    def __init__(self, record_type: str, name: str):
        super().__init__(f"unknown attribute '{name}' for {record_type}.")
        self.record_type = record_type
        self.name = name


class RecordInvalidError(ApiRecordError):
    """
    Raised when a record fails validation, either locally before any request
    or remotely through a 422 answer. The record keeps the populated errors.
    """

    def __init__(self, record: Any, response: Optional[ApiResponse] = None):
        self.record = record
        self.response = response
        super().__init__(
            "Validation failed: " + ", ".join(record.errors.full_messages())
        )

    @property
    def errors(self) -> "ErrorList":
        return self.record.errors


class ApiError(ApiRecordError):
    def __init__(
        self, response: Optional[ApiResponse] = None, message: str = "Api error"
    ):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


class TransportError(ApiError):
    """No HTTP status at all: connection refused, DNS failure, protocol error."""

    def __init__(self, message: str):
        super().__init__(None, message)


class ApiTimeoutError(TransportError):
    pass


class ApiParseError(ApiError):
    pass


class HttpClientError(ApiError):
    pass


class HttpServerError(ApiError):
    pass


class ApiNotFound(HttpClientError):
    pass


class ApiInvalidError(HttpClientError):
    pass


__all__ = [
    "ApiRecordError",
    "UnknownAttributeError",
    "RecordInvalidError",
    "ApiError",
    "TransportError",
    "ApiTimeoutError",
    "ApiParseError",
    "HttpClientError",
    "HttpServerError",
    "ApiNotFound",
    "ApiInvalidError",
]
