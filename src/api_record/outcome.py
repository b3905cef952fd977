"""
Status classification shared by type-level reads and record-level writes,
plus the tagged result the lifecycle core hands to its soft/hard wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import (
    ApiError,
    ApiInvalidError,
    ApiNotFound,
    HttpClientError,
    HttpServerError,
    RecordInvalidError,
)
from .response import ApiResponse


class Outcome(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    UNPROCESSABLE = "unprocessable"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    OTHER_ERROR = "other_error"
    # Local validation failed; no request was sent.
    INVALID = "invalid"


def classify(status_code: int) -> Outcome:
    if 200 <= status_code < 300:
        return Outcome.SUCCESS
    if status_code == 404:
        return Outcome.NOT_FOUND
    if status_code == 422:
        return Outcome.UNPROCESSABLE
    if 400 <= status_code <= 499:
        return Outcome.CLIENT_ERROR
    if 500 <= status_code <= 599:
        return Outcome.SERVER_ERROR
    return Outcome.OTHER_ERROR


@dataclass(frozen=True)
class Result:
    outcome: Outcome
    response: Optional[ApiResponse] = None
    # Set when the transport failed before any status was received.
    error: Optional[ApiError] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @classmethod
    def from_response(cls, response: ApiResponse) -> "Result":
        return cls(classify(response.status_code), response=response)

    @classmethod
    def from_transport_error(cls, error: ApiError) -> "Result":
        return cls(Outcome.OTHER_ERROR, error=error)


def error_for(result: Result, record: Any = None) -> Exception:
    """
    Map a failed result to the exception the hard variants raise.
    With a record, 422 becomes RecordInvalidError; without one (type-level
    reads) it becomes ApiInvalidError.
    """
    response = result.response
    outcome = result.outcome
    if outcome is Outcome.SUCCESS:
        raise ValueError("error_for() called with a successful result")
    if outcome is Outcome.INVALID:
        return RecordInvalidError(record)
    if outcome is Outcome.UNPROCESSABLE:
        if record is not None:
            return RecordInvalidError(record, response)
        return ApiInvalidError(response, "Invalid data")
    if outcome is Outcome.NOT_FOUND:
        return ApiNotFound(response, "Record not found")
    if outcome is Outcome.CLIENT_ERROR:
        return HttpClientError(response, "Client error")
    if outcome is Outcome.SERVER_ERROR:
        return HttpServerError(response, "Server error")
    if result.error is not None:
        return result.error
    return ApiError(response, "Api error")


def raise_for_result(result: Result, record: Any = None) -> None:
    if not result.ok:
        raise error_for(result, record)


__all__ = ["Outcome", "classify", "Result", "error_for", "raise_for_result"]
