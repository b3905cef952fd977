"""api_record package exports."""

from .client import ApiClient, ClientConfig
from .collection import IndexCollection
from .config import client_config_from_env, load_env_config
from .error_list import BASE, ErrorList
from .errors import (
    ApiError,
    ApiInvalidError,
    ApiNotFound,
    ApiParseError,
    ApiRecordError,
    ApiTimeoutError,
    HttpClientError,
    HttpServerError,
    RecordInvalidError,
    TransportError,
    UnknownAttributeError,
)
from .messages import DEFAULT_CATALOG, MessageCatalog
from .outcome import Outcome, Result, classify
from .record import ApiRecord, RecordAttributes, RecordConfig
from .response import ApiResponse

__all__ = [
    # Records
    "ApiRecord",
    "RecordAttributes",
    "RecordConfig",
    "IndexCollection",
    "ErrorList",
    "BASE",
    # Transport
    "ApiClient",
    "ApiResponse",
    "ClientConfig",
    "client_config_from_env",
    "load_env_config",
    # Outcomes
    "Outcome",
    "Result",
    "classify",
    # Messages
    "MessageCatalog",
    "DEFAULT_CATALOG",
    # Exceptions
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
