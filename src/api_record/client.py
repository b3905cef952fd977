import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx

from .errors import ApiTimeoutError, TransportError
from .response import ApiResponse

DEFAULT_BASE_URL = "http://localhost:3000"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)


class ApiClient:
    """
    Thin synchronous HTTP client for JSON resources.
    - Handles base URL, timeouts and JSON encode/decode
    - Returns every HTTP answer as an ApiResponse, whatever its status
    - Raises TransportError only when no HTTP answer was received
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = 10.0,
        headers: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("api_record.client")

        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=self.base_url,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                **dict(headers or {}),
            },
            timeout=timeout_seconds,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "ApiClient":
        return cls(
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            headers=config.headers,
            **kwargs,
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        resource: Optional[str] = None,
    ) -> ApiResponse:
        """
        Issue exactly one request; no retries.
        - Raises ApiTimeoutError on connect/read/write/pool timeouts
        - Raises TransportError on any other httpx failure
        """
        method = method.upper()
        start = time.perf_counter()

        try:
            resp = self.http.request(method, path, params=params, json=json)
        except httpx.TimeoutException as exc:
            raise ApiTimeoutError(
                f"Timeout calling {method} {path}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Network error calling {method} {path}: {exc}"
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "op.request",
            extra={
                "resource": resource,
                "method": method,
                "path": path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        return ApiResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=self._parse_body(resp),
            method=method,
            url=str(resp.request.url),
        )

    @staticmethod
    def _parse_body(resp: httpx.Response) -> Any:
        # Empty responses (204 No Content, etc.)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            # Error pages are often HTML; keep a snippet for diagnostics.
            return (resp.text or "")[:500]


__all__ = ["ApiClient", "ClientConfig", "DEFAULT_BASE_URL"]
