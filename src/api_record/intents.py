from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 30


@dataclass(frozen=True)
class RequestIntent:
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    json: Optional[Dict[str, Any]] = None


def item_path(resource_path: str, record_id: Any) -> str:
    return f"{resource_path}/{record_id}"


def build_payload(
    attributes: Mapping[str, Any],
    *,
    id_field: str = "id",
    root_key: Optional[str] = None,
    exclude_none: bool = False,
) -> Dict[str, Any]:
    """
    Write payload for create/update: the identifier is dropped before the
    optional root-key wrapping, so it never leaks into the nested map.
    """
    params = {k: v for k, v in attributes.items() if k != id_field}
    if exclude_none:
        params = {k: v for k, v in params.items() if v is not None}
    if root_key:
        return {root_key: params}
    return params


def find_intent(resource_path: str, record_id: Any) -> RequestIntent:
    return RequestIntent("GET", item_path(resource_path, record_id))


def list_intent(
    resource_path: str, *, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT
) -> RequestIntent:
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")
    return RequestIntent("GET", resource_path, params={"page": page, "limit": limit})


def create_intent(resource_path: str, payload: Dict[str, Any]) -> RequestIntent:
    return RequestIntent("POST", resource_path, json=payload)


def update_intent(
    resource_path: str, record_id: Any, payload: Dict[str, Any]
) -> RequestIntent:
    return RequestIntent("PUT", item_path(resource_path, record_id), json=payload)


def destroy_intent(resource_path: str, record_id: Any) -> RequestIntent:
    return RequestIntent("DELETE", item_path(resource_path, record_id))


__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
    "RequestIntent",
    "build_payload",
    "item_path",
    "find_intent",
    "list_intent",
    "create_intent",
    "update_intent",
    "destroy_intent",
]
