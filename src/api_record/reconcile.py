"""
Folding server answers back into a record: successful bodies become
attributes, 422 bodies become field errors.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from .error_list import BASE
from .messages import unknown_error_message
from .naming import underscore
from .response import ApiResponse


def deep_transform_keys(value: Any, transform: Callable[[str], str]) -> Any:
    if isinstance(value, Mapping):
        return {
            (transform(k) if isinstance(k, str) else k): deep_transform_keys(
                v, transform
            )
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [deep_transform_keys(v, transform) for v in value]
    return value


def normalize_keys(value: Any) -> Any:
    """Recursively underscore every mapping key (camelCase -> camel_case)."""
    return deep_transform_keys(value, underscore)


def reconcile(record: Any, body: Any) -> Dict[str, Any]:
    """
    Merge a success body into the record's attribute store.
    Empty or non-object bodies (204 on destroy, plain text) are a no-op.
    Returns the normalized attributes that were applied.
    """
    if not body or not isinstance(body, Mapping):
        return {}
    normalized = normalize_keys(body)
    return record.merge_attributes(normalized)


def collect_errors(record: Any, response: ApiResponse) -> None:
    """
    Record a general error for a 422 answer and, when the body is a
    field -> [message, ...] mapping, every field message on top of it.
    """
    record.errors.add(
        BASE, unknown_error_message(type(record).__name__, record.config.messages)
    )
    body = response.body
    if not isinstance(body, Mapping):
        return
    for field, details in body.items():
        if isinstance(details, (list, tuple)):
            for message in details:
                record.errors.add(field, message)
        elif details is not None:
            record.errors.add(field, details)


__all__ = ["deep_transform_keys", "normalize_keys", "reconcile", "collect_errors"]
