from __future__ import annotations

from typing import Dict, Mapping, Optional

from .naming import underscore

UNKNOWN_ERROR = "unknown_error"
GENERIC_KEY = "api_record.errors.response.{message}"
TYPE_KEY = "api_record.errors.models.{model}.response.{message}"


class MessageCatalog:
    """Flat key -> text lookup with a fallback chain."""

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages: Dict[str, str] = dict(messages or {})

    def translate(self, *keys: str, default: Optional[str] = None) -> str:
        for key in keys:
            if key in self._messages:
                return self._messages[key]
        if default is not None:
            return default
        return keys[-1] if keys else ""


DEFAULT_CATALOG = MessageCatalog(
    {GENERIC_KEY.format(message=UNKNOWN_ERROR): "An unknown error occurred"}
)


def unknown_error_message(
    type_name: str, catalog: Optional[MessageCatalog] = None
) -> str:
    catalog = catalog or DEFAULT_CATALOG
    return catalog.translate(
        TYPE_KEY.format(model=underscore(type_name), message=UNKNOWN_ERROR),
        GENERIC_KEY.format(message=UNKNOWN_ERROR),
        default="Unknown error",
    )


__all__ = ["MessageCatalog", "DEFAULT_CATALOG", "unknown_error_message"]
