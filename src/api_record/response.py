from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ApiResponse:
    """
    Transport-neutral capture of one HTTP exchange.
    - body is the parsed JSON document, raw text when the server sent
      something that is not JSON, or None for an empty body (204 etc.)
    """

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    method: Optional[str] = None
    url: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


__all__ = ["ApiResponse"]
