"""
Ordered field -> message multimap attached to every record.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

BASE = "base"


class ErrorList:
    def __init__(self) -> None:
        self._entries: List[Tuple[str, str]] = []

    def add(self, field: str, message: str) -> None:
        self._entries.append((str(field), str(message)))

    def clear(self) -> None:
        self._entries.clear()

    def any(self) -> bool:
        return bool(self._entries)

    def __getitem__(self, field: str) -> List[str]:
        return [msg for name, msg in self._entries if name == field]

    def __contains__(self, field: object) -> bool:
        return any(name == field for name, _ in self._entries)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorList):
            return self._entries == other._entries
        return NotImplemented

    def __repr__(self) -> str:
        return f"ErrorList({self._entries!r})"

    @property
    def fields(self) -> List[str]:
        seen: List[str] = []
        for name, _ in self._entries:
            if name not in seen:
                seen.append(name)
        return seen

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: self[name] for name in self.fields}

    def full_messages(self) -> List[str]:
        return [
            msg if name == BASE else f"{name}: {msg}" for name, msg in self._entries
        ]


__all__ = ["BASE", "ErrorList"]
