from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar, overload

from .intents import DEFAULT_LIMIT, DEFAULT_PAGE
from .response import ApiResponse

T = TypeVar("T")

TOTAL_HEADERS = ("X-Total-Count", "Total")


class IndexCollection(Generic[T]):
    """Ordered page of records plus the response that produced it."""

    def __init__(
        self,
        items: List[T],
        response: ApiResponse,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ):
        self.items = list(items)
        self.response = response
        self.page = page
        self.limit = limit

    @property
    def total(self) -> Optional[int]:
        for name in TOTAL_HEADERS:
            raw = self.response.header(name)
            if raw is None:
                continue
            try:
                return int(raw)
            except ValueError:
                return None
        return None

    @property
    def next_page(self) -> Optional[int]:
        total = self.total
        if total is not None:
            return self.page + 1 if self.page * self.limit < total else None
        return self.page + 1 if len(self.items) >= self.limit else None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self) -> str:
        return (
            f"<IndexCollection page={self.page} limit={self.limit} "
            f"items={len(self.items)} total={self.total}>"
        )


__all__ = ["IndexCollection"]
