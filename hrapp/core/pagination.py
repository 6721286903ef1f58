"""
Pagination primitives shared by repositories, search backends and services.

A ``PageRequest`` is zero-based and may carry sort expressions of the
form ``"field,asc"`` or ``"field,desc"``. A ``Page`` is one slice of a
larger result together with the total element count.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, Tuple, TypeVar

T = TypeVar('T')
R = TypeVar('R')


class InvalidPageRequest(ValueError):
    """Raised for malformed paging or sorting parameters."""


@dataclass
class PageRequest:
    """Requested slice of a result set."""
    page: int = 0
    size: int = 20
    sort: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.page < 0:
            raise InvalidPageRequest("Page index must not be negative")
        if self.size < 1:
            raise InvalidPageRequest("Page size must be at least 1")

    @property
    def offset(self) -> int:
        return self.page * self.size

    def sort_orders(self) -> List[Tuple[str, bool]]:
        """Parse sort expressions into ``(field, descending)`` pairs."""
        orders = []
        for expression in self.sort:
            parts = [part.strip() for part in expression.split(",") if part.strip()]
            if not parts:
                continue
            direction = parts[1].lower() if len(parts) > 1 else "asc"
            if direction not in ("asc", "desc"):
                raise InvalidPageRequest(f"Invalid sort direction: {parts[1]}")
            orders.append((parts[0], direction == "desc"))
        return orders


@dataclass
class Page(Generic[T]):
    """One page of results."""
    content: List[T]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size > 0 else 0

    def map(self, func: Callable[[T], R]) -> 'Page[R]':
        """Convert every element, keeping the paging metadata."""
        return Page(
            content=[func(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )

    @classmethod
    def of(cls, items: Iterable[T], page_request: PageRequest) -> 'Page[T]':
        """Slice an already materialized, ordered sequence."""
        items = list(items)
        start = page_request.offset
        return cls(
            content=items[start:start + page_request.size],
            page=page_request.page,
            size=page_request.size,
            total_elements=len(items),
        )


def sort_items(items: Iterable[T], orders: List[Tuple[str, bool]], key: Callable[[T, str], Any] = getattr) -> List[T]:
    """
    Sort materialized items by several fields.

    Missing values sort last regardless of direction.
    """
    result = list(items)
    # Stable sorts applied from the least significant order
    for name, descending in reversed(orders):
        present = [item for item in result if key(item, name) is not None]
        missing = [item for item in result if key(item, name) is None]
        present.sort(key=lambda item: key(item, name), reverse=descending)
        result = present + missing
    return result
