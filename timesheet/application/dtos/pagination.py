"""Pagination result types shared by list use cases."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationMeta:
    """Page metadata: total items, items on this page, page size, page count, current page (1-based)."""

    total_items: int
    item_count: int
    items_per_page: int
    total_pages: int
    current_page: int

    @classmethod
    def build(cls, *, total_items: int, item_count: int, page: int, limit: int) -> "PaginationMeta":
        total_pages = math.ceil(total_items / limit) if limit > 0 else 0
        return cls(
            total_items=total_items,
            item_count=item_count,
            items_per_page=limit,
            total_pages=total_pages,
            current_page=page,
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items with its metadata."""

    items: list[T]
    meta: PaginationMeta
