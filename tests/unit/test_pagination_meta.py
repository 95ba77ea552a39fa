"""PaginationMeta.build arithmetic."""

import pytest

from timesheet.application.dtos.pagination import Page, PaginationMeta


@pytest.mark.parametrize(
    ("total_items", "limit", "expected_pages"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (150, 100, 2)],
)
def test_total_pages_rounds_up(total_items: int, limit: int, expected_pages: int) -> None:
    meta = PaginationMeta.build(
        total_items=total_items, item_count=0, page=1, limit=limit
    )
    assert meta.total_pages == expected_pages


def test_build_copies_page_and_limit() -> None:
    meta = PaginationMeta.build(total_items=25, item_count=5, page=3, limit=10)
    assert meta == PaginationMeta(
        total_items=25,
        item_count=5,
        items_per_page=10,
        total_pages=3,
        current_page=3,
    )


def test_page_holds_items_and_meta() -> None:
    meta = PaginationMeta.build(total_items=2, item_count=2, page=1, limit=10)
    page = Page(items=["a", "b"], meta=meta)
    assert page.items == ["a", "b"]
    assert page.meta.item_count == 2
