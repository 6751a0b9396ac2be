"""Client-side pagination over already fetched lists."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from app.core.constants import DEFAULT_PAGE_SIZE, MAX_VISIBLE_PAGES, PAGE_GAP

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total: int

    @property
    def page_count(self) -> int:
        return page_count(self.total, self.page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count


def page_count(total: int, page_size: int) -> int:
    """ceil(total / page_size); zero items means zero pages."""
    if page_size < 1:
        raise ValueError("page_size must be positive")
    return math.ceil(max(total, 0) / page_size)


def paginate(items: Sequence[T], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """Slice one page out of ``items``.

    The page number is clamped to [1, page_count] so a stale page index
    after a filter change still shows data.
    """
    total = len(items)
    pages = page_count(total, page_size)
    current = min(max(page, 1), max(pages, 1))
    start = (current - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        page=current,
        page_size=page_size,
        total=total,
    )


def page_numbers(page: int, pages: int, max_visible: int = MAX_VISIBLE_PAGES) -> list[int | str]:
    """Page buttons with ``...`` gaps, e.g. [1, '...', 4, 5, 6, 7, 8, '...', 20]."""
    if pages <= max_visible:
        return list(range(1, pages + 1))

    start = max(1, page - max_visible // 2)
    end = min(pages, start + max_visible - 1)
    if end - start + 1 < max_visible:
        start = max(1, end - max_visible + 1)

    numbers: list[int | str] = []
    if start > 1:
        numbers.append(1)
        if start > 2:
            numbers.append(PAGE_GAP)
    numbers.extend(range(start, end + 1))
    if end < pages:
        if end < pages - 1:
            numbers.append(PAGE_GAP)
        numbers.append(pages)
    return numbers
