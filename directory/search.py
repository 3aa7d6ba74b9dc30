"""
Filter + paginate pipeline over an in-memory student collection.

A record matches a query when any field contains it as a case-insensitive
substring. The empty query matches everything. Order is always preserved.

Pages are 1-based and never fewer than one, so an empty result is shown as
"Page 1 of 1" with no items rather than "Page 1 of 0".

Public API:
    filter_students(students, query) → list[Student]
    paginate(records, page, page_size) → Page
    search(students, query, page, page_size) → Page
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from directory.models import Student

PAGE_SIZE = 12


@dataclass(frozen=True)
class Page:
    """A single page of students plus metadata."""

    items: list[Student]
    total: int       # records in the whole filtered result
    pages: int       # always >= 1
    page: int        # 1-based, within [1, pages]
    per_page: int

    def has_next(self) -> bool:
        return self.page < self.pages

    def has_prev(self) -> bool:
        return self.page > 1


def filter_students(students: Sequence[Student], query: str) -> list[Student]:
    if not query:
        return list(students)
    needle = query.lower()
    return [
        s for s in students
        if any(needle in value.lower() for value in s.field_values())
    ]


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(page, pages))


def paginate(records: Sequence[Student], page: int, page_size: int = PAGE_SIZE) -> Page:
    """Slice out page `page`; out-of-range pages are clamped, never an error."""
    pages = total_pages(len(records), page_size)
    page = clamp_page(page, pages)
    start = (page - 1) * page_size
    return Page(
        items=list(records[start:start + page_size]),
        total=len(records),
        pages=pages,
        page=page,
        per_page=page_size,
    )


def search(
    students: Sequence[Student],
    query: str = "",
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> Page:
    return paginate(filter_students(students, query), page, page_size)
