"""
View state for the student grid: collection, query, page and selection.

Each transition returns a new DirectoryState. The filtered list, page count
and visible slice are recomputed from the state on access, so a query change
and its page reset always land in the same update.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from directory.models import Student
from directory.search import PAGE_SIZE, Page, clamp_page, filter_students, paginate, total_pages


@dataclass(frozen=True)
class DirectoryState:
    students: tuple[Student, ...] = field(default_factory=tuple)
    query: str = ""
    page: int = 1
    selected_id: str | None = None
    page_size: int = PAGE_SIZE

    @classmethod
    def loaded(cls, students: Sequence[Student]) -> "DirectoryState":
        return cls(students=tuple(students))

    # --- derived -----------------------------------------------------------

    @property
    def filtered(self) -> list[Student]:
        return filter_students(self.students, self.query)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered), self.page_size)

    @property
    def current_page(self) -> int:
        return clamp_page(self.page, self.total_pages)

    @property
    def visible(self) -> Page:
        return paginate(self.filtered, self.page, self.page_size)

    @property
    def selected(self) -> Student | None:
        if self.selected_id is None:
            return None
        return next((s for s in self.students if s.id == self.selected_id), None)

    # --- transitions -------------------------------------------------------

    def with_query(self, query: str) -> "DirectoryState":
        return replace(self, query=query, page=1)

    def go_to(self, page: int) -> "DirectoryState":
        return replace(self, page=clamp_page(page, self.total_pages))

    def next_page(self) -> "DirectoryState":
        return self.go_to(self.current_page + 1)

    def prev_page(self) -> "DirectoryState":
        return self.go_to(self.current_page - 1)

    def select(self, student_id: str) -> "DirectoryState":
        return replace(self, selected_id=student_id)

    def clear_selection(self) -> "DirectoryState":
        return replace(self, selected_id=None)
