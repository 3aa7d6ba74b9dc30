import pytest

from directory.search import PAGE_SIZE, clamp_page, filter_students, paginate, search, total_pages
from directory.state import DirectoryState


class TestFilterStudents:
    """Test case-insensitive substring filtering across all fields."""

    def test_empty_query_returns_everything_in_order(self, students):
        """Test that "" keeps every record and the original order."""
        result = filter_students(students, "")
        assert result == list(students)

    def test_matches_are_case_insensitive(self, students):
        """Test that query case does not matter."""
        assert filter_students(students, "BIOLOGY") == filter_students(students, "biology")

    def test_every_match_has_a_matching_field(self, students):
        """Test that included records match and excluded records don't."""
        query = "person01"
        result = filter_students(students, query)
        assert result
        for s in students:
            hit = any(query in v.lower() for v in s.field_values())
            assert (s in result) == hit

    def test_matches_any_field(self, students):
        """Test that id, email and phone are all searchable."""
        assert [s.id for s in filter_students(students, "uuid-007")] == ["uuid-007"]
        assert [s.id for s in filter_students(students, "person042@")] == ["uuid-042"]
        assert [s.id for s in filter_students(students, "000-0013")] == ["uuid-013"]

    def test_order_is_preserved(self, students):
        """Test that the filtered list keeps input relative order."""
        result = filter_students(students, "psychology")
        ids = [s.id for s in result]
        assert ids == sorted(ids)

    def test_no_matches_is_empty_not_error(self, students):
        """Test that an unmatched query returns an empty list."""
        assert filter_students(students, "zzz-no-such-student") == []

    def test_engineering_scenario(self, students):
        """Test that "engineering" matches exactly the Engineering majors."""
        result = filter_students(students, "engineering")
        expected = [s for s in students if s.major == "Engineering"]
        assert result == expected
        assert len(result) == 13


class TestPaginate:
    """Test page slicing and page-count rules."""

    def test_total_pages_floor_is_one(self):
        """Test that an empty result still has one page."""
        assert total_pages(0) == 1

    @pytest.mark.parametrize("count, pages", [(1, 1), (12, 1), (13, 2), (50, 5)])
    def test_total_pages(self, count, pages):
        assert total_pages(count, 12) == pages

    def test_clamp_page(self):
        assert clamp_page(0, 3) == 1
        assert clamp_page(2, 3) == 2
        assert clamp_page(9, 3) == 3

    def test_page_lengths(self, students):
        """Test that each page holds min(size, remaining) records."""
        for page in range(1, total_pages(len(students)) + 1):
            result = paginate(students, page)
            expected = min(PAGE_SIZE, len(students) - (page - 1) * PAGE_SIZE)
            assert len(result.items) == expected

    def test_last_page_is_partial(self, students):
        result = paginate(students, 5)
        assert [s.id for s in result.items] == [f"uuid-{i:03d}" for i in range(48, 50)]
        assert result.has_prev() and not result.has_next()

    def test_empty_collection(self):
        """Test that page 1 of nothing is empty with pages == 1."""
        result = paginate([], 1)
        assert result.items == []
        assert result.pages == 1
        assert result.page == 1
        assert not result.has_next() and not result.has_prev()

    def test_out_of_range_page_is_clamped(self, students):
        assert paginate(students, 99).page == 5
        assert paginate(students, -3).page == 1

    def test_search_filters_then_paginates(self, students):
        """Test the engineering scenario on page 1."""
        result = search(students, "Engineering", page=1)
        expected = [s for s in students if s.major == "Engineering"][:12]
        assert result.items == expected
        assert result.total == 13
        assert result.pages == 2


class TestDirectoryState:
    """Test view-state transitions."""

    def test_query_change_resets_page(self, students):
        """Test that a new query lands on page 1 in the same state."""
        state = DirectoryState.loaded(students).go_to(4)
        assert state.current_page == 4

        state = state.with_query("biology")
        assert state.page == 1
        assert state.visible.page == 1

    def test_next_and_prev_are_clamped(self, students):
        state = DirectoryState.loaded(students)
        assert state.prev_page().page == 1

        for _ in range(10):
            state = state.next_page()
        assert state.page == 5

    def test_current_page_recomputed_from_filter(self, students):
        """Test that page stays in range if the collection shrinks under it."""
        state = DirectoryState(students=tuple(students), page=5, query="uuid-001")
        assert state.total_pages == 1
        assert state.current_page == 1

    def test_empty_state(self):
        state = DirectoryState()
        assert state.filtered == []
        assert state.total_pages == 1
        assert state.visible.items == []

    def test_single_selection(self, students):
        """Test that a new selection replaces the previous one."""
        state = DirectoryState.loaded(students).select("uuid-003").select("uuid-009")
        assert state.selected == students[9]
        assert state.clear_selection().selected is None

    def test_unknown_selection_is_none(self, students):
        assert DirectoryState.loaded(students).select("missing").selected is None

    def test_states_are_immutable(self, students):
        """Test that transitions leave the original state untouched."""
        state = DirectoryState.loaded(students)
        state.with_query("x").next_page().select("uuid-001")
        assert state.query == "" and state.page == 1 and state.selected_id is None


class TestStudent:
    def test_initials(self, make_student):
        assert make_student(1, name="Jane Doe").initials == "JD"
        assert make_student(1, name="Ana María  López").initials == "AML"

    def test_field_values_cover_every_field(self, make_student):
        values = make_student(7, major="Engineering").field_values()
        assert len(values) == 9
        assert "Engineering" in values
        assert "uuid-007" in values
