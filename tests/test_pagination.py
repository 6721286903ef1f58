"""
Tests for page requests, pages and in-memory sorting.
"""
from types import SimpleNamespace

import pytest

from hrapp.core.pagination import InvalidPageRequest, Page, PageRequest, sort_items


class TestPageRequest:

    def test_defaults(self):
        request = PageRequest()
        assert (request.page, request.size, request.sort) == (0, 20, [])
        assert request.offset == 0

    def test_offset(self):
        assert PageRequest(page=3, size=25).offset == 75

    @pytest.mark.parametrize("page,size", [(-1, 10), (0, 0)])
    def test_rejects_invalid_bounds(self, page, size):
        with pytest.raises(InvalidPageRequest):
            PageRequest(page=page, size=size)

    def test_sort_orders(self):
        request = PageRequest(sort=["job_title,desc", "id", " min_salary , ASC "])
        assert request.sort_orders() == [("job_title", True), ("id", False), ("min_salary", False)]

    def test_blank_sort_expressions_are_skipped(self):
        assert PageRequest(sort=["", " , "]).sort_orders() == []

    def test_rejects_unknown_direction(self):
        with pytest.raises(InvalidPageRequest, match="sideways"):
            PageRequest(sort=["id,sideways"]).sort_orders()


class TestPage:

    def test_of_slices(self):
        page = Page.of(range(10), PageRequest(page=1, size=4))
        assert page.content == [4, 5, 6, 7]
        assert page.total_elements == 10
        assert page.total_pages == 3

    def test_of_past_the_end(self):
        page = Page.of([1, 2], PageRequest(page=2, size=5))
        assert page.content == []
        assert page.total_pages == 1

    def test_map_keeps_metadata(self):
        page = Page(content=[1, 2], page=1, size=2, total_elements=5).map(str)
        assert page == Page(content=["1", "2"], page=1, size=2, total_elements=5)

    def test_empty_page_has_no_pages(self):
        assert Page(content=[], page=0, size=20, total_elements=0).total_pages == 0


class TestSortItems:

    @pytest.fixture
    def items(self):
        return [
            SimpleNamespace(id=1, name="b", salary=None),
            SimpleNamespace(id=2, name="a", salary=300),
            SimpleNamespace(id=3, name="b", salary=100),
        ]

    def test_single_field(self, items):
        assert [item.id for item in sort_items(items, [("salary", False)])] == [3, 2, 1]

    def test_missing_values_last_when_descending(self, items):
        assert [item.id for item in sort_items(items, [("salary", True)])] == [2, 3, 1]

    def test_multiple_fields(self, items):
        orders = [("name", True), ("salary", False)]
        assert [item.id for item in sort_items(items, orders)] == [3, 1, 2]

    def test_no_orders_keeps_input_order(self, items):
        assert sort_items(items, []) == items

    def test_custom_key(self):
        rows = [{"v": 2}, {"v": 1}]
        assert sort_items(rows, [("v", False)], key=lambda row, name: row[name]) == [{"v": 1}, {"v": 2}]
