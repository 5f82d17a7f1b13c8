"""Pagination — tests for the client-side page computation.

Tests cover:
    - Total page count and the empty set
    - Visible slices, including pages past the end
    - Clamping of navigation requests
    - PageView helpers and purity
"""

import pytest

from investments_ui import pagination
from investments_ui.filtering import filter_investments
from investments_ui.models.common import FilterState
from tests.helpers import make_investment


@pytest.mark.parametrize(
    "count,page_size,expected",
    [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2), (11, 5, 3), (3, 1, 3)],
)
def test_total_pages_is_ceiling(count, page_size, expected):
    assert pagination.total_pages(count, page_size) == expected


def test_total_pages_rejects_non_positive_page_size():
    with pytest.raises(ValueError):
        pagination.total_pages(3, 0)


def test_empty_set_has_no_pages_and_no_controls():
    view = pagination.paginate([], 1, 5)
    assert view.items == ()
    assert view.total_pages == 0
    assert not view.show_pagination


def test_visible_slice_for_second_page():
    records = [make_investment(i) for i in range(1, 8)]
    view = pagination.paginate(records, 2, 5)
    assert [inv.id for inv in view.items] == [6, 7]
    assert view.total_pages == 2
    assert view.show_pagination
    assert view.has_previous
    assert not view.has_next


def test_page_past_the_end_is_empty_and_not_corrected():
    records = [make_investment(i) for i in range(1, 4)]
    view = pagination.paginate(records, 3, 5)
    assert view.items == ()
    assert view.current_page == 3
    assert view.label == "Página 3 de 1"


def test_paginate_is_pure():
    records = [make_investment(i) for i in range(1, 13)]
    assert pagination.paginate(records, 2, 5) == pagination.paginate(records, 2, 5)


@pytest.mark.parametrize(
    "requested,pages,expected",
    [(0, 3, 1), (1, 3, 1), (3, 3, 3), (4, 3, 3), (2, 0, 1)],
)
def test_clamp_page(requested, pages, expected):
    assert pagination.clamp_page(requested, pages) == expected


def test_next_and_previous_are_clamped():
    assert pagination.next_page(2, 2) == 2
    assert pagination.next_page(1, 2) == 2
    assert pagination.previous_page(1) == 1
    assert pagination.previous_page(3) == 2


def test_scenario_type_filter_single_page(loaded_page, tesouro):
    filtered = filter_investments(loaded_page, FilterState(type="Ações"))
    view = pagination.paginate(filtered, 1, 5)
    assert view.items == (tesouro,)
    assert view.total_pages == 1
    assert view.filtered_count == 1
