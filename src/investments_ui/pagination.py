"""
Client-side pagination over the filtered investments.

This is a second pagination layer stacked on the remote page that is
currently loaded; it never reaches records outside that page. The stored
page number is not corrected when the filtered set shrinks, so a page past
the last one renders an empty slice.
"""

import math
from typing import Sequence

from investments_ui.models.common import PageView
from investments_ui.models.investment import Investment


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for count items; 0 when there are none."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive: {page_size}")
    return math.ceil(count / page_size)


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Return start/end offsets for the given 1-indexed page."""
    start = (page - 1) * page_size
    return start, start + page_size


def visible_slice(
    items: Sequence[Investment], page: int, page_size: int
) -> tuple[Investment, ...]:
    """Return the items shown on the given page, empty past the end."""
    if page < 1:
        return ()
    start, end = page_bounds(page, page_size)
    return tuple(items[start:end])


def clamp_page(requested: int, pages: int) -> int:
    """Clamp a page request to [1, pages], with 1 as the floor when empty."""
    return min(max(requested, 1), max(pages, 1))


def next_page(current: int, pages: int) -> int:
    return clamp_page(current + 1, pages)


def previous_page(current: int) -> int:
    return max(current - 1, 1)


def paginate(
    filtered: Sequence[Investment], current_page: int, page_size: int
) -> PageView:
    """
    Derive the page view for the filtered investments.

    Pure function: identical inputs always yield an identical PageView.

    Args:
        filtered: Investments that passed the filters.
        current_page: Stored page number (1-indexed), used as is.
        page_size: Number of investments per page.
    """
    return PageView(
        items=visible_slice(filtered, current_page, page_size),
        total_pages=total_pages(len(filtered), page_size),
        current_page=current_page,
        filtered_count=len(filtered),
    )
