"""
Client-side filtering of the loaded investments page.

A record passes when both predicates hold:

- type: the filter is empty, or the record type equals it exactly
- search: the filter is empty, or it is a substring of the record name,
  both sides lower-cased

No other normalization is applied (no trimming, no accent folding), so
"apê" matches "Apê Centro" but "ape" does not.
"""

from typing import Iterable

from investments_ui.models.common import FilterState
from investments_ui.models.investment import Investment


def matches_filters(investment: Investment, filters: FilterState) -> bool:
    """
    Check if an investment passes the type and search filters.

    Args:
        investment: Investment to check.
        filters: Active filter inputs.

    Returns:
        True if the investment satisfies both predicates.
    """
    matches_type = not filters.type or investment.type == filters.type
    matches_search = (
        not filters.search or filters.search.lower() in investment.name.lower()
    )
    return matches_type and matches_search


def filter_investments(
    investments: Iterable[Investment], filters: FilterState
) -> list[Investment]:
    """Return the investments passing the filters, in their original order."""
    return [inv for inv in investments if matches_filters(inv, filters)]
