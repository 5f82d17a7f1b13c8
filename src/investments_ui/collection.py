"""
State transitions for the loaded investments collection.

Each function takes a CollectionState and returns a new one. Fetches are
tagged with a generation token: begin_load issues a new token, and only a
response carrying the latest token may update the state. A response for
an older fetch that resolves late is discarded.
"""

from dataclasses import replace
from typing import Iterable

from investments_ui.lib import logs
from investments_ui.models.common import CollectionState
from investments_ui.models.investment import Investment

LOG = logs.logger(__file__)


def begin_load(
    state: CollectionState, page_index: int
) -> tuple[CollectionState, int]:
    """
    Mark a fetch of page_index as outstanding.

    Returns:
        The loading state and the token identifying this fetch.
    """
    token = state.generation + 1
    loading = replace(
        state, page_index=page_index, loading=True, error=None, generation=token
    )
    return loading, token


def is_current(state: CollectionState, token: int) -> bool:
    """Whether token belongs to the most recently issued fetch."""
    return token == state.generation


def finish_load(
    state: CollectionState, token: int, items: Iterable[Investment]
) -> CollectionState:
    """Replace the loaded items with a fetch response, unless it is stale."""
    if not is_current(state, token):
        LOG.debug(
            "Discarding stale response - token:%s current:%s", token, state.generation
        )
        return state
    return replace(state, items=tuple(items), loading=False, error=None)


def fail_load(state: CollectionState, token: int, message: str) -> CollectionState:
    """
    Record a failed fetch, unless it is stale.

    The previous items are kept; has_usable_page() reports them unusable.
    """
    if not is_current(state, token):
        LOG.debug(
            "Discarding stale failure - token:%s current:%s", token, state.generation
        )
        return state
    return replace(state, loading=False, error=message)


def remove_locally(state: CollectionState, investment_id: int) -> CollectionState:
    """
    Drop an investment after its remote deletion succeeded.

    The page is not re-fetched, so the hole is not backfilled.
    """
    items = tuple(inv for inv in state.items if inv.id != investment_id)
    return replace(state, items=items)


def has_usable_page(state: CollectionState) -> bool:
    """An error hides the collection, even when stale items are still held."""
    return state.error is None
