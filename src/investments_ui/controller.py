"""
Framework independent binding between user input and the collection core.

InvestmentsController owns one CollectionState and one FilterState and
turns user events into state transitions:

- page changes fetch the matching remote page (page N -> remote index N-1)
- filter changes reset the page to 1, which fetches when the page moved
- deletes hit the remote service first, then drop the record locally

Every operation that can fail returns a Notification for the view to show
instead of raising. The derived PageView is recomputed on access and never
performs I/O.
"""

import os

from investments_ui import pagination
from investments_ui.collection import (
    begin_load,
    fail_load,
    finish_load,
    has_usable_page,
    is_current,
    remove_locally,
)
from investments_ui.filtering import filter_investments
from investments_ui.lib import logs
from investments_ui.models.common import (
    CollectionState,
    FilterState,
    Notification,
    PageView,
)
from investments_ui.models.investment import InvestmentPage
from investments_ui.services import get_investment_service
from investments_ui.services.investment_service import InvestmentService, TransportError

LOG = logs.logger(__file__)

PAGE_SIZE = int(os.getenv("INVESTMENTS_UI_PAGE_SIZE", "5"))

CREATE_ROUTE = "/investments/new"
EDIT_ROUTE = "/investments/edit/{id}"

LOAD_ERROR_MESSAGE = "Erro ao carregar investimentos"
DELETE_SUCCESS_MESSAGE = "Investimento excluído com sucesso"
DELETE_ERROR_MESSAGE = "Erro ao excluir investimento"


class InvestmentsController:
    """
    Holds the investments view state and reacts to user events.

    Attributes:
        collection: The loaded remote page and its fetch status.
        filters: The active type and search filters.
    """

    def __init__(
        self,
        service: InvestmentService | None = None,
        page_size: int = PAGE_SIZE,
        service_kind: str | None = None,
    ) -> None:
        """
        Initialize an empty controller.

        Args:
            service: Service to use, or None to resolve it from the factory.
            page_size: Records per page, for both remote and local pagination.
            service_kind: Factory kind used when no service is given.
        """
        self._service = service
        self._service_kind = service_kind
        self.collection = CollectionState(page_size=page_size)
        self.filters = FilterState()

    @property
    def service(self) -> InvestmentService:
        if self._service is not None:
            return self._service
        return get_investment_service(self._service_kind)

    @property
    def page_index(self) -> int:
        return self.collection.page_index

    @property
    def page_size(self) -> int:
        return self.collection.page_size

    @property
    def loading(self) -> bool:
        return self.collection.loading

    @property
    def error(self) -> str | None:
        return self.collection.error

    @property
    def blocked(self) -> bool:
        """True when an error hides the collection."""
        return not has_usable_page(self.collection)

    @property
    def view(self) -> PageView:
        """The filtered and paginated slice of the loaded page."""
        filtered = filter_investments(self.collection.items, self.filters)
        return pagination.paginate(filtered, self.page_index, self.page_size)

    def begin_load(self, page_index: int) -> int:
        """Start a fetch of page_index and return its token."""
        if page_index < 1:
            raise ValueError(f"page_index must be >= 1: {page_index}")
        self.collection, token = begin_load(self.collection, page_index)
        return token

    def finish_load(self, token: int, page: InvestmentPage) -> None:
        self.collection = finish_load(self.collection, token, page.items)

    def fail_load(self, token: int, exc: Exception) -> Notification | None:
        """Record a failed fetch; stale failures produce no notification."""
        if not is_current(self.collection, token):
            LOG.debug("Ignoring failure of stale fetch - token:%s", token)
            return None
        # Transport failures are expected; anything else gets a traceback
        LOG.error(
            "Failed to load investments page %s: %s",
            self.page_index,
            exc,
            exc_info=not isinstance(exc, TransportError),
        )
        self.collection = fail_load(self.collection, token, LOAD_ERROR_MESSAGE)
        return Notification.error(LOAD_ERROR_MESSAGE)

    async def fetch_page(self, page_index: int) -> InvestmentPage:
        """Request remote page page_index - 1 without touching any state."""
        return await self.service.fetch_page(page_index - 1, self.page_size)

    async def load(self, page_index: int) -> Notification | None:
        """
        Fetch remote page page_index - 1 and replace the loaded investments.

        Every failure, including an unresolvable service, ends the load with
        the error state.

        Returns:
            An error notification when the fetch failed, None otherwise.
        """
        token = self.begin_load(page_index)
        LOG.info("Load Started - page:%s token:%s", page_index, token)
        try:
            page = await self.fetch_page(page_index)
        except Exception as exc:
            return self.fail_load(token, exc)
        self.finish_load(token, page)
        LOG.info("Load Complete - page:%s items:%s", page_index, len(page.items))
        return None

    def needs_fetch(self, page_index: int) -> bool:
        """A fetch only happens when the requested page actually changes."""
        return page_index != self.page_index

    def next_target(self) -> int:
        """Page reached by "next", clamped to the client pages."""
        return pagination.next_page(self.page_index, self.view.total_pages)

    def previous_target(self) -> int:
        return pagination.previous_page(self.page_index)

    def apply_search(self, search: str) -> bool:
        """
        Update the name search without fetching.

        Returns:
            True when going back to page 1 requires a fetch.
        """
        self.filters = FilterState(type=self.filters.type, search=search)
        return self.needs_fetch(1)

    def apply_type(self, investment_type: str) -> bool:
        """Update the type filter without fetching; see apply_search."""
        self.filters = FilterState(type=investment_type, search=self.filters.search)
        return self.needs_fetch(1)

    async def change_page(self, page_index: int) -> Notification | None:
        """Move to page_index, fetching its remote page if the page changed."""
        if not self.needs_fetch(page_index):
            return None
        return await self.load(page_index)

    async def next_page(self) -> Notification | None:
        return await self.change_page(self.next_target())

    async def previous_page(self) -> Notification | None:
        return await self.change_page(self.previous_target())

    async def set_search(self, search: str) -> Notification | None:
        """Update the name search and go back to the first page."""
        self.apply_search(search)
        return await self.change_page(1)

    async def set_type(self, investment_type: str) -> Notification | None:
        """Update the type filter and go back to the first page."""
        self.apply_type(investment_type)
        return await self.change_page(1)

    async def clear_filters(self) -> Notification | None:
        self.filters = FilterState()
        return await self.change_page(1)

    async def delete(self, investment_id: int) -> Notification:
        """
        Delete an investment remotely, then remove it from the loaded page.

        Any failure, expected or not, leaves the local state untouched and is
        reported through the error notification.
        """
        try:
            await self.service.delete_investment(investment_id)
        except Exception:
            LOG.error("Failed to delete investment %s", investment_id, exc_info=True)
            return Notification.error(DELETE_ERROR_MESSAGE)
        self.collection = remove_locally(self.collection, investment_id)
        return Notification.success(DELETE_SUCCESS_MESSAGE)

    @staticmethod
    def edit_route(investment_id: int) -> str:
        """Route of the edit screen for an investment."""
        return EDIT_ROUTE.format(id=investment_id)
