"""
Reflex state management for the Investments UI application.

InvestmentsState mirrors an InvestmentsController into Reflex vars and
forwards page, filter, edit and delete events to it. RegisterState submits
the registration form to the auth endpoint.
"""

from typing import AsyncGenerator

import reflex as rx

from investments_ui.controller import CREATE_ROUTE, InvestmentsController
from investments_ui.lib import logs
from investments_ui.models.common import Notification, Registration
from investments_ui.models.investment import INVESTMENT_TYPES
from investments_ui.models.reflex_models import investment_to_row
from investments_ui.services import get_investment_service
from investments_ui.services.investment_service import TransportError

LOG = logs.logger(__file__)

# Radix selects reserve the empty value, so "all types" gets its own label
ALL_TYPES = "Todos os Tipos"
TYPE_OPTIONS = [ALL_TYPES, *INVESTMENT_TYPES]

REGISTER_SUCCESS_MESSAGE = "Usuário cadastrado com sucesso"
REGISTER_ERROR_MESSAGE = "Erro ao cadastrar usuário"


def _toast(notification: Notification | None):
    """Map a controller notification to a toast event."""
    if notification is None:
        return None
    if notification.level == "success":
        return rx.toast.success(notification.message)
    return rx.toast.error(notification.message)


class InvestmentsState(rx.State):
    """
    Main state of the investments page.

    Public vars are a read-only projection of the backend controller and are
    refreshed with _sync() after every event.
    """

    rows: list[dict[str, str]] = []
    loading: bool = True
    error: str = ""

    search: str = ""
    type_filter: str = ALL_TYPES

    current_page: int = 1
    total_pages: int = 0
    page_label: str = ""
    show_pagination: bool = False
    has_previous: bool = False
    has_next: bool = False

    _controller: InvestmentsController | None = None

    @rx.var
    def is_empty(self) -> bool:
        """Check if the empty table row should be shown."""
        return len(self.rows) == 0

    @rx.event(background=True)
    async def on_load(self):
        """Fetch the current page when the page is opened."""
        async with self:
            page_index = self._get_controller().page_index
        return _toast(await self._load(page_index))

    @rx.event
    def retry(self):
        """Fetch the current page again after a failure."""
        return InvestmentsState.on_load

    @rx.event(background=True)
    async def next_page(self):
        async with self:
            controller = self._get_controller()
            target = controller.next_target()
            if not controller.needs_fetch(target):
                return None
        return _toast(await self._load(target))

    @rx.event(background=True)
    async def previous_page(self):
        async with self:
            controller = self._get_controller()
            target = controller.previous_target()
            if not controller.needs_fetch(target):
                return None
        return _toast(await self._load(target))

    @rx.event(background=True)
    async def update_search(self, search: str):
        """Event handler for search text changes."""
        async with self:
            self.search = search
            needs_fetch = self._get_controller().apply_search(search)
            self._sync()
        if needs_fetch:
            return _toast(await self._load(1))
        return None

    @rx.event(background=True)
    async def update_type_filter(self, value: str):
        """Event handler for the type select."""
        async with self:
            self.type_filter = value
            controller = self._get_controller()
            needs_fetch = controller.apply_type("" if value == ALL_TYPES else value)
            self._sync()
        if needs_fetch:
            return _toast(await self._load(1))
        return None

    @rx.event
    async def delete_investment(self, investment_id: str):
        """Delete an investment and report the outcome."""
        notification = await self._get_controller().delete(int(investment_id))
        self._sync()
        return _toast(notification)

    @rx.event
    def edit_investment(self, investment_id: str):
        return rx.redirect(InvestmentsController.edit_route(int(investment_id)))

    @rx.event
    def create_investment(self):
        return rx.redirect(CREATE_ROUTE)

    async def _load(self, page_index: int) -> Notification | None:
        """
        Fetch page_index from a background event.

        The state lock is held only while the controller changes, so a newer
        load may start while this fetch is awaited. The controller's fetch
        token then discards whichever response is stale.
        """
        async with self:
            controller = self._get_controller()
            token = controller.begin_load(page_index)
            self._sync()
        try:
            page = await controller.fetch_page(page_index)
        except Exception as e:
            async with self:
                notification = self._get_controller().fail_load(token, e)
                self._sync()
            return notification
        async with self:
            self._get_controller().finish_load(token, page)
            self._sync()
        return None

    def _get_controller(self) -> InvestmentsController:
        if self._controller is None:
            self._controller = InvestmentsController()
        return self._controller

    def _sync(self) -> None:
        """Copy the controller state and its derived page view into vars."""
        controller = self._get_controller()
        view = controller.view
        self.rows = [investment_to_row(inv) for inv in view.items]
        self.loading = controller.loading
        self.error = controller.error or ""
        self.current_page = view.current_page
        self.total_pages = view.total_pages
        self.page_label = view.label
        self.show_pagination = view.show_pagination
        self.has_previous = view.has_previous
        self.has_next = view.has_next
        # Reassign so Reflex persists the mutated backend object
        self._controller = controller


class RegisterState(rx.State):
    """State of the registration form."""

    is_loading: bool = False

    @rx.event
    async def handle_submit(self, form_data: dict) -> AsyncGenerator:
        """
        Post the submitted credentials to the auth endpoint.

        Args:
            form_data: Form values keyed by input name.
        """
        registration = Registration(
            username=form_data.get("username", ""),
            password=form_data.get("password", ""),
        )
        self.is_loading = True
        yield
        try:
            await get_investment_service().register_user(registration)
        except TransportError as e:
            LOG.error("Registration failed: %s", e)
            self.is_loading = False
            yield rx.toast.error(REGISTER_ERROR_MESSAGE)
            return
        self.is_loading = False
        yield rx.toast.success(REGISTER_SUCCESS_MESSAGE)
