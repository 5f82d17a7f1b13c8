"""Shared builders and fake services for the tests."""

import asyncio
from datetime import date
from typing import Sequence

from investments_ui.models.common import Registration
from investments_ui.models.investment import Investment, InvestmentPage
from investments_ui.services.investment_service import InvestmentService, TransportError


def make_investment(
    investment_id: int,
    name: str = "Tesouro",
    investment_type: str = "Ações",
    amount: float = 1000.0,
) -> Investment:
    """Build an investment with sensible defaults."""
    return Investment(
        id=investment_id,
        name=name,
        type=investment_type,
        amount=amount,
        date=date(2024, 1, investment_id % 28 + 1),
    )


class StaticPageService(InvestmentService):
    """Returns the same records for every page and counts calls."""

    def __init__(self, items: Sequence[Investment], fail_fetch: bool = False) -> None:
        self.items = list(items)
        self.fail_fetch = fail_fetch
        self.fetches: list[tuple[int, int]] = []
        self.deletes: list[int] = []
        self.delete_error: Exception | None = None
        self.fetch_error: Exception | None = None

    async def fetch_page(self, page: int, size: int) -> InvestmentPage:
        self.fetches.append((page, size))
        if self.fetch_error is not None:
            raise self.fetch_error
        if self.fail_fetch:
            raise TransportError("GET /investments returned an error", 500)
        return InvestmentPage(items=tuple(self.items), page=page, size=size)

    async def delete_investment(self, investment_id: int) -> None:
        self.deletes.append(investment_id)
        if self.delete_error is not None:
            raise self.delete_error

    async def register_user(self, registration: Registration) -> dict:
        return {"username": registration.username}


class GatedPageService(InvestmentService):
    """Each remote page answers only once its gate is opened."""

    def __init__(self, pages: dict[int, Sequence[Investment]]) -> None:
        self.pages = pages
        self.gates = {page: asyncio.Event() for page in pages}
        self.failing: set[int] = set()

    def release(self, page: int) -> None:
        self.gates[page].set()

    async def fetch_page(self, page: int, size: int) -> InvestmentPage:
        await self.gates[page].wait()
        if page in self.failing:
            raise TransportError(f"page {page} failed", 503)
        return InvestmentPage(items=tuple(self.pages[page]), page=page, size=size)

    async def delete_investment(self, investment_id: int) -> None:
        raise NotImplementedError

    async def register_user(self, registration: Registration) -> dict:
        raise NotImplementedError
