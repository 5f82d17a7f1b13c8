"""
Demo implementation of InvestmentService using static in-memory data.

This service is useful for:
- Local development without a running backend
- Testing the view binding with realistic data
- Demonstrating the application without network access

Pages are zero-indexed slices of the in-memory list, mirroring the remote
endpoint. Failures are reported with the same TransportError statuses a
REST backend would return.
"""

import asyncio
from typing import Sequence

from investments_ui.data.demo_investments import DEMO_INVESTMENTS
from investments_ui.lib import logs
from investments_ui.models.common import Registration
from investments_ui.models.investment import Investment, InvestmentPage
from investments_ui.services.investment_service import InvestmentService, TransportError

LOG = logs.logger(__file__)


class DemoInvestmentService(InvestmentService):
    """
    In-memory investment service backed by static demo data.

    Attributes:
        latency: Seconds each call waits before answering, to mimic the network.
    """

    def __init__(
        self,
        investments: Sequence[Investment] | None = None,
        latency: float = 0.0,
    ) -> None:
        """
        Initialize with investment data.

        Args:
            investments: Custom investment list, or None to use DEMO_INVESTMENTS.
            latency: Artificial delay applied to every call.
        """
        source = DEMO_INVESTMENTS if investments is None else investments
        self._investments: list[Investment] = list(source)
        self._usernames: set[str] = set()
        self.latency = latency

    async def fetch_page(self, page: int, size: int) -> InvestmentPage:
        """Return the zero-indexed slice of the in-memory investments."""
        await self._simulate_latency()
        if page < 0 or size < 1:
            raise TransportError(f"Invalid page request page={page} size={size}", 400)
        start = page * size
        items = tuple(self._investments[start : start + size])
        LOG.debug("fetch_page - page:%s size:%s items:%s", page, size, len(items))
        return InvestmentPage(items=items, page=page, size=size)

    async def delete_investment(self, investment_id: int) -> None:
        """Remove the investment, failing with 404 when it does not exist."""
        await self._simulate_latency()
        for index, investment in enumerate(self._investments):
            if investment.id == investment_id:
                del self._investments[index]
                return
        raise TransportError(f"Investment {investment_id} not found", 404)

    async def register_user(self, registration: Registration) -> dict:
        """Record the username, failing with 409 when it is already taken."""
        await self._simulate_latency()
        if registration.username in self._usernames:
            raise TransportError(f"User {registration.username} already exists", 409)
        self._usernames.add(registration.username)
        return {"username": registration.username}

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
