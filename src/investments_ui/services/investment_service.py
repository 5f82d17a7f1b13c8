"""
Abstract base class defining the investments data access contract.

All service implementations must extend InvestmentService and provide the
paginated fetch, delete, and registration operations. Every failure, whether
a non-success status, a transport problem, or a malformed body, is reported
as TransportError. Nothing is retried here.

Implementations:
- HttpInvestmentService: Remote REST endpoint accessed with httpx
- DemoInvestmentService: Static in-memory data for development/testing
"""

from abc import ABC, abstractmethod

from investments_ui.models.common import Registration
from investments_ui.models.investment import InvestmentPage


class TransportError(Exception):
    """
    Unified failure signal for any remote endpoint problem.

    Attributes:
        message: Human readable description of the failure.
        status_code: HTTP status of the response, None when no response arrived.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class InvestmentService(ABC):
    """
    Abstract base class for remote investment access.

    Implementations perform I/O only; callers own any local state updates.
    """

    @abstractmethod
    async def fetch_page(self, page: int, size: int) -> InvestmentPage:
        """
        Return one remote page of investments.

        Args:
            page: Page number (0-indexed).
            size: Number of items per page.

        Raises:
            TransportError: On any endpoint, transport, or decoding failure.
        """

    @abstractmethod
    async def delete_investment(self, investment_id: int) -> None:
        """
        Delete the investment with the given identifier.

        Deleting an identifier twice may fail; the failure is not hidden.

        Raises:
            TransportError: On any endpoint or transport failure.
        """

    @abstractmethod
    async def register_user(self, registration: Registration) -> dict:
        """
        Register a new user account.

        Returns:
            The decoded response body, or an empty dict when it has none.

        Raises:
            TransportError: On any endpoint or transport failure.
        """

    async def aclose(self) -> None:
        """Release any held resources. Default implementation does nothing."""
