"""
HTTP implementation of InvestmentService backed by a remote REST endpoint.

Endpoints used (paths relative to the configured base URL):

    GET    {collection}?page=<0-based>&size=<n>   -> {"content": [...]}
    DELETE {collection}/<id>
    POST   {auth}  {"username": ..., "password": ...}

Environment variables used:
- INVESTMENTS_UI_BASE_URL: Base URL of the remote API
- INVESTMENTS_UI_COLLECTION_PATH: Path of the investments collection
- INVESTMENTS_UI_AUTH_PATH: Path of the registration endpoint
- INVESTMENTS_UI_TIMEOUT: Request timeout in seconds

Any httpx error, non-2xx status, or malformed body is raised as
TransportError. Requests are never retried.
"""

import os

import httpx

from investments_ui.lib import logs
from investments_ui.models.common import Registration
from investments_ui.models.investment import InvestmentPage, deserialize_page
from investments_ui.services.investment_service import InvestmentService, TransportError

LOG = logs.logger(__file__)

BASE_URL = os.getenv("INVESTMENTS_UI_BASE_URL", "http://localhost:8080")
COLLECTION_PATH = os.getenv("INVESTMENTS_UI_COLLECTION_PATH", "/investments")
AUTH_PATH = os.getenv("INVESTMENTS_UI_AUTH_PATH", "/auth/register")
TIMEOUT = float(os.getenv("INVESTMENTS_UI_TIMEOUT", "10"))


class HttpInvestmentService(InvestmentService):
    """
    Remote investment service using an httpx.AsyncClient.

    One client is kept per service instance so connections are pooled
    across requests.
    """

    def __init__(
        self,
        base_url: str | None = None,
        collection_path: str | None = None,
        auth_path: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            base_url: Remote base URL, or None to use INVESTMENTS_UI_BASE_URL.
            collection_path: Investments collection path.
            auth_path: Registration endpoint path.
            timeout: Request timeout in seconds.
            transport: Custom httpx transport (used by tests).
        """
        self._collection_path = "/" + (collection_path or COLLECTION_PATH).strip("/")
        self._auth_path = "/" + (auth_path or AUTH_PATH).strip("/")
        self._client = httpx.AsyncClient(
            base_url=base_url or BASE_URL,
            timeout=timeout if timeout is not None else TIMEOUT,
            transport=transport,
        )

    async def fetch_page(self, page: int, size: int) -> InvestmentPage:
        """Fetch one remote page and decode it into Investment records."""
        LOG.info("fetch_page - page:%s size:%s", page, size)
        response = await self._send(
            "GET", self._collection_path, params={"page": page, "size": size}
        )
        # Invalid JSON and DecodeError are both ValueError
        try:
            return deserialize_page(response.json(), page=page, size=size)
        except ValueError as exc:
            raise TransportError(f"Malformed investments page: {exc}") from exc

    async def delete_investment(self, investment_id: int) -> None:
        """Delete a single remote investment."""
        LOG.info("delete_investment - id:%s", investment_id)
        await self._send("DELETE", f"{self._collection_path}/{investment_id}")

    async def register_user(self, registration: Registration) -> dict:
        """Post the registration payload to the auth endpoint."""
        LOG.info("register_user - username:%s", registration.username)
        response = await self._send(
            "POST", self._auth_path, json=registration.to_dict()
        )
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError(f"Malformed registration response: {exc}") from exc
        return data if isinstance(data, dict) else {"result": data}

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Issue a request, translating every failure into TransportError."""
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        if not response.is_success:
            LOG.warning("%s %s - status:%s", method, url, response.status_code)
            raise TransportError(
                f"{method} {url} returned an error", response.status_code
            )
        return response
