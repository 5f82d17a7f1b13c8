"""
Service factory for the Investments UI.

This module provides the get_investment_service() factory function that
returns the appropriate InvestmentService implementation based on
configuration.

Available Implementations:
- http: Remote REST endpoint accessed with httpx
- demo: In-memory service with static investment data (no backend required)

The service is cached at the module level, so the same instance is reused
across all requests. Configure via INVESTMENTS_UI_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from investments_ui.lib import logs
from investments_ui.services.investment_service import InvestmentService, TransportError
from investments_ui.services.investment_service_demo import DemoInvestmentService
from investments_ui.services.investment_service_http import HttpInvestmentService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], InvestmentService]] = {
    "demo": lambda: DemoInvestmentService(),
    "http": lambda: HttpInvestmentService(),
}


@cache
def get_investment_service(kind: str | None = None) -> InvestmentService:
    """Return the configured investment service implementation."""
    resolved_kind = (kind or os.getenv("INVESTMENTS_UI_SERVICE", "http")).lower()
    LOG.info("get_investment_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown investment service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoInvestmentService",
    "HttpInvestmentService",
    "InvestmentService",
    "TransportError",
    "get_investment_service",
]
