"""
Data models and decoding helpers for the Investments UI.

This package provides:
- Investment domain models (Investment, InvestmentPage)
- Application state models (CollectionState, FilterState, PageView)
- Notifications and the registration payload
- Typed decoding of remote payloads

All models use Python dataclasses for type safety and IDE support.
"""

from investments_ui.models.common import (
    CollectionState,
    FilterState,
    Notification,
    PageView,
    Registration,
)
from investments_ui.models.investment import (
    INVESTMENT_TYPES,
    DecodeError,
    Investment,
    InvestmentPage,
    deserialize_investment,
    deserialize_page,
)

__all__ = [
    "INVESTMENT_TYPES",
    "CollectionState",
    "DecodeError",
    "FilterState",
    "Investment",
    "InvestmentPage",
    "Notification",
    "PageView",
    "Registration",
    "deserialize_investment",
    "deserialize_page",
]
