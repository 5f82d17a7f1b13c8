"""
Investment domain models and typed decoding helpers.

The remote collection endpoint returns pages shaped like:

    {"content": [{"id": 1, "name": "...", "type": "...",
                  "amount": 100.0, "date": "2024-01-31"}, ...]}

Decoding validates every field and produces frozen Investment dataclasses,
raising DecodeError when the payload does not match that shape. Callers in
the service layer translate DecodeError into TransportError.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Sequence

from investments_ui.utils import format_currency, format_date, parse_date

# Known categories offered by the type filter. Not enforced on decode.
INVESTMENT_TYPES: tuple[str, ...] = ("Ações", "Imóveis", "Criptomoedas")


class DecodeError(ValueError):
    """Raised when a remote payload does not match the investment schema."""


@dataclass(frozen=True, slots=True)
class Investment:
    """A single investment entry owned by the remote store."""

    id: int
    name: str
    type: str
    amount: float
    date: date

    def formatted_amount(self) -> str:
        """Return the amount as a pt-BR currency string."""
        return format_currency(self.amount)

    def formatted_date(self) -> str:
        """Return the date formatted for display."""
        return format_date(self.date)


@dataclass(frozen=True, slots=True)
class InvestmentPage:
    """Represents a single remote page of investments."""

    items: Sequence[Investment]
    page: int
    size: int


def deserialize_investment(payload: Any) -> Investment:
    """
    Validate a record-shaped mapping and convert it into an Investment.

    Raises:
        DecodeError: If a field is missing or has the wrong type.
    """
    if not isinstance(payload, Mapping):
        raise DecodeError(f"Investment must be an object, got {type(payload).__name__}")

    investment_id = _require(payload, "id")
    # bool is an int subclass but never a valid identifier
    if not isinstance(investment_id, int) or isinstance(investment_id, bool):
        raise DecodeError(f"Investment id must be an integer: {investment_id!r}")

    name = _require(payload, "name")
    if not isinstance(name, str) or not name:
        raise DecodeError(f"Investment {investment_id} has an invalid name: {name!r}")

    investment_type = _require(payload, "type")
    if not isinstance(investment_type, str):
        raise DecodeError(
            f"Investment {investment_id} has an invalid type: {investment_type!r}"
        )

    amount = _require(payload, "amount")
    if not isinstance(amount, (int, float)) or isinstance(amount, bool) or amount < 0:
        raise DecodeError(
            f"Investment {investment_id} has an invalid amount: {amount!r}"
        )

    raw_date = _require(payload, "date")
    parsed_date = parse_date(raw_date) if isinstance(raw_date, str) else None
    if parsed_date is None:
        raise DecodeError(
            f"Investment {investment_id} has an invalid date: {raw_date!r}"
        )

    return Investment(
        id=investment_id,
        name=name,
        type=investment_type,
        amount=float(amount),
        date=parsed_date,
    )


def deserialize_page(payload: Any, page: int, size: int) -> InvestmentPage:
    """
    Decode a remote page response body into an InvestmentPage.

    Args:
        payload: Parsed JSON body of the fetch response.
        page: Zero-based page index that was requested.
        size: Page size that was requested.

    Raises:
        DecodeError: If the body has no `content` list or a record is invalid.
    """
    if not isinstance(payload, Mapping):
        raise DecodeError("Page response must be a JSON object")
    content = payload.get("content")
    if not isinstance(content, list):
        raise DecodeError("Page response has no 'content' list")
    return InvestmentPage(
        items=tuple(deserialize_investment(item) for item in content),
        page=page,
        size=size,
    )


def _require(payload: Mapping[str, Any], key: str) -> Any:
    if key not in payload or payload[key] is None:
        raise DecodeError(f"Investment is missing field '{key}'")
    return payload[key]
