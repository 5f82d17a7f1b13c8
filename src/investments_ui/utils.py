"""
Utility functions for investment data formatting and parsing.

Provides helpers for:
- Date parsing (ISO-8601 dates and datetimes)
- Currency formatting in the Brazilian locale
- Date formatting in the Brazilian locale
"""

from datetime import date, datetime

CURRENCY_SYMBOL = "R$"


def parse_date(date_str: str | None) -> date | None:
    """
    Parse an ISO-8601 date or datetime string into a date.

    Args:
        date_str: Date string such as "2024-12-25" or "2024-12-25T10:00:00".

    Returns:
        date object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # Datetime strings carry a time component we do not display
    try:
        return datetime.fromisoformat(date_str).date()
    except ValueError:
        pass

    return None


def format_currency(value: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Format an amount using Brazilian digit grouping.

    Args:
        value: Numeric amount to format.
        symbol: Currency symbol prefix.

    Returns:
        Formatted string like 'R$ 1.234,56'.
    """
    grouped = f"{value:,.2f}"
    # Swap the US separators for pt-BR ones
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{symbol} {localized}"


def format_date(value: date | None) -> str:
    """Format a date as dd/mm/yyyy, or N/A when missing."""
    if not value:
        return "N/A"
    return value.strftime("%d/%m/%Y")
