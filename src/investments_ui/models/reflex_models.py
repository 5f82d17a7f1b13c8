"""
Reflex-compatible row models for the Investments UI.

Reflex state vars must be JSON serializable, so investments are rendered
from flat string dictionaries with display formatting already applied.
"""

from investments_ui.models.investment import Investment


def investment_to_row(investment: Investment) -> dict[str, str]:
    """
    Convert an Investment to a display row for rx.foreach.

    Args:
        investment: Investment to display.

    Returns:
        Row dictionary with id, name, type, amount and date as strings.
    """
    return {
        "id": str(investment.id),
        "name": investment.name,
        "type": investment.type,
        "amount": investment.formatted_amount(),
        "date": investment.formatted_date(),
    }
