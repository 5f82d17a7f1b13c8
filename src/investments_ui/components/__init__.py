"""
Reflex UI components for the Investments UI application.

This package provides modular, composable components:
- filter_panel: Name search input and type select
- investment_table: Investments table with edit/delete actions
- pagination_bar: Previous/next controls with the page label
- register_form: Username/password registration card

All components are functions returning Reflex components bound to the
state classes in investments_ui.state.
"""

from investments_ui.components.filter_panel import filter_panel
from investments_ui.components.investment_table import investment_table
from investments_ui.components.pagination_bar import pagination_bar
from investments_ui.components.register_form import register_form

__all__ = [
    "filter_panel",
    "investment_table",
    "pagination_bar",
    "register_form",
]
