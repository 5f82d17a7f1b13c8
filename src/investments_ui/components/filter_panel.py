"""
Filter panel component for the investments page.

Provides the name search input and the type select.
"""

import reflex as rx

from investments_ui.state import TYPE_OPTIONS, InvestmentsState


def filter_panel() -> rx.Component:
    """
    Build the filter row with search input and type select.

    Returns:
        The filter panel component.
    """
    return rx.flex(
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Buscar investimentos...",
                value=InvestmentsState.search,
                on_change=InvestmentsState.update_search,
                class_name="search-input",
                debounce=300,
            ),
            class_name="input-with-icon",
        ),
        rx.select(
            TYPE_OPTIONS,
            value=InvestmentsState.type_filter,
            on_change=InvestmentsState.update_type_filter,
            placeholder="Filtrar por tipo",
        ),
        justify="between",
        align="center",
        gap="4",
        class_name="filter-panel",
    )
