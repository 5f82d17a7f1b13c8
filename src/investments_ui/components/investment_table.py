"""
Investments table component for Reflex.

Handles the loading state, the error state, and the table of the visible
investments with edit and delete actions.
"""

import reflex as rx

from investments_ui.state import InvestmentsState

_HEADERS = ("Nome", "Tipo", "Valor", "Data")


def investment_table() -> rx.Component:
    """
    Build the investments table container.

    An error replaces the whole table, even when stale rows are held.

    Returns:
        The results container component.
    """
    return rx.cond(
        InvestmentsState.loading,
        _loader(),
        rx.cond(
            InvestmentsState.error != "",
            _error(),
            _table(),
        ),
    )


def _table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                *[rx.table.column_header_cell(label) for label in _HEADERS],
                rx.table.column_header_cell("Ações", align="right"),
            ),
        ),
        rx.table.body(
            rx.cond(
                InvestmentsState.is_empty,
                _empty_row(),
                rx.foreach(InvestmentsState.rows, _row),
            ),
        ),
        variant="surface",
        class_name="investment-table",
    )


def _row(row: dict) -> rx.Component:
    """Build one table row with its actions."""
    return rx.table.row(
        rx.table.row_header_cell(row["name"]),
        rx.table.cell(row["type"]),
        rx.table.cell(row["amount"]),
        rx.table.cell(row["date"]),
        rx.table.cell(
            rx.flex(
                rx.icon_button(
                    rx.icon("pencil", size=16),
                    variant="ghost",
                    on_click=InvestmentsState.edit_investment(row["id"]),
                ),
                rx.icon_button(
                    rx.icon("trash-2", size=16),
                    variant="ghost",
                    on_click=InvestmentsState.delete_investment(row["id"]),
                ),
                justify="end",
                gap="2",
            ),
        ),
    )


def _empty_row() -> rx.Component:
    return rx.table.row(
        rx.table.cell(
            "Nenhum investimento encontrado.",
            col_span=5,
            class_name="empty-state",
        ),
    )


def _loader() -> rx.Component:
    """Build the loading indicator."""
    return rx.box(
        rx.spinner(),
        rx.text("Carregando...", class_name="muted"),
        class_name="card loading-state",
    )


def _error() -> rx.Component:
    """Build the error state shown instead of the table."""
    return rx.box(
        rx.text(InvestmentsState.error, color_scheme="red"),
        rx.button(
            "Tentar novamente",
            variant="outline",
            size="1",
            on_click=InvestmentsState.retry,
        ),
        class_name="card error-state",
    )
