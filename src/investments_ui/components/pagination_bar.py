"""Previous/next controls for the client-side pages."""

import reflex as rx

from investments_ui.state import InvestmentsState


def pagination_bar() -> rx.Component:
    """Build the pagination controls, hidden unless there is more than one page."""
    return rx.cond(
        InvestmentsState.show_pagination,
        rx.flex(
            rx.button(
                "Anterior",
                variant="outline",
                size="1",
                on_click=InvestmentsState.previous_page,
                disabled=~InvestmentsState.has_previous,
            ),
            rx.text(InvestmentsState.page_label, size="2"),
            rx.button(
                "Próxima",
                variant="outline",
                size="1",
                on_click=InvestmentsState.next_page,
                disabled=~InvestmentsState.has_next,
            ),
            justify="center",
            align="center",
            gap="2",
            class_name="pagination-bar",
        ),
    )
