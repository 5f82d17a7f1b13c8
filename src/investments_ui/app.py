"""
Reflex application entry point for the Investments UI.

This module initializes the Reflex app and registers the investments and
registration pages.
"""

import os

import reflex as rx

from investments_ui.components.filter_panel import filter_panel
from investments_ui.components.investment_table import investment_table
from investments_ui.components.pagination_bar import pagination_bar
from investments_ui.components.register_form import register_form
from investments_ui.lib import logs
from investments_ui.services.investment_service_http import BASE_URL
from investments_ui.state import InvestmentsState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("APP_PORT", "3000"))
APP_TITLE = "Investimentos"

LOG.info("INVESTMENTS_UI_BASE_URL: %s", BASE_URL)


def page_header() -> rx.Component:
    """Build the title row with the create button."""
    return rx.flex(
        rx.heading(APP_TITLE, size="7", as_="h2"),
        rx.button(
            rx.icon("circle-plus", size=16),
            "Adicionar Investimento",
            on_click=InvestmentsState.create_investment,
        ),
        justify="between",
        align="center",
        class_name="page-header",
    )


def investments() -> rx.Component:
    """
    Build the investments page layout.

    Returns:
        The complete page component with header, filters, table and pager.
    """
    return rx.box(
        page_header(),
        rx.card(
            rx.heading("Lista de Investimentos", size="4", as_="h3"),
            rx.text("Gerencie seu portfólio de investimentos", class_name="muted"),
            filter_panel(),
            investment_table(),
            pagination_bar(),
            class_name="investments-card",
        ),
        class_name="app-container",
    )


def register() -> rx.Component:
    """Build the registration page layout."""
    return rx.center(register_form(), min_height="100vh", padding="1em")


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
)

app.add_page(
    investments,
    route="/investments",
    title=APP_TITLE,
    on_load=InvestmentsState.on_load,
)
app.add_page(
    investments,
    route="/",
    title=APP_TITLE,
    on_load=InvestmentsState.on_load,
)
app.add_page(register, route="/register", title="Registrar")


def main() -> None:
    """Entrypoint used by `investments-ui`; production should use `reflex run`."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(APP_PORT)]
    )


if __name__ == "__main__":
    main()
