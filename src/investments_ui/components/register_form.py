"""
Registration form component.

Field rules are not enforced here; the form hands the raw values to
RegisterState, which posts them to the auth endpoint.
"""

import reflex as rx

from investments_ui.state import RegisterState


def register_form() -> rx.Component:
    """
    Build the registration card.

    Returns:
        The register card component.
    """
    return rx.card(
        rx.heading("Registrar", size="6", as_="h1", align="center"),
        rx.text(
            "Crie sua conta para acessar o sistema",
            class_name="muted",
            align="center",
        ),
        rx.form(
            rx.vstack(
                rx.text("Username", size="2", weight="medium"),
                rx.input(name="username", placeholder="Digite o nome de usuário"),
                rx.text("Password", size="2", weight="medium"),
                rx.input(
                    name="password", type="password", placeholder="Digite sua senha"
                ),
                rx.button(
                    rx.cond(RegisterState.is_loading, "Cadastrando...", "Cadastrar"),
                    type="submit",
                    width="100%",
                    disabled=RegisterState.is_loading,
                ),
                spacing="3",
                width="100%",
            ),
            on_submit=RegisterState.handle_submit,
            reset_on_submit=False,
        ),
        rx.text(
            "Already have an account? ",
            rx.link("Login", href="/login"),
            size="2",
            align="center",
        ),
        class_name="register-card",
        max_width="28em",
        width="100%",
    )
