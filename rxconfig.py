"""Reflex configuration for the Investments UI application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("APP_PORT", "3000"))

config = rx.Config(
    app_name="investments_ui",
    # Use the src directory structure
    app_module_import="investments_ui.app",
    frontend_port=APP_PORT,
)
