"""
Local library modules shared across the Investments UI package.

Modules:
    logs: Logging utilities
"""

from investments_ui.lib import logs

__all__ = ["logs"]
