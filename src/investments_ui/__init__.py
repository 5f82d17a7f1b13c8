"""
Investments UI: a Reflex application for browsing an investment portfolio.

This package provides a web interface over a remote investments CRUD
endpoint. One remote page of investments is fetched at a time; the page in
memory can then be narrowed by type and by a name search, and the filtered
subset is paginated again on the client.

Subpackages:
- components: Reflex UI components
- models: Data models and typed decoding
- services: Remote access layer (HTTP and demo implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
