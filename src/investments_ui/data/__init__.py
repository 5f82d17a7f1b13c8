"""
Static and demo data for the Investments UI.

This package contains fixture data used by DemoInvestmentService for
development, testing, and demonstrations without a running backend.

Modules:
- demo_investments: Pre-populated Investment objects
"""
