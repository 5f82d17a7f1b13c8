"""Root conftest — shared test configuration."""

import os

import pytest

# Never reach a real backend from tests
os.environ.setdefault("INVESTMENTS_UI_BASE_URL", "http://api.test")
os.environ.setdefault("INVESTMENTS_UI_SERVICE", "demo")

from investments_ui.models.investment import Investment  # noqa: E402
from tests.helpers import make_investment  # noqa: E402


@pytest.fixture
def tesouro() -> Investment:
    return make_investment(1, "Tesouro", "Ações", 5000.0)


@pytest.fixture
def ape_centro() -> Investment:
    return make_investment(2, "Apê Centro", "Imóveis", 350000.0)


@pytest.fixture
def loaded_page(tesouro, ape_centro) -> list[Investment]:
    """The two-record page used throughout the scenarios."""
    return [tesouro, ape_centro]
