"""Service factory — tests for resolving implementations by kind."""

import pytest

from investments_ui.services import (
    DemoInvestmentService,
    HttpInvestmentService,
    get_investment_service,
)


@pytest.fixture(autouse=True)
def _clear_service_cache():
    get_investment_service.cache_clear()
    yield
    get_investment_service.cache_clear()


def test_kind_selects_implementation():
    assert isinstance(get_investment_service("demo"), DemoInvestmentService)
    assert isinstance(get_investment_service("HTTP"), HttpInvestmentService)


def test_environment_selects_default(monkeypatch):
    monkeypatch.setenv("INVESTMENTS_UI_SERVICE", "demo")
    assert isinstance(get_investment_service(), DemoInvestmentService)


def test_service_is_cached_per_kind():
    assert get_investment_service("demo") is get_investment_service("demo")


def test_unknown_kind_raises():
    with pytest.raises(ValueError, match="Unknown investment service kind"):
        get_investment_service("spark")
