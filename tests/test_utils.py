"""Utils — tests for date parsing and pt-BR formatting."""

from datetime import date

import pytest

from investments_ui.utils import format_currency, format_date, parse_date


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-12-25", date(2024, 12, 25)),
        (" 2024-12-25 ", date(2024, 12, 25)),
        ("2024-12-25T08:30:00", date(2024, 12, 25)),
        ("", None),
        (None, None),
        ("25/12/2024", None),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "R$ 0,00"),
        (1234.5, "R$ 1.234,50"),
        (1234567.891, "R$ 1.234.567,89"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_date():
    assert format_date(date(2024, 1, 5)) == "05/01/2024"
    assert format_date(None) == "N/A"
