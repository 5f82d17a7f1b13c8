"""Investment models — tests for typed decoding and display helpers.

Tests cover:
    - Decoding valid records and pages
    - Rejection of missing or mistyped fields
    - Display formatting of amount and date
"""

from datetime import date

import pytest

from investments_ui.models.investment import (
    DecodeError,
    Investment,
    deserialize_investment,
    deserialize_page,
)
from investments_ui.models.reflex_models import investment_to_row


def _payload(**overrides):
    payload = {
        "id": 1,
        "name": "Tesouro",
        "type": "Ações",
        "amount": 1500,
        "date": "2024-03-08",
    }
    payload.update(overrides)
    return payload


def test_deserialize_investment_builds_typed_record():
    investment = deserialize_investment(_payload())
    assert investment == Investment(1, "Tesouro", "Ações", 1500.0, date(2024, 3, 8))
    assert isinstance(investment.amount, float)


def test_deserialize_accepts_datetime_strings():
    investment = deserialize_investment(_payload(date="2024-03-08T10:15:00"))
    assert investment.date == date(2024, 3, 8)


def test_unknown_type_is_not_rejected():
    assert deserialize_investment(_payload(type="Renda Fixa")).type == "Renda Fixa"


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": "1"},
        {"id": True},
        {"name": ""},
        {"name": 3},
        {"type": None},
        {"amount": "10"},
        {"amount": -1},
        {"date": "08/03/2024"},
        {"date": 20240308},
    ],
)
def test_invalid_fields_raise_decode_error(overrides):
    with pytest.raises(DecodeError):
        deserialize_investment(_payload(**overrides))


def test_missing_field_raises_decode_error():
    payload = _payload()
    del payload["amount"]
    with pytest.raises(DecodeError, match="amount"):
        deserialize_investment(payload)


def test_deserialize_page_reads_content():
    page = deserialize_page({"content": [_payload(), _payload(id=2)]}, page=0, size=5)
    assert [inv.id for inv in page.items] == [1, 2]
    assert page.page == 0
    assert page.size == 5


@pytest.mark.parametrize("body", [[], {"items": []}, {"content": {}}, "oops"])
def test_deserialize_page_requires_content_list(body):
    with pytest.raises(DecodeError):
        deserialize_page(body, page=0, size=5)


def test_row_uses_brazilian_formats():
    investment = Investment(7, "Apê Centro", "Imóveis", 350000.5, date(2023, 6, 2))
    assert investment_to_row(investment) == {
        "id": "7",
        "name": "Apê Centro",
        "type": "Imóveis",
        "amount": "R$ 350.000,50",
        "date": "02/06/2023",
    }
