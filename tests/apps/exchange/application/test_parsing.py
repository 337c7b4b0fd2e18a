import json
from datetime import datetime

import pytest

from apps.exchange.application.parsing import parse_daily_json
from apps.exchange.domain.errors import ExternalSourceError


def test_parse_daily_json_success(daily_body):
    table = parse_daily_json(daily_body)

    assert set(table.codes()) == {"USD", "EUR", "TRY", "JPY", "RUB"}
    assert table.unit_rate("TRY") == pytest.approx(2.81535)
    assert table.get("USD").name == "Доллар США"
    assert table.get("USD").num_code == "840"
    assert table.get("USD").previous == 90.5
    assert table.date == datetime.fromisoformat("2024-05-21T11:30:00+03:00")


def test_parse_daily_json_injects_base_currency(daily_document):
    daily_document["Valute"]["RUB"] = {"Nominal": 1, "Value": 3.0}

    table = parse_daily_json(json.dumps(daily_document).encode())

    assert table.unit_rate("RUB") == 1


def test_parse_daily_json_normalizes_codes():
    body = json.dumps({"Valute": {"usd": {"Nominal": 1, "Value": 90.0}}}).encode()

    table = parse_daily_json(body)

    assert table.codes() == ["RUB", "USD"]
    assert table.date is None


@pytest.mark.parametrize("body", [
    b"",
    b"not json at all",
    b"\xff\xfe\x00",
    b"[]",
    b'{"Date": "2024-05-21"}',
    b'{"Valute": []}',
    b'{"Valute": {"USD": 90.0}}',
    b'{"Valute": {"USD": {"Nominal": 1}}}',
    b'{"Valute": {"USD": {"Nominal": "1", "Value": 90.0}}}',
    b'{"Valute": {"USD": {"Nominal": true, "Value": 90.0}}}',
    b'{"Valute": {"USD": {"Nominal": 0, "Value": 90.0}}}',
    b'{"Valute": {"USD": {"Nominal": 1, "Value": -90.0}}}',
    b'{"Valute": {"USD": {"Nominal": 1, "Value": NaN}}}',
    b'{"Valute": {"USD": {"Nominal": 1, "Value": 1' + b"0" * 400 + b'}}}',
    b'{"Valute": {"USD": {"Nominal": 1000, "Value": 5e-324}}}',
    b'{"Valute": {"USD": {"Nominal": 1e-300, "Value": 1e300}}}',
])
def test_parse_daily_json_malformed(body):
    with pytest.raises(ExternalSourceError):
        parse_daily_json(body)


def test_parse_daily_json_ignores_bad_date():
    body = json.dumps({"Date": "yesterday", "Valute": {}}).encode()

    table = parse_daily_json(body)

    assert table.date is None
