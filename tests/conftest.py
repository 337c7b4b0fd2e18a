import json

import pytest

from apps.exchange.infrastructure.persistence.snapshot import FileSnapshotStore


DAILY_DOCUMENT = {
    "Date": "2024-05-21T11:30:00+03:00",
    "Valute": {
        "USD": {"NumCode": "840", "CharCode": "USD", "Nominal": 1, "Name": "Доллар США",
                "Value": 90.0, "Previous": 90.5},
        "EUR": {"NumCode": "978", "CharCode": "EUR", "Nominal": 1, "Name": "Евро",
                "Value": 97.5, "Previous": 98.0},
        "TRY": {"NumCode": "949", "CharCode": "TRY", "Nominal": 10, "Name": "Турецких лир",
                "Value": 28.1535, "Previous": 28.2095},
        "JPY": {"NumCode": "392", "CharCode": "JPY", "Nominal": 100, "Name": "Японских иен",
                "Value": 58.2031, "Previous": 58.4155},
    },
}


@pytest.fixture
def daily_document():
    return json.loads(json.dumps(DAILY_DOCUMENT))


@pytest.fixture
def daily_body(daily_document):
    return json.dumps(daily_document).encode("utf-8")


@pytest.fixture
def cache_path(tmp_path):
    return str(tmp_path / "daily_json.js")


@pytest.fixture
def store(cache_path):
    return FileSnapshotStore(cache_path, ttl_seconds=3600)
