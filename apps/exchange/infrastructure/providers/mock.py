"""
Mock provider for testing and offline use.
Serves a fixed document shaped like the real daily_json.js feed.
"""

import json
from typing import Optional

from apps.exchange.domain.interfaces import BaseRateSource, BaseSnapshotStore


class MockProvider(BaseRateSource):
    """
    Provider that never touches the network.
    Useful for:
    - Testing without external API calls
    - Development without network access
    """

    # Approximate real-world values, quoted against RUB
    DOCUMENT = {
        "Date": "2024-05-21T11:30:00+03:00",
        "PreviousDate": "2024-05-18T11:30:00+03:00",
        "Timestamp": "2024-05-20T20:00:00+03:00",
        "Valute": {
            "USD": {"ID": "R01235", "NumCode": "840", "CharCode": "USD", "Nominal": 1,
                    "Name": "Доллар США", "Value": 90.7493, "Previous": 90.9158},
            "EUR": {"ID": "R01239", "NumCode": "978", "CharCode": "EUR", "Nominal": 1,
                    "Name": "Евро", "Value": 98.7141, "Previous": 98.9035},
            "GBP": {"ID": "R01035", "NumCode": "826", "CharCode": "GBP", "Nominal": 1,
                    "Name": "Фунт стерлингов Соединенного королевства", "Value": 115.2921, "Previous": 115.5135},
            "TRY": {"ID": "R01700J", "NumCode": "949", "CharCode": "TRY", "Nominal": 10,
                    "Name": "Турецких лир", "Value": 28.1535, "Previous": 28.2095},
            "JPY": {"ID": "R01820", "NumCode": "392", "CharCode": "JPY", "Nominal": 100,
                    "Name": "Японских иен", "Value": 58.2031, "Previous": 58.4155},
        },
    }

    def __init__(self, document: Optional[dict] = None, store: Optional[BaseSnapshotStore] = None):
        self.document = document if document is not None else self.DOCUMENT
        self.store = store
        self.calls = 0

    def fetch(self) -> bytes:
        self.calls += 1
        body = json.dumps(self.document, ensure_ascii=False).encode("utf-8")
        if self.store is not None:
            self.store.write(body)
        return body
