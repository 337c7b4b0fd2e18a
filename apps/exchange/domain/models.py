"""
Pure domain entities (POPOs).
No dependency on HTTP or the filesystem.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from apps.exchange.domain.errors import CurrencyCodeError


BASE_CURRENCY_CODE = "RUB"


def normalize_code(code) -> str:
    """Canonical form of a currency code: 'try', :try, ' Try ' -> 'TRY'."""
    return str(code).strip().upper()


@dataclass(frozen=True)
class RateEntry:
    """
    `nominal` units of the currency cost `value` units of the base currency.
    """

    code: str
    nominal: float
    value: float
    name: Optional[str] = None
    num_code: Optional[str] = None
    previous: Optional[float] = None

    def __post_init__(self):
        for field_name in ("nominal", "value"):
            number = getattr(self, field_name)
            try:
                finite = math.isfinite(number)
            except OverflowError as e:
                raise ValueError(f"{field_name} is too large, got {number!r}") from e
            if not finite or number <= 0:
                raise ValueError(f"{field_name} must be a positive finite number, got {number!r}")

        # Both fields can be valid while their ratio underflows to 0 or overflows
        unit_rate = float(self.value) / float(self.nominal)
        if not math.isfinite(unit_rate) or unit_rate <= 0:
            raise ValueError(f"value / nominal must be a positive finite number, got {unit_rate!r}")

    @property
    def unit_rate(self) -> float:
        return self.value / float(self.nominal)


BASE_CURRENCY_ENTRY = RateEntry(
    code=BASE_CURRENCY_CODE,
    nominal=1,
    value=1,
    name="Российский рубль",
    num_code="643",
    previous=1,
)


class RateTable:
    """
    Immutable mapping from currency code to its RateEntry.

    The base currency is never quoted against itself by the feed, so its
    identity entry is always injected and takes precedence over any feed
    entry with the same code.
    """

    def __init__(self, entries: Mapping[str, RateEntry], date: Optional[datetime] = None):
        rates: Dict[str, RateEntry] = {normalize_code(code): entry for code, entry in entries.items()}
        rates[BASE_CURRENCY_CODE] = BASE_CURRENCY_ENTRY
        self._entries = MappingProxyType(rates)
        self.date = date

    def get(self, code) -> RateEntry:
        normalized = normalize_code(code)
        entry = self._entries.get(normalized)
        if entry is None:
            raise CurrencyCodeError(normalized)
        return entry

    def unit_rate(self, code) -> float:
        return self.get(code).unit_rate

    def codes(self) -> List[str]:
        return sorted(self._entries)

    def __contains__(self, code) -> bool:
        return normalize_code(code) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RateTable(date={self.date!r}, currencies={len(self)})"
