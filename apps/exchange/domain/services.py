"""
Domain services - Core business logic.
Resolves the rate table (snapshot first, then the remote feed) and converts amounts.
"""

import logging
import math
import threading
from decimal import Decimal
from numbers import Real
from typing import List, Optional, Union

from apps.exchange.application.dto import ConversionResultDTO, ResolverConfig
from apps.exchange.application.parsing import parse_daily_json
from apps.exchange.domain.interfaces import BaseRateSource, BaseSnapshotStore
from apps.exchange.domain.models import RateTable, normalize_code
from apps.exchange.infrastructure.persistence.snapshot import FileSnapshotStore
from apps.exchange.infrastructure.providers.cbr_daily import CbrDailyProvider

logger = logging.getLogger(__name__)


class RateResolver:
    """
    Converts amounts between currencies using the daily rates feed.

    Resolution strategy:
    1. Use the memoised table if this resolver already built one
    2. Otherwise read the local snapshot while it is within its TTL
    3. If the snapshot is stale, missing or unreadable, fetch from the provider
       (which saves a fresh snapshot)
    4. Parse, inject the base currency, memoise

    The table is built at most once per resolver; concurrent first callers
    wait for that single build.

    Example:
        >>> resolver = RateResolver.from_config(ResolverConfig.from_settings())
        >>> resolver.convert(100, "eur", "usd")
    """

    def __init__(self, provider: BaseRateSource, store: BaseSnapshotStore):
        self.provider = provider
        self.store = store
        self._table: Optional[RateTable] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ResolverConfig) -> "RateResolver":
        store = FileSnapshotStore(config.cache_path, config.ttl_seconds)
        provider = CbrDailyProvider(config.source_url, timeout=config.timeout, store=store)
        return cls(provider, store)

    def load(self) -> RateTable:
        """
        Return the rate table, building it on first use.

        Raises:
            ExternalSourceError: feed unreachable or the document is malformed
        """
        table = self._table
        if table is not None:
            return table

        with self._lock:
            if self._table is None:
                self._table = parse_daily_json(self._read_source())
                logger.info(f"Loaded {len(self._table)} exchange rates (date: {self._table.date})")
            return self._table

    def refresh(self) -> RateTable:
        """
        Rebuild the table from the provider, ignoring the snapshot.
        On failure the previous table stays in use.
        """
        with self._lock:
            table = parse_daily_json(self.provider.fetch())
            self._table = table
            logger.info(f"Refreshed {len(table)} exchange rates (date: {table.date})")
            return table

    def _read_source(self) -> bytes:
        if self.store.is_valid():
            body = self.store.read()
            if body is not None:
                logger.info("Using cached exchange rates snapshot")
                return body
            logger.info("Snapshot disappeared before it could be read, fetching instead")
        return self.provider.fetch()

    def currencies(self) -> List[str]:
        return self.load().codes()

    def exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """
        Units of `to_currency` equal to one unit of `from_currency`.

        Raises:
            CurrencyCodeError: either code is not in the rate table
            ExternalSourceError: rates could not be loaded
        """
        return self._rate(self.load(), from_currency, to_currency)

    def convert(self, amount: Union[Real, Decimal], from_currency: str, to_currency: str) -> float:
        """
        Convert `amount` of `from_currency` into `to_currency`.

        Zero and negative amounts are allowed; NaN and infinities are not.
        Decimal amounts are converted to float.
        """
        value = self._amount_value(amount)
        return value * self.exchange_rate(from_currency, to_currency)

    def convert_amount(self, amount: Union[Real, Decimal], from_currency: str, to_currency: str) -> ConversionResultDTO:
        """Like convert(), but returns the rate and codes along with the result."""
        value = self._amount_value(amount)
        table = self.load()
        rate = self._rate(table, from_currency, to_currency)

        return ConversionResultDTO(
            source_currency=normalize_code(from_currency),
            exchanged_currency=normalize_code(to_currency),
            amount=amount,
            rate=rate,
            converted_amount=value * rate,
            rates_date=table.date,
        )

    @staticmethod
    def _rate(table: RateTable, from_currency: str, to_currency: str) -> float:
        return table.unit_rate(from_currency) / table.unit_rate(to_currency)

    @staticmethod
    def _amount_value(amount) -> Union[int, float]:
        if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
            raise TypeError(f"amount must be a real number, got {type(amount).__name__}")
        if isinstance(amount, Decimal):
            if not amount.is_finite():
                raise ValueError(f"amount must be finite, got {amount!r}")
            amount = float(amount)
        try:
            finite = math.isfinite(amount)
        except OverflowError as e:
            raise ValueError(f"amount is too large, got {amount!r}") from e
        if not finite:
            raise ValueError(f"amount must be finite, got {amount!r}")
        return amount
