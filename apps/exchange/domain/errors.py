"""
Domain errors. Callers can catch these around conversions.
"""


class ExchangeError(Exception):
    """Base class for exchange errors."""


class CurrencyCodeError(ExchangeError):
    """Requested currency is not present in the rate table."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Unknown currency code '{self.code}'"


class ExternalSourceError(ExchangeError):
    """Rate source is unreachable or returned data we cannot use."""
