"""
Data Transfer Objects for the application layer.
DTOs decouple internal domain models from external API contracts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core import settings


@dataclass(frozen=True)
class ResolverConfig:
    """Where rates come from and how long a local snapshot stays usable."""
    cache_path: str = settings.RATES_CACHE_PATH
    ttl_seconds: int = settings.RATES_CACHE_TTL
    source_url: str = settings.CBR_DAILY_URL
    timeout: float = settings.RATES_REQUEST_TIMEOUT

    def __post_init__(self):
        if self.ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must not be negative, got {self.ttl_seconds}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_settings(cls) -> "ResolverConfig":
        return cls(
            cache_path=settings.RATES_CACHE_PATH,
            ttl_seconds=settings.RATES_CACHE_TTL,
            source_url=settings.CBR_DAILY_URL,
            timeout=settings.RATES_REQUEST_TIMEOUT,
        )


@dataclass
class ConversionResultDTO:
    """Result DTO for currency conversion."""
    source_currency: str
    exchanged_currency: str
    amount: float
    rate: float
    converted_amount: float
    rates_date: Optional[datetime] = None
