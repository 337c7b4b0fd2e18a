import pytest

from apps.exchange.application.dto import ConversionResultDTO, ResolverConfig
from core import settings


class TestResolverConfig:
    """Tests for ResolverConfig defaults and validation."""

    def test_defaults(self):
        config = ResolverConfig()

        assert config.cache_path == settings.RATES_CACHE_PATH
        assert config.ttl_seconds == settings.RATES_CACHE_TTL
        assert config.source_url == settings.CBR_DAILY_URL

    def test_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "RATES_CACHE_PATH", "/var/cache/rates.json")
        monkeypatch.setattr(settings, "RATES_CACHE_TTL", 60)
        monkeypatch.setattr(settings, "CBR_DAILY_URL", "https://example.test/daily_json.js")
        monkeypatch.setattr(settings, "RATES_REQUEST_TIMEOUT", 2.5)

        config = ResolverConfig.from_settings()

        assert config.cache_path == "/var/cache/rates.json"
        assert config.ttl_seconds == 60
        assert config.source_url == "https://example.test/daily_json.js"
        assert config.timeout == 2.5

    def test_negative_ttl(self):
        with pytest.raises(ValueError):
            ResolverConfig(ttl_seconds=-1)

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError):
            ResolverConfig(timeout=0)


def test_conversion_result_dto():
    dto = ConversionResultDTO(
        source_currency="TRY",
        exchanged_currency="USD",
        amount=10,
        rate=0.031,
        converted_amount=0.31,
    )

    assert dto.source_currency == "TRY"
    assert dto.rates_date is None
