"""
Unit tests for TemperatureConversionService.

Tests per-token outcomes, ordered iteration and batch summaries.
"""

import pytest
from unittest.mock import patch

from tempconv.base.converter import Scale
from tempconv.config.settings import TempconvConfig
from tempconv.models.temperature import ParseErrorKind
from tempconv.services.temperature_conversion_service import TemperatureConversionService


@pytest.fixture
def service():
    """Create a service with default configuration."""
    return TemperatureConversionService()


class TestParseToken:
    """Tests for parse_token."""

    def test_success(self, service):
        outcome = service.parse_token("32FC", position=3)

        assert outcome.ok
        assert outcome.position == 3
        assert outcome.failure is None
        assert outcome.result.converted == 0.0
        assert outcome.result.display == "32F => 0C"
        assert outcome.result.temperature.scale == Scale.FAHRENHEIT

    def test_failure(self, service):
        outcome = service.parse_token("10CC")

        assert not outcome.ok
        assert outcome.result is None
        assert outcome.failure.kind == ParseErrorKind.SCALE_UNKNOWN
        assert outcome.failure.message == "scale unknown"
        assert outcome.failure.display == 'ParseError: 10CC, "scale unknown"'

    def test_failure_unquoted(self):
        service = TemperatureConversionService(TempconvConfig(quote_error_messages=False))
        outcome = service.parse_token("X")

        assert outcome.failure.display == "ParseError: X, not a numeric value"

    def test_failure_logged(self, service, caplog):
        with caplog.at_level("INFO", logger="tempconv.services.temperature_conversion_service"):
            service.parse_token("abFC")

        assert "[parse] Rejected token 'abFC': not a numeric value" in caplog.text


class TestIterOutcomes:
    """Tests for iter_outcomes."""

    def test_preserves_order(self, service):
        tokens = ["32FC", "X", "36CK", "", "32CF"]
        outcomes = list(service.iter_outcomes(tokens))

        assert [o.token for o in outcomes] == tokens
        assert [o.position for o in outcomes] == [0, 1, 2, 3, 4]
        assert [o.ok for o in outcomes] == [True, False, True, False, True]

    def test_is_lazy(self, service):
        """Test tokens are parsed one at a time as the caller iterates."""
        with patch.object(service, "parse_token", wraps=service.parse_token) as spy:
            outcomes = service.iter_outcomes(["32FC", "X"])
            assert spy.call_count == 0
            next(outcomes)
            assert spy.call_count == 1


class TestConvertTokens:
    """Tests for convert_tokens."""

    def test_batch(self, service):
        response = service.convert_tokens(["32FC", "5", "45FK", "abFC", "36CK"])

        assert [r.token for r in response.results] == ["32FC", "45FK", "36CK"]
        assert [f.token for f in response.failures] == ["5", "abFC"]
        assert [f.kind for f in response.failures] == [
            ParseErrorKind.SCALE_UNKNOWN,
            ParseErrorKind.NOT_NUMERIC,
        ]
        assert response.results[1].converted == pytest.approx((45 - 32) * 5 / 9 + 273.15)
        assert response.success_count == 3
        assert response.failure_count == 2
        assert response.total == 5

    def test_empty_batch(self, service):
        response = service.convert_tokens([])

        assert response.results == []
        assert response.failures == []
        assert response.total == 0


class TestDiscovery:
    """Tests for pair discovery."""

    def test_available_conversions(self, service):
        assert sorted(service.get_available_conversions()) == ["CF", "CK", "FC", "FK", "KC", "KF"]

    def test_supports_conversion(self, service):
        assert service.supports_conversion(Scale.CELSIUS, Scale.KELVIN)
        assert not service.supports_conversion(Scale.KELVIN, Scale.KELVIN)
