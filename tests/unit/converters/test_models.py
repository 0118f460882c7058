"""
Unit tests for the Temperature model and parse errors.
"""

import pytest
from pydantic import ValidationError

from tempconv.base.converter import Scale
from tempconv.models.temperature import ParseErrorKind, Temperature, TemperatureParseError


class TestScale:
    def test_codes(self):
        assert [scale.value for scale in Scale] == ["C", "F", "K"]

    def test_str_is_code(self):
        assert str(Scale.FAHRENHEIT) == "F"
        assert f"{Scale.KELVIN}" == "K"


class TestTemperature:
    """Tests for the Temperature value object."""

    def test_construct(self):
        temperature = Temperature(value=32.0, scale=Scale.FAHRENHEIT, convert_to=Scale.CELSIUS)
        assert temperature.pair == (Scale.FAHRENHEIT, Scale.CELSIUS)

    def test_scale_codes_accepted(self):
        temperature = Temperature(value=1, scale="C", convert_to="K")
        assert temperature.scale is Scale.CELSIUS
        assert temperature.value == 1.0

    def test_same_scale_rejected(self):
        with pytest.raises(ValidationError, match="source and target scale are both C"):
            Temperature(value=1.0, scale=Scale.CELSIUS, convert_to=Scale.CELSIUS)

    def test_immutable(self):
        temperature = Temperature(value=1.0, scale=Scale.CELSIUS, convert_to=Scale.KELVIN)
        with pytest.raises(ValidationError):
            temperature.value = 2.0


class TestTemperatureParseError:
    """Tests for parse error messages."""

    @pytest.mark.parametrize("kind,message", [
        (ParseErrorKind.NOT_NUMERIC, "not a numeric value"),
        (ParseErrorKind.SCALE_UNKNOWN, "scale unknown"),
        (ParseErrorKind.INCONVERTIBLE, "string is empty"),
    ])
    def test_messages(self, kind, message):
        error = TemperatureParseError(kind)

        assert error.kind == kind
        assert error.description == message
        assert kind.message == message
        assert str(error) == f'"{message}"'

    def test_is_value_error(self):
        assert isinstance(TemperatureParseError(ParseErrorKind.NOT_NUMERIC), ValueError)
