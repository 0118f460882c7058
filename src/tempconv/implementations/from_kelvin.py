"""Kelvin to Celsius/Fahrenheit Converter Implementations"""

from tempconv.base.converter import BaseConverter, Scale
from tempconv.implementations.formulas import celsius_to_fahrenheit, kelvin_to_celsius
from tempconv.models.temperature import Temperature


class KelvinToCelsiusConverter(BaseConverter):
    @property
    def source_scale(self) -> Scale:
        return Scale.KELVIN

    @property
    def target_scale(self) -> Scale:
        return Scale.CELSIUS

    def convert(self, temperature: Temperature) -> float:
        self.validate_input(temperature)
        return kelvin_to_celsius(temperature.value)


class KelvinToFahrenheitConverter(BaseConverter):
    """Converts Kelvin values to Fahrenheit: ``(value - 273.15) * 9 / 5 + 32``."""

    @property
    def source_scale(self) -> Scale:
        return Scale.KELVIN

    @property
    def target_scale(self) -> Scale:
        return Scale.FAHRENHEIT

    def convert(self, temperature: Temperature) -> float:
        self.validate_input(temperature)
        return celsius_to_fahrenheit(kelvin_to_celsius(temperature.value))
