"""Celsius to Fahrenheit/Kelvin Converter Implementations"""

from tempconv.base.converter import BaseConverter, Scale
from tempconv.implementations.formulas import celsius_to_fahrenheit, celsius_to_kelvin
from tempconv.models.temperature import Temperature


class CelsiusToFahrenheitConverter(BaseConverter):
    """Converts Celsius values to Fahrenheit: ``value * 9 / 5 + 32``."""

    @property
    def source_scale(self) -> Scale:
        return Scale.CELSIUS

    @property
    def target_scale(self) -> Scale:
        return Scale.FAHRENHEIT

    def convert(self, temperature: Temperature) -> float:
        self.validate_input(temperature)
        return celsius_to_fahrenheit(temperature.value)


class CelsiusToKelvinConverter(BaseConverter):
    """Converts Celsius values to Kelvin: ``value + 273.15``."""

    @property
    def source_scale(self) -> Scale:
        return Scale.CELSIUS

    @property
    def target_scale(self) -> Scale:
        return Scale.KELVIN

    def convert(self, temperature: Temperature) -> float:
        self.validate_input(temperature)
        return celsius_to_kelvin(temperature.value)
