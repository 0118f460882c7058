"""Fahrenheit to Celsius/Kelvin Converter Implementations"""

from tempconv.base.converter import BaseConverter, Scale
from tempconv.implementations.formulas import celsius_to_kelvin, fahrenheit_to_celsius
from tempconv.models.temperature import Temperature


class FahrenheitToCelsiusConverter(BaseConverter):
    """Converts Fahrenheit values to Celsius: ``(value - 32) * 5 / 9``."""

    @property
    def source_scale(self) -> Scale:
        return Scale.FAHRENHEIT

    @property
    def target_scale(self) -> Scale:
        return Scale.CELSIUS

    def convert(self, temperature: Temperature) -> float:
        self.validate_input(temperature)
        return fahrenheit_to_celsius(temperature.value)


class FahrenheitToKelvinConverter(BaseConverter):
    """
    Converts Fahrenheit values to Kelvin.

    Goes through Celsius first: ``(value - 32) * 5 / 9 + 273.15``.
    """

    @property
    def source_scale(self) -> Scale:
        return Scale.FAHRENHEIT

    @property
    def target_scale(self) -> Scale:
        return Scale.KELVIN

    def convert(self, temperature: Temperature) -> float:
        self.validate_input(temperature)
        return celsius_to_kelvin(fahrenheit_to_celsius(temperature.value))
