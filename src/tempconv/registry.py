"""
Converter Registry

Registers all available converters with the converter factory.
Import this module to ensure all converters are registered.
"""

import logging

from tempconv.base.factory import ConverterFactory
from tempconv.implementations import (
    CelsiusToFahrenheitConverter,
    CelsiusToKelvinConverter,
    FahrenheitToCelsiusConverter,
    FahrenheitToKelvinConverter,
    KelvinToCelsiusConverter,
    KelvinToFahrenheitConverter,
)
from tempconv.models.temperature import Temperature

logger = logging.getLogger(__name__)

CONVERTER_CLASSES = (
    CelsiusToFahrenheitConverter,
    CelsiusToKelvinConverter,
    FahrenheitToCelsiusConverter,
    FahrenheitToKelvinConverter,
    KelvinToCelsiusConverter,
    KelvinToFahrenheitConverter,
)


def register_all_converters():
    """Register all available converters with the factory"""
    for converter_class in CONVERTER_CLASSES:
        ConverterFactory.register(converter_class)


def convert(temperature: Temperature) -> float:
    """
    Convert a temperature to its target scale.

    A pair with no registered converter leaves the value unchanged.
    """
    if not ConverterFactory.supports_conversion(*temperature.pair):
        logger.warning(
            f"[convert] No converter for {temperature.scale} -> {temperature.convert_to}, "
            f"returning value unchanged"
        )
        return temperature.value

    return ConverterFactory.for_temperature(temperature).convert(temperature)


# Auto-register on import
register_all_converters()
