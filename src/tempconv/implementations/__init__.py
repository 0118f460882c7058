"""Concrete converter implementations, one per scale pair"""

from tempconv.implementations.from_celsius import (
    CelsiusToFahrenheitConverter,
    CelsiusToKelvinConverter,
)
from tempconv.implementations.from_fahrenheit import (
    FahrenheitToCelsiusConverter,
    FahrenheitToKelvinConverter,
)
from tempconv.implementations.from_kelvin import (
    KelvinToCelsiusConverter,
    KelvinToFahrenheitConverter,
)

__all__ = [
    "CelsiusToFahrenheitConverter",
    "CelsiusToKelvinConverter",
    "FahrenheitToCelsiusConverter",
    "FahrenheitToKelvinConverter",
    "KelvinToCelsiusConverter",
    "KelvinToFahrenheitConverter",
]
