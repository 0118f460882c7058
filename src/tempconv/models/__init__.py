"""Data models for temperature conversion"""

from tempconv.models.temperature import (
    ParseErrorKind,
    Temperature,
    TemperatureParseError,
)

__all__ = [
    "ParseErrorKind",
    "Temperature",
    "TemperatureParseError",
]
