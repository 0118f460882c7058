"""Service layer for temperature conversion"""

from tempconv.services.temperature_conversion_service import TemperatureConversionService

__all__ = ["TemperatureConversionService"]
