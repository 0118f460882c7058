"""Base converter abstract class"""

from abc import ABC, abstractmethod
from typing import Any
from enum import Enum


class Scale(str, Enum):
    """Supported temperature scales, valued by their single-letter code"""
    CELSIUS = "C"
    FAHRENHEIT = "F"
    KELVIN = "K"

    def __str__(self) -> str:
        return self.value


class BaseConverter(ABC):
    """
    Abstract base class for all temperature converters.

    Each converter handles one ordered scale pair
    (e.g., Celsius -> Fahrenheit, Kelvin -> Celsius) and holds no state,
    so a single instance per pair is shared.
    """

    @abstractmethod
    def convert(self, temperature: Any) -> float:
        """
        Convert a temperature to the target scale.

        Args:
            temperature: Temperature in the source scale

        Returns:
            Converted value in the target scale

        Raises:
            ValueError: If the temperature does not match this converter's pair
        """
        pass

    def validate_input(self, temperature: Any) -> bool:
        """
        Validate a temperature before conversion.

        Args:
            temperature: Temperature to validate

        Returns:
            True if valid

        Raises:
            ValueError: If the scale pair does not match this converter
        """
        source, target = temperature.pair
        if (source, target) != self.pair:
            raise ValueError(
                f"{type(self).__name__} handles {self.source_scale} -> {self.target_scale}, "
                f"got {source} -> {target}"
            )
        return True

    @property
    def pair(self) -> tuple[Scale, Scale]:
        return (self.source_scale, self.target_scale)

    @property
    @abstractmethod
    def source_scale(self) -> Scale:
        """Return the scale this converter accepts"""
        pass

    @property
    @abstractmethod
    def target_scale(self) -> Scale:
        """Return the scale this converter produces"""
        pass
