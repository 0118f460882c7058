"""Lookup of the converter for a temperature's scale pair"""

import logging
from typing import Any, Dict, Type

from tempconv.base.converter import BaseConverter, Scale

logger = logging.getLogger(__name__)


class ConverterFactory:
    """
    Holds one shared converter per (source, target) scale pair.

    Converters are keyed by the pair they declare themselves, so a class can
    only ever answer for the conversion it implements. Same-scale pairs are
    never accepted.
    """

    _converters: Dict[tuple[Scale, Scale], BaseConverter] = {}

    @classmethod
    def register(cls, converter_class: Type[BaseConverter]) -> BaseConverter:
        """
        Register a converter under the scale pair it declares.

        Args:
            converter_class: BaseConverter subclass to instantiate and store

        Returns:
            The stored converter instance

        Raises:
            ValueError: If the class converts a scale to itself, or its pair
                is already taken by a different class
        """
        converter = converter_class()
        source, target = converter.pair

        if source == target:
            raise ValueError(
                f"{converter_class.__name__} converts {source} to itself; "
                f"only cross-scale pairs can be registered"
            )

        existing = cls._converters.get(converter.pair)
        if existing is not None and type(existing) is not converter_class:
            raise ValueError(
                f"{source}{target} is already handled by {type(existing).__name__}, "
                f"cannot register {converter_class.__name__}"
            )

        cls._converters[converter.pair] = converter
        logger.debug(f"[factory] Registered {converter_class.__name__} for {source}{target}")
        return converter

    @classmethod
    def get(cls, source_scale: Scale, target_scale: Scale) -> BaseConverter:
        """
        Return the converter for a scale pair.

        Raises:
            ValueError: If no converter is registered for the pair
        """
        converter = cls._converters.get((source_scale, target_scale))
        if converter is None:
            available = ", ".join(f"{s}{t}" for s, t in cls._converters)
            raise ValueError(
                f"No converter registered for {source_scale} -> {target_scale}. "
                f"Available conversions: {available}"
            )
        return converter

    @classmethod
    def for_temperature(cls, temperature: Any) -> BaseConverter:
        """Return the converter matching a Temperature's own pair."""
        return cls.get(*temperature.pair)

    @classmethod
    def get_available_conversions(cls) -> list[tuple[Scale, Scale]]:
        return list(cls._converters.keys())

    @classmethod
    def supports_conversion(cls, source_scale: Scale, target_scale: Scale) -> bool:
        return (source_scale, target_scale) in cls._converters
