"""Base classes and factory for temperature converters"""

from tempconv.base.converter import BaseConverter, Scale
from tempconv.base.factory import ConverterFactory

__all__ = [
    "BaseConverter",
    "Scale",
    "ConverterFactory",
]
