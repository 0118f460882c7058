"""Schemas describing temperature conversion runs"""

from tempconv.schemas.temperature_conversion import (
    BatchConversionResponse,
    ConversionResult,
    ParseFailure,
    TokenOutcome,
)

__all__ = [
    "BatchConversionResponse",
    "ConversionResult",
    "ParseFailure",
    "TokenOutcome",
]
