"""
Display formatting for conversions and parse failures.

Output lines are consumed positionally by downstream scripts, so the layout
here is fixed:

    32F => 0C
    ParseError: 10CC, "scale unknown"
"""

import math
from decimal import Decimal
from typing import Optional

from tempconv.models.temperature import Temperature, TemperatureParseError
from tempconv.registry import convert


def format_number(value: float) -> str:
    """
    Render a float with its shortest round-trip digits in positional notation.

    Integral values drop the fractional part (``32.0`` -> ``32``) and large or
    small magnitudes are written out in full rather than in exponent form.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_conversion(temperature: Temperature, converted: Optional[float] = None) -> str:
    """
    Format a temperature and its converted value as ``<value><Src> => <converted><Tgt>``.

    Args:
        temperature: Parsed temperature
        converted: Precomputed converted value; computed when omitted

    Returns:
        Display line without trailing newline
    """
    if converted is None:
        converted = convert(temperature)
    return (
        f"{format_number(temperature.value)}{temperature.scale} => "
        f"{format_number(converted)}{temperature.convert_to}"
    )


def format_parse_error(token: str, error: TemperatureParseError, quote_message: bool = True) -> str:
    """Format a parse failure as ``ParseError: <token>, <message>``."""
    message = str(error) if quote_message else error.description
    return f"ParseError: {token}, {message}"
