"""
Outbound formatting - render conversions and parse failures for display.
"""

from tempconv.outbound.display import format_conversion, format_number, format_parse_error

__all__ = [
    "format_conversion",
    "format_number",
    "format_parse_error",
]
