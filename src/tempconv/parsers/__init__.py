"""Parsers for temperature conversion requests"""

from tempconv.parsers.token import TemperatureParser, parse_number

__all__ = ["TemperatureParser", "parse_number"]
