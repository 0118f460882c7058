"""
tempconv - Temperature Conversion Library

Converts values between Celsius, Fahrenheit and Kelvin from compact tokens
such as ``32FC`` (32 degrees Fahrenheit to Celsius).

## Data Flow

    token ──► TemperatureParser ──► Temperature ──► ConverterFactory ──► float
                     │                                                    │
                     └──► TemperatureParseError                 format_conversion

## Architecture

tempconv/
├── base/              # Framework (BaseConverter, Scale, ConverterFactory)
├── models/            # Temperature value object and parse errors
├── parsers/           # Token grammar
├── implementations/   # One converter per scale pair
├── registry.py        # Registers converters, module-level convert()
├── outbound/          # Display formatting
├── schemas/           # Batch result models
├── services/          # Ordered batch processing
├── config/            # YAML-backed settings
└── cli.py             # Command line entry point

## Usage

```python
from tempconv import TemperatureParser, convert, format_conversion

temperature = TemperatureParser().parse("32FC")
convert(temperature)             # 0.0
format_conversion(temperature)   # "32F => 0C"
```
"""

# Base framework
from tempconv.base import BaseConverter, ConverterFactory, Scale
from tempconv.models import ParseErrorKind, Temperature, TemperatureParseError
from tempconv.parsers import TemperatureParser
from tempconv.registry import convert
from tempconv.outbound import format_conversion, format_parse_error

__version__ = "0.1.0"

__all__ = [
    # Framework
    "BaseConverter",
    "ConverterFactory",
    "Scale",
    # Models
    "ParseErrorKind",
    "Temperature",
    "TemperatureParseError",
    # Operations
    "TemperatureParser",
    "convert",
    "format_conversion",
    "format_parse_error",
]
