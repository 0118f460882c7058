"""
Token Parser for Temperature Conversion Requests
Turns a raw command-line token such as ``32FC`` into a Temperature
"""

import re
from typing import Dict, Optional

from tempconv.base.converter import Scale
from tempconv.models.temperature import ParseErrorKind, Temperature, TemperatureParseError

# Decimal or scientific notation with an optional sign, or inf/infinity/nan.
NUMBER_PATTERN = re.compile(
    r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan)',
    re.IGNORECASE | re.ASCII
)

# Unicode White_Space characters. str.strip() would also drop the \x1c-\x1f
# separators, which are part of a token.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

SCALE_PAIRS: Dict[str, tuple[Scale, Scale]] = {
    'CF': (Scale.CELSIUS, Scale.FAHRENHEIT),
    'CK': (Scale.CELSIUS, Scale.KELVIN),
    'FC': (Scale.FAHRENHEIT, Scale.CELSIUS),
    'FK': (Scale.FAHRENHEIT, Scale.KELVIN),
    'KC': (Scale.KELVIN, Scale.CELSIUS),
    'KF': (Scale.KELVIN, Scale.FAHRENHEIT),
}


def parse_number(text: str) -> Optional[float]:
    """
    Parse text as a float, accepting only the plain numeric grammar.

    ``float()`` alone also takes underscores and surrounding whitespace,
    which are not valid in a token.
    """
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    return float(text)


class TemperatureParser:
    """Parser for temperature tokens of the form <number><source><target>"""

    def __init__(self):
        self.scale_pairs = SCALE_PAIRS

    def parse(self, token: str) -> Temperature:
        """
        Parse a token into a Temperature

        Args:
            token: Raw token, e.g. ``"32FC"`` or ``" -40cf "``

        Returns:
            Temperature with the parsed value and scale pair

        Raises:
            TemperatureParseError: If the token is empty, has no known
                scale pair, or its numeric part does not parse
        """
        text = token.strip(WHITESPACE)

        if not text:
            raise TemperatureParseError(ParseErrorKind.INCONVERTIBLE)

        # A lone character is either a bare number or nothing usable
        if len(text) == 1:
            if parse_number(text) is not None:
                raise TemperatureParseError(ParseErrorKind.SCALE_UNKNOWN)
            raise TemperatureParseError(ParseErrorKind.NOT_NUMERIC)

        text = text.upper()
        number, suffix = text[:-2], text[-2:]

        pair = self.scale_pairs.get(suffix)
        if pair is None:
            raise TemperatureParseError(ParseErrorKind.SCALE_UNKNOWN)

        # Two-character tokens leave an empty number and fail here
        value = parse_number(number)
        if value is None:
            raise TemperatureParseError(ParseErrorKind.NOT_NUMERIC)

        return Temperature(value=value, scale=pair[0], convert_to=pair[1])
