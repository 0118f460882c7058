"""
Temperature Conversion Service

Business logic layer for temperature conversion operations.
Drives tokens through the parser and the registered converters, keeping
input order and never letting one bad token stop the rest.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from tempconv.base.converter import Scale
from tempconv.base.factory import ConverterFactory
from tempconv.config.settings import TempconvConfig
from tempconv.models.temperature import TemperatureParseError
from tempconv.outbound.display import format_conversion, format_parse_error
from tempconv.parsers.token import TemperatureParser
from tempconv.registry import convert
from tempconv.schemas.temperature_conversion import (
    BatchConversionResponse,
    ConversionResult,
    ParseFailure,
    TokenOutcome,
)

logger = logging.getLogger(__name__)


class TemperatureConversionService:
    """
    Service for handling temperature conversion operations.

    Provides:
    - Per-token parsing and conversion with typed failures
    - Ordered iteration so callers can report failures as they happen
    - Batch conversion with a summary response
    - Discovery of the supported scale pairs
    """

    def __init__(self, config: Optional[TempconvConfig] = None):
        """Initialize the temperature conversion service."""
        self.config = config or TempconvConfig()
        self.parser = TemperatureParser()
        self.factory = ConverterFactory()

    def parse_token(self, token: str, position: int = 0) -> TokenOutcome:
        """
        Parse and convert a single token.

        Args:
            token: Raw token as received
            position: Position of the token in its batch

        Returns:
            TokenOutcome holding either the conversion or the parse failure
        """
        try:
            temperature = self.parser.parse(token)
        except TemperatureParseError as e:
            logger.info(f"[parse] Rejected token {token!r}: {e.description}")
            failure = ParseFailure(
                token=token,
                kind=e.kind,
                message=e.description,
                display=format_parse_error(token, e, quote_message=self.config.quote_error_messages)
            )
            return TokenOutcome(position=position, token=token, failure=failure)

        converted = convert(temperature)
        logger.debug(
            f"[convert] {token!r}: {temperature.value} {temperature.scale} -> "
            f"{converted} {temperature.convert_to}"
        )
        result = ConversionResult(
            token=token,
            temperature=temperature,
            converted=converted,
            display=format_conversion(temperature, converted)
        )
        return TokenOutcome(position=position, token=token, result=result)

    def iter_outcomes(self, tokens: Iterable[str]) -> Iterator[TokenOutcome]:
        """Yield one outcome per token, in input order."""
        for position, token in enumerate(tokens):
            yield self.parse_token(token, position)

    def convert_tokens(self, tokens: Iterable[str]) -> BatchConversionResponse:
        """
        Convert a batch of tokens.

        Args:
            tokens: Raw tokens

        Returns:
            BatchConversionResponse with results and failures in input order
        """
        response = BatchConversionResponse()
        for outcome in self.iter_outcomes(tokens):
            if outcome.ok:
                response.results.append(outcome.result)
            else:
                response.failures.append(outcome.failure)

        logger.info(
            f"[batch] Converted {response.success_count}/{response.total} token(s), "
            f"{response.failure_count} failure(s)"
        )
        return response

    def get_available_conversions(self) -> List[str]:
        """List supported scale pairs as two-letter codes, e.g. ``"CF"``."""
        return [f"{source}{target}" for source, target in self.factory.get_available_conversions()]

    def supports_conversion(self, source: Scale, target: Scale) -> bool:
        return self.factory.supports_conversion(source, target)
