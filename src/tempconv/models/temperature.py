"""Core data models for temperature conversion"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, model_validator

from tempconv.base.converter import Scale


class ParseErrorKind(str, Enum):
    """Reasons a token can be rejected by the parser"""
    NOT_NUMERIC = "not_numeric"
    SCALE_UNKNOWN = "scale_unknown"
    INCONVERTIBLE = "inconvertible"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    ParseErrorKind.NOT_NUMERIC: "not a numeric value",
    ParseErrorKind.SCALE_UNKNOWN: "scale unknown",
    ParseErrorKind.INCONVERTIBLE: "string is empty",
}


class TemperatureParseError(ValueError):
    """
    Raised when a token cannot be turned into a Temperature.

    ``str()`` renders the message between double quotes, which is the form
    printed on ``ParseError:`` lines.
    """

    def __init__(self, kind: ParseErrorKind):
        self.kind = kind
        super().__init__(self.description)

    @property
    def description(self) -> str:
        return self.kind.message

    def __str__(self) -> str:
        return f'"{self.description}"'

    def __repr__(self) -> str:
        return f"TemperatureParseError(kind={self.kind.name})"


class Temperature(BaseModel):
    """
    A value in a source scale together with the scale to convert it to.

    Instances are immutable and only describe cross-scale pairs.
    """
    model_config = ConfigDict(frozen=True)

    value: float
    scale: Scale
    convert_to: Scale

    @model_validator(mode="after")
    def _check_distinct_scales(self) -> "Temperature":
        if self.scale == self.convert_to:
            raise ValueError(f"source and target scale are both {self.scale}")
        return self

    @property
    def pair(self) -> tuple[Scale, Scale]:
        return (self.scale, self.convert_to)
