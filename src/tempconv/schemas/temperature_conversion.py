"""Pydantic schemas for batch temperature conversion"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from tempconv.models.temperature import ParseErrorKind, Temperature


class ConversionResult(BaseModel):
    """A successfully parsed and converted token"""
    token: str = Field(..., description="Original token as given on the command line")
    temperature: Temperature = Field(..., description="Parsed temperature")
    converted: float = Field(..., description="Value in the target scale")
    display: str = Field(..., description="Formatted output line")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "32FC",
                "temperature": {"value": 32.0, "scale": "F", "convert_to": "C"},
                "converted": 0.0,
                "display": "32F => 0C"
            }
        }
    )


class ParseFailure(BaseModel):
    """A token the parser rejected"""
    token: str = Field(..., description="Original token as given on the command line")
    kind: ParseErrorKind = Field(..., description="Reason the token was rejected")
    message: str = Field(..., description="Fixed human-readable message for the kind")
    display: str = Field(..., description="Formatted ParseError line")


class TokenOutcome(BaseModel):
    """Outcome of one token; exactly one of result and failure is set"""
    position: int = Field(..., ge=0, description="Zero-based position in the input")
    token: str
    result: Optional[ConversionResult] = None
    failure: Optional[ParseFailure] = None

    @model_validator(mode="after")
    def _check_exactly_one(self) -> "TokenOutcome":
        if (self.result is None) == (self.failure is None):
            raise ValueError("TokenOutcome needs exactly one of result or failure")
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None


class BatchConversionResponse(BaseModel):
    """Results and failures of a batch, each in input order"""
    results: List[ConversionResult] = Field(default_factory=list)
    failures: List[ParseFailure] = Field(default_factory=list)

    @computed_field
    @property
    def success_count(self) -> int:
        return len(self.results)

    @computed_field
    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @computed_field
    @property
    def total(self) -> int:
        return self.success_count + self.failure_count
