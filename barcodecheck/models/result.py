"""
Typed validation outcome for callers that need to know why a code failed.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from barcodecheck.models.family import BarcodeFamily


class ValidationKind(str, Enum):
    """Outcome of validating a code against a family."""

    VALID = "valid"
    WRONG_LENGTH = "wrong_length"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_NUMBER_SYSTEM = "invalid_number_system"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class ValidationResult(BaseModel):
    """Result of validating a single code."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Code after separator stripping")
    family: BarcodeFamily
    kind: ValidationKind

    # Check digits as characters; ISBN-10 may use "X"
    expected_check_digit: str | None = Field(None, description="Recomputed check digit")
    actual_check_digit: str | None = Field(None, description="Check digit found in the code")

    message: str = Field("", description="Human-readable reason for rejection")

    @property
    def valid(self) -> bool:
        """Check if the code passed every check."""
        return self.kind == ValidationKind.VALID


class InvalidCodeError(ValueError):
    """Raised by conversion helpers when the input is not a valid code."""

    def __init__(self, code: str, family: BarcodeFamily, reason: str):
        self.code = code
        self.family = family
        self.reason = reason
        super().__init__(f"Invalid {family.value} code {code!r}: {reason}")
