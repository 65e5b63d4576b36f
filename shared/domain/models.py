"""Domain models for requests, range entries, and results."""

from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict
from shared.domain.consts import CheckStatus, OutcomeStatus, ErrorKind


@dataclass(frozen=True)
class RangeEntry:
    """One record of a range response: a hash suffix and its breach count."""
    suffix: str  # uppercase, 35 hex characters
    count: int


class PasswordRequest(BaseModel):
    """Inbound fragments used to build the character pool."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "word1": "river",
                "word2": "stone",
                "word3": "cloud",
                "symbols": "!@#",
                "numbers": "4729",
            }
        }
    )

    word1: str = Field("", description="First word fragment")
    word2: str = Field("", description="Second word fragment")
    word3: str = Field("", description="Third word fragment")
    symbols: str = Field("", description="Symbol characters to include")
    numbers: str = Field("", description="Digit characters to include")

    @field_validator("word1", "word2", "word3", "symbols", "numbers", mode="before")
    @classmethod
    def strip_whitespace(cls, value: Optional[str]) -> str:
        """Trim surrounding whitespace; treat None as empty."""
        if value is None:
            return ""
        return str(value).strip()


class CheckRequest(BaseModel):
    """Inbound payload for a standalone breach check."""
    password: str = Field(..., min_length=1, description="Password to check (never stored)")


class BreachCheckResult(BaseModel):
    """Result of checking a password against the breach database."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "SAFE",
                "hash_prefix": "21BD1",
                "occurrences": 0,
                "error_kind": None,
                "error_message": None,
            }
        }
    )

    status: CheckStatus = Field(..., description="COMPROMISED, SAFE, or UNKNOWN")
    # Only the disclosed prefix; never the password or the full digest
    hash_prefix: str = Field("", description="First 5 hex characters of the SHA-1 digest")
    occurrences: int = Field(0, ge=0, description="Times the password appears in breaches")
    error_kind: Optional[ErrorKind] = Field(None, description="Failure kind if status is UNKNOWN")
    error_message: Optional[str] = Field(None, description="Failure detail if status is UNKNOWN")

    @property
    def is_compromised(self) -> bool:
        """Check if the password was found in the breach database."""
        return self.status == CheckStatus.COMPROMISED


class PasswordOutcome(BaseModel):
    """Outcome of one generate-and-check request."""
    password: Optional[str] = Field(None, description="Generated password, if any")
    status: OutcomeStatus = Field(..., description="Overall request status")
    message: str = Field(..., description="Human-readable status message")
    breach: Optional[BreachCheckResult] = Field(None, description="Breach check details")
