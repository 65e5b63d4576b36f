"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class CheckStatus(str, Enum):
    """Breach check status constants."""
    COMPROMISED = "COMPROMISED"
    SAFE = "SAFE"
    UNKNOWN = "UNKNOWN"


class OutcomeStatus(str, Enum):
    """Status of a full generate-and-check request."""
    COMPROMISED = "COMPROMISED"
    SAFE = "SAFE"
    UNKNOWN = "UNKNOWN"
    INPUT_INCOMPLETE = "INPUT_INCOMPLETE"
    GENERATION_EXHAUSTED = "GENERATION_EXHAUSTED"


class ErrorKind(str, Enum):
    """Reasons a breach check could not complete."""
    NETWORK = "NETWORK"
    TIMEOUT = "TIMEOUT"
    SERVICE = "SERVICE"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


class PolicyName(str, Enum):
    """Composition policy name constants."""
    FIXED_SYMBOL_CLASS = "fixed_symbol_class"
    CALLER_SYMBOLS = "caller_symbols"


class HashAlgorithm:
    """Hash algorithm constants."""
    SHA1 = "sha1"

    SHA1_LENGTH = 40  # SHA-1 digest is 40 hex characters


class RangeQuery:
    """Constants for the k-anonymity range query."""
    PREFIX_LENGTH = 5
    SUFFIX_LENGTH = HashAlgorithm.SHA1_LENGTH - PREFIX_LENGTH  # 35
    PATH = "/range/{prefix}"
    COUNT_SEPARATOR = ":"


class Composition:
    """Composition minimums for accepted passwords."""
    MIN_UPPERCASE = 2
    MIN_SYMBOLS = 2
    MIN_DISTINCT_DIGITS = 2

    SYMBOL_CLASS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~`")


class StatusMessage:
    """Human-readable status strings shown to the caller."""
    INPUT_INCOMPLETE = "Please fill in all fields."
    GENERATION_EXHAUSTED = "Unable to generate a valid password with the given constraints."
    COMPROMISED = "Compromised! Generate a new password."
    SAFE = "Safe password!"
    UNKNOWN = "Unable to verify password against the breach database. Try again."
