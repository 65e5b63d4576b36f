"""Domain models and entities."""

from shared.domain.models import (
    RangeEntry,
    PasswordRequest,
    CheckRequest,
    BreachCheckResult,
    PasswordOutcome,
)
from shared.domain.consts import (
    CheckStatus,
    OutcomeStatus,
    ErrorKind,
    PolicyName,
    HashAlgorithm,
    RangeQuery,
    Composition,
    StatusMessage,
)
from shared.domain.errors import (
    InputIncompleteError,
    GenerationExhaustedError,
    BreachCheckError,
    BreachServiceUnavailableError,
    BreachCheckTimeoutError,
    BreachServiceError,
    MalformedResponseError,
)

__all__ = [
    "RangeEntry",
    "PasswordRequest",
    "CheckRequest",
    "BreachCheckResult",
    "PasswordOutcome",
    "CheckStatus",
    "OutcomeStatus",
    "ErrorKind",
    "PolicyName",
    "HashAlgorithm",
    "RangeQuery",
    "Composition",
    "StatusMessage",
    "InputIncompleteError",
    "GenerationExhaustedError",
    "BreachCheckError",
    "BreachServiceUnavailableError",
    "BreachCheckTimeoutError",
    "BreachServiceError",
    "MalformedResponseError",
]
