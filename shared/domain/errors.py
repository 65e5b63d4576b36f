"""Exceptions raised by the generator and the breach checker."""

from typing import Optional, Sequence
from shared.domain.consts import ErrorKind


class InputIncompleteError(ValueError):
    """One or more required input fragments are empty."""

    def __init__(self, missing_fields: Sequence[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class GenerationExhaustedError(Exception):
    """Rejection sampling found no acceptable candidate within the attempt budget."""

    def __init__(self, attempts: int, length: int, pool_size: int) -> None:
        self.attempts = attempts
        self.length = length
        self.pool_size = pool_size
        super().__init__(
            f"No password of length {length} met the composition constraints "
            f"after {attempts} attempts (pool size {pool_size})"
        )


class BreachCheckError(Exception):
    """Base class for breach checks that could not complete."""

    kind: ErrorKind = ErrorKind.SERVICE


class BreachServiceUnavailableError(BreachCheckError):
    """The range query could not reach the breach service."""

    kind = ErrorKind.NETWORK


class BreachCheckTimeoutError(BreachCheckError):
    """The range query did not complete within the configured timeout."""

    kind = ErrorKind.TIMEOUT


class BreachServiceError(BreachCheckError):
    """The breach service answered with a non-200 status."""

    kind = ErrorKind.SERVICE

    def __init__(self, status_code: int, detail: Optional[str] = None) -> None:
        self.status_code = status_code
        message = f"Breach service returned HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedResponseError(BreachCheckError):
    """The range response body did not have the expected shape."""

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
