"""Web services layer."""

from web.services.password_service import validate_request, generate_and_check

__all__ = [
    "validate_request",
    "generate_and_check",
]
