"""Checker infrastructure layer."""

from checker.infrastructure.breach_client import BreachClient

__all__ = [
    "BreachClient",
]
