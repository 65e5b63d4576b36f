"""Checker services layer."""

from checker.services.range_query import (
    digest,
    validate_digest,
    split_digest,
    parse_range_response,
    find_suffix,
)

__all__ = [
    "digest",
    "validate_digest",
    "split_digest",
    "parse_range_response",
    "find_suffix",
]
