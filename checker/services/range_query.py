"""SHA-1 digest and range response handling for the k-anonymity query."""

import hashlib
import re
from typing import Iterable, List, Tuple
from shared.domain.consts import HashAlgorithm, RangeQuery
from shared.domain.errors import MalformedResponseError
from shared.domain.models import RangeEntry

_ENTRY_PATTERN = re.compile(
    rf"^([0-9A-Fa-f]{{{RangeQuery.SUFFIX_LENGTH}}})(?:{RangeQuery.COUNT_SEPARATOR}\s*(\d+))?$"
)
_DIGEST_PATTERN = re.compile(rf"^[0-9A-Fa-f]{{{HashAlgorithm.SHA1_LENGTH}}}$")


def digest(password: str) -> str:
    """Return the SHA-1 digest of the UTF-8 encoded password as 40 lowercase hex characters."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest()


def validate_digest(value: str) -> bool:
    """
    Validate that value is exactly 40 hex characters.

    Returns:
        True if valid SHA-1 digest format, False otherwise.
    """
    return bool(_DIGEST_PATTERN.match(value))


def split_digest(sha1_digest: str) -> Tuple[str, str]:
    """
    Split a digest into the disclosed prefix and the locally kept suffix.

    Both parts are upper-cased to match the range endpoint's alphabet.

    Raises:
        ValueError: If the digest is not 40 hex characters.
    """
    if not validate_digest(sha1_digest):
        raise ValueError(
            f"Invalid SHA-1 digest: must be {HashAlgorithm.SHA1_LENGTH} hex characters."
        )
    normalized = sha1_digest.upper()
    return normalized[:RangeQuery.PREFIX_LENGTH], normalized[RangeQuery.PREFIX_LENGTH:]


def parse_range_response(body: str) -> List[RangeEntry]:
    """
    Parse a range response body into entries.

    Each non-blank line must be a 35 hex character suffix, optionally
    followed by ":<count>". A suffix without a count is recorded with
    count 1. Suffixes are upper-cased.

    Raises:
        MalformedResponseError: If any non-blank line has another shape.
    """
    entries = []
    for line_number, raw_line in enumerate(body.splitlines(), 1):
        line = raw_line.strip()
        if not line:
            continue

        match = _ENTRY_PATTERN.match(line)
        if match is None:
            raise MalformedResponseError(
                f"Unexpected range entry {line[:40]!r}", line_number=line_number
            )

        suffix, count = match.groups()
        entries.append(RangeEntry(
            suffix=suffix.upper(),
            count=int(count) if count is not None else 1,
        ))
    return entries


def find_suffix(entries: Iterable[RangeEntry], suffix: str) -> int:
    """
    Return the breach count recorded for `suffix`, or 0 if it is absent.

    Padding entries carry a count of 0 and therefore never count as a match.
    """
    target = suffix.upper()
    for entry in entries:
        if entry.suffix == target:
            return entry.count
    return 0
