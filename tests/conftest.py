"""Pytest configuration and fixtures."""

import random
import pytest
from shared.config.config import config
from shared.domain.models import PasswordRequest
from checker.infrastructure.breach_client import BreachClient

# sha1("password") = 5baa61e4c9b93f3f0682250b6cf8331b7ee68fd8
KNOWN_PASSWORD = "password"
KNOWN_PREFIX = "5BAA6"
KNOWN_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"


def range_url(prefix: str) -> str:
    """Full range endpoint URL for a prefix."""
    return f"{config.BREACH_API_URL}/range/{prefix}"


def range_body(*suffixes: str, count: int = 3) -> str:
    """Build a range response body in the service's SUFFIX:COUNT\\r\\n format."""
    filler = [
        "0018A45C4D1DEF81644B54AB7F969B88D65:1",
        "00D4F6E8FA6EECAD2A3AA415EEC418D38EC:2",
        "011053FD0102E94D6AE2F8B83D76FAF94F6:1",
    ]
    lines = filler + [f"{suffix}:{count}" for suffix in suffixes]
    return "\r\n".join(lines)


@pytest.fixture
def rng():
    """Seeded random source for reproducible generation."""
    return random.Random(1234)


@pytest.fixture
def breach_client():
    """Create a BreachClient pointed at the configured service."""
    return BreachClient()


@pytest.fixture
def complete_request():
    """A request with every fragment filled in."""
    return PasswordRequest(
        word1="river",
        word2="stone",
        word3="cloud",
        symbols="!@#",
        numbers="4729",
    )
