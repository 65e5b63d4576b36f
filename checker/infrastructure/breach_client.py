"""HTTP client for the breach-hash range service."""

import logging
import re
from typing import Optional
import httpx
from shared.config.config import config
from shared.domain.consts import CheckStatus, RangeQuery
from shared.domain.errors import (
    BreachCheckError,
    BreachCheckTimeoutError,
    BreachServiceError,
    BreachServiceUnavailableError,
)
from shared.domain.models import BreachCheckResult
from checker.services.range_query import digest, split_digest, parse_range_response, find_suffix

logger = logging.getLogger(__name__)

_PREFIX_PATTERN = re.compile(rf"^[0-9A-F]{{{RangeQuery.PREFIX_LENGTH}}}$")


class BreachClient:
    """
    Async client for the k-anonymity range endpoint.

    Only the first 5 hex characters of a SHA-1 digest leave this process.
    The returned suffix list is searched locally.

    Failures are raised as BreachCheckError subclasses by the boolean
    lookups, and reported as CheckStatus.UNKNOWN by check_password and
    check_digest. A failed check is never reported as safe.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        add_padding: Optional[bool] = None,
    ) -> None:
        """
        Initialize breach client.

        Unset arguments fall back to the BREACH_* configuration values.
        """
        self.base_url = (base_url or config.BREACH_API_URL).rstrip("/")
        self.timeout = config.BREACH_REQUEST_TIMEOUT if timeout is None else timeout
        add_padding = config.BREACH_ADD_PADDING if add_padding is None else add_padding

        headers = {"User-Agent": user_agent or config.BREACH_USER_AGENT}
        if add_padding:
            headers["Add-Padding"] = "true"

        self.client = httpx.AsyncClient(timeout=self.timeout, headers=headers)

    async def __aenter__(self) -> "BreachClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch_range(self, prefix: str) -> str:
        """
        Fetch the raw range response body for a 5 character hash prefix.

        Returns:
            Response body text.

        Raises:
            ValueError: If prefix is not 5 uppercase hex characters.
            BreachCheckTimeoutError: If the request timed out.
            BreachServiceUnavailableError: If the service could not be reached.
            BreachServiceError: If the service answered with a non-200 status.
        """
        if not _PREFIX_PATTERN.match(prefix):
            raise ValueError(
                f"Invalid range prefix {prefix!r}: must be "
                f"{RangeQuery.PREFIX_LENGTH} uppercase hex characters."
            )

        url = f"{self.base_url}{RangeQuery.PATH.format(prefix=prefix)}"
        logger.debug(f"Querying range for prefix {prefix}")

        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as e:
            logger.error(f"Range query for prefix {prefix} timed out after {self.timeout}s: {e}")
            raise BreachCheckTimeoutError(
                f"Range query timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP error querying range for prefix {prefix}: {e}")
            raise BreachServiceUnavailableError(f"Range query failed: {e}") from e

        if response.status_code != 200:
            logger.error(
                f"Range query for prefix {prefix} returned HTTP {response.status_code}"
            )
            raise BreachServiceError(response.status_code, response.text[:200])

        return response.text

    async def lookup_digest(self, sha1_digest: str) -> int:
        """
        Return how often the digest appears in the breach database.

        Returns:
            Breach count; 0 when the suffix is absent.

        Raises:
            ValueError: If the digest is not 40 hex characters.
            BreachCheckError: If the range query could not complete or the
                response was malformed.
        """
        prefix, suffix = split_digest(sha1_digest)
        body = await self.fetch_range(prefix)
        occurrences = find_suffix(parse_range_response(body), suffix)
        logger.info(f"Range query for prefix {prefix} complete (found={occurrences > 0})")
        return occurrences

    async def is_compromised(self, password: str) -> bool:
        """
        Check whether a password appears in the breach database.

        Raises:
            BreachCheckError: If the check could not complete.
        """
        return await self.lookup_digest(digest(password)) > 0

    async def check_digest(self, sha1_digest: str) -> BreachCheckResult:
        """
        Check a pre-computed SHA-1 digest and report the result as a status.

        Returns:
            BreachCheckResult with COMPROMISED, SAFE, or UNKNOWN status.

        Raises:
            ValueError: If the digest is not 40 hex characters.
        """
        prefix, _ = split_digest(sha1_digest)
        try:
            occurrences = await self.lookup_digest(sha1_digest)
        except BreachCheckError as e:
            logger.warning(f"Breach check for prefix {prefix} incomplete ({e.kind.value}): {e}")
            return BreachCheckResult(
                status=CheckStatus.UNKNOWN,
                hash_prefix=prefix,
                occurrences=0,
                error_kind=e.kind,
                error_message=str(e),
            )

        return BreachCheckResult(
            status=CheckStatus.COMPROMISED if occurrences > 0 else CheckStatus.SAFE,
            hash_prefix=prefix,
            occurrences=occurrences,
        )

    async def check_password(self, password: str) -> BreachCheckResult:
        """
        Check a password and report the result as a status.

        Returns:
            BreachCheckResult with COMPROMISED, SAFE, or UNKNOWN status.
        """
        return await self.check_digest(digest(password))

    async def close(self) -> None:
        """
        Close HTTP client and cleanup resources.

        Should be called when done with the client to properly close connections.
        """
        await self.client.aclose()
