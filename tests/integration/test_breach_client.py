"""Tests for BreachClient HTTP communication."""

import pytest
import respx
import httpx
from checker.infrastructure.breach_client import BreachClient
from checker.services.range_query import digest
from shared.domain.consts import CheckStatus, ErrorKind
from shared.domain.errors import (
    BreachCheckError,
    BreachCheckTimeoutError,
    BreachServiceError,
    BreachServiceUnavailableError,
    MalformedResponseError,
)
from conftest import KNOWN_PASSWORD, KNOWN_PREFIX, KNOWN_SUFFIX, range_url, range_body


class TestFetchRange:
    """Tests for the raw range request."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_requests_prefix_path(self, breach_client):
        """Test GET {base}/range/{PREFIX} returns the body."""
        route = respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body())
        )

        body = await breach_client.fetch_range(KNOWN_PREFIX)

        assert body == range_body()
        assert route.called
        request = route.calls.last.request
        assert request.method == "GET"
        assert request.url.path == f"/range/{KNOWN_PREFIX}"
        assert request.content == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_sends_user_agent_without_padding_by_default(self, breach_client):
        """Test default headers."""
        route = respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body())
        )

        await breach_client.fetch_range(KNOWN_PREFIX)

        headers = route.calls.last.request.headers
        assert headers["User-Agent"] == "pwgen-breach-check/1.0"
        assert "Add-Padding" not in headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_add_padding_header(self):
        """Test that padding can be requested."""
        client = BreachClient(add_padding=True, user_agent="custom-agent")
        route = respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body())
        )

        await client.fetch_range(KNOWN_PREFIX)
        await client.close()

        headers = route.calls.last.request.headers
        assert headers["Add-Padding"] == "true"
        assert headers["User-Agent"] == "custom-agent"

    @pytest.mark.asyncio
    @respx.mock
    async def test_custom_base_url(self):
        """Test that base_url overrides the configured service."""
        route = respx.get(f"http://breach.local:8080/range/{KNOWN_PREFIX}").mock(
            return_value=httpx.Response(200, text="")
        )

        async with BreachClient(base_url="http://breach.local:8080/") as client:
            await client.fetch_range(KNOWN_PREFIX)

        assert route.called

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prefix", ["5baa6", "5BAA", "5BAA61", "ZZZZZ"])
    async def test_invalid_prefix_rejected(self, breach_client, prefix):
        """Test that only 5 uppercase hex characters are sent."""
        with pytest.raises(ValueError, match="Invalid range prefix"):
            await breach_client.fetch_range(prefix)

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_raises_timeout_error(self, breach_client):
        """Test that a timeout is surfaced as its own failure kind."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            side_effect=httpx.TimeoutException("Request timeout")
        )

        with pytest.raises(BreachCheckTimeoutError):
            await breach_client.fetch_range(KNOWN_PREFIX)

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error_raises_unavailable(self, breach_client):
        """Test that a connection error is a network failure."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(BreachServiceUnavailableError):
            await breach_client.fetch_range(KNOWN_PREFIX)

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize("status_code", [400, 404, 429, 500, 503])
    async def test_non_200_raises_service_error(self, breach_client, status_code):
        """Test that non-200 answers are service errors."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(status_code, text="nope")
        )

        with pytest.raises(BreachServiceError) as exc_info:
            await breach_client.fetch_range(KNOWN_PREFIX)

        assert exc_info.value.status_code == status_code


class TestIsCompromised:
    """Tests for the boolean membership check."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_suffix_present(self, breach_client):
        """Test that a body containing the suffix means compromised."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body(KNOWN_SUFFIX, count=9545824))
        )

        assert await breach_client.is_compromised(KNOWN_PASSWORD) is True

    @pytest.mark.asyncio
    @respx.mock
    async def test_suffix_absent(self, breach_client):
        """Test that a body without the suffix means not compromised."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body())
        )

        assert await breach_client.is_compromised(KNOWN_PASSWORD) is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_bare_suffix_line(self, breach_client):
        """Test a body whose line equals the expected suffix with no count."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=KNOWN_SUFFIX + "\n")
        )

        assert await breach_client.is_compromised(KNOWN_PASSWORD) is True

    @pytest.mark.asyncio
    @respx.mock
    async def test_padding_entry_not_compromised(self, breach_client):
        """Test that a count 0 padding entry does not count."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body(KNOWN_SUFFIX, count=0))
        )

        assert await breach_client.is_compromised(KNOWN_PASSWORD) is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_failure_propagates(self, breach_client):
        """Test that failures raise instead of reporting safe."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(BreachCheckError):
            await breach_client.is_compromised(KNOWN_PASSWORD)

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_body_propagates(self, breach_client):
        """Test that an unexpected body shape raises."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )

        with pytest.raises(MalformedResponseError):
            await breach_client.is_compromised(KNOWN_PASSWORD)


class TestCheckPassword:
    """Tests for status-reporting checks."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_compromised_result(self, breach_client):
        """Test a COMPROMISED result with occurrences."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body(KNOWN_SUFFIX, count=42))
        )

        result = await breach_client.check_password(KNOWN_PASSWORD)

        assert result.status == CheckStatus.COMPROMISED
        assert result.occurrences == 42
        assert result.hash_prefix == KNOWN_PREFIX
        assert result.error_kind is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_safe_result(self, breach_client):
        """Test a SAFE result."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body())
        )

        result = await breach_client.check_password(KNOWN_PASSWORD)

        assert result.status == CheckStatus.SAFE
        assert result.occurrences == 0

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize("mock_kwargs, kind", [
        ({"side_effect": httpx.TimeoutException("Request timeout")}, ErrorKind.TIMEOUT),
        ({"side_effect": httpx.ConnectError("Connection refused")}, ErrorKind.NETWORK),
        ({"return_value": httpx.Response(503, text="busy")}, ErrorKind.SERVICE),
        ({"return_value": httpx.Response(200, text="garbage")}, ErrorKind.MALFORMED_RESPONSE),
    ])
    async def test_failures_are_unknown(self, breach_client, mock_kwargs, kind):
        """Test that every failure kind reports UNKNOWN, never SAFE."""
        respx.get(range_url(KNOWN_PREFIX)).mock(**mock_kwargs)

        result = await breach_client.check_password(KNOWN_PASSWORD)

        assert result.status == CheckStatus.UNKNOWN
        assert result.error_kind == kind
        assert result.error_message
        assert result.hash_prefix == KNOWN_PREFIX

    @pytest.mark.asyncio
    @respx.mock
    async def test_check_digest_accepts_lowercase(self, breach_client):
        """Test checking a pre-computed lowercase digest."""
        respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body(KNOWN_SUFFIX))
        )

        result = await breach_client.check_digest(digest(KNOWN_PASSWORD))

        assert result.status == CheckStatus.COMPROMISED

    @pytest.mark.asyncio
    async def test_check_digest_invalid(self, breach_client):
        """Test that an invalid digest is rejected before any request."""
        with pytest.raises(ValueError):
            await breach_client.check_digest("not-a-digest")

    @pytest.mark.asyncio
    @respx.mock
    async def test_password_never_sent(self, breach_client):
        """Test that neither the password nor the suffix leaves the client."""
        route = respx.get(range_url(KNOWN_PREFIX)).mock(
            return_value=httpx.Response(200, text=range_body())
        )

        await breach_client.check_password(KNOWN_PASSWORD)

        url = route.calls.last.request.url
        assert url.path == f"/range/{KNOWN_PREFIX}"
        assert url.query == b""
        assert KNOWN_SUFFIX not in str(url).upper()
