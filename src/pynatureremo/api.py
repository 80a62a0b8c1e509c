"""Low-level API client for Nature Remo cloud endpoints.

This module provides the request dispatcher shared by every resource
accessor: it builds authenticated requests, sends them, records the rate
limit snapshot and classifies and decodes responses.
"""

from __future__ import annotations

import json
import logging
from http import HTTPMethod
from typing import TYPE_CHECKING, Any

from aiohttp import ClientError, ClientSession, ClientTimeout

from pynatureremo.const import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, LIBRARY_VERSION
from pynatureremo.exceptions import (
    NatureRemoAPIError,
    NatureRemoConnectionError,
    NatureRemoDecodeError,
    NatureRemoTimeoutError,
)
from pynatureremo.parsers import parse_rate_limit


if TYPE_CHECKING:
    from types import TracebackType

    from aiohttp import ClientResponse

    from pynatureremo.models import RateLimit

_LOGGER = logging.getLogger(__name__)


def is_success_status(status: int) -> bool:
    """Check if an HTTP status code is in the 2xx range."""
    return 200 <= status < 300  # noqa: PLR2004


class NatureRemoAPI:
    """Request dispatcher for the Nature Remo cloud API.

    Every request carries a bearer token and user agent and is bounded by a
    fixed 30 second timeout. Each call is a single attempt: nothing is
    retried, cached or queued.

    Every response must carry the X-Rate-Limit-* headers. They are parsed
    before the status code is checked, so the latest rate limit snapshot is
    updated by failed (non-2xx) responses as well as successful ones. The
    snapshot is an immutable RateLimit replaced by a single assignment;
    concurrent readers always see a complete snapshot, from whichever
    response was processed last.

    Example:
        ```python
        from pynatureremo.api import NatureRemoAPI

        async with NatureRemoAPI(access_token="token") as api:
            devices = await api.get("devices")
            me = await api.post("users/me", {"nickname": "remo"})
            print(api.latest_rate_limit)
        ```

    Attributes:
        base_url: Base URL for the API (default: https://api.nature.global/1).
        user_agent: Value sent in the User-Agent header.
        version: Library version.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: ClientSession | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize the API client.

        Args:
            access_token: OAuth access token issued for the Nature Remo account.
            base_url: Base URL for the API, including the version segment.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            user_agent: User-Agent header value.
        """
        self._access_token = access_token
        self._session = session
        self._owns_session = session is None
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.version = LIBRARY_VERSION
        self._latest_rate_limit: RateLimit | None = None

    @property
    def latest_rate_limit(self) -> RateLimit | None:
        """Rate limit snapshot from the most recent response, if any."""
        return self._latest_rate_limit

    async def __aenter__(self) -> NatureRemoAPI:
        """Enter the context manager.

        Creates a session if none was injected.

        Returns:
            Self for use in async with statements.
        """
        if self._session is None:
            self._session = ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager.

        Closes session if it was created by this client.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.
        """
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._access_token}",
            "User-Agent": self.user_agent,
        }

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Make an authenticated API request and decode the JSON response.

        This is the core method for all HTTP communication. For GET requests
        params are sent as the query string; for any other method they are
        sent as a form-encoded body.

        Args:
            method: HTTP method (GET, POST, ...).
            path: Endpoint path relative to the base URL (e.g., "users/me").
            params: Optional query or form parameters.

        Returns:
            Decoded JSON body.

        Raises:
            RuntimeError: If session is not initialized or is closed.
            RateLimitHeaderError: If a rate limit header is missing or invalid.
            NatureRemoAPIError: If the response status is not 2xx.
            NatureRemoDecodeError: If the body is not valid JSON.
            NatureRemoTimeoutError: If the request times out.
            NatureRemoConnectionError: If the connection fails.
        """
        if self._session is None:
            msg = "Session not initialized. Use 'async with' or provide a session."
            raise RuntimeError(msg)

        if self._session.closed:
            msg = "Session is closed. Cannot make request."
            raise RuntimeError(msg)

        method = method.upper()
        url = self._build_url(path)
        is_read = method == HTTPMethod.GET
        timeout = ClientTimeout(total=DEFAULT_TIMEOUT)

        _LOGGER.debug("%s %s", method, url)

        try:
            async with self._session.request(
                method,
                url,
                params=params if is_read else None,
                data=None if is_read else params,
                headers=self._build_headers(),
                timeout=timeout,
            ) as response:
                self._latest_rate_limit = parse_rate_limit(response.headers)
                _LOGGER.debug(
                    "Response %d from %s (rate limit %d/%d)",
                    response.status,
                    url,
                    self._latest_rate_limit.remaining,
                    self._latest_rate_limit.limit,
                )

                if not is_success_status(response.status):
                    reason = await self._read_reason(response)
                    if reason:
                        msg = f"Request failed: HTTP {response.status}: {reason}"
                    else:
                        msg = f"Request failed: HTTP {response.status} (no reason)"
                    _LOGGER.debug(msg)
                    raise NatureRemoAPIError(msg, status=response.status, reason=reason or None)

                body = await response.read()

        except TimeoutError as err:
            _LOGGER.exception("Request to %s timed out", url)
            msg = f"Request to {url} timed out after {DEFAULT_TIMEOUT}s"
            raise NatureRemoTimeoutError(msg) from err

        except ClientError as err:
            _LOGGER.exception("Connection error for %s", url)
            msg = f"Connection error for {url}: {err}"
            raise NatureRemoConnectionError(msg) from err

        try:
            return json.loads(body)
        except ValueError as err:
            msg = f"Failed to parse the response. ({err})"
            raise NatureRemoDecodeError(msg) from err

    @staticmethod
    async def _read_reason(response: ClientResponse) -> str:
        """Read an error body as text, returning "" if it cannot be read."""
        try:
            return await response.text(errors="replace")
        except ClientError:
            _LOGGER.debug("Failed to read error body from %s", response.url)
            return ""

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Make a GET request with optional query parameters."""
        return await self.request(HTTPMethod.GET, path, params)

    async def post(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Make a POST request with optional form parameters."""
        return await self.request(HTTPMethod.POST, path, params)
