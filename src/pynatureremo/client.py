"""High-level client for the Nature Remo cloud API.

This module ties the request dispatcher to the resource accessors and owns
the session lifecycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pynatureremo.api import NatureRemoAPI
from pynatureremo.const import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from pynatureremo.devices import Devices
from pynatureremo.users import Users


if TYPE_CHECKING:
    from types import TracebackType

    from aiohttp import ClientSession

    from pynatureremo.models import Device, RateLimit, User


class NatureRemoClient:
    """Client for the Nature Remo cloud API.

    The client holds a single NatureRemoAPI dispatcher and exposes one
    accessor per resource group. All accessors share the dispatcher, so the
    latest rate limit snapshot reflects whichever call finished last.

    Example:
        Basic usage with automatic session management:

        ```python
        from pynatureremo import NatureRemoClient

        async with NatureRemoClient(access_token="token") as client:
            me = await client.users.get_me()
            devices = await client.devices.get_devices()

            for device in devices:
                print(device.name, device.newest_events.temperature.value)

            print(f"{client.latest_rate_limit.remaining} requests left")
        ```

        Session injection:

        ```python
        from aiohttp import ClientSession
        from pynatureremo import NatureRemoClient

        async with ClientSession() as session:
            client = NatureRemoClient(access_token="token", session=session)
            devices = await client.get_devices()
        ```

    Attributes:
        api: Low-level NatureRemoAPI instance for HTTP communication.
        users: Accessor for the /users endpoints.
        devices: Accessor for the /devices endpoints.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: ClientSession | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize the Nature Remo client.

        Args:
            access_token: OAuth access token issued for the Nature Remo account.
            base_url: Base URL for the API. Defaults to the production API.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            user_agent: User-Agent header value.
        """
        self.api = NatureRemoAPI(
            access_token,
            base_url,
            session=session,
            user_agent=user_agent,
        )
        self.users = Users(self.api)
        self.devices = Devices(self.api)

    @property
    def latest_rate_limit(self) -> RateLimit | None:
        """Rate limit snapshot from the most recent response, if any."""
        return self.api.latest_rate_limit

    @property
    def version(self) -> str:
        """Library version."""
        return self.api.version

    async def __aenter__(self) -> NatureRemoClient:
        """Enter the context manager.

        Returns:
            Self for use in async with statements.
        """
        await self.api.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the session if owned."""
        await self.api.__aexit__(exc_type, exc_val, exc_tb)

    async def get_devices(self) -> list[Device]:
        """Get all devices. Shortcut for ``client.devices.get_devices()``."""
        return await self.devices.get_devices()

    async def get_me(self) -> User:
        """Get the authenticated user. Shortcut for ``client.users.get_me()``."""
        return await self.users.get_me()

    async def update_me(self, user: User) -> User:
        """Update the user's nickname. Shortcut for ``client.users.update_me()``."""
        return await self.users.update_me(user)
