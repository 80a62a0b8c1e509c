"""Python client library for the Nature Remo cloud API.

This package provides an async client for the Nature Remo smart-home REST
API (devices and users).

The library is organized into three layers:
1. **API Layer** (pynatureremo.api): Request dispatch, authentication headers,
   rate limit tracking and response classification
2. **Accessor Layer** (pynatureremo.users, pynatureremo.devices): One object
   per resource group, built on the shared dispatcher
3. **Client Layer** (pynatureremo.client): Session lifecycle and access to
   the accessors

Example:
    ```python
    from pynatureremo import NatureRemoClient, User

    async with NatureRemoClient(access_token="token") as client:
        devices = await client.devices.get_devices()
        print(f"Temperature: {devices[0].newest_events.temperature.value}")

        me = await client.users.update_me(User(nickname="remo"))
        print(f"Nickname is now {me.nickname}")

        rate_limit = client.latest_rate_limit
        print(f"{rate_limit.remaining}/{rate_limit.limit} until {rate_limit.reset}")
    ```
"""

from __future__ import annotations

from pynatureremo.api import NatureRemoAPI
from pynatureremo.client import NatureRemoClient
from pynatureremo.const import LIBRARY_VERSION
from pynatureremo.devices import Devices
from pynatureremo.exceptions import (
    NatureRemoAPIError,
    NatureRemoConnectionError,
    NatureRemoDecodeError,
    NatureRemoError,
    NatureRemoTimeoutError,
    RateLimitHeaderError,
)
from pynatureremo.models import Device, NewestEvents, RateLimit, SensorValue, User
from pynatureremo.parsers import parse_device, parse_devices, parse_rate_limit, parse_user
from pynatureremo.users import Users


__version__ = LIBRARY_VERSION

__all__ = [
    "Device",
    "Devices",
    "NatureRemoAPI",
    "NatureRemoAPIError",
    "NatureRemoClient",
    "NatureRemoConnectionError",
    "NatureRemoDecodeError",
    "NatureRemoError",
    "NatureRemoTimeoutError",
    "NewestEvents",
    "RateLimit",
    "RateLimitHeaderError",
    "SensorValue",
    "User",
    "Users",
    "__version__",
    "parse_device",
    "parse_devices",
    "parse_rate_limit",
    "parse_user",
]
