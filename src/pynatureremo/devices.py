"""Accessor for the /devices endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pynatureremo.const import ENDPOINT_DEVICES
from pynatureremo.parsers import parse_devices


if TYPE_CHECKING:
    from pynatureremo.api import NatureRemoAPI
    from pynatureremo.models import Device

_LOGGER = logging.getLogger(__name__)


class Devices:
    """Operations on the Nature Remo devices registered to the account.

    Args:
        api: Shared request dispatcher.
    """

    def __init__(self, api: NatureRemoAPI) -> None:
        """Initialize the accessor."""
        self._api = api

    async def get_devices(self) -> list[Device]:
        """Get all devices (GET /devices).

        Returns:
            Devices in the order the API returned them.

        Raises:
            NatureRemoDecodeError: If the response is not an array of devices.
        """
        data = await self._api.get(ENDPOINT_DEVICES)
        devices = parse_devices(data)
        _LOGGER.debug("Found %d device(s)", len(devices))
        return devices
