"""Example of polling sensor readings within the API rate limit."""

import asyncio
import logging
import os

from pynatureremo import NatureRemoAPIError, NatureRemoClient, NatureRemoConnectionError


POLL_INTERVAL = 60  # seconds

logging.basicConfig(level=logging.INFO)
_LOGGER = logging.getLogger(__name__)


async def main() -> None:
    """Print the newest temperature of every device once a minute."""
    async with NatureRemoClient(access_token=os.environ["NATURE_REMO_ACCESS_TOKEN"]) as client:
        while True:
            try:
                devices = await client.devices.get_devices()
            except (NatureRemoAPIError, NatureRemoConnectionError) as err:
                _LOGGER.warning("Polling failed: %s", err)
            else:
                for device in devices:
                    reading = device.newest_events.temperature
                    _LOGGER.info("%s: %.1f (at %s)", device.name, reading.value, reading.created_at)

            delay = POLL_INTERVAL
            rate_limit = client.latest_rate_limit
            if rate_limit is not None and rate_limit.remaining == 0:
                # Out of quota: wait for the window to reset
                delay = max(delay, rate_limit.seconds_until_reset)
                _LOGGER.info("Rate limit exhausted, sleeping %.0fs", delay)

            await asyncio.sleep(delay)


if __name__ == "__main__":
    asyncio.run(main())
