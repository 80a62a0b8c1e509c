"""Example showing session injection for Home Assistant integration."""

import asyncio
import os

from aiohttp import ClientSession

from pynatureremo import NatureRemoClient


async def main() -> None:
    """Demonstrate session injection pattern for HA integration."""
    # This pattern is useful for Home Assistant integrations where
    # the session is managed by the application

    async with ClientSession() as session:
        print("Using application-managed aiohttp session")

        # Client will use the provided session instead of creating its own
        client = NatureRemoClient(
            access_token=os.environ["NATURE_REMO_ACCESS_TOKEN"],
            session=session,  # Inject existing session
        )

        async with client:
            devices = await client.get_devices()
            print(f"Found {len(devices)} device(s) using injected session")

            for device in devices:
                print(f"  - {device.name} ({device.id})")

        # Session remains open after client exits
        print("\nClient closed, but session still available for other requests")


if __name__ == "__main__":
    asyncio.run(main())
