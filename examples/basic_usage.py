"""Basic usage example for pynatureremo library."""

import asyncio
import os

from pynatureremo import NatureRemoClient, User


async def main() -> None:
    """Demonstrate basic usage of pynatureremo."""
    # Tokens are issued at https://home.nature.global
    async with NatureRemoClient(access_token=os.environ["NATURE_REMO_ACCESS_TOKEN"]) as client:
        print("Connected to Nature Remo API")

        me = await client.users.get_me()
        print(f"Signed in as {me.nickname} ({me.id})")

        devices = await client.devices.get_devices()
        print(f"Found {len(devices)} device(s)")

        for device in devices:
            events = device.newest_events
            print(f"\nDevice: {device.name}")
            print(f"  ID: {device.id}")
            print(f"  Firmware: {device.firmware_version}")
            print(f"  Serial: {device.serial_number}")
            print(f"  MAC: {device.mac_address}")
            print(f"  Temperature: {events.temperature.value} (offset {device.temperature_offset})")
            print(f"  Humidity: {events.humidity.value} (offset {device.humidity_offset})")
            print(f"  Illuminance: {events.illuminance.value}")
            print(f"  Last motion: {events.motion.created_at}")

        print("\nUpdating nickname...")
        updated = await client.users.update_me(User(nickname=me.nickname))
        print(f"Nickname is {updated.nickname}")

        rate_limit = client.latest_rate_limit
        if rate_limit is not None:
            print(f"\n{rate_limit.remaining}/{rate_limit.limit} requests left until {rate_limit.reset}")


if __name__ == "__main__":
    asyncio.run(main())
