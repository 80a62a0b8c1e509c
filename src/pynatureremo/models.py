"""Data models for Nature Remo API responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


__all__ = [
    "Device",
    "NewestEvents",
    "RateLimit",
    "SensorValue",
    "User",
]


@dataclass(frozen=True)
class RateLimit:
    """Request quota reported by the X-Rate-Limit-* response headers.

    Snapshots are immutable; the client replaces the whole object after
    each response instead of updating it in place.

    Attributes:
        limit: Maximum number of requests allowed in the current window.
        remaining: Number of requests left in the current window.
        reset: Time at which the window resets (timezone-aware, UTC).
    """

    limit: int
    remaining: int
    reset: datetime

    @property
    def seconds_until_reset(self) -> float:
        """Seconds from now until the window resets (0 if already past)."""
        return max(0.0, (self.reset - datetime.now(UTC)).total_seconds())


@dataclass
class User:
    """Nature Remo account.

    Attributes:
        id: Opaque user identifier.
        nickname: Display name, writable through the users/me endpoint.
    """

    id: str = ""
    nickname: str = ""


@dataclass
class SensorValue:
    """Single sensor reading.

    Attributes:
        value: Measured value.
        created_at: When the reading was recorded, or None if not reported.
    """

    value: float = 0.0
    created_at: datetime | None = None


@dataclass
class NewestEvents:
    """Latest reading of each sensor on a device."""

    temperature: SensorValue = field(default_factory=SensorValue)
    humidity: SensorValue = field(default_factory=SensorValue)
    illuminance: SensorValue = field(default_factory=SensorValue)
    motion: SensorValue = field(default_factory=SensorValue)


@dataclass
class Device:
    """Nature Remo device.

    Attributes:
        id: Unique device identifier.
        name: Human-readable device name.
        temperature_offset: Temperature calibration offset.
        humidity_offset: Humidity calibration offset.
        created_at: Registration timestamp.
        updated_at: Last update timestamp.
        firmware_version: Installed firmware version string.
        mac_address: Device MAC address.
        serial_number: Device serial number.
        newest_events: Latest sensor readings.
    """

    id: str = ""
    name: str = ""
    temperature_offset: int = 0
    humidity_offset: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    firmware_version: str = ""
    mac_address: str = ""
    serial_number: str = ""
    newest_events: NewestEvents = field(default_factory=NewestEvents)
