"""Parsing utilities for Nature Remo API responses.

This module provides the shared parsing functions used by the request
dispatcher and the resource accessors to convert raw responses into data
models. Decoding is lenient in the same way the API's own clients are:
unknown fields are ignored and missing or null fields take the model's
default value. A field that is present with the wrong JSON type is an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pynatureremo.const import (
    EVENT_HUMIDITY,
    EVENT_ILLUMINANCE,
    EVENT_MOTION,
    EVENT_TEMPERATURE,
    HEADER_RATE_LIMIT_LIMIT,
    HEADER_RATE_LIMIT_REMAINING,
    HEADER_RATE_LIMIT_RESET,
)
from pynatureremo.exceptions import NatureRemoDecodeError, RateLimitHeaderError
from pynatureremo.models import Device, NewestEvents, RateLimit, SensorValue, User


__all__ = [
    "parse_device",
    "parse_devices",
    "parse_newest_events",
    "parse_rate_limit",
    "parse_sensor_value",
    "parse_timestamp",
    "parse_user",
]

_LOGGER = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")

# Header values are signed 64-bit integers
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_header_int(headers: Mapping[str, str], name: str) -> int:
    value = headers.get(name)
    if not value:
        msg = f"{name} header was not returned"
        raise RateLimitHeaderError(msg, header_name=name, value=value)

    if _INTEGER_RE.fullmatch(value) is None:
        msg = f"{name} is invalid: {value}"
        raise RateLimitHeaderError(msg, header_name=name, value=value)

    parsed = int(value)
    if not _INT64_MIN <= parsed <= _INT64_MAX:
        msg = f"{name} is out of range: {value}"
        raise RateLimitHeaderError(msg, header_name=name, value=value)

    return parsed


def parse_rate_limit(headers: Mapping[str, str]) -> RateLimit:
    """Parse the rate limit snapshot from response headers.

    All three headers are required and must hold base-10 integers. They are
    checked in the order Limit, Reset, Remaining and the first bad one is
    reported.

    Args:
        headers: Response headers. aiohttp's CIMultiDictProxy is
            case-insensitive; a plain dict must use the canonical names.

    Returns:
        RateLimit with the reset time converted from Unix epoch seconds to a
        timezone-aware UTC datetime.

    Raises:
        RateLimitHeaderError: If a header is missing, not an integer or outside
            the signed 64-bit range.

    Example:
        >>> rate_limit = parse_rate_limit({
        ...     "X-Rate-Limit-Limit": "30",
        ...     "X-Rate-Limit-Reset": "1577804400",
        ...     "X-Rate-Limit-Remaining": "29",
        ... })
        >>> rate_limit.remaining
        29
    """
    limit = _parse_header_int(headers, HEADER_RATE_LIMIT_LIMIT)
    reset_epoch = _parse_header_int(headers, HEADER_RATE_LIMIT_RESET)
    remaining = _parse_header_int(headers, HEADER_RATE_LIMIT_REMAINING)

    try:
        reset = datetime.fromtimestamp(reset_epoch, tz=UTC)
    except (OverflowError, OSError, ValueError) as err:
        msg = f"{HEADER_RATE_LIMIT_RESET} is out of range: {reset_epoch}"
        raise RateLimitHeaderError(msg, header_name=HEADER_RATE_LIMIT_RESET, value=str(reset_epoch)) from err

    return RateLimit(limit=limit, remaining=remaining, reset=reset)


def _require_object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        msg = f"Expected a JSON object for {what}, got {type(data).__name__}"
        raise NatureRemoDecodeError(msg)
    return data


def _get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"Field '{key}' must be a string, got {type(value).__name__}"
        raise NatureRemoDecodeError(msg)
    return value


def _get_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is a subclass of int, but JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Field '{key}' must be an integer, got {type(value).__name__}"
        raise NatureRemoDecodeError(msg)
    return value


def _get_float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"Field '{key}' must be a number, got {type(value).__name__}"
        raise NatureRemoDecodeError(msg)
    return float(value)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp such as "2020-07-21T00:12:41.230Z".

    Args:
        value: Raw JSON value.

    Returns:
        Timezone-aware datetime (naive values are assumed to be UTC), or None
        if the value is null.

    Raises:
        NatureRemoDecodeError: If the value is not a valid timestamp string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"Timestamp must be a string, got {type(value).__name__}"
        raise NatureRemoDecodeError(msg)

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as err:
        msg = f"Invalid timestamp: {value!r}"
        raise NatureRemoDecodeError(msg) from err

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _parse_record_timestamp(data: dict[str, Any], key: str) -> datetime | None:
    """Parse a device bookkeeping timestamp, giving None for unparseable text.

    Unlike sensor readings these are free-form strings in the API schema;
    empty or non-ISO text decodes to None.
    """
    value = _get_str(data, key)
    try:
        return parse_timestamp(value) if value else None
    except NatureRemoDecodeError:
        _LOGGER.debug("Ignoring unparseable %s: %r", key, value)
        return None


def parse_user(data: Any) -> User:
    """Parse a user from /users/me API response.

    Args:
        data: Decoded JSON in format {"id": str, "nickname": str}.

    Returns:
        New User instance.

    Raises:
        NatureRemoDecodeError: If the data is not a user object.
    """
    user_data = _require_object(data, "user")
    return User(id=_get_str(user_data, "id"), nickname=_get_str(user_data, "nickname"))


def parse_sensor_value(data: Any) -> SensorValue:
    """Parse a sensor reading in format {"val": float, "created_at": str}."""
    if data is None:
        return SensorValue()
    value_data = _require_object(data, "sensor value")
    return SensorValue(
        value=_get_float(value_data, "val"),
        created_at=parse_timestamp(value_data.get("created_at")),
    )


def parse_newest_events(data: Any) -> NewestEvents:
    """Parse the newest_events object of a device.

    Sensors are keyed by two-letter codes: te (temperature), hu (humidity),
    il (illuminance) and mo (motion). Devices without a given sensor omit the
    key, which yields a zero reading.
    """
    if data is None:
        return NewestEvents()
    events = _require_object(data, "newest_events")
    return NewestEvents(
        temperature=parse_sensor_value(events.get(EVENT_TEMPERATURE)),
        humidity=parse_sensor_value(events.get(EVENT_HUMIDITY)),
        illuminance=parse_sensor_value(events.get(EVENT_ILLUMINANCE)),
        motion=parse_sensor_value(events.get(EVENT_MOTION)),
    )


def parse_device(data: Any) -> Device:
    """Parse a single device object.

    Args:
        data: Decoded JSON object from the /devices response array.

    Returns:
        Device instance.

    Raises:
        NatureRemoDecodeError: If the data is not a device object.
    """
    device_data = _require_object(data, "device")
    return Device(
        id=_get_str(device_data, "id"),
        name=_get_str(device_data, "name"),
        temperature_offset=_get_int(device_data, "temperature_offset"),
        humidity_offset=_get_int(device_data, "humidity_offset"),
        created_at=_parse_record_timestamp(device_data, "created_at"),
        updated_at=_parse_record_timestamp(device_data, "updated_at"),
        firmware_version=_get_str(device_data, "firmware_version"),
        mac_address=_get_str(device_data, "mac_address"),
        serial_number=_get_str(device_data, "serial_number"),
        newest_events=parse_newest_events(device_data.get("newest_events")),
    )


def parse_devices(data: Any) -> list[Device]:
    """Parse the /devices response array, preserving order.

    Raises:
        NatureRemoDecodeError: If the data is not an array of device objects.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        msg = f"Expected a JSON array of devices, got {type(data).__name__}"
        raise NatureRemoDecodeError(msg)
    return [parse_device(item) for item in data]
